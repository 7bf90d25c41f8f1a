"""
Commute Pass Planner - FastAPI Application

통근 경로의 IC카드 vs 정기권 비용 비교
같은 가격으로 더 넓은 구간을 커버하는 정기권 추천
"""

import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from commute_pass.core.config import settings
from commute_pass.core.exceptions import CommutePassException
from commute_pass.db.cache import get_graph, initialize_cache, is_initialized
from commute_pass.api.v1.router import api_router

# 로깅 설정
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

# 예외 코드 -> HTTP status
ERROR_STATUS_CODES = {
    "STATION_NOT_FOUND": 404,
    "ROUTE_NOT_FOUND": 404,
    "MISSING_FARE_DATA": 422,
    "DATA_NOT_LOADED": 503,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 생명주기 관리

    서버 시작 시 실행:
    - 거리/역 메타/요금 데이터 로드
    - 그래프 구축 (데이터가 바뀌기 전까지 재사용)
    """
    logger.info("=" * 60)
    logger.info("Commute Pass Planner 시작 중...")
    logger.info("=" * 60)

    try:
        initialize_cache()
        logger.info("Commute Pass Planner 시작 완료!")
    except CommutePassException as e:
        # 데이터가 없어도 서버는 기동 => /health 에서 unhealthy 보고
        logger.error(f"❌ 데이터 초기화 실패: {e.message}")

    # application 실행 <- yield로 제어 반환
    yield

    logger.info("✓ Commute Pass Planner 종료 완료")


# FastAPI 애플리케이션 생성
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    ## 통근 정기권 계산기

    ### 주요 기능
    - 🚇 최단 거리 경로 (환승 표시)
    - 💴 IC카드 vs 1/3/6개월 정기권 비교, 손익분기 일수
    - 🎫 같은 가격으로 더 넓은 구간을 커버하는 정기권 추천
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API 라우터 등록
app.include_router(api_router, prefix="/api/v1")


# ========== Health Check Endpoints ==========


@app.get("/")
async def root():
    """
    루트 엔드포인트

    서비스 기본 정보 반환
    """
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """
    헬스 체크 엔드포인트

    - 데이터 로드 여부
    - 그래프 역/간선 수
    """
    if not is_initialized():
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "version": settings.VERSION,
                "timestamp": time.time(),
                "components": {"data": "not_loaded"},
            },
        )

    graph = get_graph()
    return {
        "status": "healthy",
        "version": settings.VERSION,
        "timestamp": time.time(),
        "components": {"data": "loaded"},
        "graph": {"stations": len(graph), "edges": graph.edge_count},
    }


# ========== Exception Handlers ==========


@app.exception_handler(CommutePassException)
async def commute_pass_exception_handler(request: Request, exc: CommutePassException):
    """도메인 예외 => 코드별 HTTP status"""
    status_code = ERROR_STATUS_CODES.get(exc.code, 400)
    logger.warning(f"요청 실패 [{exc.code}] {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.message, "code": exc.code},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    전역 예외 핸들러

    예상치 못한 오류 처리
    """
    logger.error(f"예상치 못한 오류: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "message": "서버 내부 오류가 발생했습니다",
            "detail": str(exc) if settings.DEBUG else "Internal Server Error",
        },
    )


# ========== Development Server ==========

if __name__ == "__main__":
    import uvicorn

    logger.info("개발 서버 시작...")

    uvicorn.run(
        "commute_pass.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        access_log=True,
    )
