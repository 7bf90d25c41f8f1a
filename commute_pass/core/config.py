import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기

# 프로젝트 루트 => 기본 데이터 디렉토리 계산용
BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings:
    PROJECT_NAME: str = "Commute Pass Planner"
    VERSION: str = "1.2.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    PORT: int = int(os.getenv("PORT", 8001))

    # 입력 데이터 (distances.json, stations-meta.json, fares.json)
    DATA_DIR: str = os.getenv("DATA_DIR", str(BASE_DIR / "data"))
    DISTANCES_FILE: str = os.getenv("DISTANCES_FILE", "distances.json")
    STATIONS_META_FILE: str = os.getenv("STATIONS_META_FILE", "stations-meta.json")
    FARES_FILE: str = os.getenv("FARES_FILE", "fares.json")

    # 한 달 평균 출근 일수
    DEFAULT_WORK_DAYS: int = int(os.getenv("DEFAULT_WORK_DAYS", 20))

    # 확장 정기권 결과 캐시 크기 => 역 수가 늘어나면 O(S^2) 탐색이 무거워짐
    PASS_CACHE_MAX_ENTRIES: int = int(os.getenv("PASS_CACHE_MAX_ENTRIES", 256))

    # 캐시 메트릭 활성화 플래그
    ENABLE_CACHE_METRICS: bool = (
        os.getenv("ENABLE_CACHE_METRICS", "true").lower() == "true"
    )

    # CORS 설정
    ALLOWED_ORIGINS: list[str] = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:5173",
    ).split(",")

    def data_path(self, filename: str) -> Path:
        return Path(self.DATA_DIR) / filename


settings = Settings()  # 모듈화


# 정기권 기간(개월)
PASS_TERMS = (1, 3, 6)

# 구간표가 비어 있거나 잘못된 경우 가장 비싼 구간으로 처리
FALLBACK_ZONE = 5

STATUS_PASS_BETTER = "pass_better"
STATUS_IC_BETTER = "ic_better"

RECOMMEND_PASS = "pass"
RECOMMEND_IC = "ic"

# 노선 선택 목록에서 전체 역을 나타내는 키
ALL_LINES_KEY = "ALL"
