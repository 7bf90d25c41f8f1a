# custom exception 정의 및 관리


class CommutePassException(Exception):  # 예외 구조 정의
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class RouteNotFoundException(CommutePassException):
    def __init__(self, message: str = "경로를 찾을 수 없습니다"):
        super().__init__(message, code="ROUTE_NOT_FOUND")


class StationNotFoundException(CommutePassException):
    def __init__(self, message: str = "역을 찾을 수 없습니다"):
        super().__init__(message, code="STATION_NOT_FOUND")


# 요금표에 (기간, 구간) 조합이 없음 => 해당 계산만 실패, 기본값으로 대체하지 않음
class MissingFareDataException(CommutePassException):
    def __init__(self, message: str = "요금 데이터가 없습니다"):
        super().__init__(message, code="MISSING_FARE_DATA")


class DataNotLoadedException(CommutePassException):
    def __init__(self, message: str = "노선/요금 데이터가 로드되지 않았습니다"):
        super().__init__(message, code="DATA_NOT_LOADED")
