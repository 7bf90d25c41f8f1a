"""
Core 설정 및 utilities, 커스텀 예외
"""

from commute_pass.core.config import settings

from commute_pass.core.exceptions import (
    CommutePassException,
    RouteNotFoundException,
    StationNotFoundException,
    MissingFareDataException,
    DataNotLoadedException,
)

__all__ = [
    "settings",
    "CommutePassException",
    "RouteNotFoundException",
    "StationNotFoundException",
    "MissingFareDataException",
    "DataNotLoadedException",
]
