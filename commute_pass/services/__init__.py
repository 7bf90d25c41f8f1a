"""
Business logic services
"""

from commute_pass.services.commute_plan_service import (
    CommutePlanService,
    get_commute_plan_service,
)

__all__ = [
    "CommutePlanService",
    "get_commute_plan_service",
]
