"""
Audit Use Cases

All activity-log business logic.
"""

from .get_activities_use_case import (
    ActivitiesResponse,
    ActivityInfo,
    GetActivitiesUseCase,
)

__all__ = [
    "GetActivitiesUseCase",
    "ActivitiesResponse",
    "ActivityInfo",
]
