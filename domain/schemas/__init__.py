"""
Domain schemas package - request inputs and Pydantic response models.
"""

from domain.schemas.inputs import Credentials, MealInput, MealMetrics
from domain.schemas.meal_schemas import (
    MealResponse,
    MealListResponse,
    MealDetailResponse,
    MealMetricsResponse,
    MetricsEnvelope,
)

__all__ = [
    # Inputs
    "Credentials",
    "MealInput",
    "MealMetrics",
    # Meal schemas
    "MealResponse",
    "MealListResponse",
    "MealDetailResponse",
    "MealMetricsResponse",
    "MetricsEnvelope",
]
