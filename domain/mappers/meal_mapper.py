"""
Meal domain mappers.
Handles transformation between ORM models and DTOs for meal-related entities.
"""

from typing import Iterable

from domain.models import Meal
from domain.schemas.inputs import MealMetrics
from domain.schemas.meal_schemas import (
    MealResponse,
    MealListResponse,
    MealDetailResponse,
    MealMetricsResponse,
    MetricsEnvelope,
)


class MealMapper:
    """Mapper for meal-related transformations."""

    @staticmethod
    def to_response(meal: Meal) -> MealResponse:
        return MealResponse.model_validate(meal)

    @staticmethod
    def to_list_response(meals: Iterable[Meal]) -> MealListResponse:
        return MealListResponse(meals=[MealMapper.to_response(m) for m in meals])

    @staticmethod
    def to_detail_response(meal: Meal) -> MealDetailResponse:
        return MealDetailResponse(meal=MealMapper.to_response(meal))

    @staticmethod
    def to_metrics_response(metrics: MealMetrics) -> MetricsEnvelope:
        """
        Convert computed metrics to the camelCase response envelope.

        Args:
            metrics: MealMetrics computed by MealService

        Returns:
            MetricsEnvelope DTO wrapping the metrics
        """
        return MetricsEnvelope(
            metrics=MealMetricsResponse(
                total_meals=metrics.total_meals,
                in_diet_meals=metrics.in_diet_meals,
                out_of_diet_meals=metrics.out_of_diet_meals,
                highest_in_diet_sequence=metrics.highest_in_diet_sequence,
            )
        )
