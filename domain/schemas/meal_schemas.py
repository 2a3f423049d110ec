from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class MealResponse(BaseModel):
    """Schema for a stored meal, using the persisted column names"""

    id: str
    name: str
    description: str
    time: str
    is_inside_diet: bool
    fk_user_id: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class MealListResponse(BaseModel):
    """Schema for GET /meals"""

    meals: List[MealResponse]


class MealDetailResponse(BaseModel):
    """Schema for GET /meals/{id}"""

    meal: MealResponse


class MealMetricsResponse(BaseModel):
    """Diet compliance metrics for the current user"""

    total_meals: int = Field(..., alias="totalMeals", description="All meals")
    in_diet_meals: int = Field(..., alias="inDietMeals", description="Meals inside the diet")
    out_of_diet_meals: int = Field(
        ..., alias="outOfDietMeals", description="Meals outside the diet"
    )
    highest_in_diet_sequence: int = Field(
        ...,
        alias="highestInDietSequence",
        description="Longest run of consecutive in-diet meals by creation time",
    )

    model_config = {"populate_by_name": True}


class MetricsEnvelope(BaseModel):
    """Schema for GET /meals/metrics"""

    metrics: MealMetricsResponse
