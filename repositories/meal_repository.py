"""
Meal Repository - Data access layer for meal records and their aggregates.

Every query is filtered by the owning user id, so one user can never read or
modify another user's meals.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal
from domain.schemas.inputs import MealInput


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def _owned(self, user_id: str):
        return self.db.query(Meal).filter(Meal.fk_user_id == user_id)

    def create_meal(
        self, user_id: str, data: MealInput, created_at: Optional[datetime] = None
    ) -> Meal:
        """Create a meal owned by user_id"""
        meal = Meal(
            name=data.name,
            description=data.description,
            time=data.time,
            is_inside_diet=data.is_inside_diet,
            fk_user_id=user_id,
        )
        if created_at is not None:
            meal.created_at = created_at
        return self.add(meal)

    def update_meal(self, user_id: str, meal_id: str, data: MealInput) -> int:
        """Update the meal matching (meal_id, user_id); returns affected row count"""
        count = (
            self._owned(user_id)
            .filter(Meal.id == meal_id)
            .update(
                {
                    Meal.name: data.name,
                    Meal.description: data.description,
                    Meal.time: data.time,
                    Meal.is_inside_diet: data.is_inside_diet,
                    Meal.updated_at: datetime.now(timezone.utc),
                },
                synchronize_session=False,
            )
        )
        self.db.commit()
        return count

    def get_for_user(self, user_id: str, meal_id: str) -> Optional[Meal]:
        """Get a meal by id, only if owned by user_id"""
        return self._owned(user_id).filter(Meal.id == meal_id).first()

    def list_for_user(self, user_id: str) -> List[Meal]:
        """All meals owned by user_id, in storage order"""
        return self._owned(user_id).all()

    def delete_for_user(self, user_id: str, meal_id: str) -> bool:
        """Delete a meal owned by user_id; False when there is none"""
        meal = self.get_for_user(user_id, meal_id)
        if meal is None:
            return False
        self.remove(meal)
        return True

    def count_for_user(self, user_id: str) -> Optional[int]:
        return self.db.execute(
            select(func.count(Meal.id)).where(Meal.fk_user_id == user_id)
        ).scalar()

    def count_in_diet_for_user(self, user_id: str) -> Optional[int]:
        return self.db.execute(
            select(func.count(Meal.id)).where(
                Meal.fk_user_id == user_id, Meal.is_inside_diet.is_(True)
            )
        ).scalar()

    def longest_in_diet_run(self, user_id: str) -> Optional[int]:
        """
        Length of the longest run of consecutive in-diet meals for user_id.

        Meals are ordered by created_at. Subtracting the row number within each
        flag partition from the overall row number gives a value that is
        constant across a maximal run of equal flags, so grouping by
        (difference, flag) yields one row per run.
        """
        run_key = func.row_number().over(order_by=Meal.created_at) - func.row_number().over(
            partition_by=Meal.is_inside_diet, order_by=Meal.created_at
        )
        numbered = (
            select(Meal.is_inside_diet.label("is_inside_diet"), run_key.label("grp"))
            .where(Meal.fk_user_id == user_id)
            .subquery("numbered")
        )
        runs = (
            select(func.count().label("total"))
            .select_from(numbered)
            .where(numbered.c.is_inside_diet.is_(True))
            .group_by(numbered.c.grp, numbered.c.is_inside_diet)
            .subquery("runs")
        )
        return self.db.execute(
            select(func.coalesce(func.max(runs.c.total), 0))
        ).scalar()
