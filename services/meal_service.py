from typing import List
from sqlalchemy.orm import Session
import logging

from app.exceptions import InternalError, NotFoundError
from domain.models import Meal
from domain.schemas.inputs import MealInput, MealMetrics
from repositories import MealRepository

logger = logging.getLogger("dailydiet.meals")


class MealService:
    """Business logic for the per-user meal ledger"""

    @staticmethod
    def create_meal(db: Session, user_id: str, data: MealInput) -> Meal:
        meal = MealRepository(db).create_meal(user_id, data)
        logger.info(
            f"meal_created user_id={user_id} meal_id={meal.id} "
            f"in_diet={data.is_inside_diet}"
        )
        return meal

    @staticmethod
    def update_meal(db: Session, user_id: str, meal_id: str, data: MealInput) -> int:
        """
        Update a meal owned by the user.

        A missing meal is not an error: the update affects zero rows and the
        caller still reports success.
        """
        count = MealRepository(db).update_meal(user_id, meal_id, data)
        if count:
            logger.info(f"meal_updated user_id={user_id} meal_id={meal_id}")
        else:
            logger.info(f"meal_update_noop user_id={user_id} meal_id={meal_id}")
        return count

    @staticmethod
    def delete_meal(db: Session, user_id: str, meal_id: str) -> None:
        if not MealRepository(db).delete_for_user(user_id, meal_id):
            logger.warning(f"meal_not_found user_id={user_id} meal_id={meal_id}")
            raise NotFoundError(f"Meal {meal_id} not found")
        logger.info(f"meal_deleted user_id={user_id} meal_id={meal_id}")

    @staticmethod
    def get_meal(db: Session, user_id: str, meal_id: str) -> Meal:
        meal = MealRepository(db).get_for_user(user_id, meal_id)
        if meal is None:
            logger.warning(f"meal_not_found user_id={user_id} meal_id={meal_id}")
            raise NotFoundError(f"Meal {meal_id} not found")
        return meal

    @staticmethod
    def list_meals(db: Session, user_id: str) -> List[Meal]:
        return MealRepository(db).list_for_user(user_id)

    @staticmethod
    def get_metrics(db: Session, user_id: str) -> MealMetrics:
        """
        Compute diet compliance metrics for the user.

        Raises:
            InternalError: if any aggregate query yields no result
        """
        repo = MealRepository(db)
        total = repo.count_for_user(user_id)
        in_diet = repo.count_in_diet_for_user(user_id)
        best_run = repo.longest_in_diet_run(user_id)

        if total is None or in_diet is None or best_run is None:
            logger.error(f"metrics_failed user_id={user_id}")
            raise InternalError("Could not compute meal metrics")

        return MealMetrics(
            total_meals=int(total),
            in_diet_meals=int(in_diet),
            out_of_diet_meals=int(total) - int(in_diet),
            highest_in_diet_sequence=int(best_run),
        )
