"""Meal ledger routes; every route requires the session cookie"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session

from api.dependencies import get_db, require_session
from domain.mappers import MealMapper
from domain.schemas import MealDetailResponse, MealListResponse, MetricsEnvelope
from domain.validation import validate_meal_body, validate_meal_id
from services.meal_service import MealService

router = APIRouter(
    prefix="/meals", tags=["Meals"], dependencies=[Depends(require_session)]
)


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_meal(
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    user_id: str = Depends(require_session),
):
    """Create a meal owned by the current user"""
    data = validate_meal_body(payload).unwrap()
    MealService.create_meal(db, user_id, data)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("", response_model=MealListResponse)
def list_meals(db: Session = Depends(get_db), user_id: str = Depends(require_session)):
    """List all meals of the current user"""
    return MealMapper.to_list_response(MealService.list_meals(db, user_id))


# Declared before /{meal_id} so "metrics" is not taken for an id
@router.get("/metrics", response_model=MetricsEnvelope)
def get_metrics(db: Session = Depends(get_db), user_id: str = Depends(require_session)):
    """Totals and longest in-diet streak for the current user"""
    return MealMapper.to_metrics_response(MealService.get_metrics(db, user_id))


@router.get("/{meal_id}", response_model=MealDetailResponse)
def get_meal(
    meal_id: str, db: Session = Depends(get_db), user_id: str = Depends(require_session)
):
    """Get one meal of the current user"""
    meal_id = validate_meal_id(meal_id).unwrap()
    return MealMapper.to_detail_response(MealService.get_meal(db, user_id, meal_id))


@router.put("/{meal_id}", status_code=status.HTTP_201_CREATED, response_class=Response)
def update_meal(
    meal_id: str,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    user_id: str = Depends(require_session),
):
    """Replace a meal's fields; succeeds even when no meal matched"""
    data = validate_meal_body(payload).unwrap()
    meal_id = validate_meal_id(meal_id).unwrap()
    MealService.update_meal(db, user_id, meal_id, data)
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete(
    "/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
def delete_meal(
    meal_id: str, db: Session = Depends(get_db), user_id: str = Depends(require_session)
):
    """Delete a meal of the current user"""
    meal_id = validate_meal_id(meal_id).unwrap()
    MealService.delete_meal(db, user_id, meal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
