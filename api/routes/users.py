"""User registration and login routes"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session

from api.dependencies import get_db, get_settings
from app.config import Settings
from domain.validation import validate_credentials
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def register_user(payload: Any = Body(None), db: Session = Depends(get_db)):
    """Register a user from a {name, password} JSON body"""
    credentials = validate_credentials(payload).unwrap()
    UserService.register(db, credentials)
    return Response(status_code=status.HTTP_201_CREATED)


@router.post("/login", status_code=status.HTTP_201_CREATED, response_class=Response)
def login(
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Log in and set the session cookie carrying the user id"""
    credentials = validate_credentials(payload).unwrap()
    token = UserService.login(db, credentials)

    response = Response(status_code=status.HTTP_201_CREATED)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        path="/",
        max_age=settings.session_max_age_seconds,
    )
    return response
