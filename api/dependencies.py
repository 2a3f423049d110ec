"""
API dependencies for dependency injection
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session

from app.config import Settings
from app.exceptions import UnauthorizedError


def get_settings(request: Request) -> Settings:
    """Settings the running application was created with"""
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    The session comes from the Database handle installed on app.state by
    create_app(), and is closed when the request finishes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from request.app.state.database.get_session()


def require_session(request: Request) -> str:
    """
    Identity guard for meal routes.

    Returns the session token (user id) carried by the session cookie. Only
    presence is checked; the id is not looked up.

    Raises:
        UnauthorizedError: if the cookie is missing or empty
    """
    user_id = request.cookies.get(get_settings(request).session_cookie_name)
    if not user_id:
        raise UnauthorizedError("Unauthorized")
    return user_id
