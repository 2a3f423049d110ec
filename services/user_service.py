import logging

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.models import User
from domain.schemas.inputs import Credentials
from repositories import UserRepository

logger = logging.getLogger("dailydiet.users")


class UserService:
    """Registration and login; the session token is the user's id"""

    @staticmethod
    def register(db: Session, credentials: Credentials) -> User:
        user = UserRepository(db).create_user(credentials.name, credentials.password)
        logger.info(f"user_registered user_id={user.id}")
        return user

    @staticmethod
    def login(db: Session, credentials: Credentials) -> str:
        """
        Authenticate by exact name and password match.

        Returns:
            The session token (the matching user's id)

        Raises:
            NotFoundError: if no user matches; unknown name and wrong password
                are reported the same way
        """
        user = UserRepository(db).get_by_credentials(
            credentials.name, credentials.password
        )
        if user is None:
            logger.warning("login_failed")
            raise NotFoundError("User not found")

        logger.info(f"login_succeeded user_id={user.id}")
        return user.id
