"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import User


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_credentials(self, name: str, password: str) -> Optional[User]:
        """Get the first user whose name and password both match exactly"""
        return (
            self.db.query(User)
            .filter(User.name == name, User.password == password)
            .first()
        )

    def create_user(self, name: str, password: str) -> User:
        """Create a new user; duplicate names are allowed"""
        return self.add(User(name=name, password=password))
