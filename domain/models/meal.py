"""
Meal record model.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, String, Text
from sqlalchemy.sql import func

from domain.models.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Meal(Base):
    """A meal eaten by a user, flagged as inside or outside the diet"""

    __tablename__ = "meals"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    time = Column(Text, nullable=False)  # caller-supplied, not parsed
    is_inside_diet = Column(Boolean, nullable=False)
    # Owner reference is trusted from the session cookie; no FK constraint
    fk_user_id = Column(String(36), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self) -> str:
        return f"<Meal id={self.id} user={self.fk_user_id} in_diet={self.is_inside_diet}>"
