"""
App package - Application configuration and core utilities.
Contains settings and exceptions shared by every layer.
"""

from app.config import settings
from app.exceptions import (
    DailyDietError,
    ServiceValidationError,
    UnauthorizedError,
    NotFoundError,
    InternalError,
)

__all__ = [
    "settings",
    "DailyDietError",
    "ServiceValidationError",
    "UnauthorizedError",
    "NotFoundError",
    "InternalError",
]
