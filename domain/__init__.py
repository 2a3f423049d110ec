"""
Domain layer - Business entities, models, schemas, and validators.
"""

from domain import models, schemas, validation

__all__ = ["models", "schemas", "validation"]
