"""
Explicit request validators.

Each validator inspects a decoded JSON value and returns a ``ValidationResult``:
either the parsed input or the list of field errors found. Nothing here touches
the store, so validation failures are reported before any query runs.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

from app.exceptions import ServiceValidationError
from domain.schemas.inputs import Credentials, MealInput

T = TypeVar("T")

UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Tagged outcome of a validator: ``value`` when ok, ``errors`` otherwise."""

    value: Optional[T] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @classmethod
    def success(cls, value: T) -> "ValidationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, errors: List[FieldError]) -> "ValidationResult[T]":
        return cls(errors=list(errors))

    def unwrap(self) -> T:
        """Return the parsed value or raise ServiceValidationError with the field errors."""
        if not self.ok:
            raise ServiceValidationError(
                "Request validation failed",
                details={"errors": [e.to_dict() for e in self.errors]},
                code="VALIDATION_ERROR",
            )
        return self.value


def _check_fields(payload: Any, expected_types: dict) -> List[FieldError]:
    if not isinstance(payload, dict):
        return [FieldError("body", "Expected a JSON object")]

    errors = []
    for name, expected in expected_types.items():
        if name not in payload or payload[name] is None:
            errors.append(FieldError(name, "Required"))
            continue
        value = payload[name]
        # bool is a subclass of int, so compare types exactly for flags
        if expected is bool:
            valid = type(value) is bool
        else:
            valid = isinstance(value, expected)
        if not valid:
            errors.append(
                FieldError(name, f"Expected {expected.__name__}, received {type(value).__name__}")
            )
    return errors


def validate_credentials(payload: Any) -> ValidationResult[Credentials]:
    """Validate a register/login body: ``{name: str, password: str}``."""
    errors = _check_fields(payload, {"name": str, "password": str})
    if errors:
        return ValidationResult.failure(errors)
    return ValidationResult.success(
        Credentials(name=payload["name"], password=payload["password"])
    )


def validate_meal_body(payload: Any) -> ValidationResult[MealInput]:
    """Validate a create/update meal body; every field is required."""
    errors = _check_fields(
        payload,
        {"name": str, "description": str, "time": str, "isInsideDiet": bool},
    )
    if errors:
        return ValidationResult.failure(errors)
    return ValidationResult.success(
        MealInput(
            name=payload["name"],
            description=payload["description"],
            time=payload["time"],
            is_inside_diet=payload["isInsideDiet"],
        )
    )


def validate_meal_id(raw: Any) -> ValidationResult[str]:
    """Validate a meal id path parameter as a hyphenated UUID string."""
    if not isinstance(raw, str) or not UUID_PATTERN.fullmatch(raw):
        return ValidationResult.failure([FieldError("id", "Invalid uuid")])
    return ValidationResult.success(raw)
