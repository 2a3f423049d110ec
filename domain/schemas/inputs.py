"""Parsed request inputs produced by domain.validation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    name: str
    password: str


@dataclass(frozen=True)
class MealInput:
    name: str
    description: str
    time: str
    is_inside_diet: bool


@dataclass(frozen=True)
class MealMetrics:
    total_meals: int
    in_diet_meals: int
    out_of_diet_meals: int
    highest_in_diet_sequence: int
