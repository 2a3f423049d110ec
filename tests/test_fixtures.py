"""
Shared test data and helpers for the Daily Diet test suite.

Helpers drive the public HTTP surface the way a client would, so route tests
read as request/response flows.
"""

import uuid
from datetime import datetime, timedelta, timezone

from domain.schemas.inputs import MealInput

SESSION_COOKIE = "userId"

# Realistic default users
REALISTIC_USERS = {
    "default": {"name": "Sarah Martinez", "password": "s3cret-sarah"},
    "athlete": {"name": "Michael Chen", "password": "run-forest-run"},
    "casual": {"name": "Emma Johnson", "password": "emma1234"},
}

# Realistic meals
REALISTIC_MEALS = {
    "breakfast": {
        "name": "Oatmeal with berries",
        "description": "Rolled oats, blueberries and a spoon of honey",
        "time": "2024-03-01T08:00:00.000Z",
        "isInsideDiet": True,
    },
    "lunch": {
        "name": "Grilled chicken salad",
        "description": "Chicken breast, lettuce, tomato, olive oil",
        "time": "2024-03-01T12:30:00.000Z",
        "isInsideDiet": True,
    },
    "snack": {
        "name": "Chocolate cake",
        "description": "Two slices at the office party",
        "time": "2024-03-01T16:00:00.000Z",
        "isInsideDiet": False,
    },
}


def unique_name(prefix: str = "user") -> str:
    """Generate a unique user name to avoid cross-test collisions"""
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


def meal_payload(kind: str = "breakfast", **overrides) -> dict:
    payload = dict(REALISTIC_MEALS[kind])
    payload.update(overrides)
    return payload


def meal_input(is_inside_diet: bool = True, name: str = "Meal") -> MealInput:
    return MealInput(
        name=name,
        description=f"{name} description",
        time="2024-03-01T12:00:00.000Z",
        is_inside_diet=is_inside_diet,
    )


def timeline(count: int, start: datetime = None):
    """Strictly increasing creation timestamps, one minute apart"""
    start = start or datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)
    return [start + timedelta(minutes=i) for i in range(count)]


def register(client, profile_type: str = "default", name: str = None, password: str = None):
    profile = REALISTIC_USERS[profile_type]
    body = {
        "name": name or profile["name"],
        "password": password or profile["password"],
    }
    response = client.post("/users", json=body)
    assert response.status_code == 201
    return body


def login(client, name: str, password: str) -> str:
    """
    Log in and make the returned session cookie the only one on the client.

    Returns:
        The session token (user id) issued by the server
    """
    response = client.post("/users/login", json={"name": name, "password": password})
    assert response.status_code == 201
    token = response.cookies.get(SESSION_COOKIE)
    assert token
    use_session(client, token)
    return token


def use_session(client, token: str) -> None:
    client.cookies.clear()
    client.cookies.set(SESSION_COOKIE, token)


def sign_up_and_login(client, profile_type: str = "default") -> str:
    body = register(client, profile_type, name=unique_name(profile_type))
    return login(client, body["name"], body["password"])
