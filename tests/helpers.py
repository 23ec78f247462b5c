"""Schema references and record builders shared across tests."""

from __future__ import annotations

from datetime import datetime


class User:
    """Schema reference for users."""


class Review:
    """Schema reference for reviews."""


class Author:
    """Schema reference for review authors."""


USER_FIELDS = ["id", "username", "email", "inserted_at", "updated_at"]
REVIEW_FIELDS = ["id", "comment", "rating", "author"]
AUTHOR_FIELDS = ["id", "name"]

INSERTED = datetime(2024, 1, 2, 3, 4, 5)
UPDATED = datetime(2024, 2, 3, 4, 5, 6)


def make_user(**overrides) -> dict:
    user = {
        "id": 1,
        "username": "ada",
        "email": "ada@example.com",
        "inserted_at": INSERTED,
        "updated_at": UPDATED,
    }
    user.update(overrides)
    return user
