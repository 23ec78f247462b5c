"""Shared fixtures: a populated registry and a projector bound to it.

Fixtures here never touch the module-level registry or config singletons;
tests that do reset them locally.
"""

from __future__ import annotations

import pytest

from recordview.config import RenderConfig
from recordview.render.projector import Projector
from recordview.schemas.registry import SchemaRegistry
from tests.helpers import (
    AUTHOR_FIELDS,
    REVIEW_FIELDS,
    USER_FIELDS,
    Author,
    Review,
    User,
    make_user,
)


@pytest.fixture
def registry() -> SchemaRegistry:
    reg = SchemaRegistry()
    reg.register(User, USER_FIELDS)
    reg.register(Review, REVIEW_FIELDS)
    reg.register(Author, AUTHOR_FIELDS)
    return reg


@pytest.fixture
def config() -> RenderConfig:
    return RenderConfig()


@pytest.fixture
def projector(registry, config) -> Projector:
    return Projector(registry, config)


@pytest.fixture
def user() -> dict:
    return make_user()
