"""Pytest fixtures for diskpersist tests."""

from __future__ import annotations

from typing import Annotated

import pytest
from pydantic import BaseModel, Field


class Person(BaseModel):
    """Record used across the store tests."""

    name: str
    age: Annotated[int, Field(ge=0, le=255)]
    location: tuple[float, float] = (0.0, 0.0)


class Blob(BaseModel):
    """Record with binary data and non-string keys."""

    payload: bytes
    chunks: dict[tuple[int, int], bytes] = Field(default_factory=dict)


@pytest.fixture
def person_cls() -> type[Person]:
    return Person


@pytest.fixture
def person() -> Person:
    return Person(name="Jane Doe", age=45, location=(49.24565431256531, 111.35598566896671))


@pytest.fixture
def blob_cls() -> type[Blob]:
    return Blob

