"""
Shared pytest fixtures for the user-scenario test suite.

Offline tests never touch the network: ``fake_transport`` replaces
``requests.request`` with a scripted stand-in that hands back queued
responses (or raises queued exceptions) and records every call so
tests can assert on method, URL, headers and body.

Key Concepts Demonstrated:
- Selecting the testing configuration before the package is imported
- Monkeypatching the HTTP layer with a configurable fake
- Faker-backed test data factories
"""

from __future__ import annotations

import json
import os
from typing import Any

import pytest
from faker import Faker

# Set testing environment before importing the package
os.environ["REQRES_ENV"] = "testing"

from reqres_suite import create_client
from reqres_suite.api import UsersApi
from reqres_suite.models import User


# Initialize Faker for generating test data
fake = Faker()


class FakeResponse:
    """Configurable stand-in for ``requests.Response`` used by the client layer."""

    def __init__(
        self,
        status_code: int = 200,
        body: Any = None,
        *,
        content: bytes | None = None,
    ):
        self.status_code = status_code
        if content is None:
            content = b"" if body is None else json.dumps(body).encode("utf-8")
        self.content = content

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    def json(self) -> Any:
        # Raises ValueError on an empty or non-JSON body, like requests does.
        return json.loads(self.content)


class FakeTransport:
    """
    Scripted replacement for ``requests.request``.

    Attributes:
        calls: Keyword arguments of every request, in order.
    """

    def __init__(self):
        self.calls: list[dict[str, Any]] = []
        self._queue: list[FakeResponse | Exception] = []

    def queue(self, *items: FakeResponse | Exception) -> None:
        self._queue.extend(items)

    def __call__(self, **kwargs: Any) -> FakeResponse:
        self.calls.append(kwargs)
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def last_call(self) -> dict[str, Any]:
        return self.calls[-1]


# -----------------------------------------------------------------------------
# Client Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def fake_transport(monkeypatch) -> FakeTransport:
    """Replace the HTTP layer with a ``FakeTransport`` for one test."""
    transport = FakeTransport()
    monkeypatch.setattr("reqres_suite.api.requests.request", transport)
    return transport


@pytest.fixture
def users_api() -> UsersApi:
    """Provide a client built from the testing configuration."""
    return create_client("testing")


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def user_factory():
    """
    Factory fixture for outgoing ``User`` payloads.

    Example:
        def test_something(user_factory):
            user = user_factory(job="Tester")
            assert user.job == "Tester"
    """

    def _create_user(name: str | None = None, job: str | None = None) -> User:
        return User(name=name or fake.name(), job=job or fake.job())

    return _create_user


@pytest.fixture
def created_user_body() -> dict[str, str]:
    """Body the service returns for a successful create."""
    return {
        "name": "John Doe",
        "job": "Software Engineer",
        "id": "123",
        "createdAt": "2024-01-01T12:00:00.000Z",
    }


@pytest.fixture
def users_page_body() -> dict[str, Any]:
    """Body the service returns for ``GET /users?page=2``."""
    return {
        "page": 2,
        "per_page": 6,
        "total": 12,
        "total_pages": 2,
        "data": [
            {
                "id": 7,
                "email": "michael.lawson@reqres.in",
                "first_name": "Michael",
                "last_name": "Lawson",
                "avatar": "https://reqres.in/img/faces/7-image.jpg",
            },
            {
                "id": 8,
                "email": "lindsay.ferguson@reqres.in",
                "first_name": "Lindsay",
                "last_name": "Ferguson",
                "avatar": "https://reqres.in/img/faces/8-image.jpg",
            },
        ],
    }
