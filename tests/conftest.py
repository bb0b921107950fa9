"""Shared pytest fixtures for mock cars API tests."""

from collections.abc import Callable, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from services.values_store import ValuesStore


@pytest.fixture
def store() -> ValuesStore:
    """A store with the start-up defaults (10000 / 0 / 0 / 1)."""
    return ValuesStore()


@pytest.fixture
def make_app() -> Callable[..., FastAPI]:
    """Build a fresh app, optionally overriding settings fields.

    Example:
        app = make_app(default_count=20)
    """

    def _make(**overrides) -> FastAPI:
        config = Settings(_env_file=None, **overrides)
        return create_app(config)

    return _make


@pytest.fixture
def app(make_app) -> FastAPI:
    return make_app()


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
