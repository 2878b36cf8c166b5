"""
Pytest configuration and fixtures for the bookstore tests.
"""

import logging
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bookstore.core.config import Settings
from bookstore.core.context import AppContext
from bookstore.infrastructure.password_hasher import BcryptPasswordHasher
from bookstore.main import create_app

ACCESS_TOKEN = "test-access-token"


# ── Fixtures ─────────────────────────────────────────────────────────


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    """Cheapest bcrypt work factor, to keep the suite fast."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def settings() -> Settings:
    return Settings(access_token=ACCESS_TOKEN, version="9.9.9", log_level="WARNING")


@pytest.fixture
def app(settings: Settings, hasher: BcryptPasswordHasher) -> FastAPI:
    """Application wired to a mock engine; routes get fake services via overrides."""
    context = AppContext(
        settings=settings,
        engine=MagicMock(),
        hasher=hasher,
        logger=logging.getLogger("bookstore.test"),
    )
    return create_app(context=context)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": ACCESS_TOKEN}
