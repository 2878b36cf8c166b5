"""
Tests for the access-token middleware.

Every path except /health requires the shared secret; rejection happens
before routing, so no handler or service runs.
"""

import logging
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bookstore.application.book_service import BookService
from bookstore.application.user_service import UserService
from bookstore.core.config import Settings
from bookstore.core.context import AppContext
from bookstore.interfaces.dependencies import get_book_service, get_user_service
from bookstore.main import create_app
from bookstore.shared.security.auth import is_authorized, presented_token
from tests.conftest import ACCESS_TOKEN

ROUTES = [
    ("POST", "/books"),
    ("GET", "/books"),
    ("GET", "/books/1"),
    ("PUT", "/books/1"),
    ("PUT", "/books/abc"),
    ("DELETE", "/books/1"),
    ("POST", "/users"),
    ("GET", "/users/nobody"),
    ("PUT", "/users/nobody"),
    ("DELETE", "/users/nobody"),
    ("GET", "/does-not-exist"),
]


@pytest.fixture
def services(app: FastAPI) -> tuple[MagicMock, MagicMock]:
    books = MagicMock(spec=BookService)
    users = MagicMock(spec=UserService)
    app.dependency_overrides[get_book_service] = lambda: books
    app.dependency_overrides[get_user_service] = lambda: users
    return books, users


class TestAccessTokenMiddleware:
    """Tests for request rejection."""

    @pytest.mark.parametrize("method, path", ROUTES)
    def test_missing_credential_is_401(self, client: TestClient, services, method, path) -> None:
        response = client.request(method, path)
        assert response.status_code == 401
        assert response.content == b""
        books, users = services
        assert books.method_calls == []
        assert users.method_calls == []

    @pytest.mark.parametrize("method, path", ROUTES)
    def test_wrong_credential_is_401(self, client: TestClient, services, method, path) -> None:
        response = client.request(method, path, headers={"Authorization": "not-the-token"})
        assert response.status_code == 401

    def test_bearer_scheme_is_accepted(self, client: TestClient, services) -> None:
        books, _ = services
        books.list_books.return_value = []
        response = client.get("/books", headers={"Authorization": f"Bearer {ACCESS_TOKEN}"})
        assert response.status_code == 200

    def test_health_needs_no_credential(self, client: TestClient) -> None:
        assert client.get("/health").status_code == 200

    def test_unconfigured_token_rejects_everything(self, hasher) -> None:
        context = AppContext(
            settings=Settings(access_token=""),
            engine=MagicMock(),
            hasher=hasher,
            logger=logging.getLogger("bookstore.test"),
        )
        client = TestClient(create_app(context=context))
        assert client.get("/books", headers={"Authorization": ""}).status_code == 401


class TestTokenHelpers:
    """Tests for header parsing."""

    def test_presented_token_strips_bearer(self) -> None:
        assert presented_token("Bearer abc") == "abc"
        assert presented_token("bearer  abc ") == "abc"
        assert presented_token("abc") == "abc"

    def test_is_authorized(self) -> None:
        assert is_authorized("secret", "secret")
        assert is_authorized("Bearer secret", "secret")
        assert not is_authorized(None, "secret")
        assert not is_authorized("other", "secret")
        assert not is_authorized("", "")
