"""
Tests for BookService.

Tests the service with in-memory and failing repositories.
Each test verifies orchestration and error tagging, not SQL.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from bookstore.application.book_service import BookService
from bookstore.application.dtos import BookCommand, ListBooksQuery
from bookstore.domain.errors import InternalError, NotFoundError, PersistenceError
from tests.fakes import BrokenBookRepository, InMemoryBookRepository


def _command(title: str = "T", **overrides) -> BookCommand:
    fields = dict(
        title=title, authors=["A"], publisher="P", isbn="123",
        price=100, quantity=5, created_by="admin",
    )
    fields.update(overrides)
    return BookCommand(**fields)


@pytest.fixture
def repo() -> InMemoryBookRepository:
    return InMemoryBookRepository()


@pytest.fixture
def service(repo: InMemoryBookRepository) -> BookService:
    return BookService(book_repo=repo, log=MagicMock())


class TestAddAndGet:
    """Insert-then-get returns the same fields plus server-assigned ones."""

    def test_round_trip_keeps_every_field(self, service: BookService) -> None:
        before = datetime.now()
        added = service.add_book(_command(authors=["A", "B"]))
        fetched = service.get_book(added.id)

        assert fetched == added
        assert fetched.title == "T"
        assert fetched.authors == ["A", "B"]
        assert fetched.publisher == "P"
        assert fetched.isbn == "123"
        assert fetched.price == 100
        assert fetched.quantity == 5
        assert fetched.created_by == "admin"
        assert fetched.created_at >= before

    def test_each_insert_gets_a_new_id(self, service: BookService) -> None:
        ids = {service.add_book(_command(f"T{i}")).id for i in range(5)}
        assert len(ids) == 5
        assert all(book_id > 0 for book_id in ids)

    def test_get_missing_id_is_not_found(self, service: BookService) -> None:
        with pytest.raises(NotFoundError) as info:
            service.get_book(999)
        assert info.value.code == 404


class TestListBooks:
    """Tests for paging through books."""

    def test_never_returns_more_than_page_size(self, service: BookService) -> None:
        for i in range(7):
            service.add_book(_command(f"T{i}"))
        books = service.list_books(ListBooksQuery(page_id=1, page_size=3))
        assert len(books) == 3

    def test_sorted_by_id(self, service: BookService) -> None:
        for i in range(7):
            service.add_book(_command(f"T{i}"))
        books = service.list_books(ListBooksQuery(page_id=2, page_size=3))
        ids = [book.id for book in books]
        assert ids == sorted(ids)
        assert ids == [4, 5, 6]

    def test_empty_page_is_empty_list(self, service: BookService) -> None:
        assert service.list_books(ListBooksQuery(page_id=5, page_size=10)) == []


class TestPutBook:
    """Tests for replacing a book."""

    def test_keeps_id_and_created_at(self, service: BookService) -> None:
        added = service.add_book(_command())
        updated = service.put_book(added.id, _command("New", price=250, authors=["X"]))

        assert updated.id == added.id
        assert updated.created_at == added.created_at
        assert updated.title == "New"
        assert updated.price == 250
        assert updated.authors == ["X"]

    def test_missing_id_maps_to_internal_error(self, service: BookService) -> None:
        # Unlike get_book, a missing id on update is not reported as 404.
        with pytest.raises(InternalError) as info:
            service.put_book(999, _command())
        assert info.value.code == 500


class TestDeleteBook:
    """Tests for deleting a book."""

    def test_removes_the_row(self, service: BookService, repo: InMemoryBookRepository) -> None:
        added = service.add_book(_command())
        service.delete_book(added.id)
        assert added.id not in repo.rows

    def test_missing_id_is_success(self, service: BookService) -> None:
        assert service.delete_book(999) is None


class TestRepositoryFailures:
    """Every storage failure becomes a logged InternalError."""

    @pytest.fixture
    def log(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture
    def broken(self, log: MagicMock) -> BookService:
        return BookService(book_repo=BrokenBookRepository(), log=log)

    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.add_book(_command()),
            lambda s: s.list_books(ListBooksQuery()),
            lambda s: s.get_book(1),
            lambda s: s.put_book(1, _command()),
            lambda s: s.delete_book(1),
        ],
    )
    def test_failure_is_internal_error(self, broken: BookService, log: MagicMock, call) -> None:
        with pytest.raises(InternalError) as info:
            call(broken)
        assert info.value.code == 500
        assert isinstance(info.value.original, PersistenceError)
        log.error.assert_called_once()
