"""
Use cases: create, list, read, replace and delete books.

Input: BookCommand / ListBooksQuery / book id
Output: Book or list[Book]
Side effects: one repository call per operation.
Failure cases:
    - NotFoundError (404) when reading an id that does not exist.
    - InternalError (500) for every other repository failure, including
      replacing an id that does not exist.
"""

import logging
from typing import Optional

from bookstore.application.dtos import BookCommand, ListBooksQuery
from bookstore.domain.entities import Book
from bookstore.domain.errors import (
    InternalError,
    NotFoundError,
    PersistenceError,
    RecordNotFoundError,
)
from bookstore.domain.ports import BookRepository

logger = logging.getLogger(__name__)


class BookService:
    """Orchestrates book operations over the BookRepository port.

    Every repository failure is logged here with the operation and the
    underlying cause, then re-raised as a tagged ServiceError.
    """

    def __init__(
        self, book_repo: BookRepository, log: Optional[logging.Logger] = None
    ) -> None:
        """Initialize the service.

        Args:
            book_repo: Repository for book rows.
            log: Logger to report repository failures on.
        """
        self._book_repo = book_repo
        self._log = log or logger

    def add_book(self, command: BookCommand) -> Book:
        try:
            return self._book_repo.insert(command.to_draft())
        except PersistenceError as exc:
            self._log.error("Error InsertBook : %s", exc)
            raise InternalError("Error AddBook Service", exc) from exc

    def list_books(self, query: ListBooksQuery) -> list[Book]:
        page = query.to_page()
        try:
            return self._book_repo.list(page)
        except PersistenceError as exc:
            self._log.error("Error SelectAllBooks : %s", exc)
            raise InternalError("Error ListBooks Service", exc) from exc

    def get_book(self, book_id: int) -> Book:
        try:
            return self._book_repo.get(book_id)
        except RecordNotFoundError as exc:
            self._log.error("Error SelectBookByID : %s", exc)
            raise NotFoundError("Error Book Not Found", exc) from exc
        except PersistenceError as exc:
            self._log.error("Error SelectBookByID : %s", exc)
            raise InternalError("Error GetBook Service", exc) from exc

    def put_book(self, book_id: int, command: BookCommand) -> Book:
        # A missing id surfaces as 500 here, unlike get_book.
        try:
            return self._book_repo.update(book_id, command.to_draft())
        except PersistenceError as exc:
            self._log.error("Error UpdateBook : %s", exc)
            raise InternalError("Error UpdateBook Service", exc) from exc

    def delete_book(self, book_id: int) -> None:
        try:
            self._book_repo.delete(book_id)
        except PersistenceError as exc:
            self._log.error("Error DeleteBook : %s", exc)
            raise InternalError("Error DeleteBook Service", exc) from exc
