"""
Adapter: Book repository.

Implements BookRepository port.
Every statement is a single parameterized query against the books table;
insert and update return the stored row in the same round trip.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError

from bookstore.domain.entities import Book, BookDraft, PageParams
from bookstore.domain.errors import PersistenceError, RecordNotFoundError
from bookstore.domain.ports import BookRepository

logger = logging.getLogger(__name__)

BOOK_COLUMNS = "id, title, authors, publisher, isbn, price, quantity, created_by, created_at"

INSERT_BOOK = text(
    f"""
    INSERT INTO books
        (title, authors, publisher, isbn, price, quantity, created_by)
    VALUES
        (:title, :authors, :publisher, :isbn, :price, :quantity, :created_by)
    RETURNING {BOOK_COLUMNS}
    """
)

SELECT_BOOKS = text(
    f"""
    SELECT {BOOK_COLUMNS}
    FROM books
    ORDER BY id ASC
    LIMIT :limit
    OFFSET :offset
    """
)

SELECT_BOOK_BY_ID = text(f"SELECT {BOOK_COLUMNS} FROM books WHERE id = :id")

UPDATE_BOOK = text(
    f"""
    UPDATE books
    SET title = :title, authors = :authors, publisher = :publisher,
        isbn = :isbn, price = :price, quantity = :quantity,
        created_by = :created_by
    WHERE id = :id
    RETURNING {BOOK_COLUMNS}
    """
)

DELETE_BOOK = text("DELETE FROM books WHERE id = :id")


def _to_book(row: RowMapping) -> Book:
    return Book(
        id=row["id"],
        title=row["title"],
        authors=list(row["authors"] or []),
        publisher=row["publisher"],
        isbn=row["isbn"],
        price=row["price"],
        quantity=row["quantity"],
        created_by=row["created_by"],
        created_at=row["created_at"],
    )


def _draft_params(draft: BookDraft) -> dict:
    return {
        "title": draft.title,
        "authors": list(draft.authors),
        "publisher": draft.publisher,
        "isbn": draft.isbn,
        "price": draft.price,
        "quantity": draft.quantity,
        "created_by": draft.created_by,
    }


class BookRepositoryAdapter(BookRepository):
    """Concrete adapter persisting books to PostgreSQL.

    Driver errors are translated into PersistenceError; a statement that
    should have produced a row but did not raises RecordNotFoundError.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def insert(self, draft: BookDraft) -> Book:
        try:
            with self._engine.begin() as conn:
                row = conn.execute(INSERT_BOOK, _draft_params(draft)).mappings().first()
        except SQLAlchemyError as exc:
            raise PersistenceError("InsertBook", exc) from exc
        if row is None:
            raise PersistenceError("InsertBook")
        book = _to_book(row)
        logger.debug("Inserted book id=%d.", book.id)
        return book

    def list(self, page: PageParams) -> list[Book]:
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(
                    SELECT_BOOKS, {"limit": page.limit, "offset": page.offset}
                ).mappings().all()
        except SQLAlchemyError as exc:
            raise PersistenceError("SelectAllBooks", exc) from exc
        return [_to_book(row) for row in rows]

    def get(self, book_id: int) -> Book:
        try:
            with self._engine.connect() as conn:
                row = conn.execute(SELECT_BOOK_BY_ID, {"id": book_id}).mappings().first()
        except SQLAlchemyError as exc:
            raise PersistenceError("SelectBookByID", exc) from exc
        if row is None:
            raise RecordNotFoundError("SelectBookByID", book_id)
        return _to_book(row)

    def update(self, book_id: int, draft: BookDraft) -> Book:
        params = _draft_params(draft)
        params["id"] = book_id
        try:
            with self._engine.begin() as conn:
                row = conn.execute(UPDATE_BOOK, params).mappings().first()
        except SQLAlchemyError as exc:
            raise PersistenceError("UpdateBook", exc) from exc
        if row is None:
            raise RecordNotFoundError("UpdateBook", book_id)
        return _to_book(row)

    def delete(self, book_id: int) -> None:
        try:
            with self._engine.begin() as conn:
                conn.execute(DELETE_BOOK, {"id": book_id})
        except SQLAlchemyError as exc:
            raise PersistenceError("DeleteBook", exc) from exc
