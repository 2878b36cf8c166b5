"""
Domain entities for the bookstore.

Entities represent the stored rows (records) and the mutable field sets
(drafts) that are written to storage.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class BookDraft:
    """The mutable fields of a book, as written by insert and update."""

    title: str
    authors: list[str] = field(default_factory=list)
    publisher: str = ""
    isbn: str = ""
    price: int = 0
    quantity: int = 0
    created_by: str = ""


@dataclass(frozen=True)
class Book:
    """A stored book.

    ``id`` and ``created_at`` are assigned by the database on insert
    and never change afterwards.
    """

    id: int
    title: str
    authors: list[str]
    publisher: str
    isbn: str
    price: int
    quantity: int
    created_by: str
    created_at: datetime


@dataclass(frozen=True)
class UserDraft:
    """The fields of a user as handed to storage.

    ``hashed_password`` must already be the output of the password hasher.
    """

    username: str
    email: str
    fullname: str
    hashed_password: str


@dataclass(frozen=True)
class User:
    """A stored user."""

    username: str
    email: str
    fullname: str
    hashed_password: str
    created_at: datetime


@dataclass(frozen=True)
class PageParams:
    """Row window handed to the repository: at most ``limit`` rows after ``offset``."""

    limit: int
    offset: int
