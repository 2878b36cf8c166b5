"""
Pydantic schemas for bookstore API request/response validation.

These schemas define the JSON contract. A body that does not fit them
is rejected with 400 before any service runs. Request models are strict:
values are never coerced from one JSON type to another.
No business logic belongs here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DELETED_MESSAGE = "Deleted Successfully"


class BookRequest(BaseModel):
    """Request schema for creating or replacing a book.

    Attributes:
        title: Book title.
        authors: Author names, in display order.
        publisher: Publisher name.
        isbn: ISBN as free text.
        price: Price in the smallest currency unit.
        quantity: Units in stock.
        created_by: Who created the entry.
    """

    model_config = ConfigDict(strict=True)

    title: str
    authors: list[str]
    publisher: str
    isbn: str
    price: int
    quantity: int
    created_by: str


class BookResponse(BaseModel):
    """A stored book."""

    id: int
    title: str
    authors: list[str]
    publisher: str
    isbn: str
    price: int
    quantity: int
    created_by: str
    created_at: datetime


class PageRequest(BaseModel):
    """Pagination parameters for listing books."""

    model_config = ConfigDict(strict=True)

    page_id: int = Field(default=1, description="1-based page index")
    page_size: int = Field(default=10, description="Books per page")


class UserRequest(BaseModel):
    """Request schema for registering a user. ``password`` is plaintext."""

    model_config = ConfigDict(strict=True)

    username: str
    email: str
    fullname: str
    password: str


class UserUpdateRequest(BaseModel):
    """Request schema for replacing a user.

    ``username`` is accepted for compatibility with clients that send the
    full user, but the path decides which user is updated.
    """

    model_config = ConfigDict(strict=True)

    username: Optional[str] = None
    email: str
    fullname: str
    password: str


class UserResponse(BaseModel):
    """A stored user. Carries the password hash, never the password."""

    username: str
    email: str
    fullname: str
    hashed_password: str
    created_at: datetime


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
