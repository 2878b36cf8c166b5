"""
Port interfaces (ABCs) for the bookstore.

Ports define the contracts that the services require from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from bookstore.domain.entities import Book, BookDraft, PageParams, User, UserDraft


class BookRepository(ABC):
    """Port for persisting and retrieving books."""

    @abstractmethod
    def insert(self, draft: BookDraft) -> Book:
        """Store a new book and return the stored row.

        Raises:
            PersistenceError: The statement failed.
        """
        raise NotImplementedError

    @abstractmethod
    def list(self, page: PageParams) -> list[Book]:
        """Return at most ``page.limit`` books after ``page.offset``, ordered by id."""
        raise NotImplementedError

    @abstractmethod
    def get(self, book_id: int) -> Book:
        """Return one book.

        Raises:
            RecordNotFoundError: No book has this id.
            PersistenceError: The statement failed.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, book_id: int, draft: BookDraft) -> Book:
        """Replace every mutable field of a book and return the stored row.

        Raises:
            RecordNotFoundError: No book has this id.
            PersistenceError: The statement failed.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, book_id: int) -> None:
        """Remove a book. Removing a missing id is not an error."""
        raise NotImplementedError


class UserRepository(ABC):
    """Port for persisting and retrieving users."""

    @abstractmethod
    def insert(self, draft: UserDraft) -> User:
        """Store a new user and return the stored row."""
        raise NotImplementedError

    @abstractmethod
    def get(self, username: str) -> User:
        """Return one user.

        Raises:
            RecordNotFoundError: No user has this username.
            PersistenceError: The statement failed.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, username: str, draft: UserDraft) -> User:
        """Replace email, fullname and password hash of a user."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, username: str) -> None:
        """Remove a user. Removing a missing username is not an error."""
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted one-way hash of ``password``.

        Raises:
            PasswordHashError: The password is empty or cannot be hashed.
        """
        raise NotImplementedError
