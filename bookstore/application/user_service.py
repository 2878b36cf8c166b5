"""
Use cases: register, read, replace and delete users.

Input: UserCommand / username
Output: User
Side effects: hashes the password, then one repository call per operation.
Failure cases:
    - InternalError (500) when the password cannot be hashed; storage is
      never touched in that case.
    - NotFoundError (404) when reading a username that does not exist.
    - InternalError (500) for every other repository failure.
"""

import logging
from typing import Optional

from bookstore.application.dtos import UserCommand
from bookstore.domain.entities import User, UserDraft
from bookstore.domain.errors import (
    InternalError,
    NotFoundError,
    PasswordHashError,
    PersistenceError,
    RecordNotFoundError,
)
from bookstore.domain.ports import PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Orchestrates user operations.

    The plaintext password is replaced by its hash before anything is
    handed to the UserRepository port.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        log: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize the service.

        Args:
            user_repo: Repository for user rows.
            hasher: One-way password hasher.
            log: Logger to report failures on.
        """
        self._user_repo = user_repo
        self._hasher = hasher
        self._log = log or logger

    def _draft(self, username: str, command: UserCommand, operation: str) -> UserDraft:
        try:
            hashed = self._hasher.hash(command.password)
        except PasswordHashError as exc:
            self._log.error("Error %s Hash Password : %s", operation, exc)
            raise InternalError(f"Error {operation} Service", exc) from exc
        return UserDraft(
            username=username,
            email=command.email,
            fullname=command.fullname,
            hashed_password=hashed,
        )

    def add_user(self, command: UserCommand) -> User:
        draft = self._draft(command.username, command, "AddUser")
        try:
            return self._user_repo.insert(draft)
        except PersistenceError as exc:
            self._log.error("Error InsertUser : %s", exc)
            raise InternalError("Error AddUser Service", exc) from exc

    def get_user(self, username: str) -> User:
        try:
            return self._user_repo.get(username)
        except RecordNotFoundError as exc:
            self._log.error("Error SelectUser : %s", exc)
            raise NotFoundError("Error User Not Found", exc) from exc
        except PersistenceError as exc:
            self._log.error("Error SelectUser : %s", exc)
            raise InternalError("Error GetUser Service", exc) from exc

    def put_user(self, username: str, command: UserCommand) -> User:
        """Replace a user's email, fullname and password.

        The username in the path is the key; ``command.username`` is ignored
        because usernames never change.
        """
        draft = self._draft(username, command, "PutUser")
        try:
            return self._user_repo.update(username, draft)
        except PersistenceError as exc:
            self._log.error("Error UpdateUser : %s", exc)
            raise InternalError("Error PutUser Service", exc) from exc

    def delete_user(self, username: str) -> None:
        try:
            self._user_repo.delete(username)
        except PersistenceError as exc:
            self._log.error("Error DeleteUser : %s", exc)
            raise InternalError("Error DeleteUser Service", exc) from exc
