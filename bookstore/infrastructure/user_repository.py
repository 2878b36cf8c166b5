"""
Adapter: User repository.

Implements UserRepository port against the users table.
The username is the key and is never rewritten by update.
"""

from sqlalchemy import text
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError

from bookstore.domain.entities import User, UserDraft
from bookstore.domain.errors import PersistenceError, RecordNotFoundError
from bookstore.domain.ports import UserRepository

USER_COLUMNS = "username, email, fullname, hashed_password, created_at"

INSERT_USER = text(
    f"""
    INSERT INTO users (username, email, fullname, hashed_password)
    VALUES (:username, :email, :fullname, :hashed_password)
    RETURNING {USER_COLUMNS}
    """
)

SELECT_USER = text(f"SELECT {USER_COLUMNS} FROM users WHERE username = :username")

UPDATE_USER = text(
    f"""
    UPDATE users
    SET email = :email, fullname = :fullname, hashed_password = :hashed_password
    WHERE username = :username
    RETURNING {USER_COLUMNS}
    """
)

DELETE_USER = text("DELETE FROM users WHERE username = :username")


def _to_user(row: RowMapping) -> User:
    return User(
        username=row["username"],
        email=row["email"],
        fullname=row["fullname"],
        hashed_password=row["hashed_password"],
        created_at=row["created_at"],
    )


class UserRepositoryAdapter(UserRepository):
    """Concrete adapter persisting users to PostgreSQL."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def insert(self, draft: UserDraft) -> User:
        params = {
            "username": draft.username,
            "email": draft.email,
            "fullname": draft.fullname,
            "hashed_password": draft.hashed_password,
        }
        try:
            with self._engine.begin() as conn:
                row = conn.execute(INSERT_USER, params).mappings().first()
        except SQLAlchemyError as exc:
            raise PersistenceError("InsertUser", exc) from exc
        if row is None:
            raise PersistenceError("InsertUser")
        return _to_user(row)

    def get(self, username: str) -> User:
        try:
            with self._engine.connect() as conn:
                row = conn.execute(SELECT_USER, {"username": username}).mappings().first()
        except SQLAlchemyError as exc:
            raise PersistenceError("SelectUser", exc) from exc
        if row is None:
            raise RecordNotFoundError("SelectUser", username)
        return _to_user(row)

    def update(self, username: str, draft: UserDraft) -> User:
        params = {
            "username": username,
            "email": draft.email,
            "fullname": draft.fullname,
            "hashed_password": draft.hashed_password,
        }
        try:
            with self._engine.begin() as conn:
                row = conn.execute(UPDATE_USER, params).mappings().first()
        except SQLAlchemyError as exc:
            raise PersistenceError("UpdateUser", exc) from exc
        if row is None:
            raise RecordNotFoundError("UpdateUser", username)
        return _to_user(row)

    def delete(self, username: str) -> None:
        try:
            with self._engine.begin() as conn:
                conn.execute(DELETE_USER, {"username": username})
        except SQLAlchemyError as exc:
            raise PersistenceError("DeleteUser", exc) from exc
