"""
Adapter: bcrypt password hasher.

Implements PasswordHasher port. Hashes are salted, so hashing the same
password twice gives two different strings.
"""

import bcrypt

from bookstore.domain.errors import PasswordHashError
from bookstore.domain.ports import PasswordHasher

DEFAULT_ROUNDS = 12


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt with a configurable work factor."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        if not password:
            raise PasswordHashError("error password not found")
        try:
            hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=self._rounds))
        except ValueError as exc:
            raise PasswordHashError(f"error hash password : {exc}") from exc
        return hashed.decode("utf-8")
