"""
Application context.

Holds the objects built once at startup (settings, database engine,
password hasher, logger) and hands them to every component that needs
them. Nothing reads these from module-level globals.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.engine import Engine

from bookstore.core.config import Settings
from bookstore.domain.ports import PasswordHasher


@dataclass
class AppContext:
    """Per-process collaborators shared by all requests."""

    settings: Settings
    engine: Engine
    hasher: PasswordHasher
    logger: logging.Logger
