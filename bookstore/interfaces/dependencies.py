"""
Dependency injection for the bookstore.

Provides FastAPI dependency functions that wire infrastructure
adapters into services via constructor injection. The shared collaborators
come from the AppContext stored on the application at startup; tests swap
services out through ``app.dependency_overrides``.
"""

from fastapi import Depends, Query, Request
from pydantic import ValidationError as SchemaValidationError

from bookstore.application.book_service import BookService
from bookstore.application.dtos import ListBooksQuery
from bookstore.application.user_service import UserService
from bookstore.core.context import AppContext
from bookstore.domain.errors import ValidationError
from bookstore.infrastructure.book_repository import BookRepositoryAdapter
from bookstore.infrastructure.user_repository import UserRepositoryAdapter
from bookstore.interfaces.schemas import PageRequest


def get_context(request: Request) -> AppContext:
    """Return the AppContext built by ``create_app``."""
    return request.app.state.context


def get_book_service(context: AppContext = Depends(get_context)) -> BookService:
    """Build BookService with its infrastructure dependencies."""
    return BookService(
        book_repo=BookRepositoryAdapter(engine=context.engine),
        log=context.logger,
    )


def get_user_service(context: AppContext = Depends(get_context)) -> UserService:
    """Build UserService with its infrastructure dependencies."""
    return UserService(
        user_repo=UserRepositoryAdapter(engine=context.engine),
        hasher=context.hasher,
        log=context.logger,
    )


async def get_list_books_query(
    request: Request,
    page_id: int = Query(1),
    page_size: int = Query(10),
) -> ListBooksQuery:
    """Read pagination from the query string and, when present, the JSON body.

    Values in the body win over the query string. A page index below 1 or
    a negative page size would produce a negative SQL offset or limit, so
    both are rejected with 400.
    """
    body = await request.body()
    if body.strip():
        try:
            page = PageRequest.model_validate_json(body)
        except SchemaValidationError as exc:
            raise ValidationError("Error ListBooks Bind", exc) from exc
        if "page_id" in page.model_fields_set:
            page_id = page.page_id
        if "page_size" in page.model_fields_set:
            page_size = page.page_size

    if page_id < 1 or page_size < 0:
        raise ValidationError("Error ListBooks Page Out Of Range")
    return ListBooksQuery(page_id=page_id, page_size=page_size)
