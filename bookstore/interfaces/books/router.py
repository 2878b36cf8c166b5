"""
FastAPI router for books.

All routes delegate to BookService. No business logic here.
Input validation is handled by Pydantic schemas and path typing.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, status

from bookstore.application.book_service import BookService
from bookstore.application.dtos import BookCommand, ListBooksQuery
from bookstore.domain.entities import Book
from bookstore.interfaces.dependencies import get_book_service, get_list_books_query
from bookstore.interfaces.schemas import DELETED_MESSAGE, BookRequest, BookResponse

router = APIRouter(prefix="/books", tags=["books"])


def _command(request: BookRequest) -> BookCommand:
    return BookCommand(
        title=request.title,
        authors=list(request.authors),
        publisher=request.publisher,
        isbn=request.isbn,
        price=request.price,
        quantity=request.quantity,
        created_by=request.created_by,
    )


def _response(book: Book) -> BookResponse:
    return BookResponse(
        id=book.id,
        title=book.title,
        authors=list(book.authors),
        publisher=book.publisher,
        isbn=book.isbn,
        price=book.price,
        quantity=book.quantity,
        created_by=book.created_by,
        created_at=book.created_at,
    )


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a book",
)
def add_book(
    request: BookRequest,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Store a new book; id and created_at are assigned by the database."""
    return _response(service.add_book(_command(request)))


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List books",
    description="List books ordered by id, one page at a time.",
)
def list_all_books(
    query: ListBooksQuery = Depends(get_list_books_query),
    service: BookService = Depends(get_book_service),
) -> list[BookResponse]:
    return [_response(book) for book in service.list_books(query)]


@router.get("/{book_id}", response_model=BookResponse, summary="Get a book")
def get_book_by_id(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    return _response(service.get_book(book_id))


@router.put("/{book_id}", response_model=BookResponse, summary="Replace a book")
def put_book(
    book_id: int,
    request: BookRequest,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Replace every field of a book except its id and creation time."""
    return _response(service.put_book(book_id, _command(request)))


@router.delete("/{book_id}", response_model=str, summary="Delete a book")
def del_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> str:
    service.delete_book(book_id)
    return DELETED_MESSAGE
