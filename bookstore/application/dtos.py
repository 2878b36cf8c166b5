"""
Data Transfer Objects for the bookstore application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses; the only behavior is turning a page request
into the row window the repository understands.
"""

from dataclasses import dataclass, field

from bookstore.domain.entities import BookDraft, PageParams


@dataclass(frozen=True)
class BookCommand:
    """Input DTO for creating or replacing a book.

    Attributes:
        title: Book title.
        authors: Author names, in display order.
        publisher: Publisher name.
        isbn: ISBN as free text.
        price: Price in the smallest currency unit.
        quantity: Units in stock.
        created_by: Free-text identifier of whoever created the entry.
    """

    title: str
    authors: list[str] = field(default_factory=list)
    publisher: str = ""
    isbn: str = ""
    price: int = 0
    quantity: int = 0
    created_by: str = ""

    def to_draft(self) -> BookDraft:
        return BookDraft(
            title=self.title,
            authors=list(self.authors),
            publisher=self.publisher,
            isbn=self.isbn,
            price=self.price,
            quantity=self.quantity,
            created_by=self.created_by,
        )


@dataclass(frozen=True)
class ListBooksQuery:
    """Input DTO for listing books one page at a time.

    Attributes:
        page_id: 1-based page index.
        page_size: Number of books per page.
    """

    page_id: int = 1
    page_size: int = 10

    def to_page(self) -> PageParams:
        """Convert to a zero-based row window: offset = (page_id - 1) * page_size."""
        return PageParams(
            limit=self.page_size,
            offset=(self.page_id - 1) * self.page_size,
        )


@dataclass(frozen=True)
class UserCommand:
    """Input DTO for creating or replacing a user.

    ``password`` is plaintext and never leaves the service layer.
    """

    username: str
    email: str
    fullname: str
    password: str = field(repr=False)
