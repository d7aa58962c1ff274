"""Domain entity for a storybook in the catalog."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class BookFilter(Enum):
    """Which subset of the catalog the shelf shows."""

    ALL = "all"
    FAVORITES_ONLY = "favorites_only"


@dataclass(frozen=True)
class Book:
    """Represents one storybook's metadata (not its page content).

    Attributes:
        id: Stable identifier, unique within the catalog.
        title: Display title.
        cover_image_name: Name of the bundled cover image asset.
        created_at: UTC timestamp set once at creation; default sort key.
        is_favorite: Whether the reader starred the book.
        read_count: Number of times the book was opened (never decreases).
        last_read_date: UTC timestamp of the most recent open, if any.
    """

    id: str
    title: str
    cover_image_name: str
    created_at: datetime
    is_favorite: bool = False
    read_count: int = 0
    last_read_date: Optional[datetime] = None

    def matches(self, book_filter: BookFilter) -> bool:
        """Returns True if this book belongs to the given shelf subset."""
        if book_filter is BookFilter.FAVORITES_ONLY:
            return self.is_favorite
        return True
