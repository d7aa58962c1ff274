"""Domain layer - Pure entities representing the picture-book catalog."""

from .book import Book, BookFilter
from .errors import CatalogError, DuplicateIdError, NotFoundError, PersistenceError
from .reading_mode import (
    READING_MODE_ICONS,
    READING_MODE_LABELS,
    ReadingMode,
    reading_mode_from_name,
)
from .sample_catalog import SAMPLE_BOOKS, SampleBook
from .story_page import DEFAULT_TOTAL_PAGES, StoryPage, build_story_pages, story_text_for_page

__all__ = [
    "Book",
    "BookFilter",
    "CatalogError",
    "DuplicateIdError",
    "NotFoundError",
    "PersistenceError",
    "ReadingMode",
    "READING_MODE_ICONS",
    "READING_MODE_LABELS",
    "reading_mode_from_name",
    "SampleBook",
    "SAMPLE_BOOKS",
    "StoryPage",
    "DEFAULT_TOTAL_PAGES",
    "build_story_pages",
    "story_text_for_page",
]
