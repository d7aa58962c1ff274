"""
Picture Book - A shelf of illustrated storybooks and a page-by-page viewer.

This package provides a desktop application with:
- A persisted catalog of books (favorites, read counts)
- A two-column shelf with a favorites filter
- A full-window viewer with reading modes and an auto-hiding control overlay
"""

__version__ = "0.1.0"

# Make key components available at package level
from picture_book.core import Book, BookFilter, ReadingMode
from picture_book.io import CatalogStore, DatabaseManager

__all__ = [
    "Book",
    "BookFilter",
    "ReadingMode",
    "CatalogStore",
    "DatabaseManager",
]
