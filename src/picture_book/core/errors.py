"""Catalog error taxonomy."""


class CatalogError(Exception):
    """Base class for all catalog failures."""


class NotFoundError(CatalogError):
    """An operation referenced a book id that is not in the catalog."""

    def __init__(self, book_id: str):
        super().__init__(f"Book not found in catalog: {book_id}")
        self.book_id = book_id


class DuplicateIdError(CatalogError):
    """A book with the same id already exists."""

    def __init__(self, book_id: str):
        super().__init__(f"Book id already exists in catalog: {book_id}")
        self.book_id = book_id


class PersistenceError(CatalogError):
    """The underlying storage failed to read or write."""
