"""Write-through catalog of books backed by SQLite."""

import sqlite3
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, List, Optional, Tuple

from picture_book.core import (
    SAMPLE_BOOKS,
    Book,
    BookFilter,
    DuplicateIdError,
    NotFoundError,
    PersistenceError,
)
from picture_book.utils.logging import get_logger

logger = get_logger(__name__)

Clock = Callable[[], datetime]
CatalogListener = Callable[[List[Book]], None]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MICROSECOND = timedelta(microseconds=1)

_SELECT_BOOKS = """
    SELECT id, title, cover_image_name, is_favorite, read_count, last_read_at, created_at
    FROM books
"""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_micros(value: datetime) -> int:
    return (_as_utc(value) - _EPOCH) // _ONE_MICROSECOND


def _from_micros(value: int) -> datetime:
    return _EPOCH + timedelta(microseconds=value)


class CatalogStore:
    """Owns the in-memory list of books and keeps it in step with SQLite.

    Every mutation commits before returning, and the in-memory view is only
    updated after the commit succeeds. Read failures are logged and leave
    the in-memory view unchanged; write failures roll back and raise
    PersistenceError.

    Listeners registered with ``subscribe`` are called with the list of
    affected books after each successful mutation; a seed batch is one call.
    A listener that raises is logged and does not affect the mutation or
    the other listeners.
    """

    def __init__(self, connection: sqlite3.Connection, clock: Optional[Clock] = None) -> None:
        """Initialize the store and load the persisted catalog.

        Args:
            connection: SQLite connection with the ``books`` schema created.
            clock: Returns the current time; defaults to UTC wall clock.

        Raises:
            RuntimeError: If connection is None.
        """
        if connection is None:
            raise RuntimeError("Database connection required")
        self.connection = connection
        self.connection.row_factory = sqlite3.Row
        self._clock = clock or _utc_now
        # Insertion order; list_books sorts a copy.
        self._books: List[Book] = []
        self._listeners: List[CatalogListener] = []
        self.reload()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def reload(self) -> bool:
        """Re-read the persisted catalog into memory.

        Returns:
            True on success. On a storage error the failure is logged, the
            in-memory view is left unchanged and False is returned.
        """
        try:
            cur = self.connection.cursor()
            cur.execute(_SELECT_BOOKS + " ORDER BY seq ASC")
            rows = cur.fetchall()
        except sqlite3.Error as e:
            logger.error("Failed to load catalog: %s", e)
            return False
        self._books = [self._row_to_book(row) for row in rows]
        logger.debug("Loaded %d books from catalog", len(self._books))
        return True

    def list_books(self, book_filter: BookFilter = BookFilter.ALL) -> List[Book]:
        """Return books sorted by created_at, newest first.

        Books sharing a created_at keep their insertion order.
        """
        selected = [book for book in self._books if book.matches(book_filter)]
        return sorted(selected, key=lambda book: book.created_at, reverse=True)

    def get_book(self, book_id: str) -> Book:
        """Retrieve a book by id.

        Raises:
            NotFoundError: If no book has this id.
        """
        for book in self._books:
            if book.id == book_id:
                return book
        raise NotFoundError(book_id)

    def contains(self, book_id: str) -> bool:
        return any(book.id == book_id for book in self._books)

    def count(self) -> int:
        return len(self._books)

    def __len__(self) -> int:
        return len(self._books)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create_book(self, book_id: str, title: str, cover_image_name: str) -> Book:
        """Add a new book with no reads and not marked as favorite.

        Raises:
            ValueError: If book_id is empty.
            DuplicateIdError: If a book with this id already exists.
            PersistenceError: If the database write fails.
        """
        created = self._insert_books([(book_id, title, cover_image_name)], self._now())
        book = created[0]
        logger.debug("Created book %s", book.id)
        self._notify([book])
        return book

    def toggle_favorite(self, book_id: str) -> Book:
        """Flip the favorite flag of a book.

        Raises:
            NotFoundError: If the book does not exist.
            PersistenceError: If the database write fails.
        """
        current = self.get_book(book_id)
        updated = replace(current, is_favorite=not current.is_favorite)
        self._execute_update(
            "UPDATE books SET is_favorite = ? WHERE id = ?",
            (int(updated.is_favorite), book_id),
            book_id,
        )
        self._replace_cached(updated)
        logger.debug("Book %s favorite=%s", book_id, updated.is_favorite)
        self._notify([updated])
        return updated

    def increment_read_count(self, book_id: str) -> Book:
        """Record that a book was opened.

        Increments read_count and sets last_read_date to now (never earlier
        than the book's created_at).

        Raises:
            NotFoundError: If the book does not exist.
            PersistenceError: If the database write fails.
        """
        current = self.get_book(book_id)
        read_at = max(self._now(), current.created_at)
        updated = replace(
            current,
            read_count=current.read_count + 1,
            last_read_date=read_at,
        )
        self._execute_update(
            "UPDATE books SET read_count = ?, last_read_at = ? WHERE id = ?",
            (updated.read_count, _to_micros(read_at), book_id),
            book_id,
        )
        self._replace_cached(updated)
        logger.debug("Book %s read_count=%d", book_id, updated.read_count)
        self._notify([updated])
        return updated

    def seed_sample_data_if_empty(self) -> List[Book]:
        """Populate the fixed sample books when the catalog is empty.

        All samples are written in one transaction and share one created_at,
        so the shelf lists them in insertion order.

        Returns:
            The seeded books, or an empty list if the catalog had data (or
            its size could not be read).

        Raises:
            PersistenceError: If the database write fails.
        """
        try:
            cur = self.connection.cursor()
            cur.execute("SELECT COUNT(*) FROM books")
            existing = cur.fetchone()[0]
        except sqlite3.Error as e:
            logger.error("Failed to count catalog books, skipping seed: %s", e)
            return []
        if existing or self._books:
            return []

        created = self._insert_books(SAMPLE_BOOKS, self._now())
        logger.info("Seeded catalog with %d sample books", len(created))
        self._notify(created)
        return created

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def subscribe(self, listener: CatalogListener) -> Callable[[], None]:
        """Register a listener for catalog changes.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _now(self) -> datetime:
        return _as_utc(self._clock())

    def _notify(self, books: List[Book]) -> None:
        for listener in list(self._listeners):
            try:
                listener(books)
            except Exception:
                logger.exception("Catalog listener %r failed", listener)

    def _insert_books(
        self,
        entries: Iterable[Tuple[str, str, str]],
        created_at: datetime,
    ) -> List[Book]:
        books = []
        seen = set()
        for book_id, title, cover_image_name in entries:
            if not book_id:
                raise ValueError("Book id cannot be empty")
            if book_id in seen or self.contains(book_id):
                raise DuplicateIdError(book_id)
            seen.add(book_id)
            books.append(
                Book(
                    id=book_id,
                    title=title,
                    cover_image_name=cover_image_name,
                    created_at=created_at,
                )
            )

        created_micros = _to_micros(created_at)
        try:
            cur = self.connection.cursor()
            for book in books:
                cur.execute(
                    """
                    INSERT INTO books (id, title, cover_image_name, created_at)
                    VALUES (?, ?, ?, ?)
                    """,
                    (book.id, book.title, book.cover_image_name, created_micros),
                )
            self.connection.commit()
        except sqlite3.IntegrityError as e:
            self._rollback()
            duplicate = self._first_persisted_id(b.id for b in books)
            if duplicate is not None:
                raise DuplicateIdError(duplicate) from e
            raise PersistenceError(f"Failed to add book to catalog: {e}") from e
        except sqlite3.Error as e:
            self._rollback()
            raise PersistenceError(f"Failed to add book to catalog: {e}") from e

        self._books.extend(books)
        return books

    def _first_persisted_id(self, book_ids: Iterable[str]) -> Optional[str]:
        try:
            cur = self.connection.cursor()
            for book_id in book_ids:
                cur.execute("SELECT 1 FROM books WHERE id = ?", (book_id,))
                if cur.fetchone() is not None:
                    return book_id
        except sqlite3.Error as e:
            logger.error("Failed to check for duplicate book ids: %s", e)
        return None

    def _execute_update(self, sql: str, params: tuple, book_id: str) -> None:
        try:
            cur = self.connection.cursor()
            cur.execute(sql, params)
            if cur.rowcount == 0:
                self._rollback()
                raise NotFoundError(book_id)
            self.connection.commit()
        except sqlite3.Error as e:
            self._rollback()
            raise PersistenceError(f"Failed to update book {book_id}: {e}") from e

    def _rollback(self) -> None:
        try:
            self.connection.rollback()
        except sqlite3.Error as e:
            logger.error("Rollback failed: %s", e)

    def _replace_cached(self, updated: Book) -> None:
        for index, book in enumerate(self._books):
            if book.id == updated.id:
                self._books[index] = updated
                return

    @staticmethod
    def _row_to_book(row: sqlite3.Row) -> Book:
        """Convert database row to Book entity."""
        last_read_at = row["last_read_at"]
        return Book(
            id=row["id"],
            title=row["title"],
            cover_image_name=row["cover_image_name"],
            created_at=_from_micros(row["created_at"]),
            is_favorite=bool(row["is_favorite"]),
            read_count=row["read_count"],
            last_read_date=_from_micros(last_read_at) if last_read_at is not None else None,
        )
