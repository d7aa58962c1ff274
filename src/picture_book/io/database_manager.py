"""SQLite-backed catalog persistence setup."""

import sqlite3
from pathlib import Path


class DatabaseManager:
    """Owns the SQLite connection and the catalog schema."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        if str(db_path) != ":memory:":
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.connection = sqlite3.connect(str(db_path))
        self.connection.row_factory = sqlite3.Row

    def ensure_schema(self) -> None:
        """Create tables and indexes if they do not exist.

        ``seq`` records insertion order and breaks ties between books that
        share a ``created_at`` value. Timestamps are integer microseconds
        since the Unix epoch (UTC).
        """
        cur = self.connection.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS books (
                seq INTEGER PRIMARY KEY AUTOINCREMENT,
                id TEXT NOT NULL UNIQUE,
                title TEXT NOT NULL,
                cover_image_name TEXT NOT NULL,
                is_favorite INTEGER NOT NULL DEFAULT 0,
                read_count INTEGER NOT NULL DEFAULT 0 CHECK (read_count >= 0),
                last_read_at INTEGER,
                created_at INTEGER NOT NULL
            );
            """
        )
        cur.execute(
            """
            CREATE INDEX IF NOT EXISTS idx_books_created_at
            ON books(created_at);
            """
        )
        self.connection.commit()

    def close(self) -> None:
        self.connection.close()
