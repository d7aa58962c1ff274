"""I/O layer - Data access for catalog persistence."""

from .catalog_store import CatalogStore
from .database_manager import DatabaseManager

__all__ = ["CatalogStore", "DatabaseManager"]
