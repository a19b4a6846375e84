"""Storage layer for the catalog import pipeline.

Handles data persistence, schema management and asset file access.

Rules:
- Repository interfaces and schema management only
- MUST NOT extract, classify or decide duplicates
- MUST NOT import ingestion, classification, reconciliation, api
- MAY import shared
"""

from .filesystem import AssetFileSystem, LocalFileSystem
from .models import StoredImage, StoredRecord
from .repositories import BaseRepository, ProductRepository, ProjectRepository
from .schema import DbSchemaManager
from .store import CatalogStore, PostgresCatalogStore

__all__ = [
    # Schema
    "DbSchemaManager",
    # Repositories
    "BaseRepository",
    "ProductRepository",
    "ProjectRepository",
    # Store facade
    "CatalogStore",
    "PostgresCatalogStore",
    "StoredRecord",
    "StoredImage",
    # Files
    "AssetFileSystem",
    "LocalFileSystem",
]
