"""Repository implementations for the storage layer."""

from .base import BaseRepository
from .product_repo import ProductRepository
from .project_repo import ProjectRepository

__all__ = ["BaseRepository", "ProductRepository", "ProjectRepository"]
