"""Field extractors for ingestion layer."""

from .base import BaseFieldExtractor
from .context import ContextResolver
from .product import ProductFieldExtractor
from .project import ProjectFieldExtractor

__all__ = [
    "BaseFieldExtractor",
    "ContextResolver",
    "ProductFieldExtractor",
    "ProjectFieldExtractor",
]
