"""Ingestion layer for the catalog import pipeline.

Handles document loading, record segmentation and field extraction.

Rules:
- MUST NOT classify, touch the store, or copy files
- MUST NOT import classification, storage, reconciliation, api
"""

from .families import FAMILIES, PRODUCT_CATEGORIES, PRODUCTS, PROJECTS, DocumentFamily, get_family
from .loader import DocumentLoader
from .models import (
    PRODUCT,
    PROJECT,
    CatalogDocument,
    ExtractedProject,
    ExtractedRecord,
    SectionContext,
    Segment,
)
from .parsers import ContextResolver, ProductFieldExtractor, ProjectFieldExtractor
from .segmentation import SegmentExtractor

__all__ = [
    # Models
    "PRODUCT",
    "PROJECT",
    "CatalogDocument",
    "Segment",
    "SectionContext",
    "ExtractedRecord",
    "ExtractedProject",
    # Families
    "DocumentFamily",
    "FAMILIES",
    "PRODUCTS",
    "PROJECTS",
    "PRODUCT_CATEGORIES",
    "get_family",
    "DocumentLoader",
    # Extraction
    "SegmentExtractor",
    "ContextResolver",
    "ProductFieldExtractor",
    "ProjectFieldExtractor",
]
