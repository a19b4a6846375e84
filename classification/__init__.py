"""Classification layer for the catalog import pipeline.

Assigns product subcategories from extracted fields and section context.

Rules:
- Pure functions of the record: no store, filesystem or document access
- MAY import ingestion (models), shared
"""

from .classifier import CATEGORY_STAGES, FALLBACK_STAGES, SubcategoryClassifier
from .rules import SubcategoryRule

__all__ = [
    "SubcategoryClassifier",
    "SubcategoryRule",
    "CATEGORY_STAGES",
    "FALLBACK_STAGES",
]
