"""Data models for ingestion layer."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


PRODUCT = "product"
PROJECT = "project"


@dataclass(frozen=True)
class CatalogDocument:
    """
    Raw markup of one catalog page plus the category it declares.

    Loaded once per run and never mutated.
    """

    text: str
    category: str
    source_path: str = ""
    family: str = ""

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class Segment:
    """
    Contiguous span of a CatalogDocument believed to hold exactly one record.

    ``marker`` is the literal text of the opening marker, so attributes it
    carries stay available to the field extractor.
    """

    document: CatalogDocument
    start: int
    end: int
    marker: str = ""

    @property
    def text(self) -> str:
        return self.document.text[self.start : self.end]


@dataclass(frozen=True)
class SectionContext:
    """Ancestry hints found by scanning backward from a segment start."""

    container_id: Optional[str] = None
    heading: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.container_id is None and self.heading is None


@dataclass
class ExtractedRecord:
    """
    Product candidate produced by the field extractor.

    ``section_context`` feeds the classifier only and is never persisted.
    """

    name: str
    category: str
    description: Optional[str] = None
    subcategory: Optional[str] = None
    features: List[str] = field(default_factory=list)
    image_reference: Optional[str] = None
    section_context: Optional[SectionContext] = None

    kind = PRODUCT

    @property
    def label(self) -> str:
        return self.name

    def natural_key(self) -> Tuple[str, str]:
        return (self.name, self.category)

    def as_fields(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "subcategory": self.subcategory,
            "key_features": list(self.features),
        }


@dataclass
class ExtractedProject:
    """Project candidate; both title and location are required."""

    title: str
    location: str
    category: str = "all"
    description: Optional[str] = None
    equipment: Optional[str] = None
    image_reference: Optional[str] = None

    kind = PROJECT

    @property
    def label(self) -> str:
        return self.title

    def natural_key(self) -> Tuple[str, str]:
        return (self.title, self.location)

    def as_fields(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "location": self.location,
            "description": self.description,
            "equipment": self.equipment,
            "category": self.category,
        }


__all__ = [
    "PRODUCT",
    "PROJECT",
    "CatalogDocument",
    "Segment",
    "SectionContext",
    "ExtractedRecord",
    "ExtractedProject",
]
