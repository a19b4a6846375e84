"""Document families the pipeline knows how to read.

A family fixes the record marker and which files belong to it. Product pages
are one file per category; the projects page carries the category on each
card marker instead.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Pattern

from .models import PRODUCT, PROJECT


@dataclass(frozen=True)
class DocumentFamily:
    name: str
    kind: str
    marker: Pattern[str]
    documents: Dict[str, Optional[str]]  # filename -> declared category

    def filenames(self):
        return list(self.documents)

    def category_for(self, filename: str) -> Optional[str]:
        return self.documents.get(filename)


PRODUCT_CATEGORIES = [
    "air-handling-units",
    "chillers",
    "cooling-towers",
    "fan-coil-units",
    "variable-refrigerant-flow",
    "air-outlets-dampers",
    "pumps",
]

PRODUCTS = DocumentFamily(
    name="products",
    kind=PRODUCT,
    marker=re.compile(r'<div class="product-horizontal-card"'),
    documents={f"{category}.html": category for category in PRODUCT_CATEGORIES},
)

PROJECTS = DocumentFamily(
    name="projects",
    kind=PROJECT,
    marker=re.compile(r'<div class="project-card" data-category="([^"]+)">'),
    documents={"projects.html": None},
)

FAMILIES: Dict[str, DocumentFamily] = {
    PRODUCTS.name: PRODUCTS,
    PROJECTS.name: PROJECTS,
}


def get_family(name: str) -> DocumentFamily:
    try:
        return FAMILIES[name]
    except KeyError:
        raise ValueError(f"unknown document family: {name!r}") from None


__all__ = [
    "DocumentFamily",
    "PRODUCT_CATEGORIES",
    "PRODUCTS",
    "PROJECTS",
    "FAMILIES",
    "get_family",
]
