"""Shared pytest fixtures: an in-memory store, a fake filesystem and a site tree."""

import os
from typing import Dict, Iterable, List, Optional

import pytest

from ingestion import PRODUCT_CATEGORIES
from shared.config import CatalogConfig
from storage import StoredImage, StoredRecord

NATURAL_KEYS = {
    "product": ("name", "category"),
    "project": ("title", "location"),
}


class InMemoryCatalogStore:
    """CatalogStore kept in dictionaries; ids are shared across kinds."""

    def __init__(self):
        self.rows: Dict[str, Dict[int, StoredRecord]] = {"product": {}, "project": {}}
        self.images: Dict[str, Dict[int, StoredImage]] = {"product": {}, "project": {}}
        self.pings = 0
        self._next_id = 1

    def _new_id(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value

    def ping(self) -> None:
        self.pings += 1

    def find_by_natural_key(self, kind, key) -> Optional[StoredRecord]:
        columns = NATURAL_KEYS[kind]
        for row in self.rows[kind].values():
            if tuple(row.get(column) for column in columns) == tuple(key):
                return row
        return None

    def insert(self, kind, fields) -> int:
        row_id = self._new_id()
        self.rows[kind][row_id] = StoredRecord(row_id, kind, dict(fields))
        return row_id

    def insert_image_association(self, kind, parent_id, path, order=1) -> int:
        image_id = self._new_id()
        self.images[kind][image_id] = StoredImage(image_id, kind, parent_id, path, order)
        return image_id

    def find_all(self, kind) -> List[StoredRecord]:
        return list(self.rows[kind].values())

    def update_fields(self, kind, entity_id, fields) -> None:
        self.rows[kind][entity_id].fields.update(fields)

    def find_image_associations(self, kind) -> List[StoredImage]:
        return list(self.images[kind].values())

    def update_image_path(self, kind, image_id, path) -> None:
        self.images[kind][image_id].image_path = path

    # test helpers
    def images_of(self, kind, parent_id) -> List[str]:
        return [image.image_path for image in self.images[kind].values() if image.parent_id == parent_id]

    def by_label(self, kind, label) -> Optional[StoredRecord]:
        column = NATURAL_KEYS[kind][0]
        for row in self.rows[kind].values():
            if row.get(column) == label:
                return row
        return None


class FakeFileSystem:
    """AssetFileSystem over a set of paths; copies whose file name is in
    ``fail_on`` raise OSError."""

    def __init__(self, files: Iterable[str] = (), fail_on: Iterable[str] = ()):
        self.files = set(files)
        self.fail_on = set(fail_on)
        self.copies: List[tuple] = []
        self.directories: List[str] = []

    def exists(self, path: str) -> bool:
        return path in self.files

    def copy(self, src_path: str, dest_path: str) -> None:
        if os.path.basename(src_path) in self.fail_on:
            raise OSError(f"disk full while copying {src_path}")
        self.copies.append((src_path, dest_path))
        self.files.add(dest_path)

    def ensure_directory(self, path: str) -> None:
        self.directories.append(path)


def product_card(name: Optional[str], description: str = "", image: str = "", features: Iterable[str] = ()) -> str:
    parts = ['<div class="product-horizontal-card">']
    if image:
        parts.append(f'  <div class="product-image"><img src="{image}" alt="{name or ""}"></div>')
    parts.append('  <div class="product-info">')
    if name:
        parts.append(f'    <h3 class="product-name">{name}</h3>')
    if description:
        parts.append(f'    <p style="font-size: 0.875rem; color: #6B7280;">{description}</p>')
    features = list(features)
    if features:
        parts.append("    <h4>Key Features</h4>")
        parts.append("    <ul>")
        parts.extend(f"      <li><span>&#10003;</span> {feature}</li>" for feature in features)
        parts.append("    </ul>")
    parts.append("  </div>")
    parts.append("</div>")
    parts.append("</div>")
    return "\n".join(parts)


def product_page(*sections: str) -> str:
    return "<html><body>\n" + "\n".join(sections) + "\n</body></html>\n"


def product_section(section_id: str, heading: str, *cards: str) -> str:
    return "\n".join(
        [
            f'<section id="{section_id}">',
            f'  <h2 class="brand-title">{heading}</h2>',
            '  <div class="products-grid">',
            *cards,
            "</section>",
        ]
    )


def project_card(category: str, title: str, location: str, description: str = "", equipment: str = "", image: str = "") -> str:
    parts = [f'<div class="project-card" data-category="{category}">']
    if image:
        parts.append(f'  <div class="project-image"><img src="{image}" alt="{title}"></div>')
    parts.append('  <div class="project-content">')
    parts.append(f"    <h3>{title}</h3>")
    if location:
        parts.append(f'    <p class="project-location">{location}</p>')
    if description:
        parts.append(f'    <p class="project-description">{description}</p>')
    if equipment:
        parts.append('    <div class="equipment-list">')
        parts.append("      <h4>Equipment Provided:</h4>")
        parts.append(f"      <p>{equipment}</p>")
        parts.append("    </div>")
    parts.append("  </div>")
    parts.append("</div>")
    return "\n".join(parts)


CHILLERS_PAGE = product_page(
    product_section(
        "water-cooled-centrifugal-products",
        "Water-Cooled Centrifugal Chillers",
        product_card(
            "YK Centrifugal Chiller",
            "Capacity 250 to 3000 TR",
            "/images/chillers/yk.jpg",
            ["High efficiency", "Low noise"],
        ),
    ),
    product_section(
        "york",
        "Absorption Chillers",
        product_card("YVAA Air-Cooled Screw Chiller", "Variable speed drive", "images/chillers/yvaa.jpg"),
        product_card("YHAU Unit", "Steam fired"),
        product_card(None, "Card without a name"),
    ),
)

PUMPS_PAGE = product_page(
    product_section(
        "pump-range",
        "Pumps",
        product_card("HVAC Inline Pump", "Application: Fire Fighting | 50 Hz", "/images/pumps/inline.jpg"),
        product_card("Borehole Unit", "Submersible motor, stainless"),
    ),
)

AHU_PAGE = product_page(
    product_section(
        "carrier-products",
        "Carrier",
        product_card("Modular Air Handler 39HQ", "Double skin panels"),
        product_card("AHU 39CQ", "Compact footprint"),
    ),
)

PROJECTS_PAGE = "\n".join(
    [
        "<html><body>",
        '<div class="projects-grid">',
        project_card(
            "commercial",
            "City Mall",
            "Riyadh",
            "Central plant<br>retrofit",
            "Chillers, Cooling Towers",
            "/images/projects/mall.jpg",
        ),
        project_card("hospitality", "Harbor Hotel", "Jeddah", "Guest room fan coils"),
        project_card("industrial", "No Location Plant", ""),
        "</div>",
        "</body></html>",
    ]
)


def write_site(root: str, pages: Dict[str, str]) -> None:
    os.makedirs(root, exist_ok=True)
    for filename, text in pages.items():
        with open(os.path.join(root, filename), "w", encoding="utf-8") as handle:
            handle.write(text)


@pytest.fixture
def store():
    return InMemoryCatalogStore()


@pytest.fixture
def site_root(tmp_path):
    """A site tree holding every product page plus the projects page."""
    root = str(tmp_path / "site")
    pages = {f"{category}.html": product_page() for category in PRODUCT_CATEGORIES}
    pages.update(
        {
            "chillers.html": CHILLERS_PAGE,
            "pumps.html": PUMPS_PAGE,
            "air-handling-units.html": AHU_PAGE,
            "projects.html": PROJECTS_PAGE,
        }
    )
    write_site(root, pages)
    return root


@pytest.fixture
def config(site_root):
    legacy_root = os.path.join(site_root, "backend")
    return CatalogConfig(
        pg_conn="",
        site_root=site_root,
        legacy_root=legacy_root,
        upload_root=os.path.join(legacy_root, "uploads"),
    )


def touch(path: str) -> str:
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as handle:
        handle.write(b"\x89PNG")
    return path
