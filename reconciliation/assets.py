"""Image asset resolution across historical storage layouts.

Image references in the source pages were written against several layouts
over time. Candidates are tried in a fixed order, most likely first:

1. site root + reference            (pages authored next to ``images/``)
2. legacy backend root + reference  (files dropped into ``backend/``)
3. legacy uploads root + reference  (``backend/uploads/<reference>``)
4. canonical directory + file name  (already migrated)
5. legacy backend root + file name  (flattened copies)
"""

import os
from dataclasses import dataclass
from typing import Callable, List, Optional
from urllib.parse import unquote

from shared.config import CatalogConfig
from shared.text_utils import ensure_leading_slash
from storage.filesystem import AssetFileSystem


CANONICAL_DIRS = {
    "product": "products",
    "project": "projects",
}


@dataclass(frozen=True)
class AssetLayout:
    site_root: str
    legacy_root: str
    upload_root: str
    url_prefix: str = "/uploads"

    @classmethod
    def from_config(cls, config: CatalogConfig) -> "AssetLayout":
        return cls(
            site_root=config.site_root,
            legacy_root=config.legacy_root,
            upload_root=config.upload_root,
            url_prefix=config.upload_url_prefix,
        )

    def canonical_dir(self, kind: str) -> str:
        return os.path.join(self.upload_root, CANONICAL_DIRS[kind])

    def canonical_path(self, kind: str, filename: str) -> str:
        return f"{self.url_prefix.rstrip('/')}/{CANONICAL_DIRS[kind]}/{filename}"


CandidateBuilder = Callable[[AssetLayout, str, str], str]


def _relative(reference: str) -> str:
    rel = unquote(reference.split("?", 1)[0]).strip()
    while rel.startswith("./"):
        rel = rel[2:]
    return rel.lstrip("/")


def _filename(reference: str) -> str:
    return os.path.basename(_relative(reference))


CANDIDATE_BUILDERS: List[CandidateBuilder] = [
    lambda layout, ref, kind: os.path.join(layout.site_root, _relative(ref)),
    lambda layout, ref, kind: os.path.join(layout.legacy_root, _relative(ref)),
    lambda layout, ref, kind: os.path.join(layout.upload_root, _relative(ref)),
    lambda layout, ref, kind: os.path.join(layout.canonical_dir(kind), _filename(ref)),
    lambda layout, ref, kind: os.path.join(layout.legacy_root, _filename(ref)),
]


@dataclass
class ImagePlacement:
    stored_path: str
    source: Optional[str] = None
    copied: bool = False

    @property
    def missing(self) -> bool:
        return self.source is None


class AssetRelocator:
    """Resolve an image reference and copy it into the canonical directory."""

    def __init__(
        self,
        layout: AssetLayout,
        fs: AssetFileSystem,
        builders: Optional[List[CandidateBuilder]] = None,
    ):
        self.layout = layout
        self.fs = fs
        self.builders = CANDIDATE_BUILDERS if builders is None else builders

    def candidates(self, reference: str, kind: str) -> List[str]:
        seen = set()
        paths: List[str] = []
        for build in self.builders:
            path = build(self.layout, reference, kind)
            if path not in seen:
                seen.add(path)
                paths.append(path)
        return paths

    def resolve(self, reference: str, kind: str) -> Optional[str]:
        """First candidate that exists on disk, or None."""
        if not _filename(reference):
            return None
        for path in self.candidates(reference, kind):
            if self.fs.exists(path):
                return path
        return None

    def place(self, reference: str, kind: str) -> ImagePlacement:
        """
        Copy the referenced image into place and return the path to store.

        A reference with no file behind it is kept verbatim with a leading
        ``/``; that is not an error.
        """
        source = self.resolve(reference, kind)
        if source is None:
            return ImagePlacement(stored_path=ensure_leading_slash(reference.strip()))

        filename = os.path.basename(source)
        target_dir = self.layout.canonical_dir(kind)
        target = os.path.join(target_dir, filename)
        copied = False
        if os.path.abspath(source) != os.path.abspath(target):
            self.fs.ensure_directory(target_dir)
            self.fs.copy(source, target)
            copied = True
        return ImagePlacement(
            stored_path=self.layout.canonical_path(kind, filename),
            source=source,
            copied=copied,
        )


__all__ = [
    "AssetLayout",
    "AssetRelocator",
    "ImagePlacement",
    "CANDIDATE_BUILDERS",
    "CANONICAL_DIRS",
]
