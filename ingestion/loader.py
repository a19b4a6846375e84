"""Load catalog documents from the site root."""

import os
from typing import List, Optional, Sequence

from shared.exceptions import DocumentNotFoundError

from .families import DocumentFamily
from .models import CatalogDocument


class DocumentLoader:
    """Read family documents as plain text."""

    def __init__(self, site_root: str):
        self.site_root = site_root

    def path_for(self, filename: str) -> str:
        return os.path.join(self.site_root, filename)

    def load(self, family: DocumentFamily, filename: str) -> CatalogDocument:
        """
        Read one document of a family.

        Raises:
            DocumentNotFoundError: If the file does not exist
        """
        path = self.path_for(filename)
        if not os.path.isfile(path):
            raise DocumentNotFoundError(path)
        with open(path, "r", encoding="utf-8", errors="ignore") as handle:
            text = handle.read()
        category = family.category_for(filename) or os.path.splitext(filename)[0]
        return CatalogDocument(text=text, category=category, source_path=path, family=family.name)

    def load_family(
        self,
        family: DocumentFamily,
        categories: Optional[Sequence[str]] = None,
    ) -> List[CatalogDocument]:
        """
        Load every document of a family, optionally limited to some categories.

        All files are checked before any is read so a missing file aborts the
        run before anything is written.
        """
        filenames = family.filenames()
        if categories:
            wanted = set(categories)
            filenames = [name for name in filenames if family.category_for(name) in wanted]
            unknown = wanted - {family.category_for(name) for name in filenames}
            if unknown:
                raise ValueError(f"unknown {family.name} categories: {', '.join(sorted(unknown))}")
        for filename in filenames:
            if not os.path.isfile(self.path_for(filename)):
                raise DocumentNotFoundError(self.path_for(filename))
        return [self.load(family, filename) for filename in filenames]


__all__ = ["DocumentLoader"]
