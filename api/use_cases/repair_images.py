"""Bring stored image paths back to the canonical layout."""

from typing import Optional

from ingestion import get_family
from reconciliation import AssetLayout, AssetRelocator, RecordFailure, RepairResult
from shared.config import CatalogConfig
from storage import AssetFileSystem, CatalogStore, LocalFileSystem, PostgresCatalogStore


class RepairImagesUseCase:
    """
    Walk image associations of one family and rewrite drifted paths.

    Found files are copied into the canonical directory and the row gets the
    canonical path. Missing files only get a leading ``/``.
    """

    def __init__(
        self,
        config: CatalogConfig,
        store: Optional[CatalogStore] = None,
        fs: Optional[AssetFileSystem] = None,
    ):
        self.config = config
        self.store = store if store is not None else PostgresCatalogStore(config)
        self.fs = fs if fs is not None else LocalFileSystem()
        self.relocator = AssetRelocator(AssetLayout.from_config(config), self.fs)

    def execute(self, family_name: str) -> RepairResult:
        kind = get_family(family_name).kind
        self.store.ping()

        result = RepairResult()
        for image in self.store.find_image_associations(kind):
            result.checked += 1
            label = f"{kind} image #{image.id}"
            try:
                placement = self.relocator.place(image.image_path, kind)
                if placement.missing:
                    result.not_found += 1
                    print(f"[warn] {label}: file not found for {image.image_path}")
                if placement.copied:
                    result.copied += 1
                if placement.stored_path != image.image_path:
                    self.store.update_image_path(kind, image.id, placement.stored_path)
                    result.rewritten += 1
                    print(f"[ok] {label}: {image.image_path} -> {placement.stored_path}")
            except Exception as exc:
                print(f"[ERR] {label}: {exc}")
                result.failures.append(RecordFailure(label, str(exc)))

        print(
            f"[done] repair-images {family_name}: checked={result.checked} copied={result.copied} "
            f"rewritten={result.rewritten} not_found={result.not_found} errored={len(result.failures)}"
        )
        return result


__all__ = ["RepairImagesUseCase"]
