"""Use case orchestration for the catalog pipeline."""

from .import_catalog import ImportCatalogUseCase
from .reclassify import ReclassifyUseCase
from .repair_images import RepairImagesUseCase

__all__ = ["ImportCatalogUseCase", "ReclassifyUseCase", "RepairImagesUseCase"]
