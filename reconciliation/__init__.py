"""Reconciliation layer for the catalog import pipeline.

Deduplicates extracted records against the store, inserts them and relocates
their image assets.

Rules:
- The only layer that writes to the store or the filesystem
- MUST NOT extract fields or classify
- MUST NOT import api
- MAY import ingestion (models only), storage, shared
"""

from .assets import CANDIDATE_BUILDERS, CANONICAL_DIRS, AssetLayout, AssetRelocator, ImagePlacement
from .models import (
    DUPLICATE,
    ERROR,
    IMAGE_ATTACHED,
    IMAGE_MISSING,
    PERSISTED,
    ImportResult,
    ReclassifyResult,
    RecordFailure,
    RecordOutcome,
    RepairResult,
)
from .reconciler import Reconciler, print_summary

__all__ = [
    # Results
    "ImportResult",
    "RepairResult",
    "ReclassifyResult",
    "RecordFailure",
    "RecordOutcome",
    "DUPLICATE",
    "PERSISTED",
    "IMAGE_ATTACHED",
    "IMAGE_MISSING",
    "ERROR",
    # Assets
    "AssetLayout",
    "AssetRelocator",
    "ImagePlacement",
    "CANDIDATE_BUILDERS",
    "CANONICAL_DIRS",
    # Reconciler
    "Reconciler",
    "print_summary",
]
