"""Run summaries for the reconciliation and maintenance jobs."""

from dataclasses import dataclass, field
from typing import List, Optional


DUPLICATE = "duplicate"
PERSISTED = "persisted"
IMAGE_ATTACHED = "image_attached"
IMAGE_MISSING = "image_missing"
ERROR = "error"


@dataclass
class RecordFailure:
    """One record (or row) that could not be processed."""

    label: str
    reason: str


@dataclass
class RecordOutcome:
    label: str
    state: str
    image_path: Optional[str] = None


@dataclass
class ImportResult:
    """
    Summary of one import run.

    Attributes:
        found: Records handed to the reconciler
        imported: Records inserted with their image handled
        skipped: Records already present under their natural key
        image_missing: Imported records whose image file was not found
        dropped: Segments that yielded no record (no name resolved)
        failures: Per-record errors, in processing order
    """

    found: int = 0
    imported: int = 0
    skipped: int = 0
    image_missing: int = 0
    dropped: int = 0
    failures: List[RecordFailure] = field(default_factory=list)
    outcomes: List[RecordOutcome] = field(default_factory=list)

    @property
    def errored(self) -> int:
        return len(self.failures)


@dataclass
class RepairResult:
    checked: int = 0
    copied: int = 0
    rewritten: int = 0
    not_found: int = 0
    failures: List[RecordFailure] = field(default_factory=list)


@dataclass
class ReclassifyResult:
    checked: int = 0
    updated: int = 0
    unchanged: int = 0
    skipped: int = 0
    unresolved: int = 0
    failures: List[RecordFailure] = field(default_factory=list)


__all__ = [
    "DUPLICATE",
    "PERSISTED",
    "IMAGE_ATTACHED",
    "IMAGE_MISSING",
    "ERROR",
    "RecordFailure",
    "RecordOutcome",
    "ImportResult",
    "RepairResult",
    "ReclassifyResult",
]
