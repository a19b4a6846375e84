"""Merge extracted records into the store without duplication."""

from typing import Iterable, Optional, Union

from ingestion.models import ExtractedProject, ExtractedRecord
from shared.exceptions import RecordPersistenceError
from storage.store import CatalogStore

from .assets import AssetRelocator
from .models import (
    DUPLICATE,
    ERROR,
    IMAGE_ATTACHED,
    IMAGE_MISSING,
    PERSISTED,
    ImportResult,
    RecordFailure,
    RecordOutcome,
)

Record = Union[ExtractedRecord, ExtractedProject]


class Reconciler:
    """
    Insert-if-absent reconciliation of one batch of records.

    Per record: duplicate check by natural key, insert, then resolve and
    attach the image. Existing rows are never modified. A failure on one
    record is reported and the batch continues; rows already inserted for
    that record stay in the store.

    Example:
        >>> reconciler = Reconciler(store, relocator)
        >>> result = reconciler.reconcile(records)
        >>> result.imported, result.skipped, result.errored
        (12, 3, 0)
    """

    def __init__(self, store: CatalogStore, relocator: AssetRelocator):
        self.store = store
        self.relocator = relocator

    def reconcile(self, records: Iterable[Record], result: Optional[ImportResult] = None) -> ImportResult:
        result = result if result is not None else ImportResult()
        for record in records:
            result.found += 1
            try:
                outcome = self._reconcile_one(record)
            except RecordPersistenceError as error:
                print(f"[ERR] {error}")
                result.failures.append(RecordFailure(error.label, str(error.cause)))
                result.outcomes.append(RecordOutcome(record.label, ERROR))
                continue

            result.outcomes.append(outcome)
            if outcome.state == DUPLICATE:
                result.skipped += 1
                continue
            result.imported += 1
            if outcome.state == IMAGE_MISSING:
                result.image_missing += 1
        return result

    def _reconcile_one(self, record: Record) -> RecordOutcome:
        try:
            return self._persist(record)
        except Exception as exc:
            raise RecordPersistenceError(record.label, exc) from exc

    def _persist(self, record: Record) -> RecordOutcome:
        kind = record.kind
        existing = self.store.find_by_natural_key(kind, record.natural_key())
        if existing is not None:
            print(f"[skip] {record.label} already exists (id={existing.id})")
            return RecordOutcome(record.label, DUPLICATE)

        record_id = self.store.insert(kind, record.as_fields())
        if not record.image_reference:
            print(f"[ok] {record.label} (id={record_id})")
            return RecordOutcome(record.label, PERSISTED)

        placement = self.relocator.place(record.image_reference, kind)
        self.store.insert_image_association(kind, record_id, placement.stored_path, 1)
        if placement.missing:
            print(f"[warn] image not found for {record.label}: {record.image_reference}")
            return RecordOutcome(record.label, IMAGE_MISSING, placement.stored_path)
        print(f"[ok] {record.label} (id={record_id}) image={placement.stored_path}")
        return RecordOutcome(record.label, IMAGE_ATTACHED, placement.stored_path)


def print_summary(result: ImportResult, title: str = "import") -> None:
    print(f"[done] {title}: found={result.found} imported={result.imported} "
          f"skipped={result.skipped} errored={result.errored}")
    if result.dropped:
        print(f"[done] dropped (no name): {result.dropped}")
    if result.image_missing:
        print(f"[done] images not found: {result.image_missing}")
    for failure in result.failures:
        print(f"[ERR] {failure.label}: {failure.reason}")


__all__ = ["Reconciler", "print_summary"]
