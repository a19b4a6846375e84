"""Re-run the subcategory cascade over products already in the store."""

from typing import Dict, List, Optional, Sequence

from classification import SubcategoryClassifier
from ingestion import (
    PRODUCT,
    PRODUCTS,
    CatalogDocument,
    ContextResolver,
    DocumentLoader,
    ExtractedRecord,
    ProductFieldExtractor,
    SegmentExtractor,
)
from reconciliation import ReclassifyResult, RecordFailure
from shared.config import CatalogConfig
from storage import CatalogStore, PostgresCatalogStore, StoredRecord

PARTIAL_MATCH_CHARS = 20


class ReclassifyUseCase:
    """
    Recompute subcategories for stored products.

    Section context is not stored, so each product is looked up again in its
    category document: exact name first, then the first characters of the
    name. The same classifier as the import path labels the rebuilt record.
    """

    def __init__(
        self,
        config: CatalogConfig,
        store: Optional[CatalogStore] = None,
        classifier: Optional[SubcategoryClassifier] = None,
    ):
        self.config = config
        self.store = store if store is not None else PostgresCatalogStore(config)
        self.classifier = classifier or SubcategoryClassifier()
        self.loader = DocumentLoader(config.site_root)
        self.extractor = ProductFieldExtractor(context_resolver=ContextResolver(config.context_lookback))
        self.segmenter = SegmentExtractor(PRODUCTS.marker)

    def index_document(self, document: CatalogDocument) -> List[ExtractedRecord]:
        records = []
        for segment in self.segmenter.extract(document):
            record = self.extractor.extract(segment)
            if record is not None:
                records.append(record)
        return records

    @staticmethod
    def find_match(name: str, candidates: List[ExtractedRecord]) -> Optional[ExtractedRecord]:
        wanted = name.casefold()
        for candidate in candidates:
            if candidate.name.casefold() == wanted:
                return candidate
        prefix = wanted[:PARTIAL_MATCH_CHARS]
        for candidate in candidates:
            if prefix and prefix in candidate.name.casefold():
                return candidate
        return None

    def rebuild(self, row: StoredRecord, candidates: List[ExtractedRecord]) -> Optional[ExtractedRecord]:
        name = row.get("name")
        if not name:
            return None
        match = self.find_match(name, candidates)
        if match is None:
            return None
        return ExtractedRecord(
            name=name,
            category=row.get("category"),
            description=row.get("description"),
            section_context=match.section_context,
        )

    def execute(
        self,
        only_missing: bool = False,
        categories: Optional[Sequence[str]] = None,
    ) -> ReclassifyResult:
        """
        Args:
            only_missing: Leave products that already have a subcategory alone
            categories: Limit the run to these categories

        Raises:
            FatalSetupError: Document missing or store unreachable
        """
        self.store.ping()
        index: Dict[str, List[ExtractedRecord]] = {}
        for document in self.loader.load_family(PRODUCTS, categories):
            index[document.category] = self.index_document(document)
            print(f"[parse] {document.source_path} -> records={len(index[document.category])}")

        result = ReclassifyResult()
        for row in self.store.find_all(PRODUCT):
            category = row.get("category")
            if categories and category not in categories:
                continue
            result.checked += 1
            label = row.get("name") or f"#{row.id}"
            if only_missing and row.get("subcategory"):
                result.skipped += 1
                continue

            try:
                record = self.rebuild(row, index.get(category, []))
                subcategory = self.classifier.classify(record) if record is not None else None
                if not subcategory:
                    result.unresolved += 1
                    reason = "no rule matched" if record is not None else "not found in document"
                    print(f"[warn] {label}: {reason}")
                    continue
                if subcategory == row.get("subcategory"):
                    result.unchanged += 1
                    continue
                self.store.update_fields(PRODUCT, row.id, {"subcategory": subcategory})
                result.updated += 1
                print(f"[ok] {label} -> {subcategory}")
            except Exception as exc:
                print(f"[ERR] {label}: {exc}")
                result.failures.append(RecordFailure(label, str(exc)))

        print(
            f"[done] reclassify: checked={result.checked} updated={result.updated} "
            f"unchanged={result.unchanged} skipped={result.skipped} "
            f"unresolved={result.unresolved} errored={len(result.failures)}"
        )
        return result


__all__ = ["ReclassifyUseCase", "PARTIAL_MATCH_CHARS"]
