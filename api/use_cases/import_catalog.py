"""Import use case orchestration.

Pipeline per document family:
1. Load documents (ingestion layer)
2. Split into segments and extract fields (ingestion layer)
3. Classify products (classification layer)
4. Reconcile against the store (reconciliation layer)

Rules:
- MAY import ingestion, classification, reconciliation, storage, shared
- MUST NOT implement extraction or classification rules directly
- MUST NOT access the database directly
"""

import os
from typing import List, Optional, Sequence, Tuple

from classification import SubcategoryClassifier
from ingestion import (
    PRODUCT,
    CatalogDocument,
    ContextResolver,
    DocumentFamily,
    DocumentLoader,
    ProductFieldExtractor,
    ProjectFieldExtractor,
    SegmentExtractor,
    get_family,
)
from reconciliation import AssetLayout, AssetRelocator, ImportResult, Reconciler, print_summary
from reconciliation.reconciler import Record
from shared.config import CatalogConfig
from storage import AssetFileSystem, CatalogStore, LocalFileSystem, PostgresCatalogStore


class ImportCatalogUseCase:
    """Import one document family into the store.

    Example:
        >>> use_case = ImportCatalogUseCase(load_config())
        >>> result = use_case.execute("products", categories=["pumps"])
    """

    def __init__(
        self,
        config: CatalogConfig,
        store: Optional[CatalogStore] = None,
        fs: Optional[AssetFileSystem] = None,
        classifier: Optional[SubcategoryClassifier] = None,
    ):
        self.config = config
        self.store = store if store is not None else PostgresCatalogStore(config)
        self.fs = fs if fs is not None else LocalFileSystem()
        self.classifier = classifier or SubcategoryClassifier()
        self.loader = DocumentLoader(config.site_root)
        self.context_resolver = ContextResolver(config.context_lookback)
        self.relocator = AssetRelocator(AssetLayout.from_config(config), self.fs)
        self.reconciler = Reconciler(self.store, self.relocator)

    def extractor_for(self, family: DocumentFamily):
        if family.kind == PRODUCT:
            return ProductFieldExtractor(context_resolver=self.context_resolver)
        return ProjectFieldExtractor()

    def extract(self, document: CatalogDocument, family: DocumentFamily) -> Tuple[List[Record], int]:
        """Extract and classify every record of one document.

        Returns:
            (records, dropped) where dropped counts segments without a name
        """
        extractor = self.extractor_for(family)
        records: List[Record] = []
        dropped = 0
        for segment in SegmentExtractor(family.marker).extract(document):
            record = extractor.extract(segment)
            if record is None:
                dropped += 1
                print(f"[skip] no name in segment at offset {segment.start}")
                continue
            if family.kind == PRODUCT:
                self.classifier.apply(record)
            records.append(record)
        return records, dropped

    def execute(
        self,
        family_name: str,
        categories: Optional[Sequence[str]] = None,
        dry_run: bool = False,
    ) -> ImportResult:
        """Run the import.

        Args:
            family_name: "products" or "projects"
            categories: Limit product import to these categories
            dry_run: Extract and classify only; store and filesystem untouched

        Returns:
            ImportResult with run statistics

        Raises:
            FatalSetupError: Document missing or store unreachable
        """
        family = get_family(family_name)
        if categories and family.kind != PRODUCT:
            raise ValueError(f"{family.name} documents are not split by category")

        if not dry_run:
            self.store.ping()
        documents = self.loader.load_family(family, categories)

        result = ImportResult()
        for document in documents:
            print(f"[parse] {document.source_path}")
            records, dropped = self.extract(document, family)
            result.dropped += dropped
            print(f"[ok] {os.path.basename(document.source_path)} -> records={len(records)} dropped={dropped}")
            if dry_run:
                result.found += len(records)
                for record in records:
                    print(f"[dry-run] {_describe(record)}")
                continue
            self.reconciler.reconcile(records, result)

        print_summary(result, f"{family.name}{' (dry run)' if dry_run else ''}")
        return result


def _describe(record: Record) -> str:
    if record.kind == PRODUCT:
        return f"{record.name} [{record.category} / {record.subcategory or '-'}] image={record.image_reference}"
    return f"{record.title} @ {record.location} [{record.category}] image={record.image_reference}"


__all__ = ["ImportCatalogUseCase"]
