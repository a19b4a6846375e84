"""Batch commands for the catalog pipeline."""

import argparse
from typing import Optional

from api.use_cases import ImportCatalogUseCase, ReclassifyUseCase, RepairImagesUseCase
from ingestion import PRODUCT_CATEGORIES
from shared.config import CatalogConfig, load_config
from shared.exceptions import FatalSetupError
from storage import PostgresCatalogStore

EXIT_OK = 0
EXIT_FATAL = 2


def run_import(args: argparse.Namespace, config: CatalogConfig) -> int:
    use_case = ImportCatalogUseCase(config)
    categories = getattr(args, "category", None)
    use_case.execute(args.family, categories=categories, dry_run=args.dry_run)
    return EXIT_OK


def run_reclassify(args: argparse.Namespace, config: CatalogConfig) -> int:
    ReclassifyUseCase(config).execute(only_missing=args.only_missing, categories=args.category)
    return EXIT_OK


def run_repair_images(args: argparse.Namespace, config: CatalogConfig) -> int:
    RepairImagesUseCase(config).execute(args.family)
    return EXIT_OK


def run_init_db(args: argparse.Namespace, config: CatalogConfig) -> int:
    store = PostgresCatalogStore(config)
    store.ping()
    store.ensure_schema()
    print("[done] catalog tables ready")
    return EXIT_OK


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m api.cli",
        description="Import catalog pages into the store and maintain imported records",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    imp = sub.add_parser("import", help="Extract records from site pages and import them")
    families = imp.add_subparsers(dest="family", required=True)
    products = families.add_parser("products", help="Import product pages")
    products.add_argument(
        "--category",
        action="append",
        choices=PRODUCT_CATEGORIES,
        help="Limit to a category (repeatable)",
    )
    products.add_argument("--dry-run", action="store_true", help="Extract and classify only")
    projects = families.add_parser("projects", help="Import the projects page")
    projects.add_argument("--dry-run", action="store_true", help="Extract only")
    imp.set_defaults(handler=run_import)

    reclassify = sub.add_parser("reclassify", help="Recompute product subcategories")
    reclassify.add_argument(
        "--only-missing",
        action="store_true",
        help="Only products without a subcategory",
    )
    reclassify.add_argument(
        "--category",
        action="append",
        choices=PRODUCT_CATEGORIES,
        help="Limit to a category (repeatable)",
    )
    reclassify.set_defaults(handler=run_reclassify)

    repair = sub.add_parser("repair-images", help="Rewrite stored image paths to the canonical layout")
    repair.add_argument("family", choices=["products", "projects"])
    repair.set_defaults(handler=run_repair_images)

    init_db = sub.add_parser("init-db", help="Create catalog tables if missing")
    init_db.set_defaults(handler=run_init_db)
    return parser


def run(args: argparse.Namespace, config: Optional[CatalogConfig] = None) -> int:
    config = config or load_config()
    try:
        return args.handler(args, config)
    except FatalSetupError as exc:
        print(f"[ERR] {exc}")
        return EXIT_FATAL


__all__ = ["create_parser", "run", "EXIT_OK", "EXIT_FATAL"]
