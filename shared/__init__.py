"""Shared utilities and configuration for the catalog import pipeline."""

from .config import CatalogConfig, load_config
from .exceptions import (
    DocumentNotFoundError,
    FatalSetupError,
    RecordPersistenceError,
    SharedError,
    StoreUnavailableError,
)
from .text_utils import TextPreprocessor, ensure_leading_slash

__all__ = [
    "CatalogConfig",
    "load_config",
    "SharedError",
    "FatalSetupError",
    "DocumentNotFoundError",
    "StoreUnavailableError",
    "RecordPersistenceError",
    "TextPreprocessor",
    "ensure_leading_slash",
]
