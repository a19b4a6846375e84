import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


CONTEXT_LOOKBACK_DEFAULT = 3000
UPLOAD_URL_PREFIX_DEFAULT = "/uploads"


@dataclass
class CatalogConfig:
    """Configuration for the catalog import pipeline."""

    pg_conn: str
    site_root: str
    legacy_root: str
    upload_root: str
    upload_url_prefix: str = UPLOAD_URL_PREFIX_DEFAULT
    context_lookback: int = CONTEXT_LOOKBACK_DEFAULT


def _parse_int(value: Optional[str], default: int = 0) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        return default


def load_config() -> CatalogConfig:
    """Load configuration from environment variables."""
    load_dotenv()

    site_root = os.path.abspath(os.getenv("SITE_ROOT") or ".")
    legacy_root = os.getenv("LEGACY_ROOT") or os.path.join(site_root, "backend")
    upload_root = os.getenv("UPLOAD_ROOT") or os.path.join(legacy_root, "uploads")

    lookback = _parse_int(os.getenv("CONTEXT_LOOKBACK"), CONTEXT_LOOKBACK_DEFAULT)
    if lookback <= 0:
        lookback = CONTEXT_LOOKBACK_DEFAULT

    config = CatalogConfig(
        pg_conn=os.getenv("PG_CONN", ""),
        site_root=site_root,
        legacy_root=os.path.abspath(legacy_root),
        upload_root=os.path.abspath(upload_root),
        upload_url_prefix="/" + (os.getenv("UPLOAD_URL_PREFIX") or UPLOAD_URL_PREFIX_DEFAULT).strip("/"),
        context_lookback=lookback,
    )
    return config


__all__ = ["CatalogConfig", "load_config"]
