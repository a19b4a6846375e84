"""Database schema management for the catalog store.

Handles table creation and the start-of-run connectivity check.
"""

import psycopg  # type: ignore

from shared.config import CatalogConfig
from shared.exceptions import StoreUnavailableError


class DbSchemaManager:
    """Responsible for ensuring Postgres schema prerequisites exist."""

    def __init__(self, config: CatalogConfig):
        self.config = config

    @property
    def _pg_conn(self) -> str:
        return (self.config.pg_conn or "").replace("postgresql+psycopg", "postgresql")

    def check_connection(self) -> None:
        """Fail fast when the store is not configured or not reachable.

        Raises:
            StoreUnavailableError: If PG_CONN is unset or the server refuses
        """
        if not self.config.pg_conn:
            raise StoreUnavailableError("PG_CONN is not set")
        try:
            with psycopg.connect(self._pg_conn, connect_timeout=10) as conn:
                with conn.cursor() as cur:
                    cur.execute("SELECT 1;")
        except psycopg.Error as exc:
            raise StoreUnavailableError(f"cannot reach store: {exc}") from exc

    def ensure_catalog_schema(self) -> None:
        """Create product/project tables and their image tables."""
        self.check_connection()
        statements = [
            """
            CREATE TABLE IF NOT EXISTS products (
              id            BIGSERIAL PRIMARY KEY,
              name          TEXT NOT NULL,
              description   TEXT,
              category      TEXT NOT NULL,
              subcategory   TEXT,
              key_features  JSONB DEFAULT '[]'::jsonb,
              display_order INTEGER DEFAULT 0,
              created_at    TIMESTAMPTZ DEFAULT now()
            );
            """,
            "CREATE INDEX IF NOT EXISTS products_natural_key_idx ON products (name, category);",
            """
            CREATE TABLE IF NOT EXISTS product_images (
              id            BIGSERIAL PRIMARY KEY,
              product_id    BIGINT NOT NULL REFERENCES products (id) ON DELETE CASCADE,
              image_path    TEXT NOT NULL,
              display_order INTEGER DEFAULT 1
            );
            """,
            "CREATE INDEX IF NOT EXISTS product_images_product_idx ON product_images (product_id);",
            """
            CREATE TABLE IF NOT EXISTS projects (
              id          BIGSERIAL PRIMARY KEY,
              title       TEXT NOT NULL,
              location    TEXT NOT NULL,
              description TEXT,
              equipment   TEXT,
              category    TEXT DEFAULT 'all',
              is_featured BOOLEAN DEFAULT false,
              created_at  TIMESTAMPTZ DEFAULT now()
            );
            """,
            "CREATE INDEX IF NOT EXISTS projects_natural_key_idx ON projects (title, location);",
            """
            CREATE TABLE IF NOT EXISTS project_images (
              id            BIGSERIAL PRIMARY KEY,
              project_id    BIGINT NOT NULL REFERENCES projects (id) ON DELETE CASCADE,
              image_path    TEXT NOT NULL,
              display_order INTEGER DEFAULT 1
            );
            """,
            "CREATE INDEX IF NOT EXISTS project_images_project_idx ON project_images (project_id);",
        ]
        with psycopg.connect(self._pg_conn, autocommit=True) as conn:
            with conn.cursor() as cur:
                for sql in statements:
                    cur.execute(sql)


__all__ = ["DbSchemaManager"]
