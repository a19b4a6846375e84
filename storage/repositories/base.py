"""Shared repository plumbing.

Subclasses only declare their table layout; every statement is built from
those class constants, never from caller input.
"""

import json
from typing import Any, Dict, List, Optional, Sequence, Tuple

import psycopg  # type: ignore

from shared.config import CatalogConfig

from ..models import StoredImage, StoredRecord


class BaseRepository:
    """Natural-key CRUD over one record table and its image table."""

    kind: str = ""
    table: str = ""
    image_table: str = ""
    parent_column: str = ""
    key_columns: Tuple[str, ...] = ()
    columns: Tuple[str, ...] = ()
    json_columns: Tuple[str, ...] = ()

    def __init__(self, config: CatalogConfig):
        self.config = config

    @property
    def _pg_conn(self) -> str:
        """Get PostgreSQL connection string."""
        return (self.config.pg_conn or "").replace("postgresql+psycopg", "postgresql")

    def _encode(self, column: str, value: Any) -> Any:
        if column in self.json_columns:
            return json.dumps(value if value is not None else [])
        return value

    def _row_to_record(self, row: Sequence[Any]) -> StoredRecord:
        return StoredRecord(
            id=row[0],
            kind=self.kind,
            fields=dict(zip(self.columns, row[1:])),
        )

    def find_by_natural_key(self, key: Sequence[Any]) -> Optional[StoredRecord]:
        """Find a row by its natural key.

        Args:
            key: Values for ``key_columns``, in order

        Returns:
            StoredRecord if found, None otherwise
        """
        where = " AND ".join(f"{column} = %s" for column in self.key_columns)
        sql = f"SELECT id, {', '.join(self.columns)} FROM {self.table} WHERE {where} LIMIT 1"
        with psycopg.connect(self._pg_conn) as conn:
            with conn.cursor() as cur:
                cur.execute(sql, tuple(key))
                row = cur.fetchone()
                if row:
                    return self._row_to_record(row)
        return None

    def insert(self, fields: Dict[str, Any]) -> int:
        """Insert a row and return its generated id."""
        values = [self._encode(column, fields.get(column)) for column in self.columns]
        placeholders = ", ".join(["%s"] * len(self.columns))
        sql = f"""
        INSERT INTO {self.table} ({', '.join(self.columns)}, created_at)
        VALUES ({placeholders}, now())
        RETURNING id;
        """
        with psycopg.connect(self._pg_conn, autocommit=True) as conn:
            with conn.cursor() as cur:
                cur.execute(sql, values)
                return cur.fetchone()[0]

    def find_all(self) -> List[StoredRecord]:
        sql = f"SELECT id, {', '.join(self.columns)} FROM {self.table} ORDER BY id"
        with psycopg.connect(self._pg_conn) as conn:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_record(row) for row in cur.fetchall()]

    def update_fields(self, entity_id: int, fields: Dict[str, Any]) -> None:
        """Update selected columns of one row.

        Raises:
            ValueError: If a field is not a column of this table
        """
        unknown = set(fields) - set(self.columns)
        if unknown:
            raise ValueError(f"unknown {self.table} columns: {', '.join(sorted(unknown))}")
        if not fields:
            return
        names = list(fields)
        assignments = ", ".join(f"{name} = %s" for name in names)
        sql = f"UPDATE {self.table} SET {assignments} WHERE id = %s"
        params = [self._encode(name, fields[name]) for name in names] + [entity_id]
        with psycopg.connect(self._pg_conn, autocommit=True) as conn:
            with conn.cursor() as cur:
                cur.execute(sql, params)

    def insert_image(self, parent_id: int, image_path: str, display_order: int = 1) -> int:
        sql = f"""
        INSERT INTO {self.image_table} ({self.parent_column}, image_path, display_order)
        VALUES (%s, %s, %s)
        RETURNING id;
        """
        with psycopg.connect(self._pg_conn, autocommit=True) as conn:
            with conn.cursor() as cur:
                cur.execute(sql, (parent_id, image_path, display_order))
                return cur.fetchone()[0]

    def find_images(self) -> List[StoredImage]:
        sql = f"""SELECT id, {self.parent_column}, image_path, display_order
                 FROM {self.image_table} ORDER BY id"""
        with psycopg.connect(self._pg_conn) as conn:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [
                    StoredImage(
                        id=row[0],
                        kind=self.kind,
                        parent_id=row[1],
                        image_path=row[2] or "",
                        display_order=row[3],
                    )
                    for row in cur.fetchall()
                ]

    def update_image_path(self, image_id: int, image_path: str) -> None:
        sql = f"UPDATE {self.image_table} SET image_path = %s WHERE id = %s"
        with psycopg.connect(self._pg_conn, autocommit=True) as conn:
            with conn.cursor() as cur:
                cur.execute(sql, (image_path, image_id))


__all__ = ["BaseRepository"]
