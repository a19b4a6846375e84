"""Kind-addressed store facade used by the reconciler and maintenance jobs."""

from typing import Any, Dict, List, Optional, Protocol, Sequence

from shared.config import CatalogConfig

from .models import StoredImage, StoredRecord
from .repositories import BaseRepository, ProductRepository, ProjectRepository
from .schema import DbSchemaManager


class CatalogStore(Protocol):
    """Record CRUD by natural key, addressed by record kind."""

    def ping(self) -> None:
        ...

    def find_by_natural_key(self, kind: str, key: Sequence[Any]) -> Optional[StoredRecord]:
        ...

    def insert(self, kind: str, fields: Dict[str, Any]) -> int:
        ...

    def insert_image_association(self, kind: str, parent_id: int, path: str, order: int = 1) -> int:
        ...

    def find_all(self, kind: str) -> List[StoredRecord]:
        ...

    def update_fields(self, kind: str, entity_id: int, fields: Dict[str, Any]) -> None:
        ...

    def find_image_associations(self, kind: str) -> List[StoredImage]:
        ...

    def update_image_path(self, kind: str, image_id: int, path: str) -> None:
        ...


class PostgresCatalogStore:
    """CatalogStore backed by the product and project repositories.

    Example:
        >>> store = PostgresCatalogStore(load_config())
        >>> store.ping()
        >>> store.find_by_natural_key("product", ("CR-A 40", "fan-coil-units"))
    """

    def __init__(self, config: CatalogConfig):
        self.config = config
        self.schema_manager = DbSchemaManager(config)
        self.repositories: Dict[str, BaseRepository] = {
            repo.kind: repo for repo in (ProductRepository(config), ProjectRepository(config))
        }

    def _repo(self, kind: str) -> BaseRepository:
        try:
            return self.repositories[kind]
        except KeyError:
            raise ValueError(f"unknown record kind: {kind!r}") from None

    def ping(self) -> None:
        self.schema_manager.check_connection()

    def ensure_schema(self) -> None:
        self.schema_manager.ensure_catalog_schema()

    def find_by_natural_key(self, kind: str, key: Sequence[Any]) -> Optional[StoredRecord]:
        return self._repo(kind).find_by_natural_key(key)

    def insert(self, kind: str, fields: Dict[str, Any]) -> int:
        return self._repo(kind).insert(fields)

    def insert_image_association(self, kind: str, parent_id: int, path: str, order: int = 1) -> int:
        return self._repo(kind).insert_image(parent_id, path, order)

    def find_all(self, kind: str) -> List[StoredRecord]:
        return self._repo(kind).find_all()

    def update_fields(self, kind: str, entity_id: int, fields: Dict[str, Any]) -> None:
        self._repo(kind).update_fields(entity_id, fields)

    def find_image_associations(self, kind: str) -> List[StoredImage]:
        return self._repo(kind).find_images()

    def update_image_path(self, kind: str, image_id: int, path: str) -> None:
        self._repo(kind).update_image_path(image_id, path)


__all__ = ["CatalogStore", "PostgresCatalogStore"]
