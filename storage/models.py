"""Row shapes returned by the storage layer."""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class StoredRecord:
    """A persisted product or project row."""

    id: int
    kind: str
    fields: Dict[str, Any] = field(default_factory=dict)

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)


@dataclass
class StoredImage:
    """An image association row."""

    id: int
    kind: str
    parent_id: int
    image_path: str
    display_order: int = 1


__all__ = ["StoredRecord", "StoredImage"]
