"""Filesystem access for image assets."""

import os
import shutil
from typing import Protocol


class AssetFileSystem(Protocol):
    """The three filesystem operations the pipeline needs."""

    def exists(self, path: str) -> bool:
        ...

    def copy(self, src_path: str, dest_path: str) -> None:
        ...

    def ensure_directory(self, path: str) -> None:
        ...


class LocalFileSystem:
    """AssetFileSystem over the local disk."""

    def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def copy(self, src_path: str, dest_path: str) -> None:
        if os.path.abspath(src_path) == os.path.abspath(dest_path):
            return
        shutil.copyfile(src_path, dest_path)

    def ensure_directory(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)


__all__ = ["AssetFileSystem", "LocalFileSystem"]
