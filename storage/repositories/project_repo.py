"""Project repository implementation.

Provides natural-key CRUD for projects and their images.
"""

from .base import BaseRepository


class ProjectRepository(BaseRepository):
    """Repository for project rows, keyed by (title, location)."""

    kind = "project"
    table = "projects"
    image_table = "project_images"
    parent_column = "project_id"
    key_columns = ("title", "location")
    columns = ("title", "location", "description", "equipment", "category")


__all__ = ["ProjectRepository"]
