"""Product repository implementation.

Provides natural-key CRUD for products and their images.
"""

from .base import BaseRepository


class ProductRepository(BaseRepository):
    """Repository for product rows, keyed by (name, category)."""

    kind = "product"
    table = "products"
    image_table = "product_images"
    parent_column = "product_id"
    key_columns = ("name", "category")
    columns = ("name", "description", "category", "subcategory", "key_features")
    json_columns = ("key_features",)


__all__ = ["ProductRepository"]
