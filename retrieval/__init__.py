"""Catalog storage and loading."""

from .catalog import Catalog, CatalogLoadError
from .catalog_loader import CatalogLoader

__all__ = ["Catalog", "CatalogLoadError", "CatalogLoader"]
