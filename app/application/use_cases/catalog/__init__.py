"""Catalog use cases (sectors, projects, profiles)."""

from app.application.use_cases.catalog.catalog_operations import CatalogService

__all__ = ["CatalogService"]
