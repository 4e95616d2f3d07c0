"""Client facades."""

from .catalog_client import CatalogClient, NewsFeedResult

__all__ = ["CatalogClient", "NewsFeedResult"]
