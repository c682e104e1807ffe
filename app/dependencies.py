"""
FastAPI dependencies for dependency injection.
Provides shared resources to route handlers.
"""

from app.services.district_registry import DistrictRegistry, district_registry
from app.services.favorites import FavoritesStore, favorites_store


def get_district_registry() -> DistrictRegistry:
    """Dependency to get the district registry"""
    return district_registry


def get_favorites_store() -> FavoritesStore:
    """Dependency to get the favorites store"""
    return favorites_store
