from .calculations import CalculationService, calc_service
from .district_registry import DistrictRegistry, district_registry
from .favorites import FavoritesStore, InMemoryFavoritesStore, favorites_store

__all__ = [
    "CalculationService",
    "DistrictRegistry",
    "FavoritesStore",
    "InMemoryFavoritesStore",
    "calc_service",
    "district_registry",
    "favorites_store"
]
