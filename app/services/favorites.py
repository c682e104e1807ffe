"""
Per-user favorite districts.

Callers depend on the FavoritesStore interface and receive an
implementation through app.dependencies.
"""

from abc import ABC, abstractmethod
import threading
from typing import Dict, List
import logging

from app.exceptions import InvalidDistrictId
from app.services.district_registry import DistrictRegistry, district_registry

logger = logging.getLogger(__name__)


class FavoritesStore(ABC):
    """Favorite districts per user, stored as internal district ids"""

    @abstractmethod
    def get(self, user_id: str) -> List[int]:
        """Favorite district ids of a user in the order they were added"""

    @abstractmethod
    def add(self, user_id: str, district_id: int) -> List[int]:
        """Add a favorite and return the updated list"""

    @abstractmethod
    def remove(self, user_id: str, district_id: int) -> List[int]:
        """Remove a favorite and return the updated list"""


class InMemoryFavoritesStore(FavoritesStore):
    """
    Process-local favorites store.

    Adding an existing favorite and removing a missing one are no-ops.
    """

    def __init__(self, registry: DistrictRegistry = district_registry):
        self._registry = registry
        self._favorites: Dict[str, List[int]] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> List[int]:
        with self._lock:
            return list(self._favorites.get(user_id, []))

    def add(self, user_id: str, district_id: int) -> List[int]:
        if self._registry.internal_id_to_code(district_id) is None:
            raise InvalidDistrictId(district_id)

        with self._lock:
            favorites = self._favorites.setdefault(user_id, [])
            if district_id not in favorites:
                favorites.append(district_id)
                logger.info(f"User {user_id} added district {district_id} to favorites")
            return list(favorites)

    def remove(self, user_id: str, district_id: int) -> List[int]:
        with self._lock:
            favorites = self._favorites.get(user_id, [])
            if district_id in favorites:
                favorites.remove(district_id)
                logger.info(f"User {user_id} removed district {district_id} from favorites")
            return list(favorites)

    def clear(self):
        """Drop all stored favorites"""
        with self._lock:
            self._favorites.clear()
        logger.info("Favorites cleared")


# Global instance for dependency injection
favorites_store = InMemoryFavoritesStore()
