"""
Favorites: per-user favorite districts.
"""

from fastapi import APIRouter, Depends
from typing import List

from app.dependencies import get_district_registry, get_favorites_store
from app.models.schemas import Favorite, FavoriteCreateRequest
from app.services.district_registry import DistrictRegistry
from app.services.favorites import FavoritesStore

router = APIRouter(
    prefix="/users/{user_id}/favorites",
    tags=["Favorites"],
    responses={404: {"description": "Not found"}}
)


def _to_favorites(user_id: str, district_ids: List[int], registry: DistrictRegistry) -> List[Favorite]:
    favorites = []
    for district_id in district_ids:
        district = registry.get_district(district_id)
        favorites.append(Favorite(
            user_id=user_id,
            district_id=district_id,
            district_name=district.name if district else None,
            administrative_code=district.administrative_code if district else None
        ))
    return favorites


@router.get("", response_model=List[Favorite])
async def list_favorites(
    user_id: str,
    store: FavoritesStore = Depends(get_favorites_store),
    registry: DistrictRegistry = Depends(get_district_registry)
):
    """
    List a user's favorite districts in the order they were added.
    """
    return _to_favorites(user_id, store.get(user_id), registry)


@router.post("", response_model=List[Favorite], status_code=201)
async def add_favorite(
    user_id: str,
    request: FavoriteCreateRequest,
    store: FavoritesStore = Depends(get_favorites_store),
    registry: DistrictRegistry = Depends(get_district_registry)
):
    """
    Add a district (internal id 1-25) to a user's favorites.
    Adding an existing favorite leaves the list unchanged.
    """
    return _to_favorites(user_id, store.add(user_id, request.district_id), registry)


@router.delete("/{district_id}", response_model=List[Favorite])
async def remove_favorite(
    user_id: str,
    district_id: int,
    store: FavoritesStore = Depends(get_favorites_store),
    registry: DistrictRegistry = Depends(get_district_registry)
):
    """
    Remove a district from a user's favorites.
    """
    return _to_favorites(user_id, store.remove(user_id, district_id), registry)
