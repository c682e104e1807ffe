"""
API routers for the different resource groups.
"""

from app.routers import (
    districts,
    favorites,
    population
)

__all__ = [
    "districts",
    "favorites",
    "population"
]
