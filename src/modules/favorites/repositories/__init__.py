"""Favorite repositories package."""

from modules.favorites.repositories.django_repository import FavoriteDjangoRepository
from modules.favorites.repositories.interfaces import IFavoriteRepository
from modules.favorites.repositories.memory_repository import FavoriteMemoryRepository

__all__ = [
    "FavoriteDjangoRepository",
    "FavoriteMemoryRepository",
    "IFavoriteRepository",
]
