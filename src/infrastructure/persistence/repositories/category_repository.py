"""
Repository en mémoire des catégories.

Implémente ICategoryRepository sur InMemoryRepository.
"""

from src.core.entities import Category
from src.core.ports.repositories import ICategoryRepository
from src.core.value_objects import Uuid
from src.infrastructure.persistence.in_memory import InMemoryRepository


class CategoryInMemoryRepository(
    InMemoryRepository[Category, Uuid], ICategoryRepository
):
    """Repository en mémoire pour les catégories."""
