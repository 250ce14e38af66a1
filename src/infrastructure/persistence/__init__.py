"""
Module de persistance du catalogue.

Ce module fournit l'infrastructure de stockage. Il contient :

- in_memory.py : Repository generique en memoire (InMemoryRepository)
- repositories/ : Repositories concrets par entite

Usage:
    from src.infrastructure.persistence import CategoryInMemoryRepository

    repository = CategoryInMemoryRepository()
    await repository.insert(Category.create(name="Film"))
"""

from src.infrastructure.persistence.in_memory import InMemoryRepository
from src.infrastructure.persistence.repositories import CategoryInMemoryRepository

__all__ = [
    "InMemoryRepository",
    "CategoryInMemoryRepository",
]
