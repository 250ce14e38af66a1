"""
Implementations concretes des repositories.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine (src/core/ports/repositories.py)
- Herite du stockage generique InMemoryRepository parametre par l'entite
"""

from src.infrastructure.persistence.repositories.category_repository import (
    CategoryInMemoryRepository,
)

__all__ = [
    "CategoryInMemoryRepository",
]
