"""
Entités métier représentant les concepts du domaine.

Les entités sont des objets mutables dotés d'une identité (un objet valeur
identifiant). Elles encapsulent leurs règles métier et ne changent d'état
qu'au travers d'opérations nommées.

Exports :
- Entity : Classe de base
- Category : Catégorie de vidéos
- CategoryValidator : Validateur des champs d'une catégorie
"""

from src.core.entities.entity import Entity
from src.core.entities.category import Category, CategoryRules, CategoryValidator

__all__ = [
    "Entity",
    "Category",
    "CategoryRules",
    "CategoryValidator",
]
