"""
Objets valeur immutables représentant des concepts du domaine sans identité.

Les objets valeur sont définis par leurs attributs plutôt que par une identité.
Ils sont comparés structurellement (voir src.core.equality).

Exports :
- ValueObject : Classe de base avec égalité structurelle
- Uuid : Identifiant canonique des entités
"""

from src.core.value_objects.value_object import ValueObject
from src.core.value_objects.identifier import UUID_PATTERN, Uuid

__all__ = [
    "ValueObject",
    "Uuid",
    "UUID_PATTERN",
]
