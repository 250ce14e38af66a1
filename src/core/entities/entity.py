"""
Classe de base des entités.

Une entité est mutable et possède une identité propre : un objet valeur
identifiant. Deux entités sont la même si leurs identifiants sont égaux,
quel que soit le reste de leur contenu.
"""

from abc import ABC, abstractmethod
from typing import Any

from src.core.value_objects import ValueObject


class Entity(ABC):
    """Entité identifiée par un objet valeur."""

    @property
    @abstractmethod
    def entity_id(self) -> ValueObject:
        """Identifiant de l'entité."""
        ...

    @abstractmethod
    def to_json(self) -> dict[str, Any]:
        """Instantané des champs sous forme de dictionnaire simple."""
        ...

    def same_identity_as(self, other: "Entity") -> bool:
        """Vrai si les deux entités partagent le même identifiant."""
        return other is not None and self.entity_id.equals(other.entity_id)
