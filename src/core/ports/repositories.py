"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant le contrat de persistance des entités.
Les implémentations (adaptateurs) fournissent le stockage concret
(en mémoire aujourd'hui, base de données durable plus tard).

Toutes les opérations sont des coroutines : le stockage en mémoire répond
immédiatement, mais un backend durable pourra être substitué sans changer
les appels.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Sequence, TypeVar

from src.core.entities import Category, Entity
from src.core.value_objects import Uuid, ValueObject

EntityT = TypeVar("EntityT", bound=Entity)
IdT = TypeVar("IdT", bound=ValueObject)


class IRepository(ABC, Generic[EntityT, IdT]):
    """
    Interface générique de stockage d'entités indexées par identifiant.

    Erreurs :
    - NotFoundError : find_by_id, find_by_ids, update, delete sur un id absent
    - ConflictError : insert, bulk_insert sur un id déjà présent
    """

    @abstractmethod
    async def insert(self, entity: EntityT) -> None:
        """Ajoute une entité en fin de collection."""
        ...

    @abstractmethod
    async def bulk_insert(self, entities: Iterable[EntityT]) -> None:
        """Ajoute plusieurs entités en conservant l'ordre d'entrée."""
        ...

    @abstractmethod
    async def find_by_id(self, entity_id: IdT) -> EntityT:
        """Récupère une entité par son identifiant. Ne retourne jamais None."""
        ...

    @abstractmethod
    async def find_by_ids(self, entity_ids: Sequence[IdT]) -> list[EntityT]:
        """Récupère plusieurs entités, dans l'ordre des identifiants demandés."""
        ...

    @abstractmethod
    async def exists_by_id(self, entity_id: IdT) -> bool:
        """Vérifie la présence d'une entité."""
        ...

    @abstractmethod
    async def find_all(self) -> list[EntityT]:
        """Liste toutes les entités dans l'ordre d'insertion."""
        ...

    @abstractmethod
    async def update(self, entity: EntityT) -> None:
        """Remplace l'entité de même identifiant, à la même position."""
        ...

    @abstractmethod
    async def delete(self, entity_id: IdT) -> None:
        """Supprime une entité par identifiant."""
        ...

    @abstractmethod
    def get_entity(self) -> type[EntityT]:
        """Retourne la classe concrète des entités stockées."""
        ...


class ICategoryRepository(IRepository[Category, Uuid]):
    """Interface de stockage des catégories."""
