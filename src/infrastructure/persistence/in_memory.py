"""
Repository générique en mémoire.

Implémente IRepository sur une liste ordonnée d'entités. Chaque recherche
compare les identifiants via l'égalité structurelle des objets valeur.

Pas de verrou ni de transaction : une instance a un seul propriétaire logique
et n'est sûre qu'en ordonnancement coopératif (asyncio). Un accès depuis
plusieurs threads exige une exclusion mutuelle externe.
"""

from typing import Any, Iterable, Optional, Sequence, get_args

from loguru import logger

from src.core.entities import Entity
from src.core.errors import ConflictError, NotFoundError
from src.core.ports.repositories import EntityT, IdT, IRepository


class InMemoryRepository(IRepository[EntityT, IdT]):
    """
    Stockage en mémoire, ordre d'insertion conservé.

    La classe d'entité est déduite du paramètre générique de la sous-classe :

        class CategoryInMemoryRepository(InMemoryRepository[Category, Uuid]):
            pass

    Attributes:
        items: Collection ordonnée des entités stockées
    """

    _entity_class: Optional[type] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in cls.__dict__.get("__orig_bases__", ()):
            for arg in get_args(base):
                if isinstance(arg, type) and issubclass(arg, Entity):
                    cls._entity_class = arg
                    return

    def __init__(self) -> None:
        self.items: list[EntityT] = []

    def get_entity(self) -> type[EntityT]:
        if self._entity_class is None:
            raise TypeError(
                f"{type(self).__name__} doit parametrer InMemoryRepository "
                "avec une classe d'entite"
            )
        return self._entity_class

    async def insert(self, entity: EntityT) -> None:
        if self._find_index(entity.entity_id) is not None:
            raise ConflictError(entity.entity_id, self.get_entity())
        self.items.append(entity)
        logger.debug(
            "Entite inseree: {} {}", self.get_entity().__name__, entity.entity_id
        )

    async def bulk_insert(self, entities: Iterable[EntityT]) -> None:
        entities = list(entities)
        conflicts = []
        seen: list[EntityT] = []
        for entity in entities:
            in_batch = any(other.same_identity_as(entity) for other in seen)
            if in_batch or self._find_index(entity.entity_id) is not None:
                conflicts.append(entity.entity_id)
            seen.append(entity)
        if conflicts:
            raise ConflictError(conflicts, self.get_entity())
        self.items.extend(entities)
        logger.debug(
            "{} entites inserees: {}", len(entities), self.get_entity().__name__
        )

    async def find_by_id(self, entity_id: IdT) -> EntityT:
        return self.items[self._get_index(entity_id)]

    async def find_by_ids(self, entity_ids: Sequence[IdT]) -> list[EntityT]:
        found = []
        missing = []
        for entity_id in entity_ids:
            index = self._find_index(entity_id)
            if index is None:
                missing.append(entity_id)
            else:
                found.append(self.items[index])
        if missing:
            raise NotFoundError(missing, self.get_entity())
        return found

    async def exists_by_id(self, entity_id: IdT) -> bool:
        return self._find_index(entity_id) is not None

    async def find_all(self) -> list[EntityT]:
        """Retourne une copie superficielle de la collection."""
        return list(self.items)

    async def update(self, entity: EntityT) -> None:
        index = self._get_index(entity.entity_id)
        self.items[index] = entity
        logger.debug(
            "Entite mise a jour: {} {}", self.get_entity().__name__, entity.entity_id
        )

    async def delete(self, entity_id: IdT) -> None:
        index = self._get_index(entity_id)
        del self.items[index]
        logger.debug(
            "Entite supprimee: {} {}", self.get_entity().__name__, entity_id
        )

    def _find_index(self, entity_id: IdT) -> Optional[int]:
        for index, item in enumerate(self.items):
            if item.entity_id.equals(entity_id):
                return index
        return None

    def _get_index(self, entity_id: IdT) -> int:
        index = self._find_index(entity_id)
        if index is None:
            raise NotFoundError(entity_id, self.get_entity())
        return index
