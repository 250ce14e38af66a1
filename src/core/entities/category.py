"""
Entité Category du catalogue vidéo.

Une catégorie regroupe des vidéos (Film, Documentaire, ...). Ses invariants
sont vérifiés à la construction et après chaque mutation : aucun appelant ne
peut observer une catégorie invalide.
"""

from dataclasses import FrozenInstanceError, dataclass
from datetime import datetime
from typing import Any, Optional

from loguru import logger
from pydantic import BaseModel, field_validator
from pydantic_core import PydanticCustomError

from src.core.entities.entity import Entity
from src.core.errors import EntityValidationError
from src.core.validators import ValidatorFields
from src.core.value_objects import Uuid

NAME_MAX_LENGTH = 255


class CategoryRules(BaseModel):
    """Règles de validation d'une catégorie."""

    category_id: Any
    name: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime

    @field_validator("category_id", mode="before")
    @classmethod
    def check_category_id(cls, value: Any) -> Uuid:
        if not isinstance(value, Uuid):
            raise PydanticCustomError(
                "uuid_type", "category_id must be a valid Uuid"
            )
        return value

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise PydanticCustomError("string_type", "name must be a string")
        if not value:
            raise PydanticCustomError("not_empty", "name should not be empty")
        if len(value) > NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "max_length",
                "name must be shorter than or equal to {max_length} characters",
                {"max_length": NAME_MAX_LENGTH},
            )
        return value

    @field_validator("description", mode="before")
    @classmethod
    def check_description(cls, value: Any) -> Optional[str]:
        if value is not None and not isinstance(value, str):
            raise PydanticCustomError(
                "string_type", "description must be a string"
            )
        return value

    @field_validator("is_active", mode="before")
    @classmethod
    def check_is_active(cls, value: Any) -> bool:
        if not isinstance(value, bool):
            raise PydanticCustomError(
                "bool_type", "is_active must be a boolean value"
            )
        return value

    @field_validator("created_at", mode="before")
    @classmethod
    def check_created_at(cls, value: Any) -> datetime:
        if not isinstance(value, datetime):
            raise PydanticCustomError(
                "datetime_type", "created_at must be a datetime instance"
            )
        return value


class CategoryValidator(ValidatorFields[CategoryRules]):
    """Validateur des champs d'une catégorie."""

    def __init__(self) -> None:
        super().__init__(CategoryRules)


@dataclass(eq=False, kw_only=True)
class Category(Entity):
    """
    Catégorie de vidéos.

    Attributs :
        category_id : Identifiant (généré si absent)
        name : Nom, 1 à 255 caractères
        description : Description libre optionnelle
        is_active : Catégorie active (True par défaut)
        created_at : Date de création (maintenant par défaut), non réassignable

    Raises:
        EntityValidationError: À la construction ou après une mutation
            si un invariant n'est plus respecté
    """

    name: str
    category_id: Optional[Uuid] = None
    description: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.category_id is None:
            self.category_id = Uuid()
        if self.created_at is None:
            self.created_at = datetime.now()
        Category.validate(self)

    def __setattr__(self, name: str, value: Any) -> None:
        # created_at est fixé une seule fois (__init__ ou __post_init__)
        if name == "created_at" and getattr(self, "created_at", None) is not None:
            raise FrozenInstanceError("cannot assign to field 'created_at'")
        super().__setattr__(name, value)

    @classmethod
    def create(
        cls,
        name: str,
        description: Optional[str] = None,
        is_active: bool = True,
    ) -> "Category":
        """Crée une nouvelle catégorie avec un identifiant frais."""
        category = cls(name=name, description=description, is_active=is_active)
        logger.debug("Catégorie créée", category_id=str(category.category_id))
        return category

    @property
    def entity_id(self) -> Uuid:
        return self.category_id

    def change_name(self, name: str) -> None:
        self._change(name=name)

    def change_description(self, description: Optional[str]) -> None:
        self._change(description=description)

    def activate(self) -> None:
        self._change(is_active=True)

    def deactivate(self) -> None:
        self._change(is_active=False)

    def _change(self, **changes: Any) -> None:
        """Applique les changements puis revalide ; restaure l'état précédent en cas d'échec."""
        previous = {name: getattr(self, name) for name in changes}
        for name, value in changes.items():
            setattr(self, name, value)
        try:
            Category.validate(self)
        except EntityValidationError:
            for name, value in previous.items():
                setattr(self, name, value)
            raise

    @staticmethod
    def validate(entity: "Category") -> None:
        """Vérifie les invariants et lève EntityValidationError si violés."""
        validator = CategoryValidator()
        if not validator.validate(entity):
            raise EntityValidationError(validator.errors)

    def to_json(self) -> dict[str, Any]:
        return {
            "category_id": str(self.category_id),
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
            "created_at": self.created_at,
        }
