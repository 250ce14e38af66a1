"""
Objet valeur identifiant (UUID).

Représentation canonique externe d'un identifiant d'entité : chaîne de
36 caractères hexadécimaux minuscules séparés par des tirets
(xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx).
"""

import re
import uuid
from dataclasses import dataclass, field
from typing import Optional

from src.core.errors import InvalidUuidError
from src.core.value_objects.value_object import ValueObject

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
)


def _generate() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True, eq=False)
class Uuid(ValueObject):
    """
    Identifiant immutable d'une entité.

    Sans argument, génère un UUID4 aléatoire. Avec une chaîne, la valide
    contre la grammaire canonique et la conserve telle quelle.

    Attributs :
        id : Le token UUID

    Raises:
        InvalidUuidError: Si le token fourni n'est pas un UUID canonique
    """

    id: str = field(default_factory=_generate)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not isinstance(self.id, str) or not UUID_PATTERN.match(self.id):
            raise InvalidUuidError(self.id)

    @classmethod
    def create(cls, token: Optional[str] = None) -> "Uuid":
        """Construit un Uuid, généré si aucun token n'est fourni."""
        if token is None:
            return cls()
        return cls(token)

    def __hash__(self) -> int:
        return hash((type(self), self.id))

    def __str__(self) -> str:
        return self.id
