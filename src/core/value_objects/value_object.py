"""
Classe de base des objets valeur.

Un objet valeur est défini par son contenu et non par son identité :
deux instances de la même classe avec les mêmes attributs sont interchangeables.
"""

from abc import ABC
from typing import Any

from src.core.equality import is_equal


class ValueObject(ABC):
    """
    Objet valeur comparé structurellement.

    L'égalité exige la même classe concrète, puis compare l'ensemble
    des attributs via is_equal.
    """

    def equals(self, other: Any) -> bool:
        if other is None:
            return False
        if type(other) is not type(self):
            return False
        return is_equal(vars(self), vars(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        values = list(vars(self).values())
        if len(values) == 1:
            return str(values[0])
        return repr(self)
