"""
Erreurs du domaine.

Toutes les erreurs sont levées de façon synchrone au point de violation
(construction, mutation ou recherche) et ne sont jamais absorbées par le noyau.
L'appelant décide de les convertir (404, 422...) ou de les propager.
"""

from typing import Any, Optional, Sequence


def _format_ids(ids: Any) -> str:
    if isinstance(ids, (list, tuple)):
        return ", ".join(str(entity_id) for entity_id in ids)
    return str(ids)


class DomainError(Exception):
    """Classe de base des erreurs du domaine."""


class EntityValidationError(DomainError):
    """
    Levée quand une entité viole un de ses invariants.

    Attributes:
        errors: Dictionnaire champ -> liste de messages de violation
    """

    def __init__(
        self,
        errors: Optional[dict[str, list[str]]],
        message: str = "Validation Error",
    ) -> None:
        self.errors = errors
        super().__init__(message)

    def count(self) -> int:
        """Nombre de champs en erreur."""
        return len(self.errors) if self.errors else 0


class InvalidUuidError(DomainError):
    """
    Levée quand un identifiant ne respecte pas le format UUID canonique.

    Attributes:
        token: La valeur refusée
    """

    def __init__(self, token: Any, message: str = "ID must be a valid UUID") -> None:
        self.token = token
        super().__init__(f"{message}: {token!r}")


class NotFoundError(DomainError):
    """
    Levée quand aucune entité ne correspond au ou aux identifiants demandés.

    Attributes:
        ids: Identifiant ou liste d'identifiants manquants
        entity_class: Classe de l'entité recherchée
    """

    def __init__(self, ids: Any | Sequence[Any], entity_class: type) -> None:
        self.ids = ids
        self.entity_class = entity_class
        super().__init__(
            f"{entity_class.__name__} with id(s) {_format_ids(ids)} not found"
        )


class ConflictError(DomainError):
    """
    Levée à l'insertion d'une entité dont l'identifiant existe déjà.

    Attributes:
        ids: Identifiant ou liste d'identifiants en conflit
        entity_class: Classe de l'entité insérée
    """

    def __init__(self, ids: Any | Sequence[Any], entity_class: type) -> None:
        self.ids = ids
        self.entity_class = entity_class
        super().__init__(
            f"{entity_class.__name__} with id(s) {_format_ids(ids)} already exists"
        )
