"""
Validation des champs d'entité adossée à pydantic.

Un ValidatorFields applique un modèle de règles pydantic à une entité
et traduit les erreurs pydantic en dictionnaire champ -> messages.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

RulesT = TypeVar("RulesT", bound=BaseModel)

FieldsErrors = dict[str, list[str]]


class ValidatorFields(Generic[RulesT]):
    """
    Valide un objet contre un modèle de règles pydantic.

    Après validate() :
    - errors contient les messages par champ (None si valide)
    - validated_data contient le modèle de règles validé (None si invalide)

    Example:
        validator = ValidatorFields(CategoryRules)
        if not validator.validate(category):
            raise EntityValidationError(validator.errors)
    """

    def __init__(self, rules: type[RulesT]) -> None:
        self._rules = rules
        self.errors: Optional[FieldsErrors] = None
        self.validated_data: Optional[RulesT] = None

    def validate(self, data: Any) -> bool:
        """
        Valide les données (dict ou objet à attributs).

        Returns:
            True si toutes les règles sont respectées
        """
        try:
            self.validated_data = self._rules.model_validate(
                data, from_attributes=not isinstance(data, dict)
            )
        except ValidationError as exc:
            self.errors = _collect_errors(exc)
            self.validated_data = None
            return False
        self.errors = None
        return True


def _collect_errors(exc: ValidationError) -> FieldsErrors:
    errors: FieldsErrors = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        errors.setdefault(field, []).append(error["msg"])
    return errors
