"""
Validation des invariants d'entités.

Exports :
- ValidatorFields : Validateur générique basé sur un modèle de règles pydantic
- FieldsErrors : Type du dictionnaire champ -> messages
"""

from src.core.validators.validator_fields import FieldsErrors, ValidatorFields

__all__ = [
    "ValidatorFields",
    "FieldsErrors",
]
