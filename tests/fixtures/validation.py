"""
Helpers d'assertion pour les erreurs de validation d'entités.
"""

from typing import Callable

import pytest

from src.core.errors import EntityValidationError


def expect_validation_error(
    action: Callable[[], object], field: str, message: str
) -> EntityValidationError:
    """Verifie que l'action leve EntityValidationError avec le message sur le champ."""
    with pytest.raises(EntityValidationError) as exc_info:
        action()
    errors = exc_info.value.errors or {}
    assert message in errors.get(field, []), errors
    return exc_info.value
