"""
Égalité structurelle profonde, tolérante aux références circulaires.

Primitive d'égalité utilisée par tous les objets valeur : deux valeurs sont
égales si leur contenu l'est, indépendamment de leur identité mémoire.

Règles :
- Même référence -> égales (y compris fonctions et objets cycliques)
- Les callables ne sont égaux que par référence
- Primitives : même type concret et ``==`` (42 != "42", True != 1)
- Séquences (list, tuple) : même longueur, éléments égaux par index
- Mappings et objets à attributs : mêmes clés, valeurs égales par clé

Les objets déjà en cours de comparaison sont considérés égaux : deux graphes
cycliques de même forme sont égaux, mais une divergence située uniquement
dans la partie déjà visitée du graphe n'est pas détectée.
"""

from collections.abc import Mapping
from typing import Any, Optional

_SEQUENCE_TYPES = (list, tuple)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, _SEQUENCE_TYPES)


def _is_composite(value: Any) -> bool:
    """Vrai pour les listes, tuples, mappings et objets portant un __dict__."""
    if _is_sequence(value) or isinstance(value, Mapping):
        return True
    return hasattr(value, "__dict__")


def _fields(value: Any) -> Mapping:
    if isinstance(value, Mapping):
        return value
    return vars(value)


def is_equal(first: Any, second: Any, visited: Optional[set[int]] = None) -> bool:
    """
    Compare deux valeurs par leur contenu.

    Args:
        first: Première valeur
        second: Seconde valeur
        visited: Ensemble des id() des composites en cours de comparaison,
                 partagé par référence entre les appels récursifs

    Returns:
        True si les deux valeurs sont structurellement égales
    """
    if first is second:
        return True

    if callable(first) or callable(second):
        return False

    if not _is_composite(first) or not _is_composite(second):
        return type(first) is type(second) and first == second

    if visited is None:
        visited = set()

    # Références circulaires
    if id(first) in visited or id(second) in visited:
        return True
    visited.add(id(first))
    visited.add(id(second))

    if _is_sequence(first) != _is_sequence(second):
        return False
    if _is_sequence(first):
        if len(first) != len(second):
            return False
        return all(
            is_equal(left, right, visited) for left, right in zip(first, second)
        )

    if isinstance(first, Mapping) != isinstance(second, Mapping):
        return False

    first_fields = _fields(first)
    second_fields = _fields(second)
    if len(first_fields) != len(second_fields):
        return False

    for key, value in first_fields.items():
        if key not in second_fields:
            return False
        if not is_equal(value, second_fields[key], visited):
            return False

    return True
