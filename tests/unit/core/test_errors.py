"""
Tests unitaires pour les erreurs du domaine.
"""

import pytest

from src.core.errors import (
    ConflictError,
    DomainError,
    EntityValidationError,
    InvalidUuidError,
    NotFoundError,
)
from src.core.entities import Category
from src.core.value_objects import Uuid

VALID_UUID = "550e8400-e29b-41d4-a716-446655440000"


class TestNotFoundError:
    """Tests pour le formatage de NotFoundError."""

    def test_single_id(self) -> None:
        error = NotFoundError(Uuid(VALID_UUID), Category)
        assert str(error) == f"Category with id(s) {VALID_UUID} not found"

    def test_several_ids(self) -> None:
        error = NotFoundError(["id-1", "id-2"], Category)
        assert str(error) == "Category with id(s) id-1, id-2 not found"

    def test_plain_string_id(self) -> None:
        error = NotFoundError("abc", Category)
        assert str(error) == "Category with id(s) abc not found"


class TestConflictError:
    def test_message(self) -> None:
        error = ConflictError([Uuid(VALID_UUID)], Category)
        assert str(error) == f"Category with id(s) {VALID_UUID} already exists"


class TestEntityValidationError:
    def test_count(self) -> None:
        error = EntityValidationError({"name": ["a"], "description": ["b"]})
        assert error.count() == 2
        assert str(error) == "Validation Error"

    def test_count_without_errors(self) -> None:
        assert EntityValidationError(None).count() == 0


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            EntityValidationError({}),
            InvalidUuidError("x"),
            NotFoundError("x", Category),
            ConflictError("x", Category),
        ],
    )
    def test_all_are_domain_errors(self, error) -> None:
        assert isinstance(error, DomainError)
