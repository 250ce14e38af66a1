"""
Tests unitaires pour ValueObject.

Verifie l'egalite structurelle entre objets valeur.
"""

from src.core.value_objects import ValueObject


class StringValueObject(ValueObject):
    def __init__(self, value: str) -> None:
        self.value = value


class OtherStringValueObject(ValueObject):
    def __init__(self, value: str) -> None:
        self.value = value


class ComplexValueObject(ValueObject):
    def __init__(self, prop1: str, prop2: int) -> None:
        self.prop1 = prop1
        self.prop2 = prop2


class TestValueObjectEquality:
    """Tests pour ValueObject.equals."""

    def test_should_be_equal(self) -> None:
        assert StringValueObject("test").equals(StringValueObject("test"))
        assert ComplexValueObject("test", 1).equals(ComplexValueObject("test", 1))

    def test_should_not_be_equal(self) -> None:
        assert not StringValueObject("test").equals(StringValueObject("test2"))
        assert not ComplexValueObject("test", 2).equals(ComplexValueObject("test", 1))

    def test_none_is_never_equal(self) -> None:
        assert not StringValueObject("test").equals(None)
        assert not ComplexValueObject("test", 1).equals(None)

    def test_different_class_with_same_fields(self) -> None:
        """La classe concrete doit etre identique."""
        assert not StringValueObject("test").equals(OtherStringValueObject("test"))

    def test_nested_value_objects(self) -> None:
        first = ComplexValueObject("test", 1)
        first.prop1 = StringValueObject("nested")
        second = ComplexValueObject("test", 1)
        second.prop1 = StringValueObject("nested")

        assert first.equals(second)


class TestValueObjectDunder:
    """Tests pour les operateurs Python."""

    def test_eq_operator_delegates_to_equals(self) -> None:
        assert StringValueObject("test") == StringValueObject("test")
        assert StringValueObject("test") != StringValueObject("other")

    def test_eq_with_foreign_object(self) -> None:
        assert StringValueObject("test") != "test"

    def test_str_of_single_field(self) -> None:
        assert str(StringValueObject("test")) == "test"
