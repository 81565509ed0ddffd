"""
Structural tests for the entity classes.

These inspect the public shape of each class (constructor signatures,
accessor names, return annotations) rather than behaviour.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Iterable

import pytest

from family_model.models import Child, Parent, Person


def parameter_names(cls) -> list[str]:
    return [p for p in inspect.signature(cls.__init__).parameters if p != "self"]


def return_hint(cls, method_name: str):
    return typing.get_type_hints(getattr(cls, method_name))["return"]


class TestConstructors:
    def test_person(self) -> None:
        assert parameter_names(Person) == ["name", "age"]

    def test_parent_spouse_is_optional(self) -> None:
        assert parameter_names(Parent) == ["name", "age", "spouse"]
        assert inspect.signature(Parent.__init__).parameters["spouse"].default is None

    def test_child_requires_both_parents(self) -> None:
        params = inspect.signature(Child.__init__).parameters
        assert parameter_names(Child) == ["name", "age", "parent1", "parent2"]
        assert params["parent1"].default is inspect.Parameter.empty
        assert params["parent2"].default is inspect.Parameter.empty


class TestInheritance:
    @pytest.mark.parametrize("cls", [Parent, Child])
    def test_subclass_of_person(self, cls) -> None:
        assert issubclass(cls, Person)

    @pytest.mark.parametrize("cls", [Parent, Child])
    @pytest.mark.parametrize("method", ["get_name", "set_name", "get_age", "set_age"])
    def test_inherits_identity_accessors(self, cls, method: str) -> None:
        assert getattr(cls, method) is getattr(Person, method)


class TestAccessors:
    @pytest.mark.parametrize(
        "cls,method,expected",
        [
            (Person, "get_name", str),
            (Person, "get_age", int),
            (Parent, "get_spouse", Parent | None),
            (Parent, "get_children", list[Child]),
            (Child, "get_parent1", Parent | None),
            (Child, "get_parent2", Parent | None),
            (Child, "get_siblings", list[Child]),
        ],
    )
    def test_getter_return_types(self, cls, method: str, expected) -> None:
        assert return_hint(cls, method) == expected

    @pytest.mark.parametrize(
        "cls,methods",
        [
            (Person, ["set_name", "set_age"]),
            (Parent, ["set_spouse", "set_children", "add_child"]),
            (Child, ["set_siblings", "add_sibling"]),
        ],
    )
    def test_mutators_exist(self, cls, methods: list[str]) -> None:
        for method in methods:
            assert callable(getattr(cls, method, None)), method

    @pytest.mark.parametrize("method", ["set_parent1", "set_parent2"])
    def test_child_has_no_parent_setters(self, method: str) -> None:
        assert not hasattr(Child, method)


class TestFields:
    """Instance attributes backing each accessor, and the types they hold."""

    @pytest.fixture
    def entities(self) -> tuple[Person, Parent, Child]:
        father = Parent("John", 35)
        mother = Parent("Mary", 32, father)
        return Person("Stranger", 40), father, Child("Baby", 1, father, mother)

    def test_person_fields(self, entities) -> None:
        person, _, _ = entities
        assert vars(person) == {"_name": "Stranger", "_age": 40}
        assert isinstance(person._name, str)
        assert isinstance(person._age, int)

    def test_parent_fields(self, entities) -> None:
        _, father, child = entities
        mother = child.get_parent2()
        assert set(vars(father)) == {"_name", "_age", "_spouse", "_children"}
        assert father._spouse is None
        assert mother._spouse is father
        assert type(father._children) is list
        assert father._children == []

    def test_child_fields(self, entities) -> None:
        _, father, child = entities
        assert set(vars(child)) == {"_name", "_age", "_parent1", "_parent2", "_siblings"}
        assert child._parent1 is father
        assert isinstance(child._parent2, Parent)
        assert type(child._siblings) is list
        assert child._siblings == []

    @pytest.mark.parametrize(
        "cls,method,param,expected",
        [
            (Person, "set_name", "name", str),
            (Person, "set_age", "age", int),
            (Parent, "set_spouse", "spouse", Parent | None),
            (Parent, "set_children", "children", Iterable[Child]),
            (Parent, "add_child", "child", Child),
            (Child, "set_siblings", "siblings", Iterable[Child]),
            (Child, "add_sibling", "sibling", Child),
        ],
    )
    def test_setter_parameter_types(self, cls, method: str, param: str, expected) -> None:
        func = getattr(cls, method)
        assert [p for p in inspect.signature(func).parameters if p != "self"] == [param]
        assert typing.get_type_hints(func)[param] == expected


class TestPackaging:
    @pytest.mark.parametrize("cls", [Person, Parent, Child])
    def test_entities_live_in_package(self, cls) -> None:
        assert cls.__module__ == "family_model.models"
