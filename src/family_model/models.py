"""Entity classes for the family model.

Links between entities are plain object references. None of them are kept
reciprocal: setting a spouse, adding a child or adding a sibling touches only
the entity the method is called on. Callers that want both sides linked must
make both calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


class Person:
    def __init__(self, name: str, age: int):
        self._name = name
        self._age = age

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str):
        self._name = name

    def get_age(self) -> int:
        return self._age

    def set_age(self, age: int):
        # Negative ages are accepted as-is
        self._age = age

    def __repr__(self) -> str:
        # Only identity attributes; links are cyclic
        return f"{type(self).__name__}(name={self._name!r}, age={self._age!r})"


class Parent(Person):
    def __init__(self, name: str, age: int, spouse: Parent | None = None):
        super().__init__(name, age)
        self._spouse = spouse
        self._children: list[Child] = []

    def get_spouse(self) -> Parent | None:
        return self._spouse

    def set_spouse(self, spouse: Parent | None):
        """Replace the spouse. The other parent's spouse is left untouched."""
        self._spouse = spouse

    def get_children(self) -> list[Child]:
        """Return a copy of the children in the order they were added."""
        return list(self._children)

    def set_children(self, children: Iterable[Child]):
        self._children = list(children)

    def add_child(self, child: Child):
        """Append a child. Duplicates are kept."""
        self._children.append(child)


class Child(Person):
    """
    A person with two parents fixed at construction.

    parent1 and parent2 can be read but never reassigned. Siblings are an
    ordered list which, like Parent's children, allows duplicates and is
    not mirrored onto the sibling.
    """

    def __init__(self, name: str, age: int, parent1: Parent | None, parent2: Parent | None):
        super().__init__(name, age)
        self._parent1 = parent1
        self._parent2 = parent2
        self._siblings: list[Child] = []

    def get_parent1(self) -> Parent | None:
        return self._parent1

    def get_parent2(self) -> Parent | None:
        return self._parent2

    def get_siblings(self) -> list[Child]:
        return list(self._siblings)

    def set_siblings(self, siblings: Iterable[Child]):
        self._siblings = list(siblings)

    def add_sibling(self, sibling: Child):
        self._siblings.append(sibling)


@dataclass
class Relationship:
    person1_id: int
    person2_id: int
    relationship_type: str  # SPOUSE_OF, PARENT_OF, CHILD_OF, SIBLING_OF
