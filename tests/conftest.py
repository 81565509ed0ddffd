from __future__ import annotations

import pytest

from family_model.models import Child, Parent


@pytest.fixture
def family() -> dict:
    """A fully mirrored family: John and Mary with Child1 and Child2."""
    father = Parent("John", 35)
    mother = Parent("Mary", 32)
    father.set_spouse(mother)
    mother.set_spouse(father)

    child1 = Child("Child1", 5, father, mother)
    child2 = Child("Child2", 3, father, mother)
    for parent in (father, mother):
        parent.add_child(child1)
        parent.add_child(child2)
    child1.add_sibling(child2)
    child2.add_sibling(child1)

    return {"father": father, "mother": mother, "child1": child1, "child2": child2}
