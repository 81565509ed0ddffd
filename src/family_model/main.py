"""
1) Build a demonstration family out of Parent and Child entities.
    - Every link is set on both sides by the caller; the entities never mirror links.
2) Export the entity web to a networkx graph.
3) Audit the graph for unreciprocated links and impossible ages.
4) Plot the graph with Graphviz.
"""

from pathlib import Path

from family_model.graph import build_graph
from family_model.models import Child, Parent
from family_model.plotting import plot_graph
from family_model.validation import validate_graph


def build_demo_family() -> list[Parent]:
    """Return the two parents of a fully linked four-person family."""
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

    return [father, mother]


def main(plot_path: Path | None = None):
    # Written to the working directory unless a path is given
    if plot_path is None:
        plot_path = Path.cwd() / "family_tree.png"

    print("Building demo family...")
    people = build_demo_family()

    print("Building NetworkX graph...")
    G = build_graph(people)
    print(f"  Graph has {G.number_of_nodes()} people and {G.number_of_edges()} links")

    print("Validating graph...")
    warnings = validate_graph(G)
    if warnings:
        print(f"  Found {len(warnings)} validation warnings:")
        for w in warnings[:10]:  # Show first 10 warnings
            print(f"    - {w}")
        if len(warnings) > 10:
            print(f"    ... and {len(warnings) - 10} more")
    else:
        print("  No validation issues found")

    print(f"Plotting graph to: {plot_path}")
    plot_graph(G, plot_path)

    print("Done!")


if __name__ == "__main__":
    main()
