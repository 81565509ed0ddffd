"""Visualization functions for family graphs."""

from pathlib import Path

import networkx as nx
import pydot

from family_model.graph import build_union_layout_graph

KIND_COLORS = {
    "parent": "lightblue",
    "child": "lightpink",
}


def to_pydot(G: nx.MultiDiGraph) -> pydot.Dot:
    """
    Build a Graphviz chart of the family using the union-node model.

    - Parents appear above children
    - Spouses are aligned horizontally on the same rank
    - Siblings align under their family node
    - Family/union nodes connect parents to their children

    Args:
        G: Entity graph from `graph.build_graph`

    Returns:
        A pydot graph ready to be written
    """
    H = build_union_layout_graph(G)

    # Create pydot graph with hierarchical settings
    P = pydot.Dot(graph_type="digraph")
    P.set("rankdir", "TB")  # Top-to-bottom (parents at top)
    P.set("splines", "ortho")
    P.set("nodesep", "0.4")
    P.set("ranksep", "0.6")

    # Track spouse pairs for rank=same subgraphs
    spouse_pairs: list[tuple] = []

    for node, data in H.nodes(data=True):
        if data.get("node_type") == "family":
            # Family nodes are small invisible points
            P.add_node(
                pydot.Node(
                    str(node),
                    shape="point",
                    width="0.1",
                    height="0.1",
                    label="",
                )
            )
            spouses = data.get("spouses", ())
            if len(spouses) == 2:
                spouse_pairs.append(spouses)
        else:
            label = f"{data.get('person_name', '')}\n{data.get('age', '')}"
            P.add_node(
                pydot.Node(
                    str(node),
                    label=label,
                    shape="box",
                    style="rounded,filled",
                    fillcolor=KIND_COLORS.get(data.get("kind"), "lightgray"),
                    fontsize="10",
                )
            )

    for u, v, data in H.edges(data=True):
        if data.get("edge_type") == "spouse_to_family":
            # No arrow from parents into the union node
            P.add_edge(pydot.Edge(str(u), str(v), dir="none", color="darkgray"))
        else:
            P.add_edge(pydot.Edge(str(u), str(v), color="darkgray"))

    for i, (a, b) in enumerate(spouse_pairs):
        sg = pydot.Subgraph(f"couple_{i}", rank="same")
        sg.add_node(pydot.Node(str(a)))
        sg.add_node(pydot.Node(str(b)))
        P.add_subgraph(sg)

    return P


def plot_graph(G: nx.MultiDiGraph, output_path: Path | None = None):
    """
    Plot the family graph with Graphviz.

    Args:
        G: Entity graph from `graph.build_graph`
        output_path: Path to save the output image (PNG, SVG or PDF). If None, displays
            interactively.
    """
    P = to_pydot(G)

    if output_path:
        # Determine format from extension
        ext = output_path.suffix.lower().lstrip(".")
        if ext not in ("png", "svg", "pdf"):
            ext = "png"

        P.write(str(output_path), format=ext)
        print(f"Graph saved to {output_path}")
    else:
        # Save to temporary file and display
        import tempfile

        import matplotlib.image as mpimg
        import matplotlib.pyplot as plt

        with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as f:
            P.write(f.name, format="png")
            img = mpimg.imread(f.name)
        Path(f.name).unlink()

        plt.figure(figsize=(12, 9))
        plt.imshow(img)
        plt.axis("off")
        plt.tight_layout()
        plt.show()
