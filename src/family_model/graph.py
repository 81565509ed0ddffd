"""NetworkX graph building and operations."""

import itertools
from collections import Counter, deque
from collections.abc import Iterable

import networkx as nx

from family_model.models import Child, Parent, Person, Relationship


def entity_kind(entity: Person) -> str:
    if isinstance(entity, Parent):
        return "parent"
    if isinstance(entity, Child):
        return "child"
    return "person"


def linked_entities(entity: Person) -> list[Person]:
    """Return every entity `entity` holds a reference to, in link order."""
    linked: list[Person | None] = []
    if isinstance(entity, Parent):
        linked.append(entity.get_spouse())
        linked.extend(entity.get_children())
    if isinstance(entity, Child):
        linked.extend([entity.get_parent1(), entity.get_parent2()])
        linked.extend(entity.get_siblings())
    return [e for e in linked if e is not None]


def collect_entities(people: Iterable[Person]) -> dict[Person, int]:
    """
    Assign sequential ids to every entity reachable from `people`.

    Entities hash by identity, so two people with the same name and age are
    still distinct nodes. Ids follow breadth-first discovery order.
    """
    ids: dict[Person, int] = {}
    queue: deque[Person] = deque()

    def visit(entity: Person):
        if entity not in ids:
            ids[entity] = len(ids)
            queue.append(entity)

    for person in people:
        visit(person)
    while queue:
        for linked in linked_entities(queue.popleft()):
            visit(linked)

    return ids


def extract_relationships(ids: dict[Person, int]) -> list[Relationship]:
    """
    Normalize entity links into relationship records.

    Each link is recorded from the side that holds it, so a spouse link set on
    only one side yields a single SPOUSE_OF record. Repeated entries in a
    children or siblings list yield repeated records.
    """
    relationships: list[Relationship] = []

    for entity, entity_id in ids.items():
        if isinstance(entity, Parent):
            spouse = entity.get_spouse()
            if spouse is not None:
                relationships.append(Relationship(entity_id, ids[spouse], "SPOUSE_OF"))
            for child in entity.get_children():
                if child is not None:
                    relationships.append(Relationship(entity_id, ids[child], "PARENT_OF"))

        if isinstance(entity, Child):
            for parent in (entity.get_parent1(), entity.get_parent2()):
                if parent is not None:
                    relationships.append(Relationship(entity_id, ids[parent], "CHILD_OF"))
            for sibling in entity.get_siblings():
                if sibling is not None:
                    relationships.append(Relationship(entity_id, ids[sibling], "SIBLING_OF"))

    return relationships


def build_graph(people: Iterable[Person]) -> nx.MultiDiGraph:
    """
    Build a NetworkX multigraph from every entity reachable from `people`.

    Edges are keyed by relationship type and carry a `count` of how many times
    the link appears on the holding side.
    """
    ids = collect_entities(people)
    G = nx.MultiDiGraph()

    # Add nodes (persons)
    for entity, node_id in ids.items():
        G.add_node(
            node_id,
            entity=entity,
            person_name=entity.get_name(),
            age=entity.get_age(),
            kind=entity_kind(entity),
        )

    # Add edges (relationships), collapsing duplicates into a count
    counts = Counter(
        (r.person1_id, r.person2_id, r.relationship_type) for r in extract_relationships(ids)
    )
    for (u, v, relationship_type), count in counts.items():
        G.add_edge(u, v, key=relationship_type, relationship_type=relationship_type, count=count)

    return G


def find_node(G: nx.MultiDiGraph, entity: Person) -> int:
    """Return the node id holding `entity`."""
    for node, node_entity in G.nodes(data="entity"):
        if node_entity is entity:
            return node
    raise ValueError(f"{entity!r} not found in graph")


def get_ego_subgraph(G: nx.MultiDiGraph, entity: Person, radius: int = 2) -> nx.MultiDiGraph:
    """
    Extract a subgraph containing nodes within a given degree of a person.

    Args:
        G: The full graph
        entity: The person to center the subgraph on
        radius: Maximum distance from center (default 2)

    Returns:
        A subgraph containing only nodes within `radius` links of `entity`
    """
    center_id = find_node(G, entity)

    # Undirected view so links held by either side count; a view avoids
    # deep-copying the entity attributes
    undirected = G.to_undirected(as_view=True)
    ego = nx.ego_graph(undirected, center_id, radius=radius)

    # Return the directed subgraph induced by these nodes
    return G.subgraph(ego.nodes()).copy()


def parents_by_child(G: nx.MultiDiGraph) -> dict[int, list[int]]:
    """
    Group parents under each child, from either side of the link.

    A parent counts if the child names it or if it lists the child.
    """
    grouped: dict[int, list[int]] = {}
    for u, v, edata in G.edges(data=True):
        relationship_type = edata.get("relationship_type")
        if relationship_type == "PARENT_OF":
            grouped.setdefault(v, []).append(u)
        elif relationship_type == "CHILD_OF":
            grouped.setdefault(u, []).append(v)

    # De-duplicate parents while preserving order
    return {child: list(dict.fromkeys(parents)) for child, parents in grouped.items()}


def build_union_layout_graph(G: nx.MultiDiGraph) -> nx.DiGraph:
    """
    Build a layout graph using the union-node model for better family tree visualization.

    Creates "family nodes" (union nodes) that connect spouse pairs to their children.
    This produces cleaner hierarchical layouts where:
    - Spouses naturally sit on the same generation
    - All children hang from the union node, so siblings align
    - Fewer edge crossings than direct parent→child edges

    Args:
        G: Entity graph from `build_graph`

    Returns:
        A new graph with family nodes suitable for hierarchical layout
    """
    H = nx.DiGraph()

    # Copy person nodes without the entity reference
    for n, data in G.nodes(data=True):
        attrs = {k: v for k, v in data.items() if k != "entity"}
        H.add_node(n, node_type="person", **attrs)

    # Collect spouse pairs (a link from either side is enough)
    spouse_pairs: set[tuple] = set()
    for u, v, edata in G.edges(data=True):
        if edata.get("relationship_type") == "SPOUSE_OF" and u != v:
            spouse_pairs.add(tuple(sorted([u, v])))

    # Map spouse pair -> family node id
    fam_for_pair: dict[tuple, str] = {}
    for a, b in sorted(spouse_pairs):
        fam_id = f"FAM_{a}_{b}"
        fam_for_pair[(a, b)] = fam_id
        H.add_node(fam_id, node_type="family", spouses=(a, b))
        H.add_edge(a, fam_id, edge_type="spouse_to_family")
        H.add_edge(b, fam_id, edge_type="spouse_to_family")

    for child, parents in parents_by_child(G).items():
        fam_id = None

        # Try to find a spouse pair among the parents
        if len(parents) >= 2:
            for p1, p2 in itertools.combinations(parents, 2):
                pair = tuple(sorted([p1, p2]))
                if pair in fam_for_pair:
                    fam_id = fam_for_pair[pair]
                    break

        # If no spouse pair found, create a family node for the unmarried parents
        if fam_id is None:
            fam_id = f"FAM_{'_'.join(map(str, sorted(parents)))}"
            if fam_id not in H:
                H.add_node(fam_id, node_type="family", spouses=tuple(sorted(parents)))
                for p in parents:
                    H.add_edge(p, fam_id, edge_type="spouse_to_family")

        # Child hangs from family node
        H.add_edge(fam_id, child, edge_type="family_to_child")

    return H
