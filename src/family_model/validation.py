"""Consistency audit for family graphs.

The entities never keep links in sync, so this module only reports what a
caller left inconsistent. It does not modify anything.
"""

import networkx as nx

from family_model.graph import parents_by_child

# The relationship type expected on the other side of each link
INVERSE_RELATIONSHIP = {
    "SPOUSE_OF": "SPOUSE_OF",
    "SIBLING_OF": "SIBLING_OF",
    "PARENT_OF": "CHILD_OF",
    "CHILD_OF": "PARENT_OF",
}

UNRECIPROCATED_MESSAGES = {
    "SPOUSE_OF": "Unreciprocated: {a} lists {b} as spouse, but {b} does not list {a}",
    "SIBLING_OF": "Unreciprocated: {a} lists {b} as a sibling, but {b} does not list {a}",
    "PARENT_OF": "Inconsistent: {a} lists {b} as a child, but {b} does not name {a} as a parent",
    "CHILD_OF": "Inconsistent: {a} names {b} as a parent, but {b} does not list {a} as a child",
}

ROLE_NAMES = {
    "SPOUSE_OF": "spouse",
    "SIBLING_OF": "sibling",
    "PARENT_OF": "child",
    "CHILD_OF": "parent",
}

MIN_PARENT_AGE_GAP = 12


def validate_graph(G: nx.MultiDiGraph) -> list[str]:
    """
    Validate the family graph for:
    - Links not mirrored on the other side (spouse, sibling, parent/child)
    - People linked to themselves and repeated list entries
    - Cycles in parent-child relationships
    - Impossible ages (negative, or a child not younger than a parent)

    Returns a list of warning messages.
    """
    warnings: list[str] = []

    def name(node):
        return G.nodes[node].get("person_name")

    # Check links against the other side
    for u, v, data in G.edges(data=True):
        relationship_type = data.get("relationship_type")
        role = ROLE_NAMES.get(relationship_type, relationship_type)

        if u == v:
            warnings.append(f"Impossible: {name(u)} is listed as their own {role}")
        else:
            inverse = INVERSE_RELATIONSHIP.get(relationship_type)
            if inverse and not G.has_edge(v, u, key=inverse):
                warnings.append(
                    UNRECIPROCATED_MESSAGES[relationship_type].format(a=name(u), b=name(v))
                )

        count = data.get("count", 1)
        if count > 1:
            if relationship_type == "CHILD_OF":
                warnings.append(f"Suspicious: {name(u)} names {name(v)} as both parents")
            else:
                warnings.append(f"Duplicate: {name(u)} lists {name(v)} as {role} {count} times")

    # Create a graph with only PARENT_OF edges for cycle detection
    parent_edges = [
        (u, v) for u, v, d in G.edges(data=True) if d.get("relationship_type") == "PARENT_OF"
    ]
    parent_graph = nx.DiGraph(parent_edges)

    # Check for cycles
    try:
        cycle = nx.find_cycle(parent_graph, orientation="original")
        cycle_nodes = [name(edge[0]) for edge in cycle]
        warnings.append(f"Cycle detected in parent-child relationships: {cycle_nodes}")
    except nx.NetworkXNoCycle:
        pass  # No cycle found, which is good

    # Check for negative ages
    for _, data in G.nodes(data=True):
        age = data.get("age")
        try:
            if age < 0:
                warnings.append(f"Impossible: {data.get('person_name')} has a negative age ({age})")
        except TypeError:
            pass

    # Check for impossible ages between parents and children
    for child, parents in parents_by_child(G).items():
        child_age = G.nodes[child].get("age")
        for parent in parents:
            if parent == child:
                continue
            parent_age = G.nodes[parent].get("age")
            try:
                if child_age >= parent_age:
                    warnings.append(
                        f"Impossible: {name(child)} is not younger than parent {name(parent)}"
                    )
                elif parent_age - child_age < MIN_PARENT_AGE_GAP:
                    warnings.append(
                        f"Suspicious: {name(parent)} was less than {MIN_PARENT_AGE_GAP} years "
                        f"old when {name(child)} was born"
                    )
            except TypeError:
                pass

    return warnings
