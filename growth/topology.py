"""
Connectivity and topology edits on a closed path.

Split and prune share one cursor model: every node present when a pass
starts is examined exactly once, in sequence order, and edges created by the
pass itself are left for the next step.
"""

from typing import List, Optional, Tuple

from .errors import DegenerateTopologyError
from .geometry import distance, midpoint
from .profiling import profile
from .vector import Vector2D

MIN_CYCLE_NODES = 3


def connected_nodes(
    nodes: List[Vector2D], index: int, closed: bool = True
) -> Tuple[Optional[Vector2D], Optional[Vector2D]]:
    """
    Return (previous, next) neighbours of nodes[index].

    On a closed path the ends wrap around. On an open path the missing
    neighbour at either end is None.
    """
    n = len(nodes)
    if closed and n < 2:
        raise DegenerateTopologyError(f"a closed path needs at least 2 nodes, got {n}")
    if not 0 <= index < n:
        raise IndexError(f"node index {index} out of range for path of {n} nodes")

    if index > 0:
        previous_node = nodes[index - 1]
    else:
        previous_node = nodes[n - 1] if closed else None

    if index < n - 1:
        next_node = nodes[index + 1]
    else:
        next_node = nodes[0] if closed else None

    return previous_node, next_node


@profile
def split_edges(nodes: List[Vector2D], max_distance: float, max_nodes: Optional[int] = None) -> int:
    """
    Insert a midpoint into every edge at least `max_distance` long.

    The midpoint goes right before the edge's end node; for node 0 (whose
    predecessor is the last node) it is appended to the end, which keeps it
    between the last and first nodes of the cycle. Stops inserting once
    `max_nodes` is reached. Returns the number of inserted nodes.
    """
    inserted = 0
    cursor = 0
    for _ in range(len(nodes)):
        node = nodes[cursor]
        previous_node = nodes[cursor - 1]
        at_limit = max_nodes is not None and len(nodes) >= max_nodes

        if not at_limit and distance(node, previous_node) >= max_distance:
            mid = midpoint(node, previous_node)
            if cursor == 0:
                nodes.append(mid)
                cursor += 1
            else:
                nodes.insert(cursor, mid)
                cursor += 2
            inserted += 1
        else:
            cursor += 1

    return inserted


@profile
def prune_nodes(nodes: List[Vector2D], least_min_distance: float, min_nodes: int = MIN_CYCLE_NODES) -> int:
    """
    Collapse every edge shorter than `least_min_distance` by removing its
    start node (the predecessor of the node being examined).

    Never shrinks the path below `min_nodes`. Returns the number of removed
    nodes.
    """
    removed = 0
    cursor = 0
    for _ in range(len(nodes)):
        if len(nodes) <= min_nodes or cursor >= len(nodes):
            break

        node = nodes[cursor]
        previous_node = nodes[cursor - 1]

        if distance(node, previous_node) < least_min_distance:
            if cursor == 0:
                nodes.pop()
                cursor += 1
            else:
                # the examined node shifts down into the removed slot,
                # so the cursor already points at its successor
                nodes.pop(cursor - 1)
            removed += 1
        else:
            cursor += 1

    return removed
