#!/usr/bin/env python3
"""
Execution ordering for node-based workflows.

Depth-first topological sort with cycle detection, run on an explicit stack
so deep graphs do not hit the interpreter's recursion limit.
"""
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence, Tuple

from .data import WorkflowEdge

UNVISITED, VISITING, DONE = 0, 1, 2


class CycleError(ValueError):
    """Raised when the workflow graph contains a circular dependency"""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Circular dependency detected involving node {node_id}")


def topological_sort(node_ids: Iterable[str],
                     outgoing: Mapping[str, Sequence[WorkflowEdge]]) -> List[str]:
    """
    Order nodes so every node comes after all nodes it depends on.

    Roots are taken in ``node_ids`` order and edges in list order, so a
    fixed graph always yields the same order. Ids only reachable through
    dangling edges are included as well.

    Args:
        node_ids: Node ids in their original list order
        outgoing: Source id to outgoing edges

    Returns:
        Reverse-postorder list of node ids

    Raises:
        CycleError: On the first node found while it is still being explored
    """
    state: Dict[str, int] = {}
    postorder: List[str] = []

    for root in node_ids:
        if state.get(root, UNVISITED) != UNVISITED:
            continue

        state[root] = VISITING
        stack: List[Tuple[str, Iterator[WorkflowEdge]]] = [(root, iter(outgoing.get(root, ())))]

        while stack:
            node_id, edges = stack[-1]
            edge = next(edges, None)

            if edge is None:
                stack.pop()
                state[node_id] = DONE
                postorder.append(node_id)
                continue

            target_state = state.get(edge.target, UNVISITED)
            if target_state == VISITING:
                raise CycleError(edge.target)
            if target_state == UNVISITED:
                state[edge.target] = VISITING
                stack.append((edge.target, iter(outgoing.get(edge.target, ()))))

    postorder.reverse()
    return postorder
