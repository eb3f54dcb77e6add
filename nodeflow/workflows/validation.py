#!/usr/bin/env python3
"""
Structural checks for a workflow before it is executed.
"""
from typing import List, Optional

from nodeflow.engine.data import GraphIndex, Workflow
from nodeflow.engine.scheduler import CycleError, topological_sort
from nodeflow.nodes.registry import NodeRegistry, get_registry


def validate_workflow(workflow: Workflow, registry: Optional[NodeRegistry] = None) -> List[str]:
    """
    Check a workflow for problems the engine would report at run time.

    Dangling edges and unknown node kinds do not stop a run, but they are
    almost always editing mistakes, so they are reported here.

    Returns:
        List of human-readable problems; empty if the workflow is valid
    """
    registry = registry if registry is not None else get_registry()
    errors: List[str] = []
    node_ids = {node.id for node in workflow.nodes}

    for node in workflow.nodes:
        if node.type not in registry:
            errors.append(f"Node {node.id}: no executor for node kind '{node.type}'")

    for edge in workflow.edges:
        if edge.source not in node_ids:
            errors.append(f"Edge {edge.id} references unknown node: {edge.source}")
        if edge.target not in node_ids:
            errors.append(f"Edge {edge.id} references unknown node: {edge.target}")

    index = GraphIndex.build(workflow)
    try:
        topological_sort([node.id for node in workflow.nodes], index.outgoing)
    except CycleError as e:
        errors.append(str(e))

    return errors
