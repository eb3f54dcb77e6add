"""
Execution engine for node-based workflows.

Handles graph indexing, dependency ordering and sequential node execution.
"""
from .data import GraphIndex, Workflow, WorkflowEdge, WorkflowNode, resolve_node_inputs
from .scheduler import CycleError, topological_sort
from .executor import ExecutionResult, NodeResult, WorkflowExecutor, run_workflow

__all__ = [
    'GraphIndex',
    'Workflow',
    'WorkflowEdge',
    'WorkflowNode',
    'resolve_node_inputs',
    'CycleError',
    'topological_sort',
    'ExecutionResult',
    'NodeResult',
    'WorkflowExecutor',
    'run_workflow',
]
