"""
nodeflow - evaluate small directed graphs of typed computation nodes.
"""
from nodeflow.engine import (
    CycleError,
    ExecutionResult,
    NodeResult,
    Workflow,
    WorkflowEdge,
    WorkflowExecutor,
    WorkflowNode,
    run_workflow,
)
from nodeflow.nodes import ExecutionContext, NodeExecutionError, NodeExecutor, NodeRegistry, get_registry

__version__ = "0.1.0"

__all__ = [
    'CycleError',
    'ExecutionResult',
    'NodeResult',
    'Workflow',
    'WorkflowEdge',
    'WorkflowExecutor',
    'WorkflowNode',
    'run_workflow',
    'ExecutionContext',
    'NodeExecutionError',
    'NodeExecutor',
    'NodeRegistry',
    'get_registry',
]
