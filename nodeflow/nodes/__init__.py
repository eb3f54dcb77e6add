"""
Node executors for the workflow engine.

Each node kind is implemented by a NodeExecutor; the NodeRegistry maps kind
identifiers to executors and is the engine's only extension point.
"""
from .base import ExecutionContext, NodeExecutionError, NodeExecutor
from .registry import NodeRegistry, get_registry, register_node
from .extra_nodes import SquareRootNodeExecutor, WordCountNodeExecutor, register_extra_nodes

__all__ = [
    'ExecutionContext',
    'NodeExecutionError',
    'NodeExecutor',
    'NodeRegistry',
    'get_registry',
    'register_node',
    'SquareRootNodeExecutor',
    'WordCountNodeExecutor',
    'register_extra_nodes',
]
