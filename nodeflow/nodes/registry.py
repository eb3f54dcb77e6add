#!/usr/bin/env python3
"""
Executor registry for managing available node kinds.

Maps node kind identifiers to executor instances. The registry is the only
extension point of the engine: adding a node kind never touches the
scheduler or the execution driver.
"""
import logging
from typing import Dict, List, Optional, Type

from .base import NodeExecutor

logger = logging.getLogger(__name__)

# Executor classes declared with @register_node, in declaration order
_BUILTIN_EXECUTORS: List[Type[NodeExecutor]] = []
_BUILTIN_METADATA: Dict[str, Dict] = {}


class NodeRegistry:
    """Registry for node executors, keyed by node kind"""

    def __init__(self, include_builtins: bool = True):
        """
        Initialize a registry.

        Args:
            include_builtins: Pre-register the built-in executors
        """
        self._executors: Dict[str, NodeExecutor] = {}
        self._node_metadata: Dict[str, Dict] = {}

        if include_builtins:
            _load_builtins()
            for executor_class in _BUILTIN_EXECUTORS:
                self.register(executor_class(), _BUILTIN_METADATA.get(executor_class.node_type))

    def register(self, executor: NodeExecutor, metadata: Optional[Dict] = None):
        """
        Register an executor under its declared node kind.

        A later registration for the same kind replaces the earlier one.

        Args:
            executor: Executor instance to register
            metadata: Optional metadata about the node kind
        """
        node_type = executor.node_type
        if not node_type:
            raise ValueError(f"{executor.__class__.__name__} does not declare a node_type")

        if node_type in self._executors:
            logger.debug("Replacing executor for node kind %s", node_type)
        self._executors[node_type] = executor
        self._node_metadata[node_type] = metadata or {}

    def get_executor(self, node_type: str) -> Optional[NodeExecutor]:
        """Get executor by node kind, or None if the kind is not registered"""
        return self._executors.get(node_type)

    def unregister(self, node_type: str) -> bool:
        """Remove an executor; returns whether one was registered"""
        self._node_metadata.pop(node_type, None)
        return self._executors.pop(node_type, None) is not None

    def list_node_types(self) -> List[str]:
        """List all registered node kinds"""
        return list(self._executors.keys())

    def get_node_metadata(self, node_type: str) -> Dict:
        """Get metadata for a node kind"""
        return self._node_metadata.get(node_type, {})

    def __contains__(self, node_type: str) -> bool:
        return node_type in self._executors

    def __len__(self) -> int:
        return len(self._executors)


def _load_builtins():
    # Importing the modules runs their @register_node decorators
    from . import input_nodes, math_nodes, text_nodes  # noqa: F401


# Global registry instance
_registry = None


def get_registry() -> NodeRegistry:
    """Get the global executor registry (lazy initialization)"""
    global _registry
    if _registry is None:
        _registry = NodeRegistry()
    return _registry


def register_node(metadata: Optional[Dict] = None):
    """
    Decorator to declare a built-in executor class.

    Usage:
        @register_node(metadata={"category": "math"})
        class MyExecutor(NodeExecutor):
            node_type = "myNode"
            ...
    """
    def decorator(executor_class: Type[NodeExecutor]):
        if executor_class not in _BUILTIN_EXECUTORS:
            _BUILTIN_EXECUTORS.append(executor_class)
        _BUILTIN_METADATA[executor_class.node_type] = metadata or {}
        return executor_class
    return decorator
