#!/usr/bin/env python3
"""
Workflow execution engine.

Orders the graph, resolves each node's inputs from upstream outputs,
dispatches to the executor registered for the node's kind and accounts for
per-node timing, status and errors.
"""
import asyncio
import inspect
import logging
import math
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from nodeflow.nodes.base import ExecutionContext, describe_value
from nodeflow.nodes.registry import NodeRegistry, get_registry
from nodeflow.engine.data import GraphIndex, Workflow, WorkflowNode, resolve_node_inputs
from nodeflow.engine.scheduler import topological_sort

logger = logging.getLogger(__name__)

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


def _wire_value(value: Any) -> Any:
    """Replace non-finite floats with None so the value is strict JSON"""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _wire_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_wire_value(item) for item in value]
    return value


@dataclass
class NodeResult:
    """Outcome of a single node within one run"""
    inputs: Dict[str, Any]
    output: Any
    execution_time: float
    status: str
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status == STATUS_SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "inputs": _wire_value(self.inputs),
            "output": _wire_value(self.output),
            "executionTime": self.execution_time,
            "status": self.status,
        }
        if self.error is not None:
            result["error"] = self.error
        return result


@dataclass
class ExecutionResult:
    """Result of workflow execution"""
    node_results: Dict[str, NodeResult] = field(default_factory=dict)
    total_execution_time: float = 0.0
    execution_order: List[str] = field(default_factory=list)

    @property
    def errors(self) -> Dict[str, str]:
        return {
            node_id: result.error
            for node_id, result in self.node_results.items()
            if not result.success
        }

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def completed_nodes(self) -> int:
        return sum(1 for result in self.node_results.values() if result.success)

    @property
    def failed_nodes(self) -> int:
        return len(self.node_results) - self.completed_nodes

    def outputs(self) -> Dict[str, Any]:
        """Output value per node id"""
        return {node_id: result.output for node_id, result in self.node_results.items()}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodeResults": {node_id: result.to_dict() for node_id, result in self.node_results.items()},
            "totalExecutionTime": self.total_execution_time,
            "executionOrder": list(self.execution_order),
        }


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000.0, 3)


class WorkflowExecutor:
    """Executes node-based workflows one node at a time"""

    def __init__(self, registry: Optional[NodeRegistry] = None,
                 logger: Optional[Callable[[str], None]] = None):
        """
        Initialize workflow executor.

        Args:
            registry: Executor registry to dispatch through (default: global registry)
            logger: Optional callback receiving human-readable progress lines
        """
        self.registry = registry if registry is not None else get_registry()
        self._sink = logger

    def _log(self, message: str):
        logger.info(message)
        if self._sink is None:
            return
        try:
            self._sink(message)
        except Exception:
            logger.warning("Log sink failed on message: %s", message, exc_info=True)

    async def execute_node(self, node: WorkflowNode, inputs: Dict[str, Any]) -> NodeResult:
        """
        Execute a single node with already resolved inputs.

        Never raises: executor failures are recorded on the returned result.
        """
        start = time.perf_counter()
        executor = self.registry.get_executor(node.type)
        if executor is None:
            error = f"no executor for node kind '{node.type}'"
            self._log(f"Node {node.id} failed: {error}")
            return NodeResult(inputs=inputs, output=None, execution_time=_elapsed_ms(start),
                              status=STATUS_ERROR, error=error)

        self._log(f"Executing node {node.id} ({node.type})")
        context = ExecutionContext(inputs=dict(inputs), log=self._log)
        try:
            output = executor.execute(node.data, context)
            if inspect.isawaitable(output):
                output = await output
        except Exception as e:
            error = str(e) or e.__class__.__name__
            self._log(f"Node {node.id} failed: {error}")
            return NodeResult(inputs=inputs, output=None, execution_time=_elapsed_ms(start),
                              status=STATUS_ERROR, error=error)

        self._log(f"Node {node.id} completed: {describe_value(output)}")
        return NodeResult(inputs=inputs, output=output, execution_time=_elapsed_ms(start),
                          status=STATUS_SUCCESS)

    async def run(self, workflow: Union[Workflow, Dict[str, Any]]) -> ExecutionResult:
        """
        Execute a complete workflow.

        Args:
            workflow: Workflow (or its wire dictionary) to execute

        Returns:
            ExecutionResult with per-node results, order and total time

        Raises:
            CycleError: If the graph has a circular dependency; no node runs
        """
        if isinstance(workflow, dict):
            workflow = Workflow.from_dict(workflow)

        start = time.perf_counter()
        index = GraphIndex.build(workflow)
        order = topological_sort([node.id for node in workflow.nodes], index.outgoing)
        self._log(f"Execution order: {' -> '.join(order)}")

        result = ExecutionResult()
        outputs: Dict[str, Any] = {}

        for node_id in order:
            node = index.node_map.get(node_id)
            if node is None:
                continue

            inputs = resolve_node_inputs(node_id, index, outputs)
            node_result = await self.execute_node(node, inputs)

            result.node_results[node_id] = node_result
            result.execution_order.append(node_id)
            outputs[node_id] = node_result.output

        result.total_execution_time = _elapsed_ms(start)
        self._log(f"Workflow completed in {result.total_execution_time:.2f}ms")
        return result

    def execute_workflow(self, workflow: Union[Workflow, Dict[str, Any]]) -> ExecutionResult:
        """Synchronous wrapper around run(); must not be called from a running event loop"""
        return asyncio.run(self.run(workflow))


async def run_workflow(workflow: Union[Workflow, Dict[str, Any]],
                       logger: Optional[Callable[[str], None]] = None,
                       registry: Optional[NodeRegistry] = None) -> ExecutionResult:
    """Convenience coroutine: execute ``workflow`` with a fresh executor"""
    return await WorkflowExecutor(registry=registry, logger=logger).run(workflow)
