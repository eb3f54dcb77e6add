#!/usr/bin/env python3
"""
Source and sink nodes: bring values into a workflow and probe results out.
"""
from typing import Any, Dict

from .base import ExecutionContext, NodeExecutor, describe_value
from .registry import register_node


@register_node(metadata={"category": "input", "description": "Emit a fixed number or string"})
class InputNodeExecutor(NodeExecutor):
    """Emit the configured value verbatim"""

    node_type = "inputNode"

    def execute(self, data: Dict[str, Any], context: ExecutionContext) -> Any:
        value = data.get("value")
        context.log(f"  Input node generating value: {value}")
        return value


@register_node(metadata={"category": "output", "description": "Display the final result"})
class OutputNodeExecutor(NodeExecutor):
    """Pass the connected input through as the node's own output"""

    node_type = "outputNode"

    def execute(self, data: Dict[str, Any], context: ExecutionContext) -> Any:
        value = context.get("input")
        context.log(f"  Output: {describe_value(value)}")
        return value
