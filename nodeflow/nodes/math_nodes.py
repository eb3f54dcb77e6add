#!/usr/bin/env python3
"""
Numeric nodes: binary arithmetic and comparisons.
"""
from typing import Any, Dict

from .base import ExecutionContext, NodeExecutionError, NodeExecutor, require_input, to_number
from .registry import register_node


@register_node(metadata={"category": "math", "description": "Add, subtract, multiply or divide two inputs"})
class MathNodeExecutor(NodeExecutor):
    """Apply an arithmetic operation to inputA and inputB"""

    node_type = "mathNode"

    def execute(self, data: Dict[str, Any], context: ExecutionContext) -> Any:
        message = "Math node requires both inputs A and B"
        num_a = to_number(require_input(context, "inputA", message))
        num_b = to_number(require_input(context, "inputB", message))
        operation = data.get("operation")

        if operation == "add":
            result = num_a + num_b
        elif operation == "subtract":
            result = num_a - num_b
        elif operation == "multiply":
            result = num_a * num_b
        elif operation == "divide":
            if num_b == 0:
                raise NodeExecutionError("Division by zero")
            result = num_a / num_b
        else:
            raise NodeExecutionError(f"Unknown math operation: {operation}")

        context.log(f"  Math: {num_a} {operation} {num_b} = {result}")
        return result


@register_node(metadata={"category": "logic", "description": "Compare two inputs"})
class ConditionNodeExecutor(NodeExecutor):
    """Compare inputA against inputB and return a boolean"""

    node_type = "conditionNode"

    def execute(self, data: Dict[str, Any], context: ExecutionContext) -> bool:
        message = "Condition node requires both inputs A and B"
        value_a = to_number(require_input(context, "inputA", message))
        value_b = to_number(require_input(context, "inputB", message))
        condition = data.get("condition")

        if condition == "greater":
            result = value_a > value_b
        elif condition == "less":
            result = value_a < value_b
        elif condition == "equal":
            result = value_a == value_b
        else:
            raise NodeExecutionError(f"Unknown condition: {condition}")

        context.log(f"  Condition: {value_a} {condition} {value_b} = {result}")
        return result
