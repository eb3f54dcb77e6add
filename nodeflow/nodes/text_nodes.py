#!/usr/bin/env python3
"""
Text transform nodes.
"""
from typing import Any, Dict, Union

from .base import ExecutionContext, NodeExecutionError, NodeExecutor, require_input, to_text
from .registry import register_node


@register_node(metadata={"category": "text", "description": "Uppercase, lowercase, reverse or measure text"})
class TextNodeExecutor(NodeExecutor):
    """Transform the input coerced to text"""

    node_type = "textNode"

    def execute(self, data: Dict[str, Any], context: ExecutionContext) -> Union[str, int]:
        text = to_text(require_input(context, "input", "Text node requires input"))
        operation = data.get("operation")

        if operation == "uppercase":
            result = text.upper()
        elif operation == "lowercase":
            result = text.lower()
        elif operation == "reverse":
            result = text[::-1]
        elif operation == "length":
            result = len(text)
        else:
            raise NodeExecutionError(f"Unknown text operation: {operation}")

        context.log(f'  Text: "{text}" -> {operation} -> "{result}"')
        return result
