#!/usr/bin/env python3
"""
Optional executors that are not part of the default registry.

Callers that want them register them on a registry of their own with
``register_extra_nodes``.
"""
import math
import re
from typing import Any, Dict

from .base import ExecutionContext, NodeExecutionError, NodeExecutor, require_input, to_number, to_text
from .registry import NodeRegistry


class SquareRootNodeExecutor(NodeExecutor):
    """Calculate the square root of the input"""

    node_type = "squareRootNode"

    def execute(self, data: Dict[str, Any], context: ExecutionContext) -> float:
        num = to_number(require_input(context, "input", "Square Root node requires an input"))
        if num < 0:
            raise NodeExecutionError("Cannot calculate square root of a negative number")

        result = math.sqrt(num)
        context.log(f"  Square Root: sqrt({num}) = {result}")
        return result


class WordCountNodeExecutor(NodeExecutor):
    """Count words and characters in the input text"""

    node_type = "wordCountNode"

    def execute(self, data: Dict[str, Any], context: ExecutionContext) -> Dict[str, Any]:
        text = to_text(require_input(context, "input", "Word count node requires input"))
        words = text.split()

        result = {
            "wordCount": len(words),
            "charCount": len(text),
            "charCountNoSpaces": len(re.sub(r"\s", "", text)),
            "words": words,
        }
        context.log(f'  Word count: "{text}" -> {result["wordCount"]} words, {result["charCount"]} chars')
        return result


EXTRA_NODES = {
    SquareRootNodeExecutor: {"category": "math", "description": "Square root of a non-negative number"},
    WordCountNodeExecutor: {"category": "text", "description": "Count words and characters"},
}


def register_extra_nodes(registry: NodeRegistry) -> NodeRegistry:
    """Register the optional executors on ``registry`` and return it"""
    for executor_class, metadata in EXTRA_NODES.items():
        registry.register(executor_class(), metadata)
    return registry
