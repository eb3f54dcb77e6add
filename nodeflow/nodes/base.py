#!/usr/bin/env python3
"""
Base classes for node executors.

Defines the executor capability every node kind implements, the per-node
execution context, and the coercion helpers shared by the built-in executors.
"""
import json
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional, Union


LogSink = Callable[[str], None]


class NodeExecutionError(ValueError):
    """Raised by an executor when a node cannot produce an output"""
    pass


def _discard(message: str) -> None:
    pass


@dataclass
class ExecutionContext:
    """Resolved inputs for one node plus a sink for human-readable log lines"""
    inputs: Dict[str, Any] = field(default_factory=dict)
    log: LogSink = _discard

    def get(self, name: str) -> Optional[Any]:
        """Get an input value, or None if the slot is unconnected"""
        return self.inputs.get(name)


class NodeExecutor(ABC):
    """
    Base class for all node executors.

    One executor exists per node kind. Executors are stateless: everything a
    run needs arrives through the node's data and the execution context, and
    everything it produces leaves through the return value.
    """

    node_type: str = ""

    @abstractmethod
    def execute(self, data: Dict[str, Any],
                context: ExecutionContext) -> Union[Any, Awaitable[Any]]:
        """
        Execute the node's operation.

        Args:
            data: Node configuration (the node's ``data`` record)
            context: Resolved inputs and logging sink

        Returns:
            The node's output value, or an awaitable resolving to it

        Raises:
            NodeExecutionError: If the node cannot produce an output
        """
        pass

    def get_title(self) -> str:
        """Get display title for this executor"""
        return self.__class__.__name__.replace("Executor", "")

    def get_description(self) -> str:
        """Get description of what this executor does"""
        return (self.__doc__ or "").strip()


def require_input(context: ExecutionContext, name: str, message: str) -> Any:
    """Return a required input or raise NodeExecutionError with ``message``"""
    value = context.get(name)
    if value is None:
        raise NodeExecutionError(message)
    return value


def to_number(value: Any) -> Union[int, float]:
    """
    Coerce an input value to a number.

    Booleans become 1/0, numeric strings are parsed, blank strings become 0
    and anything that cannot be read as a number becomes NaN.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if "_" in text:
            return math.nan
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return math.nan
        # Only the spelled-out "Infinity" reads as infinite; "inf" and "nan" do not
        if math.isfinite(number) or text.lstrip("+-") == "Infinity":
            return number
        return math.nan
    return math.nan


def describe_value(value: Any) -> str:
    """JSON text for log lines, falling back to repr() for values json cannot encode"""
    try:
        return json.dumps(value, default=str)
    except (TypeError, ValueError):
        return repr(value)


def to_text(value: Any) -> str:
    """Coerce an input value to text"""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)
