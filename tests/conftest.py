"""Shared fixtures for nodeflow tests.

Provides:
- Factories for wire-format nodes, edges and workflows
- The calculator workflow used throughout (10 + 5 -> output)
- A private registry with the optional executors registered
"""

import pytest

from nodeflow.nodes.extra_nodes import register_extra_nodes
from nodeflow.nodes.registry import NodeRegistry


def _node(node_id, node_type, **data):
    return {"id": node_id, "type": node_type, "data": data, "position": {"x": 0, "y": 0}}


def _edge(edge_id, source, target, handle=None):
    edge = {"id": edge_id, "source": source, "target": target}
    if handle is not None:
        edge["targetHandle"] = handle
    return edge


@pytest.fixture
def node():
    """Factory for wire-format nodes: node(id, type, **data)."""
    return _node


@pytest.fixture
def edge():
    """Factory for wire-format edges: edge(id, source, target, handle=None)."""
    return _edge


@pytest.fixture
def calculator_workflow():
    """input1(10) -> math1.inputA, input2(5) -> math1.inputB, math1 -> output1."""
    return {
        "nodes": [
            _node("input1", "inputNode", value=10),
            _node("input2", "inputNode", value=5),
            _node("math1", "mathNode", operation="add"),
            _node("output1", "outputNode"),
        ],
        "edges": [
            _edge("e1", "input1", "math1", "inputA"),
            _edge("e2", "input2", "math1", "inputB"),
            _edge("e3", "math1", "output1"),
        ],
    }


@pytest.fixture
def binary_workflow():
    """Factory: two inputs feeding one binary node of the given type and config."""
    def build(node_type, a, b, **data):
        return {
            "nodes": [
                _node("a", "inputNode", value=a),
                _node("b", "inputNode", value=b),
                _node("op", node_type, **data),
            ],
            "edges": [
                _edge("e1", "a", "op", "inputA"),
                _edge("e2", "b", "op", "inputB"),
            ],
        }
    return build


@pytest.fixture
def unary_workflow():
    """Factory: one input feeding one single-input node of the given type and config."""
    def build(node_type, value, **data):
        return {
            "nodes": [
                _node("src", "inputNode", value=value),
                _node("op", node_type, **data),
            ],
            "edges": [_edge("e1", "src", "op")],
        }
    return build


@pytest.fixture
def extended_registry():
    """Private registry: built-ins plus squareRootNode and wordCountNode."""
    return register_extra_nodes(NodeRegistry())
