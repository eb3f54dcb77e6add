"""Unit tests for graph indexing and topological ordering"""

import pytest

from nodeflow.engine.data import GraphIndex, Workflow, WorkflowEdge, WorkflowNode, resolve_node_inputs
from nodeflow.engine.scheduler import CycleError, topological_sort


def build(node_ids, edges):
    workflow = Workflow(
        nodes=[WorkflowNode(id=n, type="outputNode") for n in node_ids],
        edges=[WorkflowEdge(id=f"e{i}", source=s, target=t) for i, (s, t) in enumerate(edges)],
    )
    return workflow, GraphIndex.build(workflow)


def order_of(node_ids, edges):
    _, index = build(node_ids, edges)
    return topological_sort(node_ids, index.outgoing)


def assert_topological(order, edges):
    position = {node_id: i for i, node_id in enumerate(order)}
    for source, target in edges:
        assert position[source] < position[target], f"{source} must run before {target}"


class TestGraphIndex:

    def test_incoming_and_outgoing(self):
        _, index = build(["a", "b", "c"], [("a", "c"), ("b", "c")])

        assert set(index.node_map) == {"a", "b", "c"}
        assert [e.source for e in index.incoming_edges("c")] == ["a", "b"]
        assert [e.target for e in index.outgoing_edges("a")] == ["c"]
        assert index.incoming_edges("a") == []

    def test_dangling_edges_are_kept(self):
        _, index = build(["a"], [("ghost", "a"), ("a", "nowhere")])

        assert [e.source for e in index.incoming_edges("a")] == ["ghost"]
        assert [e.target for e in index.outgoing_edges("a")] == ["nowhere"]


class TestResolveInputs:

    def test_default_slot_and_handles(self):
        workflow = Workflow(
            nodes=[WorkflowNode(id=n, type="outputNode") for n in ("a", "b", "c")],
            edges=[
                WorkflowEdge(id="e1", source="a", target="c", target_handle="inputA"),
                WorkflowEdge(id="e2", source="b", target="c"),
            ],
        )
        inputs = resolve_node_inputs("c", GraphIndex.build(workflow), {"a": 1, "b": 2})
        assert inputs == {"inputA": 1, "input": 2}

    def test_missing_upstream_resolves_to_none(self):
        _, index = build(["a"], [("ghost", "a")])
        assert resolve_node_inputs("a", index, {}) == {"input": None}

    def test_same_slot_last_edge_wins(self):
        _, index = build(["a", "b", "c"], [("a", "c"), ("b", "c")])
        assert resolve_node_inputs("c", index, {"a": "first", "b": "second"}) == {"input": "second"}


class TestTopologicalSort:

    def test_calculator_order(self):
        edges = [("input1", "math1"), ("input2", "math1"), ("math1", "output1")]
        order = order_of(["input1", "input2", "math1", "output1"], edges)
        assert order == ["input2", "input1", "math1", "output1"]

    def test_dependencies_listed_after_dependents_in_input(self):
        edges = [("c", "b"), ("b", "a")]
        order = order_of(["a", "b", "c"], edges)
        assert order == ["c", "b", "a"]

    def test_diamond(self):
        edges = [("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")]
        order = order_of(["d", "c", "b", "a"], edges)
        assert_topological(order, edges)
        assert sorted(order) == ["a", "b", "c", "d"]

    def test_isolated_nodes_included(self):
        order = order_of(["x", "y", "z"], [])
        assert order == ["z", "y", "x"]

    def test_disconnected_components(self):
        edges = [("a", "b"), ("c", "d")]
        order = order_of(["a", "b", "c", "d"], edges)
        assert_topological(order, edges)
        assert len(order) == 4

    def test_deterministic(self):
        edges = [("a", "c"), ("b", "c"), ("c", "d"), ("b", "d")]
        ids = ["a", "b", "c", "d"]
        assert order_of(ids, edges) == order_of(ids, edges)

    def test_long_chain_does_not_recurse(self):
        ids = [f"n{i}" for i in range(5000)]
        edges = list(zip(ids, ids[1:]))
        assert order_of(ids, edges) == ids

    def test_two_node_cycle(self):
        with pytest.raises(CycleError) as exc_info:
            order_of(["a", "b"], [("a", "b"), ("b", "a")])
        assert exc_info.value.node_id == "a"
        assert "Circular dependency detected involving node a" in str(exc_info.value)

    def test_self_loop(self):
        with pytest.raises(CycleError):
            order_of(["a"], [("a", "a")])

    def test_cycle_downstream_of_acyclic_part(self):
        with pytest.raises(CycleError) as exc_info:
            order_of(["s", "a", "b", "c"], [("s", "a"), ("a", "b"), ("b", "c"), ("c", "a")])
        assert exc_info.value.node_id == "a"

    def test_dangling_target_visited(self):
        order = order_of(["a"], [("a", "ghost")])
        assert order == ["a", "ghost"]
