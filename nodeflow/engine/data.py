#!/usr/bin/env python3
"""
Graph data model for node-based workflows.

Holds the node/edge records exchanged with the editor, the per-run graph
index, and input resolution between nodes.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

DEFAULT_INPUT = "input"


@dataclass
class WorkflowNode:
    """A unit of computation in the graph"""
    id: str
    type: str
    data: Dict[str, Any] = field(default_factory=dict)
    position: Dict[str, float] = field(default_factory=lambda: {"x": 0, "y": 0})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkflowNode":
        """Deserialize node from dictionary"""
        position = data.get("position") or {}
        return cls(
            id=data["id"],
            type=data["type"],
            data=dict(data.get("data") or {}),
            position={"x": position.get("x", 0), "y": position.get("y", 0)},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize node to dictionary"""
        return {
            "id": self.id,
            "type": self.type,
            "data": self.data,
            "position": self.position,
        }


@dataclass
class WorkflowEdge:
    """A data-flow link from one node's output to another node's input slot"""
    id: str
    source: str
    target: str
    target_handle: Optional[str] = None
    source_handle: Optional[str] = None

    @property
    def input_name(self) -> str:
        """Name of the input slot this edge feeds"""
        return self.target_handle or DEFAULT_INPUT

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkflowEdge":
        """Deserialize edge from dictionary"""
        return cls(
            id=data["id"],
            source=data["source"],
            target=data["target"],
            target_handle=data.get("targetHandle"),
            source_handle=data.get("sourceHandle"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize edge to dictionary"""
        edge = {"id": self.id, "source": self.source, "target": self.target}
        if self.target_handle is not None:
            edge["targetHandle"] = self.target_handle
        if self.source_handle is not None:
            edge["sourceHandle"] = self.source_handle
        return edge


@dataclass
class Workflow:
    """A set of nodes plus the edges between them"""
    nodes: List[WorkflowNode] = field(default_factory=list)
    edges: List[WorkflowEdge] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Workflow":
        return cls(
            nodes=[WorkflowNode.from_dict(n) for n in data.get("nodes", [])],
            edges=[WorkflowEdge.from_dict(e) for e in data.get("edges", [])],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }


@dataclass
class GraphIndex:
    """Lookups built once per run from the raw node and edge lists"""
    node_map: Dict[str, WorkflowNode]
    incoming: Dict[str, List[WorkflowEdge]]
    outgoing: Dict[str, List[WorkflowEdge]]

    @classmethod
    def build(cls, workflow: Workflow) -> "GraphIndex":
        """
        Index a workflow.

        Edges referencing unknown node ids are kept; they resolve to absent
        inputs at execution time.
        """
        node_map = {node.id: node for node in workflow.nodes}
        incoming: Dict[str, List[WorkflowEdge]] = {}
        outgoing: Dict[str, List[WorkflowEdge]] = {}

        for edge in workflow.edges:
            incoming.setdefault(edge.target, []).append(edge)
            outgoing.setdefault(edge.source, []).append(edge)

        return cls(node_map=node_map, incoming=incoming, outgoing=outgoing)

    def incoming_edges(self, node_id: str) -> List[WorkflowEdge]:
        return self.incoming.get(node_id, [])

    def outgoing_edges(self, node_id: str) -> List[WorkflowEdge]:
        return self.outgoing.get(node_id, [])


def resolve_node_inputs(node_id: str, index: GraphIndex,
                        outputs: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Resolve all inputs for a node by following its incoming edges.

    Args:
        node_id: Node to resolve inputs for
        index: Graph index of the running workflow
        outputs: Outputs recorded so far, keyed by node id

    Returns:
        Dictionary of input slot name to value. A slot fed by a node with
        no recorded output gets None; when two edges feed the same slot the
        later edge wins.
    """
    resolved_inputs: Dict[str, Any] = {}
    for edge in index.incoming_edges(node_id):
        resolved_inputs[edge.input_name] = outputs.get(edge.source)
    return resolved_inputs
