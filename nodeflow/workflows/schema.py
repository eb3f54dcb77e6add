#!/usr/bin/env python3
"""
Wire schema for workflow graphs.

Validates graphs coming from the editor or the generation service before
they are handed to the engine.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from nodeflow.engine.data import Workflow, WorkflowEdge, WorkflowNode


class PositionModel(BaseModel):
    x: float = 0
    y: float = 0


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1)
    type: str = Field(min_length=1)
    data: Dict[str, Any] = Field(default_factory=dict)
    position: PositionModel = Field(default_factory=PositionModel)


class EdgeModel(BaseModel):
    # Editor-only flags such as "animated" are accepted and dropped
    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1)
    source: str = Field(min_length=1)
    target: str = Field(min_length=1)
    targetHandle: Optional[str] = None
    sourceHandle: Optional[str] = None


class WorkflowModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nodes: List[NodeModel]
    edges: List[EdgeModel] = Field(default_factory=list)

    @field_validator("nodes")
    @classmethod
    def unique_node_ids(cls, nodes: List[NodeModel]) -> List[NodeModel]:
        seen = set()
        for node in nodes:
            if node.id in seen:
                raise ValueError(f"duplicate node id: {node.id}")
            seen.add(node.id)
        return nodes

    def to_workflow(self) -> Workflow:
        """Convert to the engine's graph dataclasses"""
        return Workflow(
            nodes=[
                WorkflowNode(
                    id=node.id,
                    type=node.type,
                    data=dict(node.data),
                    position={"x": node.position.x, "y": node.position.y},
                )
                for node in self.nodes
            ],
            edges=[
                WorkflowEdge(
                    id=edge.id,
                    source=edge.source,
                    target=edge.target,
                    target_handle=edge.targetHandle,
                    source_handle=edge.sourceHandle,
                )
                for edge in self.edges
            ],
        )


class WorkflowMetadata(BaseModel):
    description: str
    created: str
    nodeCount: int = Field(ge=0)
    edgeCount: int = Field(ge=0)


class GeneratedWorkflow(WorkflowModel):
    """A candidate graph proposed by the generation service"""
    metadata: WorkflowMetadata

    @model_validator(mode="after")
    def counts_match(self) -> "GeneratedWorkflow":
        if self.metadata.nodeCount != len(self.nodes):
            raise ValueError(
                f"metadata.nodeCount is {self.metadata.nodeCount} but workflow has {len(self.nodes)} nodes"
            )
        if self.metadata.edgeCount != len(self.edges):
            raise ValueError(
                f"metadata.edgeCount is {self.metadata.edgeCount} but workflow has {len(self.edges)} edges"
            )
        return self


class GenerateRequest(BaseModel):
    prompt: Optional[str] = None


class GenerateResponse(BaseModel):
    workflow: GeneratedWorkflow
