#!/usr/bin/env python3
"""
Workflow serialization format.

Reads workflow graphs in the editor's JSON shape:
``{"nodes": [{id, type, data, position}], "edges": [{id, source, target, targetHandle?, sourceHandle?}]}``
"""
import json
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from nodeflow.engine.data import Workflow
from nodeflow.workflows.schema import WorkflowModel


class WorkflowFormatError(ValueError):
    """Raised when workflow data does not match the expected shape"""
    pass


class WorkflowSerializer:
    """Handles workflow serialization and deserialization"""

    def serialize_workflow(self, workflow: Workflow) -> Dict[str, Any]:
        """Serialize a workflow to dictionary format"""
        return workflow.to_dict()

    def deserialize_workflow(self, workflow_data: Any) -> Workflow:
        """
        Deserialize a workflow from dictionary format.

        Args:
            workflow_data: Dictionary representation of workflow

        Returns:
            Validated Workflow

        Raises:
            WorkflowFormatError: If the data is not a valid workflow
        """
        if not isinstance(workflow_data, dict):
            raise WorkflowFormatError("Workflow must be a JSON object")
        try:
            model = WorkflowModel.model_validate(workflow_data)
        except ValidationError as e:
            raise WorkflowFormatError(f"Invalid workflow: {e}") from e
        return model.to_workflow()

    def load_workflow(self, workflow_path: Path) -> Workflow:
        """
        Load workflow from JSON file.

        Raises:
            WorkflowFormatError: If the file is not valid JSON or not a valid workflow
        """
        try:
            with open(workflow_path, 'r', encoding='utf-8') as f:
                workflow_data = json.load(f)
        except json.JSONDecodeError as e:
            raise WorkflowFormatError(f"Invalid JSON in {workflow_path}: {e}") from e

        # Accept generator output saved verbatim: {"workflow": {...}}
        if isinstance(workflow_data, dict) and "nodes" not in workflow_data and "workflow" in workflow_data:
            workflow_data = workflow_data["workflow"]

        return self.deserialize_workflow(workflow_data)
