#!/usr/bin/env python3
"""
HTTP service for the workflow editor.

Exposes the node catalogue, validation, execution and workflow generation
as a REST API.
"""
import logging
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.concurrency import run_in_threadpool
import uvicorn

from nodeflow.engine.executor import WorkflowExecutor
from nodeflow.engine.scheduler import CycleError
from nodeflow.nodes.extra_nodes import register_extra_nodes
from nodeflow.nodes.registry import NodeRegistry
from nodeflow.utils.common import setup_logging
from nodeflow.utils.config import get_config_manager
from nodeflow.workflows.generator import GeneratorError, WorkflowGenerator
from nodeflow.workflows.schema import GenerateRequest, WorkflowModel
from nodeflow.workflows.validation import validate_workflow

logger = logging.getLogger(__name__)

app = FastAPI(title="nodeflow")

# Private registry: extending it never leaks into the global default
registry = register_extra_nodes(NodeRegistry())


@app.get("/api/nodes")
async def list_nodes():
    """Get all available node types"""
    nodes_info: List[Dict[str, Any]] = []
    for node_type in registry.list_node_types():
        executor = registry.get_executor(node_type)
        metadata = registry.get_node_metadata(node_type)
        nodes_info.append({
            "type": node_type,
            "title": executor.get_title(),
            "description": metadata.get("description") or executor.get_description(),
            "category": metadata.get("category", "other"),
        })
    return {"nodes": nodes_info}


@app.post("/api/workflow/validate")
async def validate(request: WorkflowModel):
    """Validate a workflow"""
    errors = validate_workflow(request.to_workflow(), registry)
    return {"valid": len(errors) == 0, "errors": errors}


@app.post("/api/workflow/execute")
async def execute(request: WorkflowModel):
    """Execute a workflow and return per-node results"""
    executor = WorkflowExecutor(registry=registry)
    try:
        result = await executor.run(request.to_workflow())
    except CycleError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return result.to_dict()


@app.post("/api/generate-workflow")
async def generate_workflow(request: GenerateRequest):
    """Generate a candidate workflow from a text prompt"""
    if not request.prompt or not request.prompt.strip():
        raise HTTPException(status_code=400, detail="Prompt is required")

    config = get_config_manager().get_generator_config(prompt=False)
    try:
        generator = WorkflowGenerator(config)
        workflow = await run_in_threadpool(generator.generate, request.prompt)
    except GeneratorError as e:
        logger.error("Error generating workflow: %s", e)
        raise HTTPException(status_code=502, detail="Failed to generate workflow")

    return {"workflow": workflow.model_dump()}


def main():
    """Run the web server"""
    import argparse
    parser = argparse.ArgumentParser(description="nodeflow HTTP service")
    parser.add_argument("--host", help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    args = parser.parse_args()
    config = get_config_manager().load()
    setup_logging(level=config.log_level)

    uvicorn.run(
        "nodeflow.web.server:app",
        host=args.host or config.server.host,
        port=args.port or config.server.port,
        reload=args.reload
    )


if __name__ == "__main__":
    main()
