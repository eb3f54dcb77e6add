#!/usr/bin/env python3
"""
CLI interface for node-based workflows.

Provides command-line interface for executing, validating and generating workflows.
"""
import argparse
import json
import sys
from pathlib import Path

from nodeflow.engine.executor import WorkflowExecutor
from nodeflow.engine.scheduler import CycleError
from nodeflow.nodes.extra_nodes import register_extra_nodes
from nodeflow.nodes.registry import NodeRegistry
from nodeflow.utils.common import format_duration, print_section, save_json, setup_logging
from nodeflow.utils.config import get_config_manager
from nodeflow.workflows.generator import GeneratorError, WorkflowGenerator
from nodeflow.workflows.serialization import WorkflowFormatError, WorkflowSerializer
from nodeflow.workflows.validation import validate_workflow


def build_registry() -> NodeRegistry:
    """Built-in executors plus the optional ones, isolated from the global registry"""
    return register_extra_nodes(NodeRegistry())


def list_nodes(args) -> int:
    """List all available node types"""
    registry = build_registry()

    print("Available Node Types:")
    print("=" * 60)

    # Group by category
    categories = {}
    for node_type in registry.list_node_types():
        metadata = registry.get_node_metadata(node_type)
        categories.setdefault(metadata.get("category", "other"), []).append((node_type, metadata))

    for category in sorted(categories.keys()):
        print(f"\n{category.upper()}:")
        for node_type, metadata in sorted(categories[category], key=lambda item: item[0]):
            description = metadata.get("description", "")
            print(f"  {node_type:20} - {description}")
    return 0


def _load(path_arg: str):
    workflow_path = Path(path_arg)
    if not workflow_path.exists():
        print(f"Error: Workflow file not found: {workflow_path}", file=sys.stderr)
        return None
    try:
        return WorkflowSerializer().load_workflow(workflow_path)
    except WorkflowFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return None


def _run(workflow, output=None) -> int:
    executor = WorkflowExecutor(registry=build_registry(), logger=print)
    try:
        result = executor.execute_workflow(workflow)
    except CycleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_section("Execution Results")
    print(f"Success: {result.success}")
    print(f"Total Nodes: {len(result.node_results)}")
    print(f"Completed: {result.completed_nodes}")
    print(f"Failed: {result.failed_nodes}")
    print(f"Execution Time: {format_duration(result.total_execution_time)}")

    print("\nOutputs:")
    for node_id in result.execution_order:
        node_result = result.node_results[node_id]
        if node_result.success:
            print(f"  {node_id}: {json.dumps(node_result.output, default=str)}")
        else:
            print(f"  {node_id}: ERROR {node_result.error}")

    if output:
        output_path = Path(output)
        save_json(result.to_dict(), output_path)
        print(f"\nResults saved to: {output_path}")

    return 0 if result.success else 1


def execute_workflow(args) -> int:
    """Execute a workflow from JSON file"""
    workflow = _load(args.workflow)
    if workflow is None:
        return 1
    if not workflow.nodes:
        print("Error: No nodes found in workflow", file=sys.stderr)
        return 1

    print(f"Executing workflow: {Path(args.workflow).name}")
    print(f"Nodes: {len(workflow.nodes)}, Edges: {len(workflow.edges)}")
    print("-" * 60)
    return _run(workflow, args.output)


def validate_workflow_file(args) -> int:
    """Validate a workflow file"""
    workflow = _load(args.workflow)
    if workflow is None:
        return 1

    print(f"Validating workflow: {Path(args.workflow).name}")
    print("-" * 60)

    errors = validate_workflow(workflow, build_registry())
    if errors:
        print("Validation Errors:")
        for error in errors:
            print(f"  - {error}")
        return 1

    print("Workflow is valid")
    print(f"  Nodes: {len(workflow.nodes)}")
    print(f"  Edges: {len(workflow.edges)}")
    return 0


def generate_workflow(args) -> int:
    """Ask the generation service for a workflow and print it"""
    interactive = getattr(sys.stdin, "isatty", lambda: False)()
    config = get_config_manager().get_generator_config(prompt=interactive)
    try:
        generated = WorkflowGenerator(config).generate(args.prompt)
    except GeneratorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps({"workflow": generated.model_dump()}, indent=2))
    if args.run:
        return _run(generated.to_workflow())
    return 0


def serve(args) -> int:
    """Run the HTTP service"""
    import uvicorn

    config = get_config_manager().load()
    uvicorn.run(
        "nodeflow.web.server:app",
        host=args.host or config.server.host,
        port=args.port or config.server.port,
        reload=args.reload,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nodeflow",
        description="Evaluate node-based workflow graphs",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose logging')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('list-nodes', help='List all available node types')

    execute_parser = subparsers.add_parser('execute', help='Execute a workflow')
    execute_parser.add_argument('workflow', help='Path to workflow JSON file')
    execute_parser.add_argument('--output', help='Save execution results to file')

    validate_parser = subparsers.add_parser('validate', help='Validate a workflow file')
    validate_parser.add_argument('workflow', help='Path to workflow JSON file')

    generate_parser = subparsers.add_parser('generate', help='Generate a workflow from a description')
    generate_parser.add_argument('prompt', help='Description of the workflow to build')
    generate_parser.add_argument('--run', action='store_true', help='Execute the generated workflow')

    serve_parser = subparsers.add_parser('serve', help='Run the HTTP service')
    serve_parser.add_argument('--host', help='Host to bind to')
    serve_parser.add_argument('--port', type=int, help='Port to bind to')
    serve_parser.add_argument('--reload', action='store_true', help='Enable auto-reload')

    return parser


COMMANDS = {
    'list-nodes': list_nodes,
    'execute': execute_workflow,
    'validate': validate_workflow_file,
    'generate': generate_workflow,
    'serve': serve,
}


def main(argv=None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(verbose=args.verbose, level="WARNING")
    return COMMANDS[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
