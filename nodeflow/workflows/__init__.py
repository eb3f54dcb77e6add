"""
Workflow input and output: wire schema, JSON loading, the generation
service client and the command-line interface.
"""
from .serialization import WorkflowFormatError, WorkflowSerializer
from .validation import validate_workflow

__all__ = [
    'WorkflowFormatError',
    'WorkflowSerializer',
    'validate_workflow',
]
