"""
nodeflow utilities

Configuration management and shared helpers for the command-line and HTTP
entry points.
"""
from .config import get_config_manager, ConfigManager, NodeflowConfig, GeneratorConfig, ServerConfig
from .common import (
    setup_logging,
    format_duration,
    print_section,
    save_json,
    load_json,
)

__all__ = [
    'get_config_manager',
    'ConfigManager',
    'NodeflowConfig',
    'GeneratorConfig',
    'ServerConfig',
    'setup_logging',
    'format_duration',
    'print_section',
    'save_json',
    'load_json',
]
