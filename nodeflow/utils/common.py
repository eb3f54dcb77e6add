#!/usr/bin/env python3
"""
Common utilities for nodeflow entry points.
"""
import json
import logging
from pathlib import Path
from typing import Any, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def setup_logging(verbose: bool = False, level: Optional[str] = None):
    """Configure root logging for a command-line entry point"""
    if verbose:
        resolved = logging.DEBUG
    else:
        resolved = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)


def format_duration(milliseconds: float) -> str:
    """Format a duration in milliseconds for display"""
    if milliseconds < 1000:
        return f"{milliseconds:.2f}ms"
    seconds = milliseconds / 1000.0
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds % 60:04.1f}s"


def print_section(title: str, width: int = 60):
    """Print a formatted section header"""
    print("\n" + "=" * width)
    if title:
        print(title)
        print("=" * width)


def save_json(data: Any, path: Path, indent: int = 2):
    """Save data as JSON file"""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, ensure_ascii=False, default=str)


def load_json(path: Path) -> Any:
    """Load JSON file"""
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)
