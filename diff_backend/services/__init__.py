"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .decorations import build_decorations
from .diff_generator import (
    DiffGenerator,
    generate_diff,
    render_side_by_side,
    split_lines,
    summarize,
)

__all__ = [
    "ConfigManager",
    "build_decorations",
    "DiffGenerator",
    "generate_diff",
    "render_side_by_side",
    "split_lines",
    "summarize",
]
