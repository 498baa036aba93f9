"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_generator import DiffGenerator, render_patch
from .errors import DegenerateSourceError, InvalidInputError, NoDifferenceError, PatchError
from .hunk_assembler import generate_hunks
from .line_diff import compute_line_diff, find_next_matching_line, split_lines
from .patch_writer import suggest_output_path, write_patch
from .vendor_path import extract_vendor_path, trim_vendor_path

__all__ = [
    "ConfigManager",
    "DiffGenerator",
    "render_patch",
    "PatchError",
    "NoDifferenceError",
    "DegenerateSourceError",
    "InvalidInputError",
    "generate_hunks",
    "compute_line_diff",
    "find_next_matching_line",
    "split_lines",
    "suggest_output_path",
    "write_patch",
    "extract_vendor_path",
    "trim_vendor_path",
]
