"""
Diff Generator Service - Generate unified diff patches for vendor modifications
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vendorpatch.models.diff import DiffHunk, DiffOperation, DiffResult, OpKind
from vendorpatch.services.errors import DegenerateSourceError, NoDifferenceError
from vendorpatch.services.hunk_assembler import DEFAULT_CONTEXT_LINES, generate_hunks
from vendorpatch.services.line_diff import DEFAULT_LOOKAHEAD, compute_line_diff, split_lines
from vendorpatch.services.vendor_path import extract_vendor_path

if TYPE_CHECKING:
    from vendorpatch.services.config_manager import ConfigManager


def render_header(logical_path: str) -> str:
    """``---``/``+++`` header lines for a patch"""
    return f"--- a/{logical_path}\n+++ b/{logical_path}\n"


def _diff_hunks(
    source_content: str,
    patched_content: str,
    context_lines: int,
    lookahead: int,
) -> tuple[list[DiffOperation], list[DiffHunk]]:
    source = split_lines(source_content)
    patched = split_lines(patched_content)
    # A final newline on both sides terminates the last line, it is not a line
    if source_content.endswith("\n") and patched_content.endswith("\n"):
        source.pop()
        patched.pop()
    operations = compute_line_diff(source, patched, lookahead)
    return operations, generate_hunks(operations, source, context_lines)


def render_patch(
    source_path: str,
    source_content: str,
    patched_content: str,
    *,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    lookahead: int = DEFAULT_LOOKAHEAD,
) -> str:
    """Render a unified diff, or an empty string when the contents are identical"""
    if source_content == patched_content:
        return ""
    if not source_content:
        raise DegenerateSourceError(source_path)

    _, hunks = _diff_hunks(source_content, patched_content, context_lines, lookahead)
    body = "".join(hunk.render() for hunk in hunks)
    return render_header(extract_vendor_path(source_path)) + body


class DiffGenerator:
    """Generate unified diffs for vendor file modifications"""

    def __init__(
        self,
        context_lines: int = DEFAULT_CONTEXT_LINES,
        lookahead: int = DEFAULT_LOOKAHEAD,
    ):
        if context_lines < 0:
            raise ValueError(f"context_lines must not be negative, got {context_lines}")
        if lookahead < 1:
            raise ValueError(f"lookahead must be positive, got {lookahead}")
        self.context_lines = context_lines
        self.lookahead = lookahead

    @classmethod
    def from_config(cls, config_manager: ConfigManager) -> DiffGenerator:
        """Build a generator from the ``diff`` config section"""
        context_lines, lookahead = config_manager.diff_settings()
        return cls(context_lines=context_lines, lookahead=lookahead)

    def generate_diff(
        self,
        original_content: str,
        new_content: str,
        file_path: str,
    ) -> DiffResult:
        """Generate structured diff from original and new content"""
        if not original_content:
            raise DegenerateSourceError(file_path)
        if original_content == new_content:
            raise NoDifferenceError(file_path)

        operations, hunks = _diff_hunks(
            original_content, new_content, self.context_lines, self.lookahead
        )
        logical_path = extract_vendor_path(file_path)
        unified = render_header(logical_path) + "".join(hunk.render() for hunk in hunks)

        return DiffResult(
            file_path=file_path,
            logical_path=logical_path,
            hunks=hunks,
            unified_diff=unified,
            added_lines=sum(op.patch_count for op in operations if op.kind == OpKind.INSERT),
            removed_lines=sum(op.source_count for op in operations if op.kind == OpKind.DELETE),
        )

    def generate_patch(
        self,
        original_content: str,
        new_content: str,
        file_path: str,
    ) -> str:
        """Patch text only; raises like :meth:`generate_diff`"""
        return self.generate_diff(original_content, new_content, file_path).unified_diff
