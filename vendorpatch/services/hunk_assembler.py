"""
Hunk Assembler - Group diff operations into unified diff hunks
"""

from __future__ import annotations

from collections.abc import Sequence

from vendorpatch.models.diff import DiffHunk, DiffOperation, OpKind

DEFAULT_CONTEXT_LINES = 3

_PREFIXES = {
    OpKind.EQUAL: " ",
    OpKind.DELETE: "-",
    OpKind.INSERT: "+",
}


class _OpenHunk:
    """Mutable accumulator for the hunk currently being written"""

    def __init__(self, source_start: int, patch_start: int, context: Sequence[str]):
        self.source_start = source_start
        self.patch_start = patch_start
        self.lines = [f" {line}" for line in context]
        self.source_length = len(context)
        self.patch_length = len(context)

    def add(self, op: DiffOperation, count: int | None = None) -> None:
        lines = op.lines if count is None else op.lines[:count]
        prefix = _PREFIXES[op.kind]
        self.lines.extend(f"{prefix}{line}" for line in lines)
        if op.kind != OpKind.INSERT:
            self.source_length += len(lines)
        if op.kind != OpKind.DELETE:
            self.patch_length += len(lines)

    def build(self) -> DiffHunk:
        return DiffHunk(
            source_start=self.source_start,
            source_length=self.source_length,
            patch_start=self.patch_start,
            patch_length=self.patch_length,
            lines=self.lines,
        )


def generate_hunks(
    operations: Sequence[DiffOperation],
    source: Sequence[str],
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> list[DiffHunk]:
    """
    Convert an operation list into hunks with up to ``context_lines`` of context.

    An equal run between two changes that is no longer than twice the context
    width is written out in full and the changes share one hunk. Longer runs
    get ``context_lines`` of trailing context, close the hunk, and provide the
    leading context of the next one, so hunks never overlap.
    """
    if context_lines < 0:
        raise ValueError(f"context_lines must not be negative, got {context_lines}")

    hunks: list[DiffHunk] = []
    current: _OpenHunk | None = None
    last_index = len(operations) - 1

    for index, op in enumerate(operations):
        if op.kind == OpKind.EQUAL:
            if current is None:
                continue

            if index < last_index and op.source_count <= 2 * context_lines:
                current.add(op)
                continue

            current.add(op, min(context_lines, op.source_count))
            hunks.append(current.build())
            current = None
            continue

        if current is None:
            leading = min(context_lines, op.source_start)
            current = _OpenHunk(
                source_start=op.source_start - leading,
                patch_start=op.patch_start - leading,
                context=source[op.source_start - leading:op.source_start],
            )

        current.add(op)

    if current is not None:
        hunks.append(current.build())

    return hunks
