"""
Line Diff - Split texts into lines and compute equal/delete/insert runs

The matcher only looks a bounded number of lines ahead on each side when the
two sequences diverge. Output is therefore not a minimal edit script on
inputs with long repeated runs, but the cost per mismatch stays at
O(lookahead^2) and hunk boundaries stay stable across versions.
"""

from __future__ import annotations

from collections.abc import Sequence

from vendorpatch.models.diff import DiffOperation, OpKind

DEFAULT_LOOKAHEAD = 50


def split_lines(text: str) -> list[str]:
    """Split on newline, keeping an empty trailing segment as a line"""
    return text.split("\n")


def find_next_matching_line(
    source: Sequence[str],
    patch: Sequence[str],
    lookahead: int = DEFAULT_LOOKAHEAD,
) -> tuple[int, int]:
    """
    Find the offsets of the next line present in both windows.

    Source offsets are tried from 0 upward and, for each one, patch offsets
    from 0 upward; the first equal pair wins. Only the first ``lookahead``
    lines of each window are inspected. Without a match the full window
    lengths are returned, i.e. everything left is one delete plus one insert.
    """
    if lookahead < 1:
        raise ValueError(f"lookahead must be positive, got {lookahead}")

    source_limit = min(len(source), lookahead)
    patch_limit = min(len(patch), lookahead)

    for source_offset in range(source_limit):
        line = source[source_offset]
        for patch_offset in range(patch_limit):
            if patch[patch_offset] == line:
                return source_offset, patch_offset

    return len(source), len(patch)


def compute_line_diff(
    source: Sequence[str],
    patch: Sequence[str],
    lookahead: int = DEFAULT_LOOKAHEAD,
) -> list[DiffOperation]:
    """Walk both sequences and return the ordered list of diff operations"""
    operations: list[DiffOperation] = []
    source_idx = 0
    patch_idx = 0

    while source_idx < len(source) or patch_idx < len(patch):
        equal_start = source_idx
        patch_equal_start = patch_idx
        while (
            source_idx < len(source)
            and patch_idx < len(patch)
            and source[source_idx] == patch[patch_idx]
        ):
            source_idx += 1
            patch_idx += 1

        if source_idx > equal_start:
            count = source_idx - equal_start
            operations.append(
                DiffOperation(
                    kind=OpKind.EQUAL,
                    source_start=equal_start,
                    source_count=count,
                    patch_start=patch_equal_start,
                    patch_count=count,
                    lines=list(source[equal_start:source_idx]),
                )
            )

        if source_idx >= len(source) and patch_idx >= len(patch):
            break

        source_offset, patch_offset = find_next_matching_line(
            source[source_idx:], patch[patch_idx:], lookahead
        )

        if source_offset > 0:
            operations.append(
                DiffOperation(
                    kind=OpKind.DELETE,
                    source_start=source_idx,
                    source_count=source_offset,
                    patch_start=patch_idx,
                    patch_count=0,
                    lines=list(source[source_idx:source_idx + source_offset]),
                )
            )
            source_idx += source_offset

        if patch_offset > 0:
            operations.append(
                DiffOperation(
                    kind=OpKind.INSERT,
                    source_start=source_idx,
                    source_count=0,
                    patch_start=patch_idx,
                    patch_count=patch_offset,
                    lines=list(patch[patch_idx:patch_idx + patch_offset]),
                )
            )
            patch_idx += patch_offset

    return operations
