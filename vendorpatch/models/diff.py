"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class OpKind(str, Enum):
    """Kind of a line diff operation"""

    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


class DiffOperation(BaseModel):
    """A maximal run of equal, deleted or inserted lines"""

    model_config = ConfigDict(frozen=True)

    kind: OpKind
    source_start: int  # 0-indexed
    source_count: int
    patch_start: int  # 0-indexed
    patch_count: int
    lines: list[str]

    def source_lines(self) -> list[str]:
        """Lines this operation contributes to the source side"""
        return [] if self.kind == OpKind.INSERT else list(self.lines)

    def patch_lines(self) -> list[str]:
        """Lines this operation contributes to the patched side"""
        return [] if self.kind == OpKind.DELETE else list(self.lines)


class DiffHunk(BaseModel):
    """A single change hunk in a unified diff"""

    model_config = ConfigDict(frozen=True)

    source_start: int  # 0-indexed first line of the hunk
    source_length: int
    patch_start: int  # 0-indexed first line of the hunk
    patch_length: int
    lines: list[str]  # prefixed with " ", "-" or "+"

    @property
    def header(self) -> str:
        # An empty side points at the line before the hunk, as diff -u does
        source_line = self.source_start + 1 if self.source_length else self.source_start
        patch_line = self.patch_start + 1 if self.patch_length else self.patch_start
        return f"@@ -{source_line},{self.source_length} +{patch_line},{self.patch_length} @@"

    def render(self) -> str:
        """Header and body, every line terminated by a newline"""
        return "".join(f"{line}\n" for line in [self.header, *self.lines])


class DiffResult(BaseModel):
    """Complete diff result for a file"""

    file_path: str
    logical_path: str  # path written into the ---/+++ headers
    hunks: list[DiffHunk]
    unified_diff: str  # Standard unified diff format
    added_lines: int = 0
    removed_lines: int = 0
