"""Patch API data models"""

from __future__ import annotations

from pydantic import BaseModel

from .diff import DiffHunk


class DiffRequest(BaseModel):
    """Request for an in-memory diff"""

    file_path: str
    original_content: str
    new_content: str


class PatchFileRequest(BaseModel):
    """Request to write a patch file from two files on disk"""

    source_path: str
    patched_path: str
    output_path: str | None = None  # Defaults to the suggested path


class PatchFileResponse(BaseModel):
    """Result of writing a patch file"""

    output_path: str
    logical_path: str
    hunks: int


class PatchEvent(BaseModel):
    """SSE stream event"""

    type: str  # "header", "hunk", "done", "error"
    header: str | None = None
    hunk: DiffHunk | None = None
    metadata: dict | None = None
    done: bool = False
    error: str | None = None
