"""Models module - Pydantic data models"""

from .diff import DiffHunk, DiffOperation, DiffResult, OpKind
from .patch import DiffRequest, PatchEvent, PatchFileRequest, PatchFileResponse

__all__ = [
    # Diff models
    "OpKind",
    "DiffOperation",
    "DiffHunk",
    "DiffResult",
    # Patch API models
    "DiffRequest",
    "PatchFileRequest",
    "PatchFileResponse",
    "PatchEvent",
]
