"""Patch generation errors"""

from __future__ import annotations


class PatchError(Exception):
    """Base class for conditions that prevent a patch from being produced"""


class NoDifferenceError(PatchError):
    """Source and patched contents are identical"""

    def __init__(self, file_path: str = ""):
        self.file_path = file_path
        where = f": {file_path}" if file_path else ""
        super().__init__(f"source and patched files do not have different content{where}")


class DegenerateSourceError(PatchError):
    """Source content is empty"""

    def __init__(self, file_path: str = ""):
        self.file_path = file_path
        where = f": {file_path}" if file_path else ""
        super().__init__(f"source file is empty{where}")


class InvalidInputError(PatchError):
    """Source/patched/output paths failed validation"""
