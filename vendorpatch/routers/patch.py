"""Patch API endpoints"""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import APIRouter, HTTPException
from sse_starlette.sse import EventSourceResponse

from vendorpatch.models.diff import DiffResult
from vendorpatch.models.patch import DiffRequest, PatchEvent, PatchFileRequest, PatchFileResponse
from vendorpatch.services.config_manager import ConfigManager
from vendorpatch.services.diff_generator import DiffGenerator, render_header
from vendorpatch.services.errors import NoDifferenceError, PatchError
from vendorpatch.services.patch_writer import (
    resolve_output_path,
    suggest_output_path,
    write_patch,
)

router = APIRouter()


def get_diff_generator() -> DiffGenerator:
    """Generator configured from the current ``diff`` settings"""
    try:
        return DiffGenerator.from_config(ConfigManager.get_instance())
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Invalid diff configuration: {e}")


def to_http_error(error: PatchError) -> HTTPException:
    """Map patch errors onto HTTP status codes"""
    if isinstance(error, NoDifferenceError):
        return HTTPException(status_code=409, detail=str(error))
    return HTTPException(status_code=400, detail=str(error))


def iter_patch_events(generator: DiffGenerator, request: DiffRequest) -> Iterator[PatchEvent]:
    """Header, one event per hunk, then done; a failure yields a single error event"""
    try:
        result = generator.generate_diff(
            request.original_content, request.new_content, request.file_path
        )
    except PatchError as e:
        yield PatchEvent(type="error", error=str(e))
        return

    yield PatchEvent(type="header", header=render_header(result.logical_path))
    for hunk in result.hunks:
        yield PatchEvent(type="hunk", hunk=hunk)
    yield PatchEvent(
        type="done",
        done=True,
        metadata={
            "logical_path": result.logical_path,
            "hunks": len(result.hunks),
            "added_lines": result.added_lines,
            "removed_lines": result.removed_lines,
        },
    )


@router.post("/diff", response_model=DiffResult)
async def create_diff(request: DiffRequest) -> DiffResult:
    """Diff two in-memory contents"""
    generator = get_diff_generator()
    try:
        return generator.generate_diff(
            request.original_content, request.new_content, request.file_path
        )
    except PatchError as e:
        raise to_http_error(e)


@router.post("/stream")
async def stream_diff(request: DiffRequest):
    """Diff two in-memory contents, streaming hunks as SSE events"""
    generator = get_diff_generator()

    async def event_generator():
        for event in iter_patch_events(generator, request):
            yield {"event": "message", "data": event.model_dump_json()}

    return EventSourceResponse(event_generator())


@router.post("/file", response_model=PatchFileResponse)
async def create_patch_file(request: PatchFileRequest) -> PatchFileResponse:
    """Diff two files on disk and write the patch file"""
    config_manager = ConfigManager.get_instance()
    generator = get_diff_generator()

    patches_dir = config_manager.patches_dir()
    requested = request.output_path or suggest_output_path(request.source_path, patches_dir)

    try:
        output_path = str(resolve_output_path(requested, patches_dir))
        result = write_patch(request.source_path, request.patched_path, output_path, generator)
    except PatchError as e:
        raise to_http_error(e)
    except (OSError, UnicodeDecodeError) as e:
        raise HTTPException(status_code=500, detail=f"Failed to write patch: {e}")

    return PatchFileResponse(
        output_path=output_path,
        logical_path=result.logical_path,
        hunks=len(result.hunks),
    )
