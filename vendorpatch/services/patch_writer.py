"""
Patch Writer - Write unified diff patches for single vendor files
"""

from __future__ import annotations

import time
from pathlib import Path

from vendorpatch.models.diff import DiffResult
from vendorpatch.services.diff_generator import DiffGenerator
from vendorpatch.services.errors import InvalidInputError
from vendorpatch.services.vendor_path import trim_vendor_path

ALLOWED_EXTENSIONS = frozenset({
    ".php", ".js", ".ts", ".css", ".scss",
    ".html", ".twig", ".xml", ".json", ".yml",
    ".yaml", ".md", ".txt", ".sql", ".sh",
    ".vue", ".jsx", ".tsx", ".less", ".sass",
})


def validate_file_extensions(source_path: str | Path, patched_path: str | Path):
    """Both files must share an extension; uncommon ones only warn"""
    source_ext = Path(source_path).suffix.lower()
    patched_ext = Path(patched_path).suffix.lower()

    if source_ext and source_ext not in ALLOWED_EXTENSIONS:
        print(f"[PatchWriter] Warning: Uncommon file extension for source: {source_ext}")
    if patched_ext and patched_ext not in ALLOWED_EXTENSIONS:
        print(f"[PatchWriter] Warning: Uncommon file extension for patched: {patched_ext}")

    if source_ext != patched_ext:
        raise InvalidInputError(
            f"source and patched files have different extensions: {source_ext} vs {patched_ext}"
        )


def validate_inputs(
    source_path: str | Path,
    patched_path: str | Path,
    output_path: str | Path | None,
):
    """Check a source/patched/output triple before any diffing happens"""
    if not output_path or not str(output_path).strip():
        raise InvalidInputError("output path cannot be empty")

    source = Path(source_path)
    patched = Path(patched_path)
    output = Path(output_path)

    if not source.exists():
        raise InvalidInputError(f"source path does not exist: {source}")
    if not patched.exists():
        raise InvalidInputError(f"patched path does not exist: {patched}")
    if not source.is_file() or not patched.is_file():
        raise InvalidInputError("source and patched paths must both be files")
    if source.resolve() == patched.resolve():
        raise InvalidInputError("source and patched paths cannot be the same")
    if output.is_dir():
        raise InvalidInputError(f"output path exists and is a directory: {output}")

    validate_file_extensions(source, patched)


def suggest_output_path(
    source_path: str | Path,
    patches_dir: str | Path = "artifacts/patches",
    now: float | None = None,
) -> Path:
    """<patches_dir>/<provider>/<package>/<unix-ts>-<stem>.patch"""
    source = Path(source_path)
    timestamp = int(time.time() if now is None else now)
    base = Path.cwd() / Path(patches_dir)
    trimmed = Path(trim_vendor_path(str(source_path)))
    if trimmed.is_absolute():
        trimmed = trimmed.relative_to(trimmed.anchor)
    return base / trimmed / f"{timestamp}-{source.stem}.patch"


def resolve_output_path(output_path: str | Path, patches_dir: str | Path) -> Path:
    """Absolute output path, which must stay inside ``patches_dir``"""
    base = (Path.cwd() / Path(patches_dir)).resolve()
    output = Path(output_path)
    if not output.is_absolute():
        output = base / output
    output = output.resolve()
    if not output.is_relative_to(base):
        raise InvalidInputError(f"output path must be inside {base}: {output_path}")
    return output


def write_patch(
    source_path: str | Path,
    patched_path: str | Path,
    output_path: str | Path,
    generator: DiffGenerator | None = None,
) -> DiffResult:
    """Validate, diff and write the patch file; returns the diff result"""
    validate_inputs(source_path, patched_path, output_path)
    generator = generator or DiffGenerator()

    print(f"[PatchWriter] Processing: {Path(source_path).name}")
    source_content = Path(source_path).read_text(encoding="utf-8")
    patched_content = Path(patched_path).read_text(encoding="utf-8")

    result = generator.generate_diff(source_content, patched_content, str(source_path))

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.unified_diff, encoding="utf-8")
    print(f"[PatchWriter] Patch saved to {output} ({len(result.hunks)} hunks)")

    return result
