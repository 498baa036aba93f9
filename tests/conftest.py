import pytest

from vendorpatch.models.diff import OpKind
from vendorpatch.services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    """Isolate every test in its own config directory"""
    directory = tmp_path / "config"
    monkeypatch.setenv("VENDORPATCH_CONFIG_DIR", str(directory))
    ConfigManager.reset_instance()
    yield directory
    ConfigManager.reset_instance()


def rebuild(operations):
    """Source-side and patch-side lines recovered from an operation list"""
    source, patched = [], []
    for op in operations:
        source.extend(op.source_lines())
        patched.extend(op.patch_lines())
    return source, patched


def assert_well_formed(operations):
    for op in operations:
        assert op.lines, "zero-length operation"
        if op.kind == OpKind.INSERT:
            assert op.source_count == 0 and op.patch_count == len(op.lines)
        elif op.kind == OpKind.DELETE:
            assert op.patch_count == 0 and op.source_count == len(op.lines)
        else:
            assert op.source_count == op.patch_count == len(op.lines)
    for prev, nxt in zip(operations, operations[1:]):
        assert prev.kind != nxt.kind
        assert nxt.source_start == prev.source_start + prev.source_count
        assert nxt.patch_start == prev.patch_start + prev.patch_count
