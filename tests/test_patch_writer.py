import pytest

from vendorpatch.services.diff_generator import DiffGenerator
from vendorpatch.services.errors import DegenerateSourceError, InvalidInputError, NoDifferenceError
from vendorpatch.services.patch_writer import (
    resolve_output_path,
    suggest_output_path,
    validate_file_extensions,
    validate_inputs,
    write_patch,
)


@pytest.fixture
def files(tmp_path):
    source = tmp_path / "source.php"
    patched = tmp_path / "patched.php"
    source.write_text("<?php echo 'test';", encoding="utf-8")
    patched.write_text("<?php echo 'modified';", encoding="utf-8")
    existing_dir = tmp_path / "existing_dir"
    existing_dir.mkdir()
    return {
        "source": source,
        "patched": patched,
        "output": tmp_path / "output.patch",
        "dir": existing_dir,
        "root": tmp_path,
    }


class TestValidateInputs:
    def test_valid_inputs(self, files):
        validate_inputs(files["source"], files["patched"], files["output"])

    @pytest.mark.parametrize(
        "source, patched, output, message",
        [
            ("missing.php", "patched", "output", "source path does not exist"),
            ("source", "missing.php", "output", "patched path does not exist"),
            ("source", "source", "output", "source and patched paths cannot be the same"),
            ("source", "patched", "", "output path cannot be empty"),
            ("source", "patched", "dir", "output path exists and is a directory"),
            ("dir", "patched", "output", "must both be files"),
        ],
    )
    def test_invalid_inputs(self, files, source, patched, output, message):
        def resolve(key):
            if not key:
                return ""
            return files[key] if key in files else files["root"] / key

        with pytest.raises(InvalidInputError) as excinfo:
            validate_inputs(resolve(source), resolve(patched), resolve(output))

        assert message in str(excinfo.value)


class TestValidateFileExtensions:
    @pytest.mark.parametrize(
        "source, patched",
        [
            ("test.php", "test2.php"),
            ("test.js", "test2.js"),
            ("test.twig", "test2.twig"),
            ("test", "test2"),
            ("Test.PHP", "test.php"),
        ],
    )
    def test_matching_extensions(self, source, patched):
        validate_file_extensions(source, patched)

    @pytest.mark.parametrize("source, patched", [("test.php", "test.js"), ("test.php", "test")])
    def test_different_extensions(self, source, patched):
        with pytest.raises(InvalidInputError, match="different extensions"):
            validate_file_extensions(source, patched)

    def test_uncommon_extension_only_warns(self, capsys):
        validate_file_extensions("schema.graphql", "schema2.graphql")

        assert "Uncommon file extension for source: .graphql" in capsys.readouterr().out


class TestSuggestOutputPath:
    def test_vendor_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        path = suggest_output_path(
            "vendor/shopware/core/Framework/Plugin/PluginManager.php", now=1700000000
        )

        expected = tmp_path / "artifacts" / "patches" / "shopware" / "core"
        assert path == expected / "1700000000-PluginManager.patch"

    def test_non_vendor_file_keeps_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        path = suggest_output_path("src/Controller/TestController.php", "out", now=5)

        assert path.as_posix().endswith("out/src/Controller/TestController.php/5-TestController.patch")

    def test_absolute_patches_dir(self, tmp_path):
        path = suggest_output_path("vendor/symfony/console/Command/Command.php", tmp_path, now=1)

        assert path == tmp_path / "symfony" / "console" / "1-Command.patch"


    def test_absolute_non_vendor_source_nests_under_patches_dir(self, tmp_path):
        source = tmp_path / "project" / "src" / "File.php"

        path = suggest_output_path(source, tmp_path / "patches", now=1)

        relative_source = source.relative_to(source.anchor)
        assert path == tmp_path / "patches" / relative_source / "1-File.patch"
        assert path.is_relative_to(tmp_path / "patches")


class TestResolveOutputPath:
    def test_relative_path_is_joined_to_patches_dir(self, tmp_path):
        assert resolve_output_path("a/b.patch", tmp_path) == (tmp_path / "a" / "b.patch").resolve()

    def test_absolute_path_inside_patches_dir(self, tmp_path):
        output = tmp_path / "nested" / "x.patch"

        assert resolve_output_path(output, tmp_path) == output.resolve()

    @pytest.mark.parametrize("output", ["../x.patch", "/etc/x.patch"])
    def test_path_outside_patches_dir_is_rejected(self, tmp_path, output):
        with pytest.raises(InvalidInputError, match="output path must be inside"):
            resolve_output_path(output, tmp_path / "patches")


class TestWritePatch:
    def test_writes_patch_file(self, tmp_path):
        vendor_dir = tmp_path / "vendor" / "shopware" / "core"
        vendor_dir.mkdir(parents=True)
        source = vendor_dir / "Test.php"
        source.write_text("<?php\necho 'original';", encoding="utf-8")
        patched = tmp_path / "Test.php"
        patched.write_text("<?php\necho 'modified';", encoding="utf-8")
        output = tmp_path / "patches" / "nested" / "test.patch"

        result = write_patch(source, patched, output)

        assert output.read_text(encoding="utf-8") == result.unified_diff
        assert result.unified_diff.startswith(
            "--- a/vendor/shopware/core/Test.php\n+++ b/vendor/shopware/core/Test.php\n"
        )
        assert "-echo 'original';\n+echo 'modified';\n" in result.unified_diff

    def test_uses_given_generator(self, files):
        files["source"].write_text("a\nb\nc", encoding="utf-8")
        files["patched"].write_text("a\nx\nc", encoding="utf-8")

        result = write_patch(files["source"], files["patched"], files["output"], DiffGenerator(context_lines=0))

        assert result.hunks[0].lines == ["-b", "+x"]

    def test_identical_files_write_nothing(self, files):
        files["patched"].write_text("<?php echo 'test';", encoding="utf-8")

        with pytest.raises(NoDifferenceError):
            write_patch(files["source"], files["patched"], files["output"])

        assert not files["output"].exists()

    def test_empty_source_writes_nothing(self, files):
        files["source"].write_text("", encoding="utf-8")

        with pytest.raises(DegenerateSourceError):
            write_patch(files["source"], files["patched"], files["output"])

        assert not files["output"].exists()
