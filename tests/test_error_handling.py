"""Tests for fatal errors during a folder read."""

from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

from sml_reader.errors import MaxRecursionDepthError, SMLReaderError
from sml_reader.ingestion import SMLFolderReader, parse_yaml, read_sml_objects

WriteObject = Callable[..., Path]


class TestMalformedYAMLSyntax:
    """Tests for malformed files failing the whole read."""

    def test_parse_invalid_syntax(self) -> None:
        """Test parse_yaml raises on invalid syntax."""
        with pytest.raises(yaml.YAMLError):
            parse_yaml("object_type: [unclosed\n")

    def test_parse_multiple_documents(self) -> None:
        """Test parse_yaml rejects multi-document content."""
        with pytest.raises(yaml.YAMLError):
            parse_yaml("a: 1\n---\nb: 2\n")

    @pytest.mark.asyncio
    async def test_bad_file_fails_read(
        self, tmp_path: Path, write_object: WriteObject
    ) -> None:
        """Test one malformed file fails the read even with valid siblings."""
        write_object("catalog.yml", "catalog", "C", "c1")
        write_object("dim/age.yml", "dimension", "Age", "dim.age")
        (tmp_path / "dim" / "broken.yml").write_text(
            'object_type: dimension\nlabel: "unclosed quote\n', encoding="utf-8"
        )

        with pytest.raises(yaml.YAMLError):
            await SMLFolderReader().read(tmp_path)

    @pytest.mark.asyncio
    async def test_error_notes_failing_file(self, tmp_path: Path) -> None:
        """Test the parser error names the file it came from."""
        bad = tmp_path / "dim" / "broken.yml"
        bad.parent.mkdir()
        bad.write_text("{unclosed: 1\n", encoding="utf-8")

        with pytest.raises(yaml.YAMLError) as exc_info:
            await SMLFolderReader().read(tmp_path)

        assert exc_info.value.__notes__ == [f"while reading {bad}"]

    @pytest.mark.asyncio
    async def test_bad_file_in_sibling_folder(
        self, tmp_path: Path, write_object: WriteObject
    ) -> None:
        """Test failures in concurrent sibling folders surface unwrapped."""
        for i in range(5):
            write_object(f"ok_{i}/dim.yml", "dimension", "D", f"d{i}")
        (tmp_path / "bad_a").mkdir()
        (tmp_path / "bad_a" / "x.yaml").write_text("key: [1, 2\n", encoding="utf-8")
        (tmp_path / "bad_b").mkdir()
        (tmp_path / "bad_b" / "y.yml").write_text("{unclosed: 1\n", encoding="utf-8")

        with pytest.raises(yaml.YAMLError):
            await SMLFolderReader().read(tmp_path)

    def test_sync_wrapper_propagates(self, tmp_path: Path) -> None:
        """Test read_sml_objects raises the parser error unchanged."""
        (tmp_path / "bad.yml").write_text("{unclosed", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            read_sml_objects(tmp_path)


class TestFilesystemErrors:
    """Tests for listing failures."""

    @pytest.mark.asyncio
    async def test_missing_root(self, tmp_path: Path) -> None:
        """Test a missing root folder raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            await SMLFolderReader().read(tmp_path / "does-not-exist")

    @pytest.mark.asyncio
    async def test_root_is_a_file(self, tmp_path: Path) -> None:
        """Test a file given as root raises NotADirectoryError."""
        file_path = tmp_path / "catalog.yml"
        file_path.write_text("object_type: catalog\n", encoding="utf-8")
        with pytest.raises(NotADirectoryError):
            await SMLFolderReader().read(file_path)

    @pytest.mark.asyncio
    async def test_undecodable_file(self, tmp_path: Path) -> None:
        """Test a non UTF-8 .yml file fails the read."""
        binary = tmp_path / "binary.yml"
        binary.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(UnicodeDecodeError) as exc_info:
            await SMLFolderReader().read(tmp_path)
        assert exc_info.value.__notes__ == [f"while reading {binary}"]


class TestErrorTypes:
    """Tests for the reader exception hierarchy."""

    def test_max_depth_is_reader_error(self) -> None:
        """Test MaxRecursionDepthError derives from SMLReaderError."""
        error = MaxRecursionDepthError("/models/a/b", 100)
        assert isinstance(error, SMLReaderError)
        assert error.depth == 100
        assert error.path == Path("/models/a/b")
        assert "/models/a/b" in str(error)
