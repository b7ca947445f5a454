"""Unit tests for the file I/O helpers."""

import pytest
from unittest.mock import patch
from remcli.data import io as io_module
from remcli.data.io import atomic_write, read_text, list_dir
from remcli.recovery import FileOperationError


class TestIO:
    """Test atomic writes and error mapping."""

    def test_atomic_write_and_read(self, tmp_path):
        """Test writing a file and reading it back unchanged."""
        path = tmp_path / "a" / "record.md"
        atomic_write(path, "line one\r\nline two\n", create_dirs=True)
        assert read_text(path) == "line one\r\nline two\n"
        assert [p.name for p in list_dir(path.parent)] == ["record.md"]

    def test_read_failure_is_logged(self, tmp_path):
        """Test that a failed read logs an error before raising."""
        missing = tmp_path / "missing.md"
        with patch.object(io_module, "log") as mock_log:
            with pytest.raises(FileOperationError, match="Failed to read file"):
                read_text(missing)
            mock_log.error.assert_called_once()
            assert str(missing) in mock_log.error.call_args[0][0]

    def test_write_failure_is_logged(self, tmp_path):
        """Test that a write into a missing directory logs and raises."""
        with patch.object(io_module, "log") as mock_log:
            with pytest.raises(FileOperationError):
                atomic_write(tmp_path / "nope" / "record.md", "x")
            mock_log.error.assert_called_once()

    def test_missing_directory_lists_empty(self, tmp_path):
        """Test that listing a missing directory yields nothing."""
        assert list_dir(tmp_path / "absent") == []
