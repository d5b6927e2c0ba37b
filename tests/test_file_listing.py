"""Tests for directory listing and name filtering."""

import os
from unittest.mock import patch

import pytest

from fs_tools.core.exceptions import NotADirectoryPathError, ReadFailureError
from fs_tools.filesystem.listing import (
    get_files,
    get_files_contains,
    get_files_contains_recursive,
)


class _FailingScanner:
    """Stand-in for os.scandir whose iteration fails."""

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False

    def __iter__(self):
        raise OSError("I/O error")

    def close(self):
        pass


@pytest.fixture
def report_directory(temp_dir):
    """Create files for name-filtering tests."""
    (temp_dir / "report_jan.txt").write_text("jan")
    (temp_dir / "report_feb.txt").write_text("feb")
    (temp_dir / "notes.txt").write_text("notes")
    nested = temp_dir / "archive"
    nested.mkdir()
    (nested / "report_2023.txt").write_text("2023")
    (nested / "summary.txt").write_text("summary")
    return temp_dir


class TestGetFiles:
    """Test file listings."""

    def test_non_recursive(self, sample_file_structure):
        """Test only direct files are listed and subdirectories are excluded."""
        root = str(sample_file_structure)

        result = get_files(root)

        assert set(result) == {
            os.path.join(root, "a.txt"),
            os.path.join(root, "b.txt"),
        }

    def test_recursive(self, sample_file_structure):
        """Test files in subdirectories are included."""
        root = str(sample_file_structure)

        result = get_files(root, recursive=True)

        assert set(result) == {
            os.path.join(root, "a.txt"),
            os.path.join(root, "b.txt"),
            os.path.join(root, "sub", "c.txt"),
        }

    def test_empty_directory(self, temp_dir):
        """Test an empty directory yields an empty list."""
        assert get_files(str(temp_dir)) == []

    def test_path_is_file(self, sample_file_structure):
        """Test listing a file raises NotADirectoryPathError."""
        with pytest.raises(NotADirectoryPathError) as exc_info:
            get_files(str(sample_file_structure / "a.txt"))

        assert "is not a directory" in str(exc_info.value)

    def test_path_missing(self, temp_dir):
        """Test listing a non-existent path raises NotADirectoryPathError."""
        with pytest.raises(NotADirectoryPathError):
            get_files(str(temp_dir / "missing"))

    def test_unreadable_contents(self, temp_dir):
        """Test an enumeration failure raises ReadFailureError."""
        with patch(
            "fs_tools.filesystem.listing.os.scandir", return_value=_FailingScanner()
        ):
            with pytest.raises(ReadFailureError) as exc_info:
                get_files(str(temp_dir))

        assert "Cannot read the contents of" in str(exc_info.value)

    def test_recursive_discards_nested_errors(self, sample_file_structure):
        """Test a failing subdirectory is skipped rather than failing the listing."""
        root = str(sample_file_structure)
        real_scandir = os.scandir

        def fake_scandir(path):
            if os.path.basename(path) == "sub":
                raise PermissionError("denied")
            return real_scandir(path)

        with patch("fs_tools.filesystem.listing.os.scandir", side_effect=fake_scandir):
            result = get_files(root, recursive=True)

        assert set(result) == {
            os.path.join(root, "a.txt"),
            os.path.join(root, "b.txt"),
        }


class TestGetFilesContains:
    """Test name-filtered listings."""

    def test_filters_by_substring(self, report_directory):
        """Test only matching names are kept, in listing order."""
        root = str(report_directory)

        result = get_files_contains(root, "report")

        expected = [f for f in get_files(root) if "report" in os.path.basename(f)]
        assert result == expected
        assert {os.path.basename(f) for f in result} == {
            "report_jan.txt",
            "report_feb.txt",
        }

    def test_case_sensitive(self, report_directory):
        """Test matching is case-sensitive."""
        assert get_files_contains(str(report_directory), "REPORT") == []

    def test_no_match(self, report_directory):
        """Test a filter that matches nothing returns an empty list."""
        assert get_files_contains(str(report_directory), "invoice") == []

    def test_matches_base_name_only(self, temp_dir):
        """Test directory names in the path do not count as matches."""
        nested = temp_dir / "report_dir"
        nested.mkdir()
        (nested / "data.txt").write_text("data")

        assert get_files_contains_recursive(str(temp_dir), "report") == []

    def test_error_propagates(self, temp_dir):
        """Test listing errors reach the caller."""
        with pytest.raises(NotADirectoryPathError):
            get_files_contains(str(temp_dir / "missing"), "report")


class TestGetFilesContainsRecursive:
    """Test recursive name-filtered listings."""

    def test_filters_recursively(self, report_directory):
        """Test matches at every depth are returned."""
        root = str(report_directory)

        result = get_files_contains_recursive(root, "report")

        assert set(result) == {
            os.path.join(root, "report_jan.txt"),
            os.path.join(root, "report_feb.txt"),
            os.path.join(root, "archive", "report_2023.txt"),
        }

    def test_error_propagates(self, temp_dir):
        """Test listing errors reach the caller."""
        file_path = temp_dir / "file.txt"
        file_path.write_text("content")

        with pytest.raises(NotADirectoryPathError):
            get_files_contains_recursive(str(file_path), "file")
