"""Test configuration and fixtures for fs-tools."""

import pytest


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def sample_file_structure(temp_dir):
    """Create a sample file structure for listing and copy tests."""
    (temp_dir / "a.txt").write_text("alpha")
    (temp_dir / "b.txt").write_text("bravo" * 20)

    subdir = temp_dir / "sub"
    subdir.mkdir()
    (subdir / "c.txt").write_text("charlie")

    return temp_dir


@pytest.fixture
def in_temp_dir(temp_dir, monkeypatch):
    """Run the test with the temporary directory as working directory."""
    monkeypatch.chdir(temp_dir)
    return temp_dir
