"""
conftest.py
-----------
Shared pytest fixtures for pathmorph tests.
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from pathmorph.core import Change


@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_files(tmp_dir):
    """Create files in tmp_dir: make_files("a.txt", "b.txt") -> [paths]."""
    def _make(*names, content="content"):
        paths = []
        for name in names:
            path = tmp_dir / name
            path.write_text(content if content is not None else name)
            paths.append(path)
        return paths
    return _make


@pytest.fixture
def change():
    """A change whose proposed side differs from its original."""
    return Change(old=Path("/data/in/photo(2).jpeg"), new=Path("/data/in/photo.jpeg"))
