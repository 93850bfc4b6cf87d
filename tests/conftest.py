"""
Shared fixtures for deduplication tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'dedupe' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files:
    - a.txt, b.txt, c.doc with identical content "X"
    - sub/d.txt with the same content, one directory deeper
    - e.txt / f.doc pair with identical content "Y" * 100
    - unique.txt with distinct content
    - ignore.tmp with content "X" (extension not scanned)
    - upper.TXT with content "X" (upper-case extension, not scanned)
    """
    files = {}

    files["a"] = temp_dir / "a.txt"
    files["b"] = temp_dir / "b.txt"
    files["c"] = temp_dir / "c.doc"
    for key in ("a", "b", "c"):
        files[key].write_bytes(b"X")

    subdir = temp_dir / "sub"
    subdir.mkdir()
    files["d"] = subdir / "d.txt"
    files["d"].write_bytes(b"X")

    files["e"] = temp_dir / "e.txt"
    files["f"] = temp_dir / "f.doc"
    files["e"].write_bytes(b"Y" * 100)
    files["f"].write_bytes(b"Y" * 100)

    files["unique"] = temp_dir / "unique.txt"
    files["unique"].write_bytes(b"Z" * 42)

    files["ignored"] = temp_dir / "ignore.tmp"
    files["ignored"].write_bytes(b"X")

    files["upper"] = temp_dir / "upper.TXT"
    files["upper"].write_bytes(b"X")

    return files


@pytest.fixture
def three_copies(temp_dir) -> Dict[str, Path]:
    """a.txt, b.txt and c.doc, all with content "X"."""
    files = {
        "a": temp_dir / "a.txt",
        "b": temp_dir / "b.txt",
        "c": temp_dir / "c.doc",
    }
    for path in files.values():
        path.write_bytes(b"X")
    return files
