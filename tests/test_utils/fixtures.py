"""
Test data and file fixtures.
"""

from pathlib import Path
from typing import List


def create_test_file(directory: Path, name: str, content: bytes = b"0" * 64) -> Path:
    """Create a file with the given content."""
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


def create_test_directory_structure(base_dir: Path, structure: List[str]) -> None:
    """Create a directory structure for testing.

    Args:
        base_dir: Base directory to create structure in
        structure: List of relative paths (files or directories)
    """
    for item in structure:
        path = base_dir / item
        if item.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(item)
