"""
Shared pytest fixtures and configuration.
"""

import shutil
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from outlook_backup.core.config import BackupConfig


LOGGER_USERS = [
    "outlook_backup.services.backup.get_logger",
    "outlook_backup.core.volume_locator.get_logger",
    "outlook_backup.core.orchestrator.get_logger",
    "outlook_backup.cli.get_logger",
]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    # Cleanup
    if temp_path.exists():
        shutil.rmtree(temp_path)


@pytest.fixture
def mock_logger(mocker):
    """Replace the application logger everywhere it is looked up."""
    logger = MagicMock()
    for target in LOGGER_USERS:
        mocker.patch(target, return_value=logger)
    return logger


@pytest.fixture
def profile_dir(temp_dir):
    """A fake user profile with two small documents."""
    profile = temp_dir / "profile"
    profile.mkdir()
    (profile / "a.txt").write_bytes(b"alpha\n")
    (profile / "b.txt").write_bytes(b"bravo\x00\xff\n")
    return profile


@pytest.fixture
def backup_config(profile_dir):
    """A BackupConfig pointing at the two documents in profile_dir."""
    return BackupConfig(sources=(profile_dir / "a.txt", profile_dir / "b.txt"))
