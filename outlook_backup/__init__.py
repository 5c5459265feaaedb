"""
outlook_backup - Copy Outlook data files to a timestamped folder on a removable drive.
"""

__version__ = "0.1.0"

# Package-level exports for convenience
from outlook_backup.cli import main
from outlook_backup.core.config import BackupConfig, ParameterValidator, default_sources
from outlook_backup.core.orchestrator import BackupOrchestrator, BackupResult, RunOutcome
from outlook_backup.core.process_check import ProcessChecker, ProcessQueryError
from outlook_backup.core.volume_locator import (
    LsblkVolumeProvider,
    VolumeLocator,
    VolumeProvider,
    WindowsVolumeProvider,
    volume_root,
)
from outlook_backup.services.backup import BackupManager
from outlook_backup.utils.file_processor import FileProcessor
from outlook_backup.utils.format import format_size, format_timestamp


__all__ = [
    "BackupConfig",
    "ParameterValidator",
    "default_sources",
    "BackupOrchestrator",
    "BackupResult",
    "RunOutcome",
    "ProcessChecker",
    "ProcessQueryError",
    "VolumeLocator",
    "VolumeProvider",
    "WindowsVolumeProvider",
    "LsblkVolumeProvider",
    "volume_root",
    "BackupManager",
    "FileProcessor",
    "format_size",
    "format_timestamp",
    "main",
]
