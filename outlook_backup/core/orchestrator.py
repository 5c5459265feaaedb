from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from outlook_backup.core.config import BackupConfig, ParameterValidator
from outlook_backup.core.process_check import ProcessChecker
from outlook_backup.core.volume_locator import VolumeLocator
from outlook_backup.services.backup import BackupManager
from outlook_backup.utils.format import format_timestamp
from outlook_backup.utils.logger import get_logger


class RunOutcome(Enum):
    """Terminal state of a backup run."""

    SUCCESS = "success"
    PROCESS_ACTIVE = "process_active"
    NO_VOLUME = "no_volume"
    COPY_FAILED = "copy_failed"


@dataclass(frozen=True)
class BackupResult:
    outcome: RunOutcome
    destination: Optional[Path] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is RunOutcome.SUCCESS


# ============================================================================
# Backup Orchestrator
# ============================================================================


class BackupOrchestrator:
    """Sequences the process gate, volume lookup and copy for one backup run."""

    def __init__(
        self,
        config: BackupConfig,
        checker: Optional[ProcessChecker] = None,
        locator: Optional[VolumeLocator] = None,
        backup_manager: Optional[BackupManager] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize backup orchestrator.

        Args:
            config: Backup configuration
            checker: Process presence check for the guarded application
            locator: Destination volume locator
            backup_manager: File copier
            clock: Source of the run timestamp
        """
        ParameterValidator.validate(config)
        self.config = config
        self.checker = checker or ProcessChecker()
        self.locator = locator or VolumeLocator()
        self.backup_manager = backup_manager or BackupManager()
        self.clock = clock

    def build_destination(self, volume: str, timestamp: str) -> Path:
        """Compose <volume root>/<base folder>/<timestamp>."""
        return self.locator.root(volume) / self.config.base_folder_name / timestamp

    def run(self, volume: Optional[str] = None) -> BackupResult:
        """
        Execute one backup run. Stops at the first failed step; never retries.

        Args:
            volume: Preferred destination volume identifier

        Returns:
            BackupResult with the terminal outcome and, once built, the destination path
        """
        logger = get_logger()
        timestamp = format_timestamp(self.clock())

        if self.checker.is_running(self.config.guarded_process):
            logger.error(
                f"{self.config.guarded_process} is running. Close it before backing up; no files were copied."
            )
            return BackupResult(RunOutcome.PROCESS_ACTIVE)

        found = self.locator.find_volume(volume)
        if found is None:
            logger.error("No removable drive found. Attach one or pass its drive letter; no files were copied.")
            return BackupResult(RunOutcome.NO_VOLUME)

        destination = self.build_destination(found, timestamp)
        logger.debug(f"Backing up {len(self.config.sources)} item(s) to {destination}")

        if not self.backup_manager.copy_all(self.config.sources, destination, proceed=True):
            logger.error(f"Backup to {destination} failed")
            return BackupResult(RunOutcome.COPY_FAILED, destination)

        logger.info(f"Backup completed: {destination}")
        return BackupResult(RunOutcome.SUCCESS, destination)
