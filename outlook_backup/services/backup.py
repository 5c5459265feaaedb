from pathlib import Path
from typing import Iterable

from outlook_backup.utils.file_processor import FileProcessor
from outlook_backup.utils.format import format_size
from outlook_backup.utils.logger import get_logger


# ============================================================================
# Backup Manager
# ============================================================================

class BackupManager:
    """Handles backup copy operations."""

    @staticmethod
    def copy_all(sources: Iterable[Path], destination_dir: Path, proceed: bool = True) -> bool:
        """
        Copy every existing source into the destination directory.

        Missing sources are skipped with a warning. The first I/O failure
        aborts the remaining copies; items copied before it stay on disk,
        there is no rollback.

        Args:
            sources: Files or folders to copy, in order
            destination_dir: Directory to copy into (created if missing)
            proceed: When False nothing is touched and False is returned

        Returns:
            True if the directory was prepared and every present source copied
        """
        if not proceed:
            return False

        logger = get_logger()

        try:
            destination_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            logger.error(f"Failed to create backup folder: {destination_dir}", exc_info=True)
            return False

        copied = 0
        skipped = 0
        total_size = 0

        for source in sources:
            source = Path(source)
            if not source.exists():
                logger.warning(f"Source not found, skipping: {source}")
                skipped += 1
                continue

            try:
                target = FileProcessor.copy_into(source, destination_dir)
                total_size += FileProcessor.item_size(target)
            except OSError:
                logger.error(f"Failed to copy {source} to {destination_dir}", exc_info=True)
                return False

            logger.debug(f"Copied {source} -> {target}")
            copied += 1

        logger.info(f"Copied {copied} item(s), {format_size(total_size)}; skipped {skipped} missing")
        return True
