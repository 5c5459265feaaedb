"""Command-line entry point."""

import argparse
import sys
from typing import List, Optional

from outlook_backup.core.config import BackupConfig
from outlook_backup.core.orchestrator import BackupOrchestrator
from outlook_backup.core.process_check import ProcessQueryError
from outlook_backup.utils.logger import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="outlook-backup",
        description=(
            "Copy Outlook mail data, documents and signatures to a timestamped folder on a removable drive. "
            "Refuses to run while Outlook is open."
        ),
    )
    parser.add_argument(
        "volume",
        nargs="?",
        default=None,
        help="Destination drive letter or mount point (default: first removable drive found)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run a backup; returns the process exit code."""
    args = build_parser().parse_args(argv)

    logger = get_logger()
    logger.configure(log_level="INFO", enable_console=True)

    try:
        orchestrator = BackupOrchestrator(BackupConfig.for_user())
        result = orchestrator.run(args.volume)
    except (ProcessQueryError, ValueError) as e:
        logger.error(str(e))
        return 1

    return 0 if result.succeeded else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
