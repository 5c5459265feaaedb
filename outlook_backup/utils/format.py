# ============================================================================
# Utility Functions
# ============================================================================

from datetime import datetime


# Year, month, day, hour, minute, second; unique at one-second granularity
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def format_size(size_bytes: int) -> str:
    """Format bytes to human-readable size."""
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if size_bytes < 1024.0:
            return f"{size_bytes:.2f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.2f} PB"


def format_timestamp(moment: datetime) -> str:
    """Format a moment as a backup folder name, e.g. 20240101_120000."""
    return moment.strftime(TIMESTAMP_FORMAT)
