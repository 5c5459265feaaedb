from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple


DEFAULT_BASE_FOLDER_NAME = "OutlookBackups"
DEFAULT_GUARDED_PROCESS = "OUTLOOK.EXE"


def default_sources(home: Path) -> Tuple[Path, ...]:
    """
    Build the fixed list of items backed up from a user profile.

    Args:
        home: The user's profile directory

    Returns:
        Mail data file, two documents and the signature folder, in copy order
    """
    return (
        home / "AppData" / "Local" / "Microsoft" / "Outlook" / "Outlook.pst",
        home / "Documents" / "Contacts.xlsx",
        home / "Documents" / "Notes.docx",
        home / "AppData" / "Roaming" / "Microsoft" / "Signatures",
    )


# ============================================================================
# Configuration Classes
# ============================================================================


@dataclass(frozen=True)
class BackupConfig:
    """Configuration for a backup run."""

    sources: Tuple[Path, ...] = field(default_factory=tuple)
    base_folder_name: str = DEFAULT_BASE_FOLDER_NAME
    guarded_process: str = DEFAULT_GUARDED_PROCESS

    @classmethod
    def for_user(cls, home: Optional[Path] = None) -> "BackupConfig":
        """Create the default configuration for the current (or given) user profile."""
        return cls(sources=default_sources(home or Path.home()))


# ============================================================================
# Parameter Validator
# ============================================================================


class ParameterValidator:
    """Validates backup configuration."""

    @staticmethod
    def validate(config: BackupConfig) -> None:
        """Validate all parameters in the configuration."""
        ParameterValidator.validate_sources(config.sources)
        ParameterValidator.validate_base_folder_name(config.base_folder_name)
        ParameterValidator.validate_guarded_process(config.guarded_process)

    @staticmethod
    def validate_sources(sources: Tuple[Path, ...]) -> None:
        """Validate the source list: non-empty and absolute paths only."""
        if not sources:
            raise ValueError("sources must contain at least one path")
        for source in sources:
            if not Path(source).is_absolute():
                raise ValueError(f"source paths must be absolute, got {source}")

    @staticmethod
    def validate_base_folder_name(base_folder_name: str) -> None:
        """Validate the base folder name is a single path segment."""
        if not base_folder_name or not base_folder_name.strip():
            raise ValueError("base_folder_name must not be empty")
        if "/" in base_folder_name or "\\" in base_folder_name:
            raise ValueError(f"base_folder_name must be a single folder name, got {base_folder_name}")

    @staticmethod
    def validate_guarded_process(guarded_process: str) -> None:
        if not guarded_process or not guarded_process.strip():
            raise ValueError("guarded_process must not be empty")
