import csv
import os
import subprocess  # nosec B404
from typing import List, Optional


class ProcessQueryError(RuntimeError):
    """Raised when the operating system process list cannot be read."""


def _normalize(name: str) -> str:
    name = os.path.basename(name.strip()).lower()
    if name.endswith(".exe"):
        name = name[: -len(".exe")]
    return name


def _command_name(args: str) -> str:
    """Executable base name from a full ps command line."""
    args = args.strip()
    # Kernel threads have no argv; ps shows them as "[name]"
    if args.startswith("[") and args.endswith("]"):
        return args[1:-1]
    return os.path.basename(args.split()[0])


# ============================================================================
# Process Checker
# ============================================================================


class ProcessChecker:
    """Answers whether a named application process is currently active."""

    def __init__(self, windows: Optional[bool] = None):
        """
        Initialize process checker.

        Args:
            windows: Query with tasklist instead of ps. Defaults to the current platform.
        """
        self.windows = os.name == "nt" if windows is None else windows

    def is_running(self, name: str) -> bool:
        """
        Check for an active process with the given executable name.

        The match is exact and case-insensitive; a trailing ".exe" is ignored
        so "OUTLOOK", "outlook.exe" and "OUTLOOK.EXE" are equivalent.

        Raises:
            ProcessQueryError: If the process list cannot be queried
        """
        wanted = _normalize(name)
        return any(_normalize(process) == wanted for process in self.list_process_names())

    def list_process_names(self) -> List[str]:
        """Return the executable names of all running processes."""
        if self.windows:
            # tasklist writes in the console (OEM) code page
            output = self._run(["tasklist", "/FO", "CSV", "/NH"], encoding="oem")
            return [row[0] for row in csv.reader(output.splitlines()) if row]

        # comm is cut to 15 characters on Linux, so read full command lines first
        try:
            output = self._run(["ps", "-A", "-o", "args="])
            return [_command_name(line) for line in output.splitlines() if line.strip()]
        except ProcessQueryError:
            output = self._run(["ps", "-A", "-o", "comm="])
            return [line.strip() for line in output.splitlines() if line.strip()]

    @staticmethod
    def _run(cmd: List[str], encoding: str = "utf-8") -> str:
        try:
            result = subprocess.run(  # nosec B603
                cmd,
                capture_output=True,
                text=True,
                encoding=encoding,
                errors="replace",
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as e:
            raise ProcessQueryError(f"Could not list running processes with {cmd[0]}: {e}") from e
        return result.stdout
