import json
import os
import platform
import re
import subprocess  # nosec B404
from pathlib import Path
from typing import Dict, List, Optional

from outlook_backup.utils.logger import get_logger


_DRIVE_LETTER = re.compile(r"^([A-Za-z]):?\\?$")


def volume_root(volume_id: str, windows: Optional[bool] = None) -> Path:
    """
    Map a volume identifier to the root directory of that volume.

    On Windows a drive letter ("E" or "E:") maps to "E:\\"; anywhere else the
    identifier is taken as a mount point path.
    """
    if windows is None:
        windows = os.name == "nt"
    match = _DRIVE_LETTER.match(volume_id.strip()) if windows else None
    if match:
        return Path(f"{match.group(1).upper()}:\\")
    return Path(volume_id)


# ============================================================================
# Volume Providers
# ============================================================================


class VolumeProvider:
    """Capability interface: enumerate removable volumes attached right now."""

    def list_removable_volumes(self) -> List[str]:
        """Return removable volume identifiers in platform enumeration order."""
        raise NotImplementedError


class WindowsVolumeProvider(VolumeProvider):
    """Lists removable logical disks (DriveType=2) through PowerShell CIM."""

    command = [
        "powershell",
        "-NoProfile",
        "-NonInteractive",
        "-Command",
        "Get-CimInstance Win32_LogicalDisk -Filter 'DriveType=2' | ForEach-Object { $_.DeviceID }",
    ]

    def list_removable_volumes(self) -> List[str]:
        output = _run_query(self.command)
        if output is None:
            return []
        return [line.strip().rstrip(":") for line in output.splitlines() if line.strip()]


class LsblkVolumeProvider(VolumeProvider):
    """Lists mount points of removable block devices reported by lsblk."""

    command = ["lsblk", "-J", "-o", "NAME,RM,MOUNTPOINT"]

    def list_removable_volumes(self) -> List[str]:
        output = _run_query(self.command)
        if output is None:
            return []
        try:
            data = json.loads(output)
        except json.JSONDecodeError as e:
            get_logger().warning(f"Could not parse lsblk output: {e}")
            return []

        mount_points: List[str] = []
        for device in data.get("blockdevices", []):
            self._collect(device, False, mount_points)
        return mount_points

    def _collect(self, device: Dict, parent_removable: bool, mount_points: List[str]) -> None:
        # Older lsblk releases report RM as "1"/"0" strings
        removable = parent_removable or device.get("rm") in (True, 1, "1")
        if removable and device.get("mountpoint"):
            mount_points.append(device["mountpoint"])
        for child in device.get("children", []):
            self._collect(child, removable, mount_points)


def default_volume_provider() -> VolumeProvider:
    """Pick the volume provider for the running operating system."""
    if platform.system().lower() == "windows":
        return WindowsVolumeProvider()
    return LsblkVolumeProvider()


def _run_query(cmd: List[str]) -> Optional[str]:
    """Run an enumeration command; None (after a warning) when it fails."""
    try:
        result = subprocess.run(  # nosec B603
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        get_logger().warning(f"Could not enumerate volumes with {cmd[0]}: {e}")
        return None
    return result.stdout


# ============================================================================
# Volume Locator
# ============================================================================


class VolumeLocator:
    """Finds the destination volume for a backup."""

    def __init__(self, provider: Optional[VolumeProvider] = None, windows: Optional[bool] = None):
        """
        Initialize volume locator.

        Args:
            provider: Source of removable volumes. Defaults to the platform provider.
            windows: Treat identifiers as drive letters. Defaults to the current platform.
        """
        self.provider = provider or default_volume_provider()
        self.windows = windows

    def root(self, volume_id: str) -> Path:
        """Root directory of the given volume."""
        return volume_root(volume_id, self.windows)

    def find_volume(self, preferred: Optional[str] = None) -> Optional[str]:
        """
        Find a destination volume.

        A preferred identifier that exists is returned without scanning.
        Otherwise the first removable volume in enumeration order is used;
        that order is platform-defined, so pass an explicit identifier when
        several removable volumes are attached.

        Args:
            preferred: Volume identifier supplied by the user

        Returns:
            Volume identifier, or None when no removable volume is attached
        """
        logger = get_logger()

        if preferred:
            if self.root(preferred).exists():
                return preferred
            logger.warning(f"Volume {preferred} not found, scanning for a removable drive instead")

        volumes = self.provider.list_removable_volumes()
        if not volumes:
            logger.warning("No removable volume found")
            return None

        logger.debug(f"Removable volumes: {', '.join(volumes)}")
        return volumes[0]
