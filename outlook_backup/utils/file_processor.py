import shutil
from pathlib import Path


# ============================================================================
# File Processor
# ============================================================================

class FileProcessor:
    """Handles per-item copy operations into a backup folder."""

    @staticmethod
    def copy_into(source: Path, destination_dir: Path) -> Path:
        """
        Copy a file or directory into destination_dir under its own base name.

        An existing item with the same name is replaced, including a folder
        copy from an earlier run. Files keep their timestamps (shutil.copy2).

        Args:
            source: Existing file or directory to copy
            destination_dir: Directory that receives the copy

        Returns:
            Path to the copied item
        """
        target = destination_dir / source.name

        if source.is_dir():
            if target.is_dir():
                shutil.rmtree(target)
            elif target.exists():
                target.unlink()
            shutil.copytree(source, target)
        else:
            if target.is_dir():
                shutil.rmtree(target)
            shutil.copy2(source, target)

        return target

    @staticmethod
    def item_size(path: Path) -> int:
        """Total size in bytes of a file, or of every file below a directory."""
        if path.is_dir():
            return sum(f.stat().st_size for f in path.rglob("*") if f.is_file())
        return path.stat().st_size
