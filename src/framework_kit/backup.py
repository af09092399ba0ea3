"""Timestamped backups of files about to be overwritten."""

import logging
from datetime import UTC, datetime
from pathlib import Path

from framework_kit.integrations.filesystem.abc import FileSystem
from framework_kit.integrations.time.abc import Time

logger = logging.getLogger(__name__)

BACKUP_MARKER = ".backup-"

# Sortable and free of ':' so it is valid on every file system
BACKUP_TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S-%fZ"


def backup_path_for(path: Path, at: datetime) -> Path:
    """Sibling path for a backup of ``path`` taken at ``at``."""
    stamp = at.astimezone(UTC).strftime(BACKUP_TIMESTAMP_FORMAT)
    return path.with_name(f"{path.name}{BACKUP_MARKER}{stamp}")


class BackupManager:
    """Copies files to timestamped siblings and lists them for recovery.

    Restoring is a manual step: copy a listed backup back over the original.
    """

    def __init__(self, fs: FileSystem, time: Time) -> None:
        self._fs = fs
        self._time = time

    async def backup(self, path: Path) -> Path:
        """Copy path to a timestamped sibling and return the new path.

        The original is never modified or deleted.

        Raises:
            FileNotFoundError: If path does not exist
        """
        destination = backup_path_for(path, self._time.now())
        await self._fs.copy_file(path, destination)
        logger.info("Backed up %s to %s", path, destination.name)
        return destination

    async def list_backups(self, path: Path) -> list[Path]:
        """Backups of path, oldest first."""
        prefix = f"{path.name}{BACKUP_MARKER}"
        names = await self._fs.list_files(path.parent)
        return [path.parent / name for name in sorted(names) if name.startswith(prefix)]
