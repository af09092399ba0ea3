"""Installation engine: places one framework's file and records it."""

import asyncio
import logging
from pathlib import Path

from framework_kit.backup import BackupManager
from framework_kit.catalog import FrameworkCatalog
from framework_kit.config import FrameworkKitConfig
from framework_kit.errors import ConflictError, RegistryLoadError
from framework_kit.integrations.filesystem.abc import FileSystem
from framework_kit.integrations.time.abc import Time
from framework_kit.models.framework import FrameworkDescriptor
from framework_kit.models.installed import InstalledFramework
from framework_kit.models.operations import InstallAction, InstallOptions, InstallResult
from framework_kit.registry import FrameworkRegistry

logger = logging.getLogger(__name__)

MERGE_CONFLICT_START = "<!-- ========== MERGE CONFLICT: New Framework Content Below ========== -->"
MERGE_CONFLICT_HINT = (
    "<!-- Review and integrate the content below, then remove conflict markers -->"
)
MERGE_CONFLICT_END = "<!-- ========== END MERGE CONFLICT ========== -->"


def merge_with_markers(existing: str, incoming: str) -> str:
    """Concatenate both documents around conflict markers for manual reconciliation."""
    return (
        f"{existing}\n\n"
        f"{MERGE_CONFLICT_START}\n"
        f"{MERGE_CONFLICT_HINT}\n\n"
        f"{incoming}\n\n"
        f"{MERGE_CONFLICT_END}\n"
    )


class InstallationEngine:
    """Installs frameworks into the workspace steering directory.

    All installs on one engine run through a single-writer lock, so two
    concurrent installs of the same id cannot both see the target as absent
    or merge twice.
    """

    def __init__(
        self,
        fs: FileSystem,
        time: Time,
        config: FrameworkKitConfig,
        catalog: FrameworkCatalog,
        registry: FrameworkRegistry,
        backups: BackupManager,
    ) -> None:
        self._fs = fs
        self._time = time
        self._config = config
        self._catalog = catalog
        self._registry = registry
        self._backups = backups
        self._lock = asyncio.Lock()

    async def install(
        self, framework_id: str, options: InstallOptions | None = None
    ) -> InstallResult:
        """Install a framework, resolving an existing target per options.

        Args:
            framework_id: Catalog id of the framework
            options: Conflict resolution; defaults to rejecting existing files

        Raises:
            PackageNotFoundError: If framework_id is not in the catalog
            ConflictError: If the target exists and neither overwrite nor merge is set
            OSError: Storage failures, unchanged
        """
        if options is None:
            options = InstallOptions()

        framework = await self._catalog.require(framework_id, "install")
        async with self._lock:
            return await self._install(framework, options)

    async def _install(
        self, framework: FrameworkDescriptor, options: InstallOptions
    ) -> InstallResult:
        target = self._config.target_path(framework)
        exists = await self._fs.file_exists(target)

        if exists and not options.overwrite and not options.merge:
            raise ConflictError(framework.id, str(target))

        backup_path: Path | None = None
        if exists and options.backup:
            backup_path = await self._backups.backup(target)

        if not exists:
            await self._fs.copy_file(self._config.source_path(framework), target)
            action = InstallAction.INSTALLED
        elif options.merge:
            existing = await self._fs.read_text(target)
            incoming = await self._catalog.read_content(framework)
            await self._fs.write_text(target, merge_with_markers(existing, incoming))
            action = InstallAction.MERGED
        else:
            await self._fs.copy_file(self._config.source_path(framework), target)
            action = InstallAction.OVERWRITTEN

        await self._record(framework, target)
        logger.info(
            "%s %s v%s at %s", action.value.capitalize(), framework.id, framework.version, target
        )

        return InstallResult(
            framework_id=framework.id,
            version=framework.version,
            target_path=target,
            action=action,
            backup_path=backup_path,
        )

    async def _record(self, framework: FrameworkDescriptor, target: Path) -> None:
        record = InstalledFramework(
            id=framework.id,
            version=framework.version,
            installed_at=self._time.now().isoformat(),
            customized=False,
        )
        try:
            await self._registry.upsert(record)
        except (OSError, RegistryLoadError):
            # The file is already written; it is left in place and the
            # registry keeps its previous entry.
            logger.error(
                "Wrote %s for %s but failed to update the registry; "
                "registry metadata is now out of date",
                target,
                framework.id,
            )
            raise
