"""FrameworkManager: the consumer-facing lifecycle API.

Presentation layers (the CLI, a tree view) call the read methods to render
and the mutation methods to act, then re-query; nothing is pushed back to
them. Each manager owns its own catalog and registry caches, so separate
instances never share state.
"""

import logging
from pathlib import Path

from framework_kit.backup import BackupManager
from framework_kit.catalog import FrameworkCatalog
from framework_kit.context import FrameworkKitContext
from framework_kit.customization import CustomizationDetector
from framework_kit.installer import InstallationEngine
from framework_kit.models.framework import FrameworkCategory, FrameworkDescriptor
from framework_kit.models.installed import InstalledFramework
from framework_kit.models.operations import (
    FrameworkUpdate,
    InstallOptions,
    InstallResult,
    UpdateResult,
)
from framework_kit.registry import FrameworkRegistry
from framework_kit.updates import FrameworkUpdater, UpdatePlanner

logger = logging.getLogger(__name__)


class FrameworkManager:
    """Discovery, installation, update and removal of frameworks."""

    def __init__(self, ctx: FrameworkKitContext) -> None:
        self._ctx = ctx
        self.catalog = FrameworkCatalog(ctx.fs, ctx.time, ctx.config)
        self.registry = FrameworkRegistry(ctx.fs, ctx.time, ctx.config, self.catalog)
        self.backups = BackupManager(ctx.fs, ctx.time)
        self.detector = CustomizationDetector(ctx.fs, ctx.config, self.catalog)
        self.engine = InstallationEngine(
            ctx.fs, ctx.time, ctx.config, self.catalog, self.registry, self.backups
        )
        self.planner = UpdatePlanner(self.catalog, self.registry)
        self.updater = FrameworkUpdater(
            self.catalog,
            self.registry,
            self.detector,
            self.engine,
            self.planner,
            ctx.prompter,
        )

    # Read API

    async def list_available_frameworks(self) -> list[FrameworkDescriptor]:
        return await self.catalog.list_all()

    async def get_framework_by_id(self, framework_id: str) -> FrameworkDescriptor | None:
        return await self.catalog.get_by_id(framework_id)

    async def search_frameworks(self, query: str) -> list[FrameworkDescriptor]:
        return await self.catalog.search(query)

    async def get_frameworks_by_category(
        self, category: FrameworkCategory
    ) -> list[FrameworkDescriptor]:
        return await self.catalog.by_category(category)

    async def is_framework_installed(self, framework_id: str) -> bool:
        return await self.registry.is_installed(framework_id)

    async def get_installed_frameworks(self) -> list[FrameworkDescriptor]:
        return await self.registry.list_installed_frameworks()

    async def get_installed_metadata(self, framework_id: str) -> InstalledFramework | None:
        return await self.registry.get_installed(framework_id)

    async def check_for_updates(self) -> list[FrameworkUpdate]:
        return await self.planner.check_for_updates()

    async def list_backups(self, framework_id: str) -> list[Path]:
        """Backups taken of a framework's installed file, oldest first."""
        framework = await self.catalog.require(framework_id, "list backups of")
        return await self.backups.list_backups(self._ctx.config.target_path(framework))

    # Mutation API

    async def install_framework(
        self, framework_id: str, options: InstallOptions | None = None
    ) -> InstallResult:
        return await self.engine.install(framework_id, options)

    async def update_framework(self, framework_id: str) -> UpdateResult:
        return await self.updater.update_framework(framework_id)

    async def update_all_frameworks(self) -> list[UpdateResult]:
        return await self.updater.update_all_frameworks()

    async def mark_framework_as_customized(self, framework_id: str) -> InstalledFramework | None:
        return await self.registry.mark_customized(framework_id)

    async def remove_framework(self, framework_id: str) -> None:
        """Delete a framework's file and its registry entry.

        A file that is already gone is not an error.

        Raises:
            PackageNotFoundError: If framework_id is not in the catalog
        """
        framework = await self.catalog.require(framework_id, "remove")
        target = self._ctx.config.target_path(framework)
        await self._ctx.fs.delete_file(target)
        await self.registry.remove(framework_id)
        logger.info("Removed %s from %s", framework_id, target)

    def clear_caches(self) -> None:
        """Drop cached catalog and registry documents (manual refresh)."""
        self.catalog.invalidate()
        self.registry.invalidate()
