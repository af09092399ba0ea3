"""Manifest catalog: the canonical list of installable frameworks."""

import logging

from framework_kit.cache import TimedCache
from framework_kit.config import FrameworkKitConfig
from framework_kit.errors import CatalogLoadError, PackageNotFoundError
from framework_kit.integrations.filesystem.abc import FileSystem
from framework_kit.integrations.time.abc import Time
from framework_kit.io.manifest import parse_manifest
from framework_kit.models.framework import (
    FrameworkCategory,
    FrameworkDescriptor,
    FrameworkManifest,
)

logger = logging.getLogger(__name__)


class FrameworkCatalog:
    """Loads the catalog manifest once and answers lookups from memory.

    The loaded manifest is kept until invalidate() is called. Concurrent
    first-time callers may each load the manifest; whichever finishes last
    populates the cache, which only costs a duplicate read.
    """

    def __init__(self, fs: FileSystem, time: Time, config: FrameworkKitConfig) -> None:
        self._fs = fs
        self._config = config
        self._cache: TimedCache[FrameworkManifest] = TimedCache(clock=time.monotonic)

    async def load(self) -> FrameworkManifest:
        """Return the manifest, reading it from storage on first use.

        Raises:
            CatalogLoadError: If the manifest is missing, unreadable or malformed
        """
        cached = self._cache.get()
        if cached is not None:
            return cached

        manifest_path = self._config.manifest_path
        try:
            text = await self._fs.read_text(manifest_path)
        except OSError as e:
            raise CatalogLoadError(str(manifest_path), str(e)) from e

        manifest = parse_manifest(text, str(manifest_path))
        logger.debug(
            "Loaded catalog %s (v%s, %d frameworks)",
            manifest_path,
            manifest.version,
            len(manifest.frameworks),
        )
        self._cache.set(manifest)
        return manifest

    def invalidate(self) -> None:
        self._cache.invalidate()

    async def list_all(self) -> list[FrameworkDescriptor]:
        manifest = await self.load()
        return list(manifest.frameworks)

    async def get_by_id(self, framework_id: str) -> FrameworkDescriptor | None:
        for framework in await self.list_all():
            if framework.id == framework_id:
                return framework
        return None

    async def require(self, framework_id: str, operation: str) -> FrameworkDescriptor:
        """Look up a framework, failing if the catalog does not know it.

        Raises:
            PackageNotFoundError: If framework_id is not in the catalog
        """
        framework = await self.get_by_id(framework_id)
        if framework is None:
            raise PackageNotFoundError(framework_id, operation)
        return framework

    async def search(self, query: str) -> list[FrameworkDescriptor]:
        """Case-insensitive literal substring search over name, description and category.

        An empty or whitespace-only query returns the whole catalog.
        """
        frameworks = await self.list_all()
        if not query or not query.strip():
            return frameworks

        needle = query.lower()
        return [
            f
            for f in frameworks
            if needle in f.name.lower()
            or needle in f.description.lower()
            or needle in f.category.value.lower()
        ]

    async def by_category(self, category: FrameworkCategory) -> list[FrameworkDescriptor]:
        return [f for f in await self.list_all() if f.category == category]

    async def read_content(self, framework: FrameworkDescriptor) -> str:
        """Read a framework's canonical content from the catalog resources."""
        return await self._fs.read_text(self._config.source_path(framework))
