"""Package registry: persisted record of installed frameworks."""

import asyncio
import logging

from framework_kit.cache import TimedCache
from framework_kit.catalog import FrameworkCatalog
from framework_kit.config import FrameworkKitConfig
from framework_kit.integrations.filesystem.abc import FileSystem
from framework_kit.integrations.time.abc import Time
from framework_kit.io.state import parse_installed_metadata, serialize_installed_metadata
from framework_kit.models.framework import FrameworkDescriptor
from framework_kit.models.installed import InstalledFramework, InstalledFrameworksMetadata

logger = logging.getLogger(__name__)


class FrameworkRegistry:
    """Reads and writes installed-frameworks.toml with a short-lived cache.

    The parsed document is cached for ``config.registry_cache_ttl`` seconds
    to avoid re-reading storage across closely spaced calls. Writes refresh
    the cache with the document just saved; changes made to the file by
    anyone else are only seen once the window elapses or invalidate() is
    called.

    Mutations are read-modify-write of the whole document and run one at a
    time through a single-writer lock.
    """

    def __init__(
        self,
        fs: FileSystem,
        time: Time,
        config: FrameworkKitConfig,
        catalog: FrameworkCatalog,
    ) -> None:
        self._fs = fs
        self._time = time
        self._config = config
        self._catalog = catalog
        self._cache: TimedCache[InstalledFrameworksMetadata] = TimedCache(
            clock=time.monotonic, ttl=config.registry_cache_ttl
        )
        self._write_lock = asyncio.Lock()

    def invalidate(self) -> None:
        self._cache.invalidate()

    async def load(self) -> InstalledFrameworksMetadata:
        """Return the registry document; an absent document has no entries.

        Raises:
            RegistryLoadError: If the document exists but cannot be parsed
        """
        cached = self._cache.get()
        if cached is not None:
            return cached

        registry_path = self._config.registry_path
        if await self._fs.file_exists(registry_path):
            text = await self._fs.read_text(registry_path)
            metadata = parse_installed_metadata(text, str(registry_path))
        else:
            metadata = InstalledFrameworksMetadata()

        self._cache.set(metadata)
        return metadata

    async def _save(self, metadata: InstalledFrameworksMetadata) -> None:
        await self._fs.write_text(
            self._config.registry_path, serialize_installed_metadata(metadata)
        )
        self._cache.set(metadata)

    async def get_installed(self, framework_id: str) -> InstalledFramework | None:
        metadata = await self.load()
        return metadata.find(framework_id)

    async def list_installed(self) -> list[InstalledFramework]:
        """All registry entries, including ids the catalog no longer knows."""
        metadata = await self.load()
        return list(metadata.frameworks)

    async def list_installed_frameworks(self) -> list[FrameworkDescriptor]:
        """Catalog descriptors of registered frameworks, in registry order.

        Orphaned entries (ids missing from the catalog) are skipped but kept
        in storage.
        """
        installed: list[FrameworkDescriptor] = []
        for record in await self.list_installed():
            framework = await self._catalog.get_by_id(record.id)
            if framework is None:
                logger.debug("Skipping orphaned registry entry %s", record.id)
                continue
            installed.append(framework)
        return installed

    async def is_installed(self, framework_id: str) -> bool:
        """Whether the framework's target file exists in the workspace.

        Ids unknown to the catalog return False without touching storage.
        """
        framework = await self._catalog.get_by_id(framework_id)
        if framework is None:
            return False
        return await self._fs.file_exists(self._config.target_path(framework))

    async def upsert(self, record: InstalledFramework) -> None:
        """Replace the entry with the same id in place, or append it."""
        async with self._write_lock:
            metadata = await self.load()
            await self._save(metadata.with_framework(record))

    async def mark_customized(self, framework_id: str) -> InstalledFramework | None:
        """Flag an entry as locally customized. No entry means no change."""
        async with self._write_lock:
            metadata = await self.load()
            record = metadata.find(framework_id)
            if record is None:
                return None
            updated = record.as_customized(self._time.now().isoformat())
            await self._save(metadata.with_framework(updated))
            return updated

    async def remove(self, framework_id: str) -> bool:
        """Drop an entry. Returns False if there was none."""
        async with self._write_lock:
            metadata = await self.load()
            if metadata.find(framework_id) is None:
                return False
            await self._save(metadata.without_framework(framework_id))
            return True
