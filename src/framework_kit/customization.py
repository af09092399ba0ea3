"""Detect local edits to installed framework files."""

import hashlib
import logging
from dataclasses import dataclass

from framework_kit.catalog import FrameworkCatalog
from framework_kit.config import FrameworkKitConfig
from framework_kit.integrations.filesystem.abc import FileSystem
from framework_kit.models.framework import FrameworkDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CustomizationCheck:
    """Outcome of comparing an installed file against its catalog content.

    Both texts are returned as read so a caller can present them side by
    side; either is None when it could not be read.
    """

    framework_id: str
    customized: bool
    installed_text: str | None
    canonical_text: str | None


def content_digest(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


class CustomizationDetector:
    """Compares installed content to canonical content by SHA-256 digest."""

    def __init__(
        self, fs: FileSystem, config: FrameworkKitConfig, catalog: FrameworkCatalog
    ) -> None:
        self._fs = fs
        self._config = config
        self._catalog = catalog

    async def detect(self, framework: FrameworkDescriptor) -> CustomizationCheck:
        """Decide whether the installed file differs from the catalog content.

        If either side cannot be read the framework is reported as not
        customized, so an unreadable reference file never blocks an update.
        """
        installed_path = self._config.target_path(framework)
        try:
            installed_text = await self._fs.read_text(installed_path)
        except OSError as e:
            logger.warning(
                "Cannot read installed file for %s (%s); assuming not customized",
                framework.id,
                e,
            )
            return CustomizationCheck(framework.id, False, None, None)

        try:
            canonical_text = await self._catalog.read_content(framework)
        except OSError as e:
            logger.warning(
                "Cannot read catalog content for %s (%s); assuming not customized",
                framework.id,
                e,
            )
            return CustomizationCheck(framework.id, False, installed_text, None)

        customized = content_digest(installed_text) != content_digest(canonical_text)
        logger.debug("Customization check for %s: customized=%s", framework.id, customized)
        return CustomizationCheck(framework.id, customized, installed_text, canonical_text)
