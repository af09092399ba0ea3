"""Registry document I/O for installed-frameworks.toml."""

import logging
from typing import Any

import tomli
import tomli_w
from pydantic import ValidationError

from framework_kit.errors import RegistryLoadError
from framework_kit.models.installed import InstalledFramework, InstalledFrameworksMetadata

logger = logging.getLogger(__name__)


def parse_installed_metadata(text: str, source: str) -> InstalledFrameworksMetadata:
    """Parse the registry document.

    Entries that do not match the schema are kept aside verbatim, with a
    warning, so that saving the document writes them back unchanged.

    Raises:
        RegistryLoadError: If the document is not valid TOML or its
            ``frameworks`` value is not a list
    """
    try:
        data = tomli.loads(text)
    except tomli.TOMLDecodeError as e:
        raise RegistryLoadError(source, f"invalid TOML: {e}") from e

    entries = data.get("frameworks", [])
    if not isinstance(entries, list):
        raise RegistryLoadError(source, "'frameworks' must be a list of tables")

    frameworks: list[InstalledFramework] = []
    unparsed: list[Any] = []
    for i, entry in enumerate(entries):
        try:
            frameworks.append(InstalledFramework.model_validate(entry))
        except ValidationError as e:
            logger.warning(
                "Keeping unrecognized registry entry at index %d in %s as is: %s", i, source, e
            )
            unparsed.append(entry)

    return InstalledFrameworksMetadata(frameworks=frameworks, unparsed_entries=unparsed)


def serialize_installed_metadata(metadata: InstalledFrameworksMetadata) -> str:
    """Serialize the whole registry document; absent customized_at is omitted.

    Unrecognized entries are written after the recognized ones.
    """
    entries: list[Any] = [
        record.model_dump(exclude_none=True) for record in metadata.frameworks
    ]
    entries.extend(metadata.unparsed_entries)
    return tomli_w.dumps({"frameworks": entries})
