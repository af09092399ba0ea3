from framework_kit.io.manifest import parse_manifest
from framework_kit.io.state import parse_installed_metadata, serialize_installed_metadata

__all__ = [
    "parse_installed_metadata",
    "parse_manifest",
    "serialize_installed_metadata",
]
