"""Catalog manifest parsing."""

import yaml
from pydantic import ValidationError

from framework_kit.errors import CatalogLoadError
from framework_kit.models.framework import FrameworkManifest


def parse_manifest(text: str, source: str) -> FrameworkManifest:
    """Parse a catalog manifest document.

    The manifest is YAML; JSON manifests parse as well since YAML is a
    superset of JSON.

    Args:
        text: Raw document text
        source: Where the text came from, for error messages

    Raises:
        CatalogLoadError: If the document is not valid YAML or does not match
            the manifest schema
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CatalogLoadError(source, f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise CatalogLoadError(source, "manifest must be a mapping with 'version' and 'frameworks'")

    try:
        return FrameworkManifest.model_validate(data)
    except ValidationError as e:
        raise CatalogLoadError(source, f"invalid manifest: {e}") from e
