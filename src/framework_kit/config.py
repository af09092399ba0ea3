"""Workspace layout and tunables, loaded from environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path

from framework_kit.models.framework import FrameworkDescriptor

DEFAULT_RESOURCES_DIR = Path(__file__).parent / "data" / "frameworks"
DEFAULT_MANIFEST_FILE = "manifest.yaml"
DEFAULT_REGISTRY_CACHE_TTL = 5.0
REGISTRY_FILE_NAME = "installed-frameworks.toml"


@dataclass(frozen=True)
class FrameworkKitConfig:
    """Where the catalog lives and where frameworks get installed.

    Attributes:
        workspace_root: Project directory frameworks are installed into
        resources_dir: Directory holding the catalog manifest and canonical content
        manifest_file: Catalog manifest file name inside resources_dir
        registry_cache_ttl: Seconds a loaded registry document stays valid in memory
    """

    workspace_root: Path
    resources_dir: Path = DEFAULT_RESOURCES_DIR
    manifest_file: str = DEFAULT_MANIFEST_FILE
    registry_cache_ttl: float = DEFAULT_REGISTRY_CACHE_TTL

    @property
    def steering_dir(self) -> Path:
        return self.workspace_root / ".kiro" / "steering"

    @property
    def metadata_dir(self) -> Path:
        return self.workspace_root / ".kiro" / ".metadata"

    @property
    def manifest_path(self) -> Path:
        return self.resources_dir / self.manifest_file

    @property
    def registry_path(self) -> Path:
        return self.metadata_dir / REGISTRY_FILE_NAME

    def target_path(self, framework: FrameworkDescriptor) -> Path:
        """Where a framework's file lives once installed in the workspace."""
        return self.steering_dir / framework.file_name

    def source_path(self, framework: FrameworkDescriptor) -> Path:
        """Where a framework's canonical content lives in the catalog resources."""
        return self.resources_dir / framework.file_name

    @staticmethod
    def from_env(
        workspace_root: Path, resources_dir: Path | None = None
    ) -> "FrameworkKitConfig":
        """Load configuration from environment variables.

        ``resources_dir`` takes precedence over FRAMEWORK_KIT_RESOURCES_DIR.
        """
        if resources_dir is None:
            env_resources = os.environ.get("FRAMEWORK_KIT_RESOURCES_DIR")
            resources_dir = Path(env_resources) if env_resources else DEFAULT_RESOURCES_DIR
        return FrameworkKitConfig(
            workspace_root=workspace_root,
            resources_dir=resources_dir,
            manifest_file=os.environ.get("FRAMEWORK_KIT_MANIFEST", DEFAULT_MANIFEST_FILE),
            registry_cache_ttl=_cache_ttl_from_env(),
        )


def _cache_ttl_from_env() -> float:
    raw = os.environ.get("FRAMEWORK_KIT_CACHE_TTL")
    if raw is None or not raw.strip():
        return DEFAULT_REGISTRY_CACHE_TTL
    try:
        ttl = float(raw)
    except ValueError:
        raise ValueError(
            f"FRAMEWORK_KIT_CACHE_TTL must be a number of seconds, got {raw!r}"
        ) from None
    if ttl < 0:
        raise ValueError(f"FRAMEWORK_KIT_CACHE_TTL must not be negative, got {raw!r}")
    return ttl
