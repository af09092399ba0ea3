"""Inputs and results of install and update operations."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class InstallOptions:
    """How to resolve an install whose target file already exists.

    ``merge`` wins over ``overwrite`` when both are set. ``backup`` only has
    an effect when an existing file is about to be replaced.
    """

    overwrite: bool = False
    merge: bool = False
    backup: bool = False


class InstallAction(str, Enum):
    """What an install did to the target file."""

    INSTALLED = "installed"
    OVERWRITTEN = "overwritten"
    MERGED = "merged"


@dataclass(frozen=True)
class InstallResult:
    """Result of installing a single framework."""

    framework_id: str
    version: str
    target_path: Path
    action: InstallAction
    backup_path: Path | None = None


@dataclass(frozen=True)
class FrameworkUpdate:
    """An installed framework whose catalog version differs from the registry."""

    framework_id: str
    current_version: str
    latest_version: str
    changes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UpdateResult:
    """Result of updating a single framework."""

    framework_id: str
    old_version: str | None
    new_version: str
    was_customized: bool
    backup_path: Path | None = None
