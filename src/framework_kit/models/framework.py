"""Catalog models: the canonical list of installable frameworks."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FrameworkCategory(str, Enum):
    """Category a framework is filed under in the catalog."""

    ARCHITECTURE = "architecture"
    TESTING = "testing"
    SECURITY = "security"
    DEVOPS = "devops"
    CLOUD = "cloud"
    INFRASTRUCTURE = "infrastructure"
    WORK_MANAGEMENT = "work-management"


def _coerce_version(value: Any) -> Any:
    # YAML reads an unquoted 1.0 as a float
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return value


class FrameworkDescriptor(BaseModel):
    """A framework entry in the catalog manifest."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = ""
    category: FrameworkCategory
    version: str = Field(..., min_length=1)
    file_name: str = Field(..., min_length=1, alias="fileName")
    dependencies: list[str] = Field(default_factory=list)

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> Any:
        return _coerce_version(v)

    @field_validator("dependencies", mode="before")
    @classmethod
    def default_dependencies(cls, v: Any) -> Any:
        """Treat an explicit null dependency list as empty."""
        if v is None:
            return []
        return v

    @field_validator("file_name")
    @classmethod
    def validate_file_name(cls, v: str) -> str:
        """Reject content references that would escape the target directory."""
        if "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"fileName must be a bare file name, got: {v}")
        return v


class FrameworkManifest(BaseModel):
    """Top-level catalog document."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(..., min_length=1)
    frameworks: list[FrameworkDescriptor] = Field(default_factory=list)

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> Any:
        return _coerce_version(v)

    @field_validator("frameworks", mode="before")
    @classmethod
    def default_frameworks(cls, v: Any) -> Any:
        if v is None:
            return []
        return v
