"""Registry models: what is installed in a workspace."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class InstalledFramework(BaseModel):
    """A framework recorded as installed in the workspace registry.

    ``customized_at`` is only meaningful while ``customized`` is true; the
    model clears it whenever ``customized`` is false, and falls back to
    ``installed_at`` when a customized entry lacks it.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
    installed_at: str
    customized: bool = False
    customized_at: str | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_customization(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if not data.get("customized", False):
            return {**data, "customized_at": None}
        # Older registries flagged customization without a timestamp
        if data.get("customized_at") is None and data.get("installed_at") is not None:
            return {**data, "customized_at": data["installed_at"]}
        return data

    @model_validator(mode="after")
    def require_customized_at(self) -> "InstalledFramework":
        if self.customized and self.customized_at is None:
            raise ValueError("customized frameworks must record customized_at")
        return self

    def as_customized(self, at: str) -> "InstalledFramework":
        """Return a copy flagged as locally customized at the given time."""
        return InstalledFramework(
            id=self.id,
            version=self.version,
            installed_at=self.installed_at,
            customized=True,
            customized_at=at,
        )


class InstalledFrameworksMetadata(BaseModel):
    """The persisted registry document.

    ``unparsed_entries`` holds entries read from storage that do not match
    the schema. They are kept verbatim and written back on every save until
    an entry with the same id replaces them.
    """

    model_config = ConfigDict(frozen=True)

    frameworks: list[InstalledFramework] = Field(default_factory=list)
    unparsed_entries: list[Any] = Field(default_factory=list)

    @field_validator("frameworks", mode="before")
    @classmethod
    def default_frameworks(cls, v: Any) -> Any:
        if v is None:
            return []
        return v

    def find(self, framework_id: str) -> InstalledFramework | None:
        for record in self.frameworks:
            if record.id == framework_id:
                return record
        return None

    def with_framework(self, record: InstalledFramework) -> "InstalledFrameworksMetadata":
        """Return new metadata with the record replaced in place or appended."""
        replaced = False
        frameworks: list[InstalledFramework] = []
        for existing in self.frameworks:
            if existing.id == record.id and not replaced:
                frameworks.append(record)
                replaced = True
            else:
                frameworks.append(existing)
        if not replaced:
            frameworks.append(record)
        unparsed = [
            entry
            for entry in self.unparsed_entries
            if not (isinstance(entry, dict) and entry.get("id") == record.id)
        ]
        return InstalledFrameworksMetadata(frameworks=frameworks, unparsed_entries=unparsed)

    def without_framework(self, framework_id: str) -> "InstalledFrameworksMetadata":
        return InstalledFrameworksMetadata(
            frameworks=[f for f in self.frameworks if f.id != framework_id],
            unparsed_entries=self.unparsed_entries,
        )
