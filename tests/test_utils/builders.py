"""Builders for catalog, registry and workspace fixtures backed by FakeFileSystem."""

from pathlib import Path

import tomli_w
import yaml

from framework_kit.config import FrameworkKitConfig
from framework_kit.context import FrameworkKitContext
from framework_kit.integrations.filesystem.fake import FakeFileSystem
from framework_kit.integrations.prompter.abc import UpdatePrompter
from framework_kit.integrations.time.fake import FakeTime
from framework_kit.manager import FrameworkManager

CONFIG = FrameworkKitConfig(
    workspace_root=Path("/fake/workspace"),
    resources_dir=Path("/fake/resources"),
)


def framework_entry(
    framework_id: str,
    version: str = "1.0.0",
    *,
    name: str | None = None,
    description: str = "",
    category: str = "testing",
    dependencies: list[str] | None = None,
) -> dict[str, object]:
    entry: dict[str, object] = {
        "id": framework_id,
        "name": name if name is not None else framework_id.title(),
        "description": description,
        "category": category,
        "version": version,
        "fileName": f"{framework_id}.md",
    }
    if dependencies is not None:
        entry["dependencies"] = dependencies
    return entry


def manifest_yaml(entries: list[dict[str, object]], version: str = "1.0.0") -> str:
    return yaml.safe_dump({"version": version, "frameworks": entries}, sort_keys=False)


def canonical_text(framework_id: str, version: str) -> str:
    return f"# {framework_id}\n\nCanonical guidance, version {version}.\n"


def catalog_files(
    entries: list[dict[str, object]], config: FrameworkKitConfig = CONFIG
) -> dict[Path, str]:
    """Manifest plus canonical content for every entry."""
    files = {config.manifest_path: manifest_yaml(entries)}
    for entry in entries:
        files[config.resources_dir / str(entry["fileName"])] = canonical_text(
            str(entry["id"]), str(entry["version"])
        )
    return files


def target_path(framework_id: str, config: FrameworkKitConfig = CONFIG) -> Path:
    return config.steering_dir / f"{framework_id}.md"


def registry_record(
    framework_id: str,
    version: str,
    *,
    installed_at: str = "2024-12-01T00:00:00+00:00",
    customized: bool = False,
    customized_at: str | None = None,
) -> dict[str, object]:
    record: dict[str, object] = {
        "id": framework_id,
        "version": version,
        "installed_at": installed_at,
        "customized": customized,
    }
    if customized_at is not None:
        record["customized_at"] = customized_at
    return record


def registry_files(
    records: list[dict[str, object]], config: FrameworkKitConfig = CONFIG
) -> dict[Path, str]:
    return {config.registry_path: tomli_w.dumps({"frameworks": records})}


def build_manager(
    files: dict[Path, str] | None = None,
    *,
    prompter: UpdatePrompter | None = None,
    time: FakeTime | None = None,
    read_errors: dict[Path, OSError] | None = None,
    write_errors: dict[Path, OSError] | None = None,
) -> tuple[FrameworkManager, FakeFileSystem]:
    fs = FakeFileSystem(files=files, read_errors=read_errors, write_errors=write_errors)
    ctx = FrameworkKitContext.for_test(fs=fs, time=time, prompter=prompter, config=CONFIG)
    return FrameworkManager(ctx), fs
