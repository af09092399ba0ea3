"""Tests for FrameworkKitConfig and context factories."""

from pathlib import Path

import pytest

from framework_kit.config import DEFAULT_RESOURCES_DIR, FrameworkKitConfig
from framework_kit.context import FrameworkKitContext, create_context
from framework_kit.integrations.filesystem.fake import FakeFileSystem
from framework_kit.integrations.filesystem.real import RealFileSystem
from framework_kit.integrations.prompter.real import ClickUpdatePrompter
from framework_kit.integrations.time.real import RealTime
from framework_kit.models.framework import FrameworkCategory, FrameworkDescriptor


def test_workspace_layout() -> None:
    config = FrameworkKitConfig(workspace_root=Path("/ws"), resources_dir=Path("/res"))
    framework = FrameworkDescriptor(
        id="tdd",
        name="TDD",
        category=FrameworkCategory.TESTING,
        version="1.0.0",
        file_name="tdd.md",
    )

    assert config.target_path(framework) == Path("/ws/.kiro/steering/tdd.md")
    assert config.source_path(framework) == Path("/res/tdd.md")
    assert config.registry_path == Path("/ws/.kiro/.metadata/installed-frameworks.toml")
    assert config.manifest_path == Path("/res/manifest.yaml")


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FRAMEWORK_KIT_RESOURCES_DIR", raising=False)
    monkeypatch.delenv("FRAMEWORK_KIT_MANIFEST", raising=False)
    monkeypatch.delenv("FRAMEWORK_KIT_CACHE_TTL", raising=False)

    config = FrameworkKitConfig.from_env(Path("/ws"))

    assert config.resources_dir == DEFAULT_RESOURCES_DIR
    assert config.manifest_file == "manifest.yaml"
    assert config.registry_cache_ttl == 5.0


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FRAMEWORK_KIT_RESOURCES_DIR", "/custom")
    monkeypatch.setenv("FRAMEWORK_KIT_MANIFEST", "manifest.json")
    monkeypatch.setenv("FRAMEWORK_KIT_CACHE_TTL", "0.5")

    config = FrameworkKitConfig.from_env(Path("/ws"))

    assert config.manifest_path == Path("/custom/manifest.json")
    assert config.registry_cache_ttl == 0.5


def test_explicit_resources_dir_beats_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FRAMEWORK_KIT_RESOURCES_DIR", "/custom")

    config = FrameworkKitConfig.from_env(Path("/ws"), Path("/explicit"))

    assert config.resources_dir == Path("/explicit")


def test_for_test_uses_fakes() -> None:
    ctx = FrameworkKitContext.for_test()

    assert isinstance(ctx.fs, FakeFileSystem)
    assert ctx.config.workspace_root == Path("/fake/workspace")
    assert ctx.debug is False


def test_create_context_uses_real_implementations(tmp_path: Path) -> None:
    ctx = create_context(workspace_root=tmp_path, debug=True)

    assert isinstance(ctx.fs, RealFileSystem)
    assert isinstance(ctx.time, RealTime)
    assert isinstance(ctx.prompter, ClickUpdatePrompter)
    assert ctx.config.workspace_root == tmp_path
    assert ctx.debug is True
    assert ctx.time.now().tzinfo is not None


@pytest.mark.parametrize("raw", ["soon", "-1"])
def test_from_env_rejects_bad_cache_ttl(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("FRAMEWORK_KIT_CACHE_TTL", raw)

    with pytest.raises(ValueError, match="FRAMEWORK_KIT_CACHE_TTL"):
        FrameworkKitConfig.from_env(Path("/ws"))
