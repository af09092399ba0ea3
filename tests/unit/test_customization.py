"""Tests for CustomizationDetector."""

from framework_kit.catalog import FrameworkCatalog
from framework_kit.customization import CustomizationDetector, content_digest
from framework_kit.integrations.filesystem.fake import FakeFileSystem
from framework_kit.integrations.time.fake import FakeTime
from tests.test_utils.builders import (
    CONFIG,
    canonical_text,
    catalog_files,
    framework_entry,
    target_path,
)


def _detector(fs: FakeFileSystem) -> tuple[CustomizationDetector, FrameworkCatalog]:
    catalog = FrameworkCatalog(fs, FakeTime(), CONFIG)
    return CustomizationDetector(fs, CONFIG, catalog), catalog


def test_content_digest_is_sha256_hex() -> None:
    assert content_digest("") == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


async def test_identical_content_is_not_customized() -> None:
    files = catalog_files([framework_entry("tdd")])
    files[target_path("tdd")] = canonical_text("tdd", "1.0.0")
    detector, catalog = _detector(FakeFileSystem(files=files))

    check = await detector.detect(await catalog.require("tdd", "check"))

    assert check.customized is False
    assert check.installed_text == check.canonical_text


async def test_edited_content_is_customized() -> None:
    files = catalog_files([framework_entry("tdd")])
    files[target_path("tdd")] = canonical_text("tdd", "1.0.0") + "\nLocal team notes.\n"
    detector, catalog = _detector(FakeFileSystem(files=files))

    check = await detector.detect(await catalog.require("tdd", "check"))

    assert check.customized is True
    assert check.installed_text is not None
    assert "Local team notes." in check.installed_text


async def test_missing_installed_file_is_not_customized() -> None:
    detector, catalog = _detector(FakeFileSystem(files=catalog_files([framework_entry("tdd")])))

    check = await detector.detect(await catalog.require("tdd", "check"))

    assert check.customized is False
    assert check.installed_text is None


async def test_unreadable_canonical_content_is_not_customized() -> None:
    files = catalog_files([framework_entry("tdd")])
    files[target_path("tdd")] = "edited"
    fs = FakeFileSystem(
        files=files,
        read_errors={CONFIG.resources_dir / "tdd.md": PermissionError("denied")},
    )
    detector, catalog = _detector(fs)

    check = await detector.detect(await catalog.require("tdd", "check"))

    assert check.customized is False
    assert check.installed_text == "edited"
    assert check.canonical_text is None
