"""Pytest configuration and fixtures."""

import pytest

from framework_kit.integrations.filesystem.fake import FakeFileSystem
from framework_kit.integrations.time.fake import FakeTime
from tests.test_utils.builders import CONFIG, catalog_files, framework_entry


@pytest.fixture
def fake_time() -> FakeTime:
    """Create a fresh FakeTime starting at 2025-01-01T00:00:00Z."""
    return FakeTime()


@pytest.fixture
def catalog_entries() -> list[dict[str, object]]:
    """A small catalog spanning several categories."""
    return [
        framework_entry(
            "tdd",
            "1.1.0",
            name="Test-Driven Development",
            description="Red-green-refactor workflow",
            category="testing",
        ),
        framework_entry(
            "clean-architecture",
            "1.0.0",
            name="Clean Architecture",
            description="Dependency rule and layer boundaries",
            category="architecture",
        ),
        framework_entry(
            "secure-coding",
            "2.0.0-beta.1",
            name="Secure Coding",
            description="Überprüfung of inputs and secrets handling",
            category="security",
            dependencies=["tdd", "secure-coding"],
        ),
    ]


@pytest.fixture
def catalog_fs(catalog_entries: list[dict[str, object]]) -> FakeFileSystem:
    """FakeFileSystem holding only the catalog resources."""
    return FakeFileSystem(files=catalog_files(catalog_entries, CONFIG))
