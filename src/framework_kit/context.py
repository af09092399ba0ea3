"""Application context with dependency injection.

The FrameworkKitContext dataclass holds all dependencies (file system,
clock, update prompter, config). It is created once at the CLI entry point,
or per test via for_test(), and handed to FrameworkManager.
"""

from dataclasses import dataclass
from pathlib import Path

from framework_kit.config import FrameworkKitConfig
from framework_kit.integrations.filesystem.abc import FileSystem
from framework_kit.integrations.prompter.abc import UpdatePrompter
from framework_kit.integrations.time.abc import Time


@dataclass(frozen=True)
class FrameworkKitContext:
    """Immutable context holding all dependencies for framework-kit operations.

    Attributes:
        fs: File storage integration
        time: Clock integration for timestamps and cache expiry
        prompter: Decision provider consulted by the update flow
        config: Workspace layout and tunables
        debug: Debug flag for error handling (full stack traces)
    """

    fs: FileSystem
    time: Time
    prompter: UpdatePrompter
    config: FrameworkKitConfig
    debug: bool

    @staticmethod
    def for_test(
        fs: FileSystem | None = None,
        time: Time | None = None,
        prompter: UpdatePrompter | None = None,
        config: FrameworkKitConfig | None = None,
        debug: bool = False,
    ) -> "FrameworkKitContext":
        """Create test context with optional pre-configured implementations.

        Uses fakes by default so no test touches the real disk or terminal.

        Args:
            fs: Optional FileSystem. If None, creates an empty FakeFileSystem.
            time: Optional Time. If None, creates FakeTime.
            prompter: Optional UpdatePrompter. If None, creates a FakeUpdatePrompter
                that cancels every prompt.
            config: Optional config. Defaults to workspace /fake/workspace and
                resources /fake/resources.
            debug: Whether to enable debug mode (default False).

        Example:
            >>> from framework_kit.integrations.filesystem.fake import FakeFileSystem
            >>> ctx = FrameworkKitContext.for_test(fs=FakeFileSystem(files={...}))
        """
        from framework_kit.integrations.filesystem.fake import FakeFileSystem
        from framework_kit.integrations.prompter.fake import FakeUpdatePrompter
        from framework_kit.integrations.time.fake import FakeTime

        resolved_fs: FileSystem = fs if fs is not None else FakeFileSystem()
        resolved_time: Time = time if time is not None else FakeTime()
        resolved_prompter: UpdatePrompter = (
            prompter if prompter is not None else FakeUpdatePrompter()
        )
        resolved_config = (
            config
            if config is not None
            else FrameworkKitConfig(
                workspace_root=Path("/fake/workspace"),
                resources_dir=Path("/fake/resources"),
            )
        )

        return FrameworkKitContext(
            fs=resolved_fs,
            time=resolved_time,
            prompter=resolved_prompter,
            config=resolved_config,
            debug=debug,
        )


def create_context(
    *,
    workspace_root: Path,
    resources_dir: Path | None = None,
    debug: bool,
) -> FrameworkKitContext:
    """Create production context with real implementations.

    Args:
        workspace_root: Project directory to manage
        resources_dir: Catalog directory override (defaults to env or bundled data)
        debug: If True, enable debug mode (full stack traces in error handling)
    """
    from framework_kit.integrations.filesystem.real import RealFileSystem
    from framework_kit.integrations.prompter.real import ClickUpdatePrompter
    from framework_kit.integrations.time.real import RealTime

    return FrameworkKitContext(
        fs=RealFileSystem(),
        time=RealTime(),
        prompter=ClickUpdatePrompter(),
        config=FrameworkKitConfig.from_env(workspace_root, resources_dir),
        debug=debug,
    )
