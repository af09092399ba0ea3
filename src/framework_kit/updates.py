"""Update planning and the interactive update flow."""

import logging
from enum import Enum

from framework_kit.catalog import FrameworkCatalog
from framework_kit.customization import CustomizationCheck, CustomizationDetector
from framework_kit.errors import NotInstalledError, UserCancelledError
from framework_kit.installer import InstallationEngine
from framework_kit.integrations.prompter.abc import UpdatePrompter
from framework_kit.models.framework import FrameworkDescriptor
from framework_kit.models.operations import FrameworkUpdate, InstallOptions, UpdateResult
from framework_kit.models.update_flow import DiffComparison, UpdateChoice, UpdatePrompt
from framework_kit.registry import FrameworkRegistry

logger = logging.getLogger(__name__)


class UpdatePlanner:
    """Compares registry versions with catalog versions."""

    def __init__(self, catalog: FrameworkCatalog, registry: FrameworkRegistry) -> None:
        self._catalog = catalog
        self._registry = registry

    async def check_for_updates(self) -> list[FrameworkUpdate]:
        """List installed frameworks whose catalog version differs.

        Versions are compared as plain strings. Registry entries the catalog
        no longer knows are skipped.
        """
        updates: list[FrameworkUpdate] = []
        for installed in await self._registry.list_installed():
            framework = await self._catalog.get_by_id(installed.id)
            if framework is None:
                continue
            if framework.version != installed.version:
                updates.append(
                    FrameworkUpdate(
                        framework_id=installed.id,
                        current_version=installed.version,
                        latest_version=framework.version,
                        changes=[f"Updated to version {framework.version}"],
                    )
                )
        return updates


class UpdateFlowState(Enum):
    PROMPT = "prompt"
    SHOWING_DIFF = "showing-diff"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


_TRANSITIONS = {
    UpdateChoice.SHOW_DIFF: UpdateFlowState.SHOWING_DIFF,
    UpdateChoice.PROCEED: UpdateFlowState.CONFIRMED,
    UpdateChoice.CANCEL: UpdateFlowState.CANCELLED,
}


class UpdateFlow:
    """Confirmation state machine for updating one framework.

    PROMPT asks the prompter; SHOWING_DIFF displays the comparison and
    returns to PROMPT with only proceed/cancel left. CONFIRMED and CANCELLED
    are terminal. Nothing is written while the flow runs.
    """

    def __init__(
        self,
        framework: FrameworkDescriptor,
        check: CustomizationCheck,
        prompter: UpdatePrompter,
    ) -> None:
        self._framework = framework
        self._check = check
        self._prompter = prompter
        self._diff_shown = False
        self.state = UpdateFlowState.PROMPT

    @property
    def is_finished(self) -> bool:
        return self.state in (UpdateFlowState.CONFIRMED, UpdateFlowState.CANCELLED)

    def build_prompt(self) -> UpdatePrompt:
        framework = self._framework
        if self._check.customized:
            if self._diff_shown:
                message = "Do you want to proceed with the update? A backup will be created."
            else:
                message = (
                    f'The framework "{framework.name}" has been customized. '
                    "Updating will overwrite your changes."
                )
        elif self._diff_shown:
            message = "Proceed with the update?"
        else:
            message = f'Update framework "{framework.name}" to version {framework.version}?'

        if self._diff_shown:
            choices = (UpdateChoice.PROCEED, UpdateChoice.CANCEL)
        else:
            choices = (UpdateChoice.SHOW_DIFF, UpdateChoice.PROCEED, UpdateChoice.CANCEL)

        return UpdatePrompt(
            framework_id=framework.id,
            framework_name=framework.name,
            latest_version=framework.version,
            customized=self._check.customized,
            message=message,
            choices=choices,
        )

    def build_comparison(self) -> DiffComparison:
        return DiffComparison(
            framework_id=self._framework.id,
            title=f"{self._framework.name}: Current <-> New Version",
            installed_text=self._check.installed_text,
            canonical_text=self._check.canonical_text,
        )

    async def step(self) -> UpdateFlowState:
        """Advance one transition and return the new state."""
        if self.state is UpdateFlowState.PROMPT:
            prompt = self.build_prompt()
            choice = await self._prompter.choose(prompt)
            if choice not in prompt.choices:
                logger.warning(
                    "Choice %s was not offered for %s; cancelling",
                    choice.value,
                    self._framework.id,
                )
                choice = UpdateChoice.CANCEL
            self.state = _TRANSITIONS[choice]
        elif self.state is UpdateFlowState.SHOWING_DIFF:
            await self._prompter.show_diff(self.build_comparison())
            self._diff_shown = True
            self.state = UpdateFlowState.PROMPT
        return self.state

    async def run(self) -> UpdateFlowState:
        while not self.is_finished:
            await self.step()
        return self.state


class FrameworkUpdater:
    """Executes confirmed updates, backing up customized files first."""

    def __init__(
        self,
        catalog: FrameworkCatalog,
        registry: FrameworkRegistry,
        detector: CustomizationDetector,
        engine: InstallationEngine,
        planner: UpdatePlanner,
        prompter: UpdatePrompter,
    ) -> None:
        self._catalog = catalog
        self._registry = registry
        self._detector = detector
        self._engine = engine
        self._planner = planner
        self._prompter = prompter

    async def update_framework(self, framework_id: str) -> UpdateResult:
        """Update one installed framework to its catalog version.

        Raises:
            NotInstalledError: If the framework's file is not in the workspace
            PackageNotFoundError: If framework_id is not in the catalog
            UserCancelledError: If the prompter cancels; nothing is changed
            OSError: Storage failures, unchanged
        """
        if not await self._registry.is_installed(framework_id):
            raise NotInstalledError(framework_id, "update")

        framework = await self._catalog.require(framework_id, "update")
        check = await self._detector.detect(framework)

        flow = UpdateFlow(framework, check, self._prompter)
        if await flow.run() is UpdateFlowState.CANCELLED:
            logger.info("Update of %s cancelled by user", framework_id)
            raise UserCancelledError(framework_id, "update")

        previous = await self._registry.get_installed(framework_id)
        result = await self._engine.install(
            framework_id, InstallOptions(overwrite=True, backup=check.customized)
        )
        logger.info(
            "Updated %s to v%s%s",
            framework_id,
            framework.version,
            f" (backup: {result.backup_path.name})" if result.backup_path else "",
        )

        return UpdateResult(
            framework_id=framework_id,
            old_version=previous.version if previous is not None else None,
            new_version=framework.version,
            was_customized=check.customized,
            backup_path=result.backup_path,
        )

    async def update_all_frameworks(self) -> list[UpdateResult]:
        """Update every framework with a pending update, one at a time.

        The first failure, including a cancellation, stops the batch and
        propagates; updates already applied stay applied.
        """
        updates = await self._planner.check_for_updates()
        results: list[UpdateResult] = []
        for update in updates:
            results.append(await self.update_framework(update.framework_id))
        return results
