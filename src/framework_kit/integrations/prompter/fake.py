"""Fake scripted decision provider for testing."""

from framework_kit.integrations.prompter.abc import UpdatePrompter
from framework_kit.models.update_flow import DiffComparison, UpdateChoice, UpdatePrompt


class FakeUpdatePrompter(UpdatePrompter):
    """Returns pre-configured choices in order and records every interaction.

    Once the scripted choices run out, prompts are treated as dismissed and
    answered with CANCEL.
    """

    def __init__(self, choices: list[UpdateChoice] | None = None) -> None:
        self._choices = list(choices or [])
        self._prompts: list[UpdatePrompt] = []
        self._diffs_shown: list[DiffComparison] = []

    @property
    def prompts(self) -> list[UpdatePrompt]:
        """Get prompts that were asked, for test assertions."""
        return list(self._prompts)

    @property
    def diffs_shown(self) -> list[DiffComparison]:
        """Get comparisons that were displayed, for test assertions."""
        return list(self._diffs_shown)

    async def choose(self, prompt: UpdatePrompt) -> UpdateChoice:
        self._prompts.append(prompt)
        if not self._choices:
            return UpdateChoice.CANCEL
        return self._choices.pop(0)

    async def show_diff(self, comparison: DiffComparison) -> None:
        self._diffs_shown.append(comparison)
