"""Abstract decision provider for the interactive update flow."""

from abc import ABC, abstractmethod

from framework_kit.models.update_flow import DiffComparison, UpdateChoice, UpdatePrompt


class UpdatePrompter(ABC):
    """Answers the questions asked while confirming an update.

    Implementations include:
    - FakeUpdatePrompter: Scripted answers for testing
    - ClickUpdatePrompter: Terminal prompts for the CLI
    """

    @abstractmethod
    async def choose(self, prompt: UpdatePrompt) -> UpdateChoice:
        """Ask the user to pick one of ``prompt.choices``.

        A dismissed prompt must be reported as UpdateChoice.CANCEL.
        """
        ...

    @abstractmethod
    async def show_diff(self, comparison: DiffComparison) -> None:
        """Present the installed and catalog texts side by side."""
        ...
