"""Terminal decision provider built on click and rich."""

import difflib

import click
from rich.console import Console
from rich.syntax import Syntax

from framework_kit.integrations.prompter.abc import UpdatePrompter
from framework_kit.models.update_flow import DiffComparison, UpdateChoice, UpdatePrompt


def _choice_label(choice: UpdateChoice, customized: bool) -> str:
    if choice is UpdateChoice.PROCEED:
        return "update-with-backup" if customized else "update"
    return choice.value


def render_unified_diff(comparison: DiffComparison) -> str:
    """Render the comparison as a unified diff, installed text first."""
    installed = (comparison.installed_text or "").splitlines(keepends=True)
    canonical = (comparison.canonical_text or "").splitlines(keepends=True)
    return "".join(
        difflib.unified_diff(
            installed,
            canonical,
            fromfile=f"{comparison.framework_id} (current)",
            tofile=f"{comparison.framework_id} (new version)",
        )
    )


class ClickUpdatePrompter(UpdatePrompter):
    """Production prompter used by the ``framework-kit`` CLI."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    async def choose(self, prompt: UpdatePrompt) -> UpdateChoice:
        labels = {_choice_label(c, prompt.customized): c for c in prompt.choices}
        if prompt.customized:
            click.secho(prompt.message, fg="yellow", err=True)
        else:
            click.echo(prompt.message, err=True)
        try:
            answer = click.prompt(
                "Choose",
                type=click.Choice(list(labels)),
                default="cancel",
                err=True,
            )
        except click.Abort:
            return UpdateChoice.CANCEL
        return labels[answer]

    async def show_diff(self, comparison: DiffComparison) -> None:
        diff_text = render_unified_diff(comparison)
        self._console.rule(comparison.title)
        if not diff_text:
            self._console.print("No differences.")
            return
        self._console.print(Syntax(diff_text, "diff", theme="ansi_dark"))
