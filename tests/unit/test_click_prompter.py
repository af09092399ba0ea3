"""Tests for the terminal decision provider."""

import io

import click
from click.testing import CliRunner
from rich.console import Console

from framework_kit.commands import run
from framework_kit.integrations.prompter.real import ClickUpdatePrompter, render_unified_diff
from framework_kit.models.update_flow import DiffComparison, UpdateChoice, UpdatePrompt


def _prompt(customized: bool) -> UpdatePrompt:
    return UpdatePrompt(
        framework_id="tdd",
        framework_name="TDD",
        latest_version="1.1.0",
        customized=customized,
        message="Update?",
        choices=(UpdateChoice.SHOW_DIFF, UpdateChoice.PROCEED, UpdateChoice.CANCEL),
    )


def _choose_command(prompt: UpdatePrompt, answers: list[UpdateChoice]) -> click.Command:
    @click.command()
    def choose() -> None:
        answers.append(run(ClickUpdatePrompter().choose(prompt)))

    return choose


def test_render_unified_diff_marks_changes() -> None:
    diff = render_unified_diff(DiffComparison("tdd", "TDD", "a\nb\n", "a\nc\n"))

    assert "--- tdd (current)" in diff
    assert "+++ tdd (new version)" in diff
    assert "-b" in diff
    assert "+c" in diff


def test_render_unified_diff_handles_missing_text() -> None:
    diff = render_unified_diff(DiffComparison("tdd", "TDD", None, "new\n"))

    assert "+new" in diff


def test_choose_maps_labels_to_choices() -> None:
    answers: list[UpdateChoice] = []

    result = CliRunner().invoke(_choose_command(_prompt(False), answers), input="update\n")

    assert result.exit_code == 0
    assert answers == [UpdateChoice.PROCEED]


def test_customized_proceed_label_mentions_backup() -> None:
    answers: list[UpdateChoice] = []

    CliRunner().invoke(_choose_command(_prompt(True), answers), input="update-with-backup\n")

    assert answers == [UpdateChoice.PROCEED]


def test_choose_defaults_to_cancel() -> None:
    answers: list[UpdateChoice] = []

    CliRunner().invoke(_choose_command(_prompt(False), answers), input="\n")

    assert answers == [UpdateChoice.CANCEL]


def test_choose_treats_abort_as_cancel() -> None:
    answers: list[UpdateChoice] = []

    # No input at all makes click abort on EOF
    CliRunner().invoke(_choose_command(_prompt(False), answers), input="")

    assert answers == [UpdateChoice.CANCEL]


async def test_show_diff_prints_title_and_diff() -> None:
    buffer = io.StringIO()
    prompter = ClickUpdatePrompter(console=Console(file=buffer, width=120, no_color=True))

    await prompter.show_diff(DiffComparison("tdd", "TDD: Current <-> New", "a\n", "b\n"))

    output = buffer.getvalue()
    assert "TDD: Current <-> New" in output
    assert "+b" in output


async def test_show_diff_reports_identical_texts() -> None:
    buffer = io.StringIO()
    prompter = ClickUpdatePrompter(console=Console(file=buffer, width=120, no_color=True))

    await prompter.show_diff(DiffComparison("tdd", "TDD", "same\n", "same\n"))

    assert "No differences." in buffer.getvalue()
