"""Models exchanged between the update flow and a decision provider."""

from dataclasses import dataclass
from enum import Enum


class UpdateChoice(str, Enum):
    """A decision offered while confirming an update."""

    SHOW_DIFF = "show-diff"
    PROCEED = "proceed"
    CANCEL = "cancel"


@dataclass(frozen=True)
class UpdatePrompt:
    """A question the update flow asks before touching any file.

    ``customized`` prompts carry the stronger warning; for them PROCEED means
    "update with backup".
    """

    framework_id: str
    framework_name: str
    latest_version: str
    customized: bool
    message: str
    choices: tuple[UpdateChoice, ...]


@dataclass(frozen=True)
class DiffComparison:
    """Both full texts of an installed framework and its catalog version.

    Either text is None when it could not be read.
    """

    framework_id: str
    title: str
    installed_text: str | None
    canonical_text: str | None
