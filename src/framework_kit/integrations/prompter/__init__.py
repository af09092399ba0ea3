from framework_kit.integrations.prompter.abc import UpdatePrompter
from framework_kit.integrations.prompter.real import ClickUpdatePrompter

__all__ = [
    "ClickUpdatePrompter",
    "UpdatePrompter",
]
