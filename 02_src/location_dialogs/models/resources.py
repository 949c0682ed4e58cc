"""Reserved command words and their localized strings."""

from dataclasses import dataclass
from enum import Enum


class Command(str, Enum):
    """Reserved commands, in the order they are matched."""

    CANCEL = "Cancel"
    HELP = "Help"
    RESET = "Reset"


@dataclass(frozen=True)
class ResourceSet:
    """Locale-resolved command words plus the help message."""

    cancel: str
    help: str
    reset: str
    help_message: str
    locale: str = "en"

    def __post_init__(self) -> None:
        words = {
            Command.CANCEL: self.cancel,
            Command.HELP: self.help,
            Command.RESET: self.reset,
        }
        for command, word in words.items():
            if not isinstance(word, str) or not word.strip():
                raise ValueError(f"{command.value} command word must be a non-empty string")

        folded = [word.casefold() for word in words.values()]
        if len(set(folded)) != len(folded):
            raise ValueError(
                f"Command words must be distinct: {self.cancel!r}, {self.help!r}, {self.reset!r}"
            )

    def word_for(self, command: Command) -> str:
        """Localized word for a command."""
        return {
            Command.CANCEL: self.cancel,
            Command.HELP: self.help,
            Command.RESET: self.reset,
        }[command]

    def command_for(self, text: str | None) -> Command | None:
        """Match text against the command words, whole-string and case-insensitive."""
        if text is None:
            return None

        folded = text.casefold()
        for command in Command:
            if folded == self.word_for(command).casefold():
                return command
        return None
