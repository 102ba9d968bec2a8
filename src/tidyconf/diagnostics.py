#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration diagnostics.

Problems found while reading configuration values are recorded here and
counted instead of being raised, so one bad property never discards the
rest of a file. Each record is also logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)


class MessageKind(Enum):
    """Kinds of configuration problems."""

    BAD_ARGUMENT = "bad-argument"
    UNKNOWN_OPTION = "unknown-option"
    FILE_OPEN_FAILURE = "file-open-failure"


@dataclass(frozen=True)
class ConfigMessage:
    """A single recorded configuration problem."""

    kind: MessageKind
    subject: str
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass
class Diagnostics:
    """Collected configuration problems and the option error counter."""

    messages: list[ConfigMessage] = field(default_factory=list)
    option_errors: int = 0

    def report_bad_argument(self, option_name: str) -> None:
        """Record a value that failed validation for a known option."""
        text = f"Warning: missing or malformed argument for option: {option_name}"
        self._record(ConfigMessage(MessageKind.BAD_ARGUMENT, option_name, text))
        self.option_errors += 1

    def report_unknown_option(self, option_name: str) -> None:
        """Record a property name that no option or fallback handler accepted."""
        text = f"Warning: unknown option: {option_name}"
        self._record(ConfigMessage(MessageKind.UNKNOWN_OPTION, option_name, text))
        self.option_errors += 1

    def report_file_error(self, file_name: str) -> None:
        """Record a configuration file that could not be opened."""
        text = f'Config: can\'t open "{file_name}"'
        self._record(ConfigMessage(MessageKind.FILE_OPEN_FAILURE, file_name, text))

    def clear(self) -> None:
        """Drop all messages and reset the error counter."""
        self.messages.clear()
        self.option_errors = 0

    def of_kind(self, kind: MessageKind) -> list[ConfigMessage]:
        """Return the recorded messages of one kind."""
        return [message for message in self.messages if message.kind is kind]

    def _record(self, message: ConfigMessage) -> None:
        self.messages.append(message)
        if message.kind is MessageKind.FILE_OPEN_FAILURE:
            logger.error(message.text)
        else:
            logger.warning(message.text)
