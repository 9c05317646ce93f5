"""
Structured messages for either track.

Results accept any message type. Plain strings are the common choice;
Message is there for callers who want a severity and a machine-readable
code next to the human-readable text.

Enum + frozen dataclass gives __eq__, __hash__ and __repr__ for free, and
Enum members are singleton-comparable with `is`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import Iterable, Optional


@unique
class Severity(Enum):
    """How serious a message is."""

    INFO = "INFO"
    """Informational note, usually on the success track."""

    WARNING = "WARNING"
    """Something worth surfacing that did not stop the computation."""

    ERROR = "ERROR"
    """The reason a computation failed."""


@dataclass(frozen=True, slots=True)
class Message:
    """
    Immutable message carrying text, severity and an optional code.

    str() renders the text, prefixed by the code when there is one, which
    is the form return_or_fail() puts in its exception.

    >>> str(Message.error("Name must not be blank", code="NAME_BLANK"))
    '[NAME_BLANK] Name must not be blank'
    >>> str(Message.info("cache hit"))
    'cache hit'
    """

    text: str
    severity: Severity = Severity.ERROR
    code: Optional[str] = None

    @staticmethod
    def info(text: str, code: Optional[str] = None) -> Message:
        return Message(text, Severity.INFO, code)

    @staticmethod
    def warning(text: str, code: Optional[str] = None) -> Message:
        return Message(text, Severity.WARNING, code)

    @staticmethod
    def error(text: str, code: Optional[str] = None) -> Message:
        return Message(text, Severity.ERROR, code)

    def __str__(self) -> str:
        if self.code is None:
            return self.text
        return f"[{self.code}] {self.text}"


def errors_only(messages: Iterable[object]) -> tuple[Message, ...]:
    """Keep the ERROR-severity Messages, in order. Other message types are skipped."""
    return tuple(m for m in messages if isinstance(m, Message) and m.severity is Severity.ERROR)


def warnings_only(messages: Iterable[object]) -> tuple[Message, ...]:
    """Keep the WARNING-severity Messages, in order. Other message types are skipped."""
    return tuple(m for m in messages if isinstance(m, Message) and m.severity is Severity.WARNING)
