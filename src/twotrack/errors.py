"""
Exceptions raised by twotrack.

Domain failures are values (``Failure``), never exceptions. The only
exception the algebra raises is ``UnhandledFailureError``, and only from
``return_or_fail`` — the deliberate exit from the railway back into
ordinary exception handling.
"""

from __future__ import annotations

from typing import Any, Sequence

MESSAGE_SEPARATOR = "\n\t"


class TwoTrackError(Exception):
    """Base class for every exception raised by twotrack."""


class UnhandledFailureError(TwoTrackError, RuntimeError):
    """
    A Failure reached a call site that refused to stay on the railway.

    The exception text is every failure message rendered with ``str()``
    and joined by a newline plus a tab. The raw messages stay available
    on ``messages`` for callers that want to inspect them.

        try:
            user = result.return_or_fail()
        except UnhandledFailureError as e:
            print(e.messages)
    """

    def __init__(self, messages: Sequence[Any]) -> None:
        self.messages: tuple[Any, ...] = tuple(messages)
        super().__init__(MESSAGE_SEPARATOR.join(str(m) for m in self.messages))
