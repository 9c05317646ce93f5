"""
Shared test fixtures for the twotrack test suite.

Provides a call recorder for checking which callbacks a combinator ran,
and resets structlog after every test so configure_logging() in one test
cannot leak cached loggers into another.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

import pytest
import structlog


@dataclass
class CallRecorder:
    """Callable that records every call it receives and returns nothing."""

    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> None:
        self.calls.append(args)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture()
def recorder() -> CallRecorder:
    return CallRecorder()


@pytest.fixture()
def other_recorder() -> CallRecorder:
    return CallRecorder()


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()
