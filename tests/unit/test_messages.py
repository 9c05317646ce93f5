"""Tests for the structured Message type."""

from __future__ import annotations

import pytest

from twotrack import Message, Result, Severity
from twotrack.messages import errors_only, warnings_only


class TestMessage:
    def test_default_severity_is_error(self):
        assert Message("boom").severity is Severity.ERROR

    def test_factories(self):
        assert Message.info("i").severity is Severity.INFO
        assert Message.warning("w").severity is Severity.WARNING
        assert Message.error("e", code="E1") == Message("e", Severity.ERROR, "E1")

    def test_str_without_code(self):
        assert str(Message.info("cache hit")) == "cache hit"

    def test_str_with_code(self):
        assert str(Message.error("Name must not be blank", code="NAME_BLANK")) == (
            "[NAME_BLANK] Name must not be blank"
        )

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Message("x").text = "y"  # type: ignore[misc]


class TestFilters:
    def test_errors_only_keeps_order(self):
        messages = [Message.error("a"), Message.info("b"), "plain", Message.error("c")]
        assert errors_only(messages) == (Message.error("a"), Message.error("c"))

    def test_warnings_only(self):
        result = Result.succeed(1, Message.info("i"), Message.warning("w"))
        assert warnings_only(result.messages) == (Message.warning("w"),)
