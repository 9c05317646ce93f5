"""
Test assertions for Result values.

Expressive assert helpers that produce clear failure messages under pytest.

Usage in tests:
    from twotrack.testing import ResultAssertions

    def test_signup():
        request = ResultAssertions.assert_success(validate(valid_request))
        assert request.name == "Scott"

    def test_blank_email():
        ResultAssertions.assert_messages(validate(blank_email), ["Email must not be blank"])
"""

from __future__ import annotations

from typing import Any, Iterable, TypeVar

from twotrack.result import Result

S = TypeVar("S")
M = TypeVar("M")


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[S, Any], message: str = "") -> S:
        """
        Assert the Result is a Success and return the value.

            value = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_success(), (
            f"Expected Success but got Failure({list(result.messages)!r}){context}"
        )
        return result.value

    @staticmethod
    def assert_success_value(result: Result[Any, Any], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_failure(result: Result[Any, M], message: str = "") -> tuple[M, ...]:
        """
        Assert the Result is a Failure and return its messages.

            errors = ResultAssertions.assert_failure(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.value!r}){context}"
        )
        return result.messages

    @staticmethod
    def assert_messages(result: Result[Any, Any], expected: Iterable[Any]) -> None:
        """Assert the Result carries exactly the expected messages, in order, on either track."""
        expected = tuple(expected)
        assert result.messages == expected, (
            f"Expected messages {list(expected)!r} but got {list(result.messages)!r}"
        )

    @staticmethod
    def assert_failure_message_contains(result: Result[Any, Any], substring: str) -> None:
        """Assert that some failure message contains the given substring, case-insensitively."""
        errors = ResultAssertions.assert_failure(result)
        assert any(substring.lower() in str(e).lower() for e in errors), (
            f"Expected a failure message containing {substring!r} "
            f"but messages were: {[str(e) for e in errors]!r}"
        )
