"""
Function-first forms of the Result combinators.

Every function takes the Result last, so they compose with
functools.partial into pipeline stages:

    from functools import partial
    from twotrack.operators import bind

    then_validate_email = partial(bind, validate_email)
    result = then_validate_email(validate_name(request))

The method and operator forms on Result (result.bind(f), result >> f)
are equivalent; use whichever reads better at the call site.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from twotrack.result import Result

S = TypeVar("S")
U = TypeVar("U")
M = TypeVar("M")
R = TypeVar("R")

# ──────────────────────── Constructors ────────────────────────

succeed = Result.succeed
succeed_with = Result.succeed_with
fail = Result.fail
fail_with = Result.fail_with
fail_if_none = Result.fail_if_none
collect = Result.collect


# ──────────────────────── Inspection ────────────────────────


def is_failure(result: Result[Any, Any]) -> bool:
    """True iff result is a Failure."""
    return result.is_failure()


def either(
    on_success: Callable[[S, tuple[M, ...]], R],
    on_failure: Callable[[tuple[M, ...]], R],
    result: Result[S, M],
) -> R:
    """Eliminate a Result: on_success(value, messages) or on_failure(messages)."""
    return result.either(on_success, on_failure)


def return_or_fail(result: Result[S, Any]) -> S:
    """Return the success value or raise UnhandledFailureError."""
    return result.return_or_fail()


# ──────────────────────── Composition ────────────────────────


def merge_messages(messages: Iterable[M], result: Result[S, M]) -> Result[S, M]:
    return result.merge_messages(messages)


def bind(f: Callable[[S], Result[U, M]], result: Result[S, M]) -> Result[U, M]:
    return result.bind(f)


def apply(wrapped_fn: Result[Callable[[S], U], M], result: Result[S, M]) -> Result[U, M]:
    return wrapped_fn.apply(result)


def lift(f: Callable[[S], U], result: Result[S, M]) -> Result[U, M]:
    return result.map(f)


# ──────────────────────── Side Effects ────────────────────────


def either_tee(
    on_success: Callable[[S, tuple[M, ...]], Any],
    on_failure: Callable[[tuple[M, ...]], Any],
    result: Result[S, M],
) -> Result[S, M]:
    return result.either_tee(on_success, on_failure)


def success_tee(f: Callable[[S, tuple[M, ...]], Any], result: Result[S, M]) -> Result[S, M]:
    return result.success_tee(f)


def failure_tee(f: Callable[[tuple[M, ...]], Any], result: Result[S, M]) -> Result[S, M]:
    return result.failure_tee(f)


__all__ = [
    "succeed",
    "succeed_with",
    "fail",
    "fail_with",
    "fail_if_none",
    "collect",
    "is_failure",
    "either",
    "return_or_fail",
    "merge_messages",
    "bind",
    "apply",
    "lift",
    "either_tee",
    "success_tee",
    "failure_tee",
]
