"""
Result — the two-track type at the core of railway-oriented programming.

A Result[S, M] is either Success(value, messages) or Failure(messages).
Both tracks carry an ordered tuple of messages: informational ones on the
success track, errors on the failure track. Combinators thread those
messages forward in the order they were produced.

    ┌───────────┐     bind      ┌───────────┐     bind      ┌──────────┐
    │ validate1 │──Success──────│ validate2 │──Success──────│validate3 │──→ Result
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure                   │ Failure                   │ Failure
          └───────────────────────────┴───────────────────────────┴──→ Result

Design choices:
  - frozen dataclasses for the two variants, so equality, hashing and
    match/case come for free and nothing can be mutated in place
  - messages are always stored as tuples
  - either() is the only place that dispatches on the variant
  - >> is bind, @ is applicative apply (or map, with a plain callable on the left)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from twotrack.errors import UnhandledFailureError

S = TypeVar("S")
U = TypeVar("U")
M = TypeVar("M")
R = TypeVar("R")


def _noop(*_: Any) -> None:
    return None


class Result(Generic[S, M]):
    """
    Two-track result carrying messages on both tracks.

    Two possible states:
      - Success(value, messages) — the happy path, with informational messages
      - Failure(messages) — the error track, with error messages

    bind() short-circuits on failure, so pipelines only describe the
    success path. apply() does not short-circuit: it gathers the errors of
    both sides.

        >>> Result.succeed(5).bind(lambda x: Result.succeed(x * 2, "doubled"))
        Success(10, ('doubled',))

        >>> Result.fail("bad input").bind(lambda x: Result.succeed(x * 2)).is_failure()
        True
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a Success."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Result is a Failure."""
        return isinstance(self, Failure)

    def either(
        self,
        on_success: Callable[[S, tuple[M, ...]], R],
        on_failure: Callable[[tuple[M, ...]], R],
    ) -> R:
        """
        Apply one of two functions depending on the track.

        This is the fundamental destructor. on_success receives the value
        and the messages, on_failure receives the messages.

            result.either(
                lambda user, _: f"Hello {user.name}",
                lambda errors: "; ".join(errors),
            )
        """
        match self:
            case Success(value, messages):
                return on_success(value, messages)
            case Failure(messages):
                return on_failure(messages)
        raise TypeError("unreachable")  # pragma: no cover

    def return_or_fail(self) -> S:
        """
        Leave the railway: return the success value or raise.

        On a Failure this raises UnhandledFailureError whose text is every
        message joined by a newline and a tab. Use it at the very edge of a
        program or in tests, where giving up is the right answer; inside a
        pipeline keep using either() or the tees instead.
        """

        def raise_unhandled(messages: tuple[M, ...]) -> S:
            raise UnhandledFailureError(messages)

        return self.either(lambda value, _: value, raise_unhandled)

    # ──────────────────────── Composition ────────────────────────

    def merge_messages(self, messages: Iterable[M]) -> Result[S, M]:
        """Prepend the given messages to this result's messages, keeping the track."""
        prefix = tuple(messages)
        return self.either(
            lambda value, own: Success(value, prefix + own),
            lambda own: Failure(prefix + own),
        )

    def bind(self, f: Callable[[S], Result[U, M]]) -> Result[U, M]:
        """
        Chain a Result-returning function. Short-circuits on failure.

        This is the key operator: it connects railway segments. On Success
        the messages gathered so far are merged in front of f's messages;
        on Failure f is never called and the failure comes back as is.

            Result.succeed(user).bind(validate_name).bind(validate_email)
        """
        return self.either(
            lambda value, messages: f(value).merge_messages(messages),
            lambda _: self,
        )

    def apply(self, result: Result[Any, M]) -> Result[Any, M]:
        """
        Apply the function held by this Result to the value held by another.

        Unlike bind() this is not sequential: both sides are evaluated
        already, and when either is a Failure the errors of both are kept.

            Success(f, m1) @ Success(x, m2)  → Success(f(x), m1 + m2)
            Failure(e) @ Success(x, m)       → Failure(e + m)
            Success(f, m) @ Failure(e)       → Failure(e + m)
            Failure(e1) @ Failure(e2)        → Failure(e1 + e2)
        """
        return self.either(
            lambda f, fn_messages: result.either(
                lambda value, messages: Success(f(value), fn_messages + messages),
                lambda errors: Failure(errors + fn_messages),
            ),
            lambda errors: result.either(
                lambda _, messages: Failure(errors + messages),
                lambda other_errors: Failure(errors + other_errors),
            ),
        )

    def map(self, f: Callable[[S], U]) -> Result[U, M]:
        """
        Lift a plain function onto the success track.

        Same as Result.succeed(f).apply(self).

            Result.succeed(5).map(lambda x: x * 2)  # → Success(10, ())
        """
        return Result.succeed(f).apply(self)

    # ──────────────────────── Side Effects ────────────────────────

    def either_tee(
        self,
        on_success: Callable[[S, tuple[M, ...]], Any],
        on_failure: Callable[[tuple[M, ...]], Any],
    ) -> Result[S, M]:
        """
        Run the callback matching the track for its side effect only.

        The callback's return value is discarded and this Result is
        returned unchanged. Useful for logging and persistence hooks.
        """
        self.either(on_success, on_failure)
        return self

    def success_tee(self, f: Callable[[S, tuple[M, ...]], Any]) -> Result[S, M]:
        """Run f(value, messages) on Success; pass the Result through unchanged."""
        return self.either_tee(f, _noop)

    def failure_tee(self, f: Callable[[tuple[M, ...]], Any]) -> Result[S, M]:
        """Run f(messages) on Failure; pass the Result through unchanged."""
        return self.either_tee(_noop, f)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def succeed(value: S, *messages: M) -> Result[S, M]:
        """
        Create a Success with zero or more messages.

            Result.succeed(42)                  # → Success(42, ())
            Result.succeed(42, "cached")        # → Success(42, ('cached',))
        """
        return Success(value, messages)

    @staticmethod
    def succeed_with(value: S, messages: Iterable[M]) -> Result[S, M]:
        """Create a Success carrying every message of the given iterable."""
        return Success(value, messages)

    @staticmethod
    def fail(message: M) -> Result[Any, M]:
        """Create a Failure with a single message."""
        return Failure((message,))

    @staticmethod
    def fail_with(messages: Iterable[M]) -> Result[Any, M]:
        """Create a Failure carrying every message of the given iterable."""
        return Failure(messages)

    @staticmethod
    def fail_if_none(message: M, value: Optional[S]) -> Result[S, M]:
        """
        Convert an optional value into a Result.

            Result.fail_if_none("User not found", repo.find(user_id))
        """
        if value is None:
            return Result.fail(message)
        return Result.succeed(value)

    @staticmethod
    def collect(results: Iterable[Result[S, M]]) -> Result[list[S], M]:
        """
        Fold many Results into one Result holding the list of values.

        Messages of every element are concatenated in order. The first
        Failure makes the whole fold a Failure; success values after it
        are dropped, but the messages of later elements (successes and
        failures alike) are still appended.

            Result.collect([Result.succeed(1), Result.succeed(2)])
            # → Success([1, 2], ())
        """
        values: list[S] = []
        messages: list[M] = []
        failed = False
        for result in results:
            match result:
                case Success(value, _) if not failed:
                    values.append(value)
                case Failure():
                    failed = True
            messages.extend(result.messages)

        if failed:
            return Failure(messages)
        return Success(values, messages)

    # ──────────────────────── Operators ────────────────────────

    def __rshift__(self, f: Callable[[S], Result[U, M]]) -> Result[U, M]:
        """result >> f is result.bind(f)."""
        return self.bind(f)

    def __matmul__(self, other: object) -> Result[Any, M]:
        """wrapped_fn @ result is wrapped_fn.apply(result)."""
        if not isinstance(other, Result):
            return NotImplemented
        return self.apply(other)

    def __rmatmul__(self, f: object) -> Result[Any, M]:
        """f @ result, with f a plain callable, is result.map(f)."""
        if not callable(f):
            return NotImplemented
        return self.map(f)

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True, repr=False)
class Success(Result[S, M]):
    """The success track — a value plus informational messages."""

    value: S
    messages: tuple[M, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", tuple(self.messages))

    def __repr__(self) -> str:
        return f"Success({self.value!r}, {self.messages!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Failure(Result[S, M]):
    """The failure track — error messages only."""

    messages: tuple[M, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", tuple(self.messages))

    def __repr__(self) -> str:
        return f"Failure({self.messages!r})"
