"""
twotrack — railway-oriented error handling for Python.

A Result is either Success(value, messages) or Failure(messages). Functions
that may fail return a Result, and combinators compose them: bind sequences,
apply/map combine independent results, collect folds many into one, and
the tee family observes without changing anything. Errors are values, not
exceptions.

    from twotrack import Result

    def validate_name(request: dict) -> Result[dict, str]:
        if not request["name"]:
            return Result.fail("Name must not be blank")
        return Result.succeed(request)

    result = Result.succeed({"name": "Scott"}) >> validate_name >> validate_email
"""

from twotrack.errors import TwoTrackError, UnhandledFailureError
from twotrack.messages import Message, Severity
from twotrack.operators import (
    apply,
    bind,
    collect,
    either,
    either_tee,
    fail,
    fail_if_none,
    fail_with,
    failure_tee,
    is_failure,
    lift,
    merge_messages,
    return_or_fail,
    succeed,
    succeed_with,
    success_tee,
)
from twotrack.result import Failure, Result, Success

__all__ = [
    "Result",
    "Success",
    "Failure",
    "TwoTrackError",
    "UnhandledFailureError",
    "Message",
    "Severity",
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

__version__ = "1.0.0"
