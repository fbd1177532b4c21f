"""
================================================================================
DSL Exceptions
================================================================================

Failure kinds raised by the Playwright DSL.

Every Action Library operation reports failures as ``ActionError``; the
specific kind below is chained as its cause.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Iterable, Optional


class DslError(Exception):
    """Base exception for all DSL failures."""
    pass


class UnsupportedInputKind(DslError):
    """Raised when a reference is neither a selector string nor a Locator."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            "You have entered a not supported data type. Please provide a "
            f"locator (string) or element (Locator), got {type(value).__name__}."
        )


class ElementNotActionable(DslError):
    """Raised when an actionable-state check does not hold within the timeout."""

    def __init__(self, reason: str, element: str, timeout: Optional[int] = None):
        self.reason = reason
        self.element = element
        self.timeout = timeout
        detail = f"Element {element} is not actionable: {reason}"
        if timeout is not None:
            detail += f" (timeout {timeout} ms)"
        super().__init__(detail)


class MismatchError(DslError):
    """A value read back after an action differs from the expected one."""

    subject = "value"

    def __init__(self, expected: Any, actual: Any):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected {self.subject} '{expected}', but got '{actual}'"
        )


class InputMismatch(MismatchError):
    subject = "input value"


class AttributeMismatch(MismatchError):
    subject = "attribute value"


class TextMismatch(MismatchError):
    subject = "text"


class SelectionMismatch(MismatchError):
    subject = "selected value containing"


class DialogMismatch(MismatchError):
    subject = "dialog message"


class NavigationMismatch(MismatchError):
    subject = "URL"


class CheckStateMismatch(MismatchError):
    subject = "checked state"


class InvalidActionMode(DslError):
    """Raised when an action mode is outside its legal set."""

    def __init__(self, mode: Any, allowed: Iterable[str], parameter: str = "mode"):
        self.mode = mode
        self.allowed = tuple(allowed)
        self.parameter = parameter
        choices = " or ".join(f"'{a}'" for a in self.allowed)
        super().__init__(
            f"You provided the wrong action data '{mode}'. Please provide only "
            f"{choices} for the '{parameter}' parameter."
        )


class InvalidDimension(DslError):
    """Raised when a value required to be a positive integer is not."""

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value
        super().__init__(
            f"'{name}' must be a positive integer, got {value!r}."
        )


class IndexOutOfRange(DslError):
    """Raised when an index exceeds the matched-node count."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        if count:
            valid = f"Please provide a number between 0 and {count - 1}."
        else:
            valid = "No element matched the locator."
        super().__init__(
            f"It seems that you call value that doesn't exist. The list size is "
            f"'{count}'. {valid}"
        )


class ActionError(DslError):
    """
    Wrapped failure raised by every Action Library operation.

    Attributes:
        operation: Name of the DSL operation that failed
        cause: The underlying exception (also chained as ``__cause__``)
    """

    def __init__(self, operation: str, message: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        super().__init__(message)


__all__ = [
    "ActionError",
    "AttributeMismatch",
    "CheckStateMismatch",
    "DialogMismatch",
    "DslError",
    "ElementNotActionable",
    "IndexOutOfRange",
    "InputMismatch",
    "InvalidActionMode",
    "InvalidDimension",
    "MismatchError",
    "NavigationMismatch",
    "SelectionMismatch",
    "TextMismatch",
    "UnsupportedInputKind",
]
