"""
================================================================================
Locator Resolver
================================================================================

Normalizes the "locator or element" argument of every DSL operation into a
single Playwright ``Locator``.

References are a tagged variant:

    Selector(query)  - a selector string in Playwright's query language
    Handle(locator)  - an already-built Locator

Raw ``str`` and ``Locator`` values are tagged once at the API boundary by
``as_reference``; ``resolve`` is then a plain match on the tag. Selectors are
never validated here: Playwright reports bad syntax when the locator is used.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from playwright.async_api import Frame, FrameLocator, Locator, Page

from .exceptions import UnsupportedInputKind


@dataclass(frozen=True)
class Selector:
    """A selector string, resolved lazily against a session."""
    query: str

    def __str__(self) -> str:
        return self.query


@dataclass(frozen=True)
class Handle:
    """An already-resolved Playwright Locator."""
    locator: Locator

    def __str__(self) -> str:
        return repr(self.locator)


ElementReference = Union[Selector, Handle]

# What callers may pass to DSL operations
LocatorOrElement = Union[str, Locator, Selector, Handle]

# Anything that can build locators: a tab, a frame or a frame-scoped handle
Session = Union[Page, Frame, FrameLocator]


def as_reference(value: LocatorOrElement) -> ElementReference:
    """
    Tag a caller-supplied value.

    Raises:
        UnsupportedInputKind: If the value is neither a string nor a Locator
    """
    if isinstance(value, (Selector, Handle)):
        return value
    if isinstance(value, str):
        return Selector(value)
    if isinstance(value, Locator):
        return Handle(value)
    raise UnsupportedInputKind(value)


def resolve(value: LocatorOrElement, session: Session) -> Locator:
    """
    Turn a reference into a Locator.

    Selectors are queried against ``session`` (lazily: Playwright defers the DOM
    lookup until the locator is used). Handles pass through unchanged.
    """
    reference = as_reference(value)
    if isinstance(reference, Selector):
        return session.locator(reference.query)
    return reference.locator


def describe(value: LocatorOrElement) -> str:
    """Human-readable form of a reference for log lines."""
    if isinstance(value, Locator):
        return repr(value)
    return str(value)


__all__ = [
    "ElementReference",
    "Handle",
    "LocatorOrElement",
    "Selector",
    "Session",
    "as_reference",
    "describe",
    "resolve",
]
