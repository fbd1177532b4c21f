"""
================================================================================
Playwright Test Doubles
================================================================================

Browser-free doubles for the DSL:
  - ``FakeElement`` state drives a ``MagicMock(spec=Locator)``
  - ``FakeExpect`` replaces Playwright's ``expect`` and asserts on that state
  - ``FakeEventInfo`` stands in for ``expect_download`` / ``expect_page``

Mocks built with spec= keep the real method signatures: async Playwright methods become
AsyncMocks and ``isinstance(mock, Locator)`` holds.

================================================================================
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from unittest.mock import MagicMock

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


def strict_mode_violation(name: str, count: int) -> PlaywrightError:
    return PlaywrightError(f"strict mode violation: locator('{name}') resolved to {count} elements")


@dataclass
class FakeElement:
    """Observable state of one fake element."""
    visible: bool = True
    enabled: bool = True
    count: int = 1
    checked: bool = False
    # Whether clicking flips ``checked`` (checkbox/radio behavior)
    toggles: bool = False
    value: str = ""
    texts: List[str] = field(default_factory=lambda: ["text"])
    attributes: Dict[str, str] = field(default_factory=dict)
    options: List[str] = field(default_factory=list)


def make_locator(
    state: Optional[FakeElement] = None,
    name: str = "#element",
    strict: bool = True,
) -> MagicMock:
    """
    Build a Locator double whose methods read and write ``state``.

    Like a real Locator it is strict: waiting on it while several nodes match
    raises a strict mode violation. ``first`` and ``nth`` return a non-strict
    view of the same state.
    """
    state = state or FakeElement()
    locator = MagicMock(spec=Locator, name=name)
    locator.state = state
    locator.strict = strict
    if strict:
        view = make_locator(state, f"{name} >> nth", strict=False)
        locator.first = view
        locator.nth.side_effect = lambda index: view

    async def wait_for(**kwargs):
        timeout = kwargs.get("timeout")
        wanted = kwargs.get("state", "visible")
        if strict and state.count > 1 and wanted in ("attached", "visible"):
            raise strict_mode_violation(name, state.count)
        if wanted == "visible" and not (state.visible and state.count >= 1):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {name}")
        if wanted == "attached" and state.count < 1:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {name}")

    async def click(**kwargs):
        if state.toggles:
            state.checked = not state.checked

    async def check(**kwargs):
        state.checked = True

    async def uncheck(**kwargs):
        state.checked = False

    async def fill(text: str, **kwargs):
        state.value = text

    async def input_value(**kwargs):
        return state.value

    async def select_option(value, **kwargs):
        if value in state.options:
            state.value = value
        return [state.value]

    async def get_attribute(attribute_name: str, **kwargs):
        return state.attributes.get(attribute_name)

    async def count():
        return state.count

    async def is_checked(**kwargs):
        return state.checked

    async def all_text_contents():
        return list(state.texts[: state.count])

    async def inner_text(**kwargs):
        return state.texts[0]

    locator.wait_for.side_effect = wait_for
    locator.click.side_effect = click
    locator.check.side_effect = check
    locator.uncheck.side_effect = uncheck
    locator.fill.side_effect = fill
    locator.input_value.side_effect = input_value
    locator.select_option.side_effect = select_option
    locator.get_attribute.side_effect = get_attribute
    locator.count.side_effect = count
    locator.is_checked.side_effect = is_checked
    locator.all_text_contents.side_effect = all_text_contents
    locator.inner_text.side_effect = inner_text
    return locator


class FakeAssertions:
    """The subset of ``LocatorAssertions`` used by the verifier."""

    def __init__(self, owner: "FakeExpect", locator: MagicMock):
        self.owner = owner
        self.name = str(locator)
        self.strict: bool = locator.strict
        self.state: FakeElement = locator.state

    def _check(self, name: str, condition: bool, timeout: Optional[float]) -> None:
        self.owner.calls.append((name, timeout))
        if not condition:
            raise AssertionError(f"{name} failed after {timeout} ms")

    async def to_be_visible(self, timeout: Optional[float] = None) -> None:
        if self.strict and self.state.count > 1:
            self.owner.calls.append(("to_be_visible", timeout))
            raise strict_mode_violation(self.name, self.state.count)
        self._check("to_be_visible", self.state.visible, timeout)

    async def not_to_be_hidden(self, timeout: Optional[float] = None) -> None:
        self._check("not_to_be_hidden", self.state.visible, timeout)

    async def to_be_enabled(self, timeout: Optional[float] = None) -> None:
        self._check("to_be_enabled", self.state.enabled, timeout)

    async def not_to_be_disabled(self, timeout: Optional[float] = None) -> None:
        self._check("not_to_be_disabled", self.state.enabled, timeout)

    async def to_have_count(self, count: int, timeout: Optional[float] = None) -> None:
        self._check("to_have_count", self.state.count == count, timeout)

    async def to_be_checked(self, checked: bool = True, timeout: Optional[float] = None) -> None:
        self._check("to_be_checked", self.state.checked == checked, timeout)


class FakeExpect:
    """Callable stand-in for ``playwright.async_api.expect``."""

    def __init__(self):
        self.calls = []

    def __call__(self, locator: MagicMock) -> FakeAssertions:
        return FakeAssertions(self, locator)


class FakeEventInfo:
    """
    Async context manager returned by ``expect_download`` / ``expect_page``.

    ``journal`` receives "armed" on enter and "closed" on exit, so a test can
    see whether the triggering action happened in between.
    """

    def __init__(self, result, journal: Optional[List[str]] = None):
        self._result = result
        self.journal = journal if journal is not None else []

    async def __aenter__(self) -> "FakeEventInfo":
        self.journal.append("armed")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.journal.append("closed")
        return False

    @property
    def value(self):
        return self._resolve()

    async def _resolve(self):
        return self._result
