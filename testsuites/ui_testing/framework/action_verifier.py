"""
================================================================================
Action Verifier
================================================================================

Waits for and asserts the actionable state of a Locator before the DSL acts on
it. One place owns the contract, so every action observes the same rules:

    1. attached and visible (soft wait)
    2. visible
    3. not hidden
    4. enabled
    5. not disabled
    6. exactly one matching node

All steps share one timeout budget. Each assertion is given whatever is left
of it, and Playwright's ``expect`` re-polls internally until that runs out.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from typing import Awaitable, Callable, List, Optional, Tuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, expect
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .configuration import Configuration
from .exceptions import CheckStateMismatch, ElementNotActionable, InvalidDimension
from .locator_resolver import describe
from .message_log import MessageLog

NOT_UNIQUE = "not exactly one matching element"
# Prefix of the error Playwright raises when a strict locator matches several nodes
STRICT_MODE_VIOLATION = "strict mode violation"


class TimeoutBudget:
    """Remaining share of a millisecond timeout."""

    def __init__(self, timeout_ms: int):
        self.timeout_ms = timeout_ms
        self._deadline = time.monotonic() + timeout_ms / 1000

    def remaining(self) -> int:
        """
        Milliseconds left, never below 1.

        Playwright treats a timeout of 0 as "wait forever", so an exhausted
        budget still hands out 1 ms.
        """
        left = int((self._deadline - time.monotonic()) * 1000)
        return max(left, 1)


def check_positive_integer(name: str, value) -> int:
    """Return ``value`` if it is a positive int, else raise InvalidDimension."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimension(name, value)
    return value


class ActionVerifier:
    """
    Actionable-state checks for resolved Locators.

    Example:
        verifier = ActionVerifier(config, log)
        button = await verifier.ensure_actionable(page.locator("#submit"), 5000)
        await button.click(force=True)
    """

    def __init__(self, config: Configuration, log: MessageLog):
        self.config = config
        self.log = log

    def _timeout(self, timeout: Optional[int]) -> int:
        if timeout is None:
            return self.config.element_timeout
        return check_positive_integer("timeout", timeout)

    async def ensure_actionable(self, handle: Locator, timeout: Optional[int] = None) -> Locator:
        """
        Assert the six-point actionable state of ``handle``.

        Args:
            handle: Resolved Locator
            timeout: Overall budget in milliseconds (configured default if None)

        Returns:
            The same Locator, for chaining

        Raises:
            ElementNotActionable: If any check is still failing when the budget runs out
        """
        timeout_ms = self._timeout(timeout)
        budget = TimeoutBudget(timeout_ms)

        steps: List[Tuple[str, Callable[[int], Awaitable[None]]]] = [
            ("not attached and visible", lambda t: handle.wait_for(state="visible", timeout=t)),
            ("not visible", lambda t: expect(handle).to_be_visible(timeout=t)),
            ("hidden", lambda t: expect(handle).not_to_be_hidden(timeout=t)),
            ("not enabled", lambda t: expect(handle).to_be_enabled(timeout=t)),
            ("disabled", lambda t: expect(handle).not_to_be_disabled(timeout=t)),
            (NOT_UNIQUE, lambda t: expect(handle).to_have_count(1, timeout=t)),
        ]
        for reason, step in steps:
            await self._run_step(handle, reason, step, budget)

        self._log_selected(timeout)
        return handle

    async def ensure_present(self, handle: Locator, timeout: Optional[int] = None) -> Locator:
        """
        Assert only that exactly one node matches ``handle``.

        Used where the caller reads from the element without interacting with it.
        """
        timeout_ms = self._timeout(timeout)
        budget = TimeoutBudget(timeout_ms)
        await self._run_step(
            handle,
            NOT_UNIQUE,
            lambda t: expect(handle).to_have_count(1, timeout=t),
            budget,
        )
        self._log_selected(timeout)
        return handle

    async def ensure_matches(self, handle: Locator, timeout: Optional[int] = None) -> int:
        """
        Wait until at least one node matches and return the match count.

        Used by operations that read every matched node. Nothing matching
        within the timeout is not a failure here: the count is 0 and the
        caller decides what that means.
        """
        budget = TimeoutBudget(self._timeout(timeout))
        try:
            await handle.first.wait_for(state="attached", timeout=budget.remaining())
        except PlaywrightTimeoutError:
            self.log.alert_log(f"No element matched: {describe(handle)}")
        return await handle.count()

    async def wait_for_checked(
        self,
        handle: Locator,
        checked: bool,
        timeout: Optional[int] = None,
    ) -> None:
        """
        Wait until the checkbox/radio state equals ``checked``.

        Raises:
            CheckStateMismatch: If the state does not flip within the timeout
        """
        budget = TimeoutBudget(self._timeout(timeout))
        try:
            await expect(handle).to_be_checked(checked=checked, timeout=budget.remaining())
        except (AssertionError, PlaywrightError) as e:
            raise CheckStateMismatch(checked, not checked) from e

    async def _run_step(
        self,
        handle: Locator,
        reason: str,
        step: Callable[[int], Awaitable[None]],
        budget: TimeoutBudget,
    ) -> None:
        try:
            await step(budget.remaining())
        except (AssertionError, PlaywrightError) as e:
            if STRICT_MODE_VIOLATION in str(e):
                reason = NOT_UNIQUE
            raise ElementNotActionable(reason, describe(handle), budget.timeout_ms) from e

    def _log_selected(self, timeout: Optional[int]) -> None:
        if timeout is None:
            self.log.inform_log("The element was selected.")
        else:
            self.log.inform_log(
                f"The element was selected. Timeout was set to: {timeout} milliseconds."
            )


__all__ = [
    "ActionVerifier",
    "TimeoutBudget",
    "check_positive_integer",
]
