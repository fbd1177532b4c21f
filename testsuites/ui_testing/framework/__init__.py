"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation DSL.

Components:
    - locator_resolver: Selector / Handle references and resolution
    - action_verifier: Actionable-state checks with a shared timeout budget
    - message_log: Inform / alert / error log lines
    - dsl: The verified action library
    - page_base: Base page object composed over the DSL
    - browser_manager: Browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .action_verifier import ActionVerifier, TimeoutBudget
from .browser_manager import BrowserManager
from .configuration import Configuration
from .dsl import Dsl, with_logging
from .exceptions import (
    ActionError,
    DslError,
    ElementNotActionable,
    MismatchError,
    UnsupportedInputKind,
)
from .locator_resolver import Handle, Selector, as_reference, describe, resolve
from .message_log import MessageLog
from .page_base import BasePage

__all__ = [
    "ActionError",
    "ActionVerifier",
    "BasePage",
    "BrowserManager",
    "Configuration",
    "Dsl",
    "DslError",
    "ElementNotActionable",
    "Handle",
    "MessageLog",
    "MismatchError",
    "Selector",
    "TimeoutBudget",
    "UnsupportedInputKind",
    "as_reference",
    "describe",
    "resolve",
    "with_logging",
]
