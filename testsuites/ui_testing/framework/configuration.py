"""
================================================================================
DSL Configuration
================================================================================

Immutable settings consumed by the message log, the action verifier and the
Action Library.

A ``Configuration`` is built once at the outermost composition point (the
``Dsl`` constructor when none is injected, or a pytest fixture) and then passed
down by reference.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dsl_tools.common import ConfigLoader, ConfigurationError

ERROR_TOGGLE_VALUES = ("enable", "disable")


@dataclass(frozen=True)
class Configuration:
    """
    DSL settings.

    Attributes:
        error_messages_toggle: "enable" to print error-category messages
        begin_inform_message: Prefix of information messages
        begin_error_message: Prefix of error messages
        begin_alert_message: Prefix of alert messages
        element_timeout: Default element timeout in milliseconds
        dropdown_settle_wait: Pause between the two clicks of a custom drop-down
    """

    error_messages_toggle: str = "disable"
    begin_inform_message: str = "--Action: "
    begin_error_message: str = "--ERROR: "
    begin_alert_message: str = "--Alert: "
    element_timeout: int = 10000
    dropdown_settle_wait: int = 3000

    def __post_init__(self) -> None:
        if self.error_messages_toggle not in ERROR_TOGGLE_VALUES:
            raise ConfigurationError(
                f"error_messages_toggle must be one of {ERROR_TOGGLE_VALUES}, "
                f"got {self.error_messages_toggle!r}"
            )
        for name in ("element_timeout", "dropdown_settle_wait"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(
                    f"{name} must be a positive integer (milliseconds), got {value!r}"
                )

    @property
    def errors_enabled(self) -> bool:
        return self.error_messages_toggle == "enable"

    @classmethod
    def from_loader(cls, loader: Optional[ConfigLoader] = None) -> "Configuration":
        """
        Build a configuration from the ``dsl`` section of the YAML file.

        Environment variables override file values (``DSL_ELEMENT_TIMEOUT``,
        ``DSL_ERROR_MESSAGES_TOGGLE`` ...); missing keys keep the defaults.
        """
        loader = loader or ConfigLoader()
        defaults = cls()
        return cls(
            error_messages_toggle=str(
                loader.get("dsl.error_messages_toggle", defaults.error_messages_toggle)
            ).lower(),
            begin_inform_message=loader.get(
                "dsl.begin_inform_message", defaults.begin_inform_message
            ),
            begin_error_message=loader.get(
                "dsl.begin_error_message", defaults.begin_error_message
            ),
            begin_alert_message=loader.get(
                "dsl.begin_alert_message", defaults.begin_alert_message
            ),
            element_timeout=loader.get("dsl.element_timeout", defaults.element_timeout),
            dropdown_settle_wait=loader.get(
                "dsl.dropdown_settle_wait", defaults.dropdown_settle_wait
            ),
        )


__all__ = [
    "Configuration",
    "ERROR_TOGGLE_VALUES",
]
