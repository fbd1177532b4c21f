# ================================================================================
# Message Log
# ================================================================================
#
# Categorized terminal messages for interactive runs.
#
#   inform_log - bold green text, INFO level, always printed
#   alert_log  - yellow background, WARNING level, always printed
#   error_log  - red background, ERROR level, printed only when the
#                configuration's error_messages_toggle is "enable"
#
# Messages go through Loguru, so they share the sink and format configured by
# dsl_tools.common.init_logger().
#
# ================================================================================

from typing import Optional

from loguru import logger

from .configuration import Configuration


class MessageLog:
    """
    Categorized message writer used by every DSL component.

    Example:
        log = MessageLog(Configuration(error_messages_toggle="enable"))
        log.inform_log("The element was selected.")
        log.alert_log("Verify the selected value manually.")
        log.error_log("Failed to click the element.")
    """

    def __init__(self, config: Optional[Configuration] = None):
        self.config = config or Configuration()
        # depth=2 reports the DSL call site instead of this module
        self._logger = logger.opt(colors=True, depth=2)

    def inform_log(self, message: str) -> None:
        self._emit("INFO", "<green><bold>{}</bold></green>", self.config.begin_inform_message, message)

    def alert_log(self, message: str) -> None:
        self._emit("WARNING", "<YELLOW><bold>{}</bold></YELLOW>", self.config.begin_alert_message, message)

    def error_log(self, message: str) -> None:
        if not self.config.errors_enabled:
            return
        self._emit("ERROR", "<RED><bold>{}</bold></RED>", self.config.begin_error_message, message)

    def _emit(self, level: str, markup: str, prefix: str, message: str) -> None:
        # The text is passed as a format argument so that "<" in selectors is
        # never parsed as a color tag.
        self._logger.log(level, markup, f"{prefix}{message}")


__all__ = ["MessageLog"]
