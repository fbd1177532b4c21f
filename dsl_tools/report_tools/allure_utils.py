"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers used by the DSL and the pytest hooks.

Attachments are no-ops when pytest runs without ``--alluredir``, so the
helpers are safe to call from any test.

================================================================================
"""

import allure


def attach_text(text: str, name: str = "Text") -> None:
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_png(content: bytes, name: str = "Screenshot") -> None:
    """
    Attach a PNG image (usually a page screenshot) to Allure report.

    Args:
        content: PNG bytes
        name: Attachment name
    """
    allure.attach(
        content,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )
