"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for demoqa.com pages.

Each page class encapsulates:
    - Element locators
    - Page-specific flows built from DSL operations
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .practice_form_page import PracticeFormPage
from .text_box_page import TextBoxPage

__all__ = [
    "PracticeFormPage",
    "TextBoxPage",
]
