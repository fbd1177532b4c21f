"""
================================================================================
Test Data Generators
================================================================================

Random form data for data-driven UI tests.

================================================================================
"""

from .form_data_generator import FormData, FormDataGenerator

__all__ = [
    "FormData",
    "FormDataGenerator",
]
