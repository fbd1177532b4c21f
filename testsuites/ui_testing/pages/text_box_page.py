"""
================================================================================
Text Box Page Object
================================================================================

demoqa.com "text-box": four inputs and an output panel that echoes them after
submit.

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.page_base import BasePage


class TextBoxPage(BasePage):
    """Text box form with an output panel."""

    URL_PATH = "/text-box"

    FULL_NAME_INPUT = "#userName"
    EMAIL_INPUT = "#userEmail"
    CURRENT_ADDRESS_INPUT = "#currentAddress"
    PERMANENT_ADDRESS_INPUT = "#permanentAddress"
    PERMANENT_ADDRESS_LABEL = "#permanentAddress-label"
    SUBMIT_BUTTON = "#submit"

    NAME_OUTPUT = "#output #name"
    EMAIL_OUTPUT = "#output #email"

    @allure.step("Fill text box form for {full_name}")
    async def fill_form(
        self,
        full_name: str,
        email: str,
        current_address: str,
        permanent_address: str,
    ) -> None:
        await self.dsl.send_keys(self.FULL_NAME_INPUT, full_name)
        await self.dsl.send_keys(self.EMAIL_INPUT, email)
        await self.dsl.send_keys(self.CURRENT_ADDRESS_INPUT, current_address)
        await self.dsl.send_keys(self.PERMANENT_ADDRESS_INPUT, permanent_address)

    async def submit(self) -> None:
        await self.dsl.click(self.SUBMIT_BUTTON)

    async def full_name_placeholder(self) -> str:
        return await self.dsl.get_attribute(self.FULL_NAME_INPUT, "placeholder")

    @allure.step("Verify output panel")
    async def verify_output(self, full_name: str, email: str) -> None:
        await self.dsl.get_text(self.NAME_OUTPUT, f"Name:{full_name}")
        await self.dsl.get_text(self.EMAIL_OUTPUT, f"Email:{email}")
