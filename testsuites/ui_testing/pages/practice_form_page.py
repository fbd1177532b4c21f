"""
================================================================================
Practice Form Page Object
================================================================================

demoqa.com "automation-practice-form": a student registration form that uses
most element kinds the DSL supports (inputs, radio buttons, checkboxes, a
multi-select, a file input and custom drop-downs).

Locators are plain selector strings; the DSL resolves them on every call.

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.page_base import BasePage


def result_cell(label: str) -> str:
    """Value cell of the submission summary table for ``label``."""
    return f'//*[contains(text(),"{label}")]/following-sibling::td'


class PracticeFormPage(BasePage):
    """Student registration form."""

    URL_PATH = "/automation-practice-form"

    FIRST_NAME_INPUT = "#firstName"
    LAST_NAME_INPUT = "#lastName"
    EMAIL_INPUT = "#userEmail"
    GENDER_MALE_RADIO = '//*[@id="gender-radio-1"]/following-sibling::label'
    MOBILE_INPUT = "#userNumber"
    DATE_OF_BIRTH_INPUT = "#dateOfBirthInput"
    SUBJECT_INPUT = "#subjectsInput"
    SUBJECT_SELECTED_VALUE = '(//*[@id="subjectsWrapper"]/div/div/div/div/div/div)[1]'
    HOBBIES_SPORTS_CHECKBOX = '//*[@id="hobbies-checkbox-1"]/following-sibling::label'
    UPLOAD_PICTURE_INPUT = "#uploadPicture"
    CURRENT_ADDRESS_INPUT = "#currentAddress"
    STATE_DROP_DOWN = "#state"
    STATE_NCR_OPTION = '//*[@id="react-select-3-option-0"]'
    STATE_SELECTED_VALUE = "(//*[@id='stateCity-wrapper']/div/div/div/div/div)[1]"
    CITY_DROP_DOWN = "#city"
    CITY_DELHI_OPTION = '//*[@id="react-select-4-option-0"]'
    CITY_SELECTED_VALUE = "(//*[@id='stateCity-wrapper']/div/div/div/div/div)[4]"
    SUBMIT_BUTTON = "#submit"

    NAME_RESULT = result_cell("Student Name")
    EMAIL_RESULT = result_cell("Student Email")
    GENDER_RESULT = result_cell("Gender")
    MOBILE_RESULT = result_cell("Mobile")
    DATE_OF_BIRTH_RESULT = result_cell("Date of Birth")
    SUBJECTS_RESULT = result_cell("Subjects")
    HOBBIES_RESULT = result_cell("Hobbies")
    PICTURE_RESULT = result_cell("Picture")
    ADDRESS_RESULT = result_cell("Address")
    STATE_AND_CITY_RESULT = result_cell("State and City")

    @allure.step("Fill name: {first_name} {last_name}")
    async def fill_name(self, first_name: str, last_name: str) -> None:
        await self.dsl.send_keys(self.FIRST_NAME_INPUT, first_name)
        await self.dsl.send_keys(self.LAST_NAME_INPUT, last_name)

    async def fill_email(self, email: str) -> None:
        await self.dsl.send_keys(self.EMAIL_INPUT, email)

    async def select_male_gender(self) -> None:
        await self.dsl.check_radio_button_check_box(self.GENDER_MALE_RADIO)

    async def fill_mobile(self, mobile: str) -> None:
        await self.dsl.send_keys(self.MOBILE_INPUT, mobile)

    async def fill_date_of_birth(self, date_of_birth: str) -> None:
        """Type the date and close the calendar pop-up."""
        await self.dsl.send_keys(self.DATE_OF_BIRTH_INPUT, date_of_birth)
        await self.dsl.press_key("Escape", self.DATE_OF_BIRTH_INPUT)

    async def select_subject(self, subject: str) -> None:
        await self.dsl.send_keys_multi_select(
            self.SUBJECT_INPUT,
            subject,
            self.SUBJECT_SELECTED_VALUE,
            verify_against_same_element=False,
        )

    async def check_sports_hobby(self) -> None:
        await self.dsl.check_radio_button_check_box(self.HOBBIES_SPORTS_CHECKBOX)

    async def upload_picture(self, file_path: str) -> None:
        await self.dsl.upload_file(self.UPLOAD_PICTURE_INPUT, file_path)

    async def fill_current_address(self, address: str) -> None:
        await self.dsl.send_keys(self.CURRENT_ADDRESS_INPUT, address)

    @allure.step("Select state and city: {state} {city}")
    async def select_state_and_city(self, state: str, city: str) -> None:
        """Pick the first state and city options and verify the shown values."""
        await self.dsl.drop_down_by_double_click(self.STATE_DROP_DOWN, self.STATE_NCR_OPTION)
        await self.dsl.get_text(self.STATE_SELECTED_VALUE, state)
        await self.dsl.drop_down_by_double_click(self.CITY_DROP_DOWN, self.CITY_DELHI_OPTION)
        await self.dsl.get_text(self.CITY_SELECTED_VALUE, city)

    async def submit(self) -> None:
        await self.dsl.click(self.SUBMIT_BUTTON)

    @allure.step("Verify submitted form")
    async def verify_submission(
        self,
        full_name: str,
        email: str,
        gender: str,
        mobile: str,
        date_of_birth: str,
        subject: str,
        hobbies: str,
        picture: str,
        address: str,
        state: str,
        city: str,
    ) -> None:
        """Compare every row of the submission summary with the sent values."""
        await self.dsl.get_text(self.NAME_RESULT, full_name)
        await self.dsl.get_text(self.EMAIL_RESULT, email)
        await self.dsl.get_text(self.GENDER_RESULT, gender)
        await self.dsl.get_text(self.MOBILE_RESULT, mobile)
        await self.dsl.get_text(self.DATE_OF_BIRTH_RESULT, date_of_birth)
        await self.dsl.get_text(self.SUBJECTS_RESULT, subject)
        await self.dsl.get_text(self.HOBBIES_RESULT, hobbies)
        await self.dsl.get_text(self.PICTURE_RESULT, picture)
        await self.dsl.get_text(self.ADDRESS_RESULT, address)
        await self.dsl.get_text(self.STATE_AND_CITY_RESULT, f"{state} {city}")
