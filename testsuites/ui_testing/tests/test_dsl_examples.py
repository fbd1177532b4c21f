"""
================================================================================
DSL Operation UI Tests (Async / Playwright)
================================================================================

One scenario per DSL operation against the demoqa.com practice pages.

Run with:
    UI_E2E=1 pytest testsuites/ui_testing/tests

================================================================================
"""

import allure
import pytest

from testsuites.ui_testing.framework.dsl import Dsl
from testsuites.ui_testing.framework.exceptions import ActionError, TextMismatch


@allure.epic("UI Testing")
@allure.feature("DSL Operations")
class TestReadingValues:
    """Text and attribute readers."""

    @allure.story("Text")
    @allure.title("get_text returns and verifies the label text")
    @pytest.mark.P0
    @pytest.mark.smoke_ui
    @pytest.mark.asyncio
    async def test_get_text(self, dsl: Dsl, base_url: str):
        await dsl.navigate_to(f"{base_url}/text-box")

        await dsl.get_text("#permanentAddress-label", "Permanent Address")
        element = await dsl.element("#permanentAddress-label", 10000)
        assert await dsl.get_text(element) == "Permanent Address"

    @allure.story("Text")
    @allure.title("get_text fails with TextMismatch on a different text")
    @pytest.mark.P1
    @pytest.mark.regression_ui
    @pytest.mark.asyncio
    async def test_get_text_mismatch(self, dsl: Dsl, base_url: str):
        await dsl.navigate_to(f"{base_url}/text-box")

        with pytest.raises(ActionError) as exc_info:
            await dsl.get_text("#permanentAddress-label", "Current Address")

        assert exc_info.value.operation == "get_text"
        assert isinstance(exc_info.value.cause, TextMismatch)

    @allure.story("Text")
    @allure.title("get_all_texts reads one of several matches")
    @pytest.mark.P1
    @pytest.mark.regression_ui
    @pytest.mark.asyncio
    async def test_get_all_texts(self, dsl: Dsl, base_url: str):
        await dsl.navigate_to(f"{base_url}/text-box")

        assert await dsl.get_all_texts("label", 0) == "Full Name"

    @allure.story("Attributes")
    @allure.title("get_attribute reads the placeholder")
    @pytest.mark.P1
    @pytest.mark.regression_ui
    @pytest.mark.asyncio
    async def test_get_attribute(self, dsl: Dsl, base_url: str):
        await dsl.navigate_to(f"{base_url}/text-box")

        await dsl.get_attribute("//input[@id='userName']", "placeholder", "Full Name")


@allure.epic("UI Testing")
@allure.feature("DSL Operations")
class TestInteractions:
    """Clicks, keyboard input, checkboxes and drop-downs."""

    @allure.story("Keyboard")
    @allure.title("send_keys replaces the input value")
    @pytest.mark.P0
    @pytest.mark.smoke_ui
    @pytest.mark.asyncio
    async def test_send_keys(self, dsl: Dsl, base_url: str):
        await dsl.navigate_to(f"{base_url}/text-box")

        await dsl.send_keys("#userName", "first")
        await dsl.send_keys("#userName", "test")

    @allure.story("Mouse")
    @allure.title("click, double_click and right_click trigger their messages")
    @pytest.mark.P0
    @pytest.mark.smoke_ui
    @pytest.mark.asyncio
    async def test_click_variants(self, dsl: Dsl, base_url: str):
        await dsl.navigate_to(f"{base_url}/buttons")

        await dsl.click("//button[text()='Click Me']")
        await dsl.get_text("#dynamicClickMessage", "You have done a dynamic click")

        await dsl.double_click("#doubleClickBtn")
        await dsl.get_text("#doubleClickMessage", "You have done a double click")

        await dsl.right_click("#rightClickBtn")
        await dsl.get_text("#rightClickMessage", "You have done a right click")

    @allure.story("Checkboxes")
    @allure.title("check_radio_button_check_box selects a radio button")
    @pytest.mark.P1
    @pytest.mark.regression_ui
    @pytest.mark.asyncio
    async def test_radio_button(self, dsl: Dsl, base_url: str):
        await dsl.navigate_to(f"{base_url}/radio-button")

        await dsl.check_radio_button_check_box("label[for='yesRadio']", "check")
        await dsl.get_text(".text-success", "Yes")

    @allure.story("Checkboxes")
    @allure.title("un_check_box clears a checked checkbox")
    @pytest.mark.P1
    @pytest.mark.regression_ui
    @pytest.mark.asyncio
    async def test_un_check_box(self, dsl: Dsl, base_url: str):
        home = "//label[@for='tree-node-home']"
        await dsl.navigate_to(f"{base_url}/checkbox")

        await dsl.check_radio_button_check_box(home)
        await dsl.un_check_box(home, "uncheck")

    @allure.story("Drop-down")
    @allure.title("drop_down_old_style selects a native option")
    @pytest.mark.P1
    @pytest.mark.regression_ui
    @pytest.mark.asyncio
    async def test_drop_down_old_style(self, dsl: Dsl, base_url: str):
        await dsl.navigate_to(f"{base_url}/select-menu")

        await dsl.drop_down_old_style("#oldSelectMenu", "2")

    @allure.story("Drop-down")
    @allure.title("drop_down_by_double_click picks a custom option")
    @pytest.mark.P2
    @pytest.mark.regression_ui
    @pytest.mark.asyncio
    async def test_drop_down_by_double_click(self, dsl: Dsl, base_url: str):
        await dsl.navigate_to(f"{base_url}/select-menu")

        await dsl.drop_down_by_double_click("#withOptGroup", "#react-select-2-option-0-0")


@allure.epic("UI Testing")
@allure.feature("DSL Operations")
class TestBrowserFeatures:
    """Alerts, frames, files, tabs and navigation."""

    @allure.story("Alerts")
    @allure.title("alert_cancel dismisses a confirm box")
    @pytest.mark.P1
    @pytest.mark.regression_ui
    @pytest.mark.asyncio
    async def test_alert_cancel(self, dsl: Dsl, base_url: str):
        await dsl.navigate_to(f"{base_url}/alerts")

        await dsl.alert_cancel("#confirmButton", "Do you confirm action?")
        await dsl.get_text("#confirmResult", "You selected Cancel")

    @allure.story("Alerts")
    @allure.title("alert_type_value_and_accept fills a prompt")
    @pytest.mark.P1
    @pytest.mark.regression_ui
    @pytest.mark.asyncio
    async def test_alert_type_value_and_accept(self, dsl: Dsl, base_url: str):
        await dsl.navigate_to(f"{base_url}/alerts")

        await dsl.alert_type_value_and_accept("#promtButton", "test", "Please enter your name")
        await dsl.get_text("#promptResult", "You entered test")

    @allure.story("Frames")
    @allure.title("i_frame_nested focuses the child frame")
    @pytest.mark.P1
    @pytest.mark.regression_ui
    @pytest.mark.asyncio
    async def test_nested_frames(self, dsl: Dsl, base_url: str):
        await dsl.navigate_to(f"{base_url}/nestedframes")

        child = await dsl.i_frame_nested("#frame1", "//iframe[@srcdoc]", "//body/p")
        await dsl.get_text("//body/p", "Child Iframe", session=child)

    @allure.story("Files")
    @allure.title("upload_file and download_file move files through the page")
    @pytest.mark.P1
    @pytest.mark.regression_ui
    @pytest.mark.asyncio
    async def test_upload_and_download(self, dsl: Dsl, base_url: str, upload_file, tmp_path):
        await dsl.navigate_to(f"{base_url}/upload-download")

        await dsl.upload_file("#uploadFile", str(upload_file))
        await dsl.get_text("#uploadedFilePath", f"C:\\fakepath\\{upload_file.name}")

        target = tmp_path / "download" / "file.jpg"
        saved = await dsl.download_file("#downloadButton", str(target))
        assert saved == str(target)
        assert target.exists()

    @allure.story("Tabs")
    @allure.title("open_new_tab returns a session for the new tab")
    @pytest.mark.P2
    @pytest.mark.regression_ui
    @pytest.mark.asyncio
    async def test_open_new_tab(self, dsl: Dsl, base_url: str):
        await dsl.navigate_to(f"{base_url}/browser-windows")

        new_tab = await dsl.open_new_tab("#tabButton")
        await dsl.get_text("#sampleHeading", "This is a sample page", session=new_tab)

    @allure.story("Navigation")
    @allure.title("go_back and go_forward land on the expected URLs")
    @pytest.mark.P2
    @pytest.mark.regression_ui
    @pytest.mark.asyncio
    async def test_history_navigation(self, dsl: Dsl, base_url: str):
        first, second = f"{base_url}/buttons", f"{base_url}/text-box"
        await dsl.navigate_to(first)
        await dsl.navigate_to(second)

        await dsl.go_back(first)
        await dsl.go_forward(second)

    @allure.story("Window")
    @allure.title("screen_size resizes the viewport")
    @pytest.mark.P3
    @pytest.mark.regression_ui
    @pytest.mark.asyncio
    async def test_screen_size(self, dsl: Dsl):
        await dsl.screen_size(1280, 720)

        assert dsl.page.viewport_size == {"width": 1280, "height": 720}
