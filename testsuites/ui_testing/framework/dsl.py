# ================================================================================
# Domain-Specific Language (Action Library)
# ================================================================================
#
# Named, verified user-intent operations on top of Playwright.
#
# Every operation follows the same template:
#
#   resolve -> verify (actionable or present) -> act -> check postcondition
#           -> inform_log -> return
#
# Failures are handled in one place, the with_logging decorator: it writes an
# error line (when error messages are enabled), attaches the failure to the
# Allure report and raises ActionError chained to the underlying exception.
# Public operations never call each other, so a failure is wrapped once.
#
# Every operation accepts a keyword-only ``session`` to act on another tab or
# inside a frame instead of the default page.
#
# ================================================================================

import asyncio
from functools import wraps
from typing import Awaitable, Callable, List, Optional, Union

import allure
from playwright.async_api import BrowserContext, Dialog, FrameLocator, Locator, Page
from playwright.async_api import Error as PlaywrightError

from dsl_tools.report_tools import attach_text

from .action_verifier import ActionVerifier, check_positive_integer
from .configuration import Configuration
from .exceptions import (
    ActionError,
    AttributeMismatch,
    CheckStateMismatch,
    DialogMismatch,
    IndexOutOfRange,
    InputMismatch,
    InvalidActionMode,
    NavigationMismatch,
    SelectionMismatch,
    TextMismatch,
    UnsupportedInputKind,
)
from .locator_resolver import (
    LocatorOrElement,
    Selector,
    Session,
    as_reference,
    describe,
    resolve,
)
from .message_log import MessageLog

CHECK_ACTIONS = ("check", "click")
UNCHECK_ACTIONS = ("uncheck", "click")
MODIFIER_KEYS = ("Alt", "Control", "ControlOrMeta", "Meta", "Shift")


def with_logging(failure_message: str):
    """
    Decorator wrapping a DSL operation with uniform failure reporting.

    Args:
        failure_message: Human-readable prefix, e.g. "Failed to click the element"
    """

    def decorator(func: Callable[..., Awaitable]):
        @wraps(func)
        async def wrapper(self: "Dsl", *args, **kwargs):
            try:
                return await func(self, *args, **kwargs)
            except Exception as e:
                self.log.error_log(f"{failure_message}. {func.__name__} {e}")
                detail = f"{failure_message}: {e}"
                attach_text(detail, name=f"{func.__name__} failure")
                raise ActionError(func.__name__, detail, cause=e) from e

        return wrapper

    return decorator


class Dsl:
    """
    Verified browser actions for tests and page objects.

    Example:
        dsl = Dsl(page)
        await dsl.navigate_to("https://demoqa.com/text-box")
        await dsl.send_keys("#userName", "test")
        await dsl.click("#submit")
        await dsl.get_text("#name", "Name:test")
    """

    def __init__(
        self,
        page: Page,
        context: Optional[BrowserContext] = None,
        config: Optional[Configuration] = None,
        log: Optional[MessageLog] = None,
    ):
        """
        Args:
            page: Default session for every operation
            context: Browser context, needed only to catch newly opened tabs
            config: DSL settings (defaults when omitted)
            log: Message writer (built from ``config`` when omitted)
        """
        self.page = page
        self.context = context
        self.config = config or Configuration()
        self.log = log or MessageLog(self.config)
        self.verifier = ActionVerifier(self.config, self.log)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _session(self, session: Optional[Session]) -> Session:
        return self.page if session is None else session

    def _page(self, session: Optional[Session]) -> Page:
        """Tab-level object for keyboard, dialogs, downloads and navigation."""
        return session if isinstance(session, Page) else self.page

    async def _actionable(
        self,
        locator_or_element: LocatorOrElement,
        session: Optional[Session],
        timeout: Optional[int] = None,
    ) -> Locator:
        element = resolve(locator_or_element, self._session(session))
        return await self.verifier.ensure_actionable(element, timeout)

    async def _present(
        self,
        locator_or_element: LocatorOrElement,
        session: Optional[Session],
        timeout: Optional[int] = None,
    ) -> Locator:
        element = resolve(locator_or_element, self._session(session))
        return await self.verifier.ensure_present(element, timeout)

    async def _wait_for_url(self, page: Page, expected_url: str) -> None:
        try:
            await page.wait_for_url(
                lambda current: current == expected_url,
                timeout=self.config.element_timeout,
            )
        except PlaywrightError as e:
            raise NavigationMismatch(expected_url, page.url) from e

    @staticmethod
    def _frame_of(
        locator_or_element: LocatorOrElement,
        element: Locator,
        session: Session,
    ) -> FrameLocator:
        reference = as_reference(locator_or_element)
        if isinstance(reference, Selector):
            return session.frame_locator(reference.query)
        return element.content_frame

    # =========================================================================
    # Browser Window and Navigation
    # =========================================================================

    @with_logging("Failed to set the screen size")
    @allure.step("Set screen size: {width_size}x{height_size}")
    async def screen_size(
        self,
        width_size: int,
        height_size: int,
        *,
        session: Optional[Page] = None,
    ) -> None:
        """Resize the viewport. Both sizes must be positive integers."""
        check_positive_integer("width_size", width_size)
        check_positive_integer("height_size", height_size)
        await self._page(session).set_viewport_size(
            {"width": width_size, "height": height_size}
        )
        self.log.inform_log(
            f"The screen size was set to: '{width_size}' width and '{height_size}' height."
        )

    @with_logging("Failed to navigate to the URL")
    @allure.step("Navigate to: {url}")
    async def navigate_to(self, url: str, *, session: Optional[Page] = None) -> None:
        """Open ``url`` and verify the browser landed on exactly that URL."""
        page = self._page(session)
        await page.goto(url)
        await self._wait_for_url(page, url)
        self.log.inform_log(f"The user was redirected to the URL address: {url}")

    @with_logging("Failed to navigate back to the previous URL")
    @allure.step("Go back to: {verify_url}")
    async def go_back(self, verify_url: str, *, session: Optional[Page] = None) -> None:
        page = self._page(session)
        await page.go_back()
        await self._wait_for_url(page, verify_url)
        self.log.inform_log(
            f"The user was redirected to the previous URL address: {verify_url}"
        )

    @with_logging("Failed to navigate forward to the URL")
    @allure.step("Go forward to: {verify_url}")
    async def go_forward(self, verify_url: str, *, session: Optional[Page] = None) -> None:
        page = self._page(session)
        await page.go_forward()
        await self._wait_for_url(page, verify_url)
        self.log.inform_log(
            f"The user was redirected to the forward URL address: {verify_url}"
        )

    @with_logging("Failed to open the new browser tab")
    @allure.step("Open new tab via: {locator_or_element}")
    async def open_new_tab(
        self,
        locator_or_element: LocatorOrElement,
        *,
        session: Optional[Session] = None,
    ) -> Page:
        """
        Click an element that opens a new tab and return the new tab in front.

        The returned Page can be passed as ``session`` to any other operation.
        """
        element = await self._actionable(locator_or_element, session)
        context = self.context or self._page(session).context
        async with context.expect_page(timeout=self.config.element_timeout) as page_info:
            await element.click(force=True)
        new_tab = await page_info.value
        await new_tab.bring_to_front()
        self.log.inform_log(f"The automation switched to the new tab: {new_tab.url}")
        return new_tab

    @with_logging("Failed to pause the execution")
    async def static_wait(self, period_time: int, *, session: Optional[Page] = None) -> None:
        """Pause for ``period_time`` milliseconds."""
        check_positive_integer("period_time", period_time)
        await self._page(session).wait_for_timeout(period_time)
        self.log.inform_log(
            f"The automation test paused the execution of the code for '{period_time}' milliseconds."
        )

    @with_logging("Failed to subscribe to the console messages")
    async def capture_console_errors(self, *, session: Optional[Page] = None) -> List[str]:
        """
        Report every console error of the page as an alert message.

        Returns:
            List collecting the error texts as they arrive
        """
        errors: List[str] = []

        def on_console(message) -> None:
            if message.type == "error":
                errors.append(message.text)
                self.log.alert_log(f'Error text: "{message.text}"')

        self._page(session).on("console", on_console)
        self.log.inform_log("The automation listens for console errors.")
        return errors

    # =========================================================================
    # Element Selection
    # =========================================================================

    @with_logging("Failed to retrieve or interact with the element")
    @allure.step("Select element: {locator_or_element}")
    async def element(
        self,
        locator_or_element: LocatorOrElement,
        timeout_period: Optional[int] = None,
        *,
        session: Optional[Session] = None,
    ) -> Locator:
        """Resolve and return an element that is visible, enabled and unique."""
        return await self._actionable(locator_or_element, session, timeout_period)

    @with_logging("Failed to retrieve or interact with the element")
    @allure.step("Select element (light): {locator_or_element}")
    async def element_light_assertion(
        self,
        locator_or_element: LocatorOrElement,
        timeout_period: Optional[int] = None,
        *,
        session: Optional[Session] = None,
    ) -> Locator:
        """Resolve and return an element, checking only that it is unique."""
        return await self._present(locator_or_element, session, timeout_period)

    @with_logging("Failed to retrieve or interact with the elements")
    async def get_elements_by_locator(
        self,
        locator_or_element: LocatorOrElement,
        *,
        session: Optional[Session] = None,
    ) -> List[Locator]:
        """Return one Locator per node currently matching the reference."""
        locator = resolve(locator_or_element, self._session(session))
        count = await locator.count()
        elements = [locator.nth(i) for i in range(count)]
        self.log.inform_log(
            f"Found {count} elements matching the locator: {describe(locator_or_element)}"
        )
        return elements

    # =========================================================================
    # Reading Values
    # =========================================================================

    @with_logging("Failed to get the attribute value")
    @allure.step("Get attribute {attribute_name} of: {locator_or_element}")
    async def get_attribute(
        self,
        locator_or_element: LocatorOrElement,
        attribute_name: str,
        expected_attribute_value: Optional[str] = None,
        *,
        session: Optional[Session] = None,
    ) -> Optional[str]:
        element = await self._present(locator_or_element, session)
        attribute_value = await element.get_attribute(attribute_name)
        if expected_attribute_value is not None and attribute_value != expected_attribute_value:
            raise AttributeMismatch(expected_attribute_value, attribute_value)
        self.log.inform_log(
            "The automated test reads the attribute value from the used element. "
            f"The attribute value is: '{attribute_value}'."
        )
        return attribute_value

    @with_logging("Failed to get the inner text")
    @allure.step("Get inner text of: {locator_or_element}")
    async def get_inner_text(
        self,
        locator_or_element: LocatorOrElement,
        expected_text_value: Optional[str] = None,
        *,
        session: Optional[Session] = None,
    ) -> str:
        """Rendered text of a single element."""
        element = await self._actionable(locator_or_element, session)
        text_value = await element.inner_text()
        self._check_text(expected_text_value, text_value)
        return text_value

    @with_logging("Failed to get the text")
    @allure.step("Get text of: {locator_or_element}")
    async def get_text(
        self,
        locator_or_element: LocatorOrElement,
        expected_text_value: Optional[str] = None,
        *,
        session: Optional[Session] = None,
    ) -> str:
        """Text content of a single element."""
        element = await self._actionable(locator_or_element, session)
        text_value = (await element.all_text_contents())[0]
        self._check_text(expected_text_value, text_value)
        return text_value

    @with_logging("Failed to get the text")
    @allure.step("Get text #{sequence_number} of: {locator_or_element}")
    async def get_all_texts(
        self,
        locator_or_element: LocatorOrElement,
        sequence_number: int = 0,
        expected_text_value: Optional[str] = None,
        *,
        session: Optional[Session] = None,
    ) -> str:
        """
        Text content of the ``sequence_number``-th matched node (0-indexed).

        Unlike the other readers this one accepts several matches.

        Raises:
            IndexOutOfRange: If the index is not below the number of matched nodes
        """
        element = resolve(locator_or_element, self._session(session))
        await self.verifier.ensure_matches(element)
        texts = await element.all_text_contents()
        if (
            isinstance(sequence_number, bool)
            or not isinstance(sequence_number, int)
            or not 0 <= sequence_number < len(texts)
        ):
            raise IndexOutOfRange(sequence_number, len(texts))
        text_value = texts[sequence_number]
        self._check_text(expected_text_value, text_value)
        return text_value

    def _check_text(self, expected: Optional[str], actual: str) -> None:
        if expected is not None and actual != expected:
            raise TextMismatch(expected, actual)
        self.log.inform_log(
            f"The automated test reads the element text value. The element text value is: '{actual}'."
        )

    # =========================================================================
    # Keyboard Input
    # =========================================================================

    async def _select_all_and_fill(self, element: Locator, text: str) -> None:
        # Control+A for Windows/Linux, Meta+A for macOS
        await element.press("Control+A")
        await element.press("Meta+A")
        await element.fill(text)

    @with_logging("Failed to send the keys")
    @allure.step("Send keys to: {locator_or_element}")
    async def send_keys(
        self,
        locator_or_element: LocatorOrElement,
        text: str,
        *,
        session: Optional[Session] = None,
    ) -> None:
        """Replace the content of an input with ``text`` and verify its value."""
        element = await self._actionable(locator_or_element, session)
        await self._select_all_and_fill(element, text)
        actual = await element.input_value()
        if actual != text:
            raise InputMismatch(text, actual)
        self.log.inform_log(
            f"The automated test fill with text inside the input text element with value: '{text}'."
        )

    @with_logging("Failed to send the keys")
    @allure.step("Send keys to multi-select: {locator_or_element}")
    async def send_keys_multi_select(
        self,
        locator_or_element: LocatorOrElement,
        text: str,
        verifier: Optional[LocatorOrElement] = None,
        verify_against_same_element: bool = True,
        *,
        session: Optional[Session] = None,
    ) -> None:
        """
        Type into an autocomplete/multi-select input and confirm with Enter.

        Args:
            locator_or_element: The input to type into
            text: Value to type and expect
            verifier: Element showing the selected value
            verify_against_same_element: Read the result from the input itself
                instead of ``verifier``
        """
        if not verify_against_same_element and verifier is None:
            raise UnsupportedInputKind(verifier)

        element = await self._actionable(locator_or_element, session)
        await self._select_all_and_fill(element, text)
        await element.press("Enter")

        if verify_against_same_element:
            target = element
        else:
            target = resolve(verifier, self._session(session))
        contents = await target.all_text_contents()
        actual = contents[0] if contents else ""
        if actual != text:
            raise InputMismatch(text, actual)
        self.log.inform_log(
            f"The automated test fill with text inside the multi-select element with the value: '{text}'."
        )

    @with_logging("Failed to press the key")
    @allure.step("Press {key}")
    async def press_key(
        self,
        key: str,
        locator_or_element: Optional[LocatorOrElement] = None,
        *,
        session: Optional[Session] = None,
    ) -> None:
        """
        Press a key or chord (``"Escape"``, ``"Control+A"``).

        With an element the key goes to that element once it is actionable,
        otherwise to whatever has focus in the tab.
        """
        if locator_or_element is None:
            await self._page(session).keyboard.press(key)
        else:
            element = await self._actionable(locator_or_element, session)
            await element.press(key)
        self.log.inform_log(f"The automated test pressed the key: '{key}'.")

    # =========================================================================
    # Checkboxes and Radio Buttons
    # =========================================================================

    @with_logging("Failed to check the radio button or checkbox")
    @allure.step("Check: {locator_or_element}")
    async def check_radio_button_check_box(
        self,
        locator_or_element: LocatorOrElement,
        check_or_click_action: str = "click",
        *,
        session: Optional[Session] = None,
    ) -> None:
        """
        Check an unchecked checkbox or radio button.

        Args:
            check_or_click_action: "check" uses Playwright's check, "click" a plain click
        """
        if check_or_click_action not in CHECK_ACTIONS:
            raise InvalidActionMode(check_or_click_action, CHECK_ACTIONS, "check_or_click_action")

        element = await self._actionable(locator_or_element, session)
        if await element.is_checked():
            raise CheckStateMismatch(False, True)

        if check_or_click_action == "check":
            await element.check(force=True)
        else:
            await element.click(force=True)

        await self.verifier.wait_for_checked(element, True)
        self.log.inform_log("The automated test checks the element.")

    @with_logging("Failed to uncheck the checkbox")
    @allure.step("Uncheck: {locator_or_element}")
    async def un_check_box(
        self,
        locator_or_element: LocatorOrElement,
        uncheck_or_click_action: str = "click",
        *,
        session: Optional[Session] = None,
    ) -> None:
        if uncheck_or_click_action not in UNCHECK_ACTIONS:
            raise InvalidActionMode(
                uncheck_or_click_action, UNCHECK_ACTIONS, "uncheck_or_click_action"
            )

        element = await self._actionable(locator_or_element, session)
        if not await element.is_checked():
            raise CheckStateMismatch(True, False)

        if uncheck_or_click_action == "uncheck":
            await element.uncheck(force=True)
        else:
            await element.click(force=True)

        await self.verifier.wait_for_checked(element, False)
        self.log.inform_log("The automated test unchecks the check box element.")

    # =========================================================================
    # Mouse Actions
    # =========================================================================

    @with_logging("Failed to click the element")
    @allure.step("Click: {locator_or_element}")
    async def click(
        self,
        locator_or_element: LocatorOrElement,
        *,
        session: Optional[Session] = None,
    ) -> None:
        """
        Left click. Forced, because the verifier has already certified the
        element by the DSL's own rules.
        """
        element = await self._actionable(locator_or_element, session)
        await element.click(force=True)
        self.log.inform_log(
            "The automated test makes the left click with the mouse over the element."
        )

    @with_logging("Failed to make the double-click")
    @allure.step("Double click: {locator_or_element}")
    async def double_click(
        self,
        locator_or_element: LocatorOrElement,
        *,
        session: Optional[Session] = None,
    ) -> None:
        element = await self._actionable(locator_or_element, session)
        await element.dblclick(force=True)
        self.log.inform_log(
            "The automated test makes the double mouse (left) click over the element."
        )

    @with_logging("Failed to make the right-click")
    @allure.step("Right click: {locator_or_element}")
    async def right_click(
        self,
        locator_or_element: LocatorOrElement,
        *,
        session: Optional[Session] = None,
    ) -> None:
        element = await self._actionable(locator_or_element, session)
        await element.click(button="right", force=True)
        self.log.inform_log(
            "The automated test makes the right click with the mouse over the element."
        )

    @with_logging("Failed to hover the element")
    @allure.step("Hover: {locator_or_element}")
    async def hover(
        self,
        locator_or_element: LocatorOrElement,
        *,
        session: Optional[Session] = None,
    ) -> None:
        element = await self._actionable(locator_or_element, session)
        await element.hover(force=True)
        self.log.inform_log("The automated test hovers the element.")

    @with_logging("Failed to click on the exact position")
    @allure.step("Click {locator_or_element} at ({x_value}, {y_value})")
    async def click_position(
        self,
        locator_or_element: LocatorOrElement,
        x_value: int,
        y_value: int,
        *,
        session: Optional[Session] = None,
    ) -> None:
        """Click at an offset inside the element's bounding box."""
        check_positive_integer("x_value", x_value)
        check_positive_integer("y_value", y_value)
        element = await self._actionable(locator_or_element, session)
        await element.click(position={"x": x_value, "y": y_value}, force=True)
        self.log.inform_log(
            "The automated test makes the left click with the mouse over the element on a "
            f"specific position with coordinates: X:{x_value} and Y:{y_value}."
        )

    @with_logging("Failed to click with holding the keyboard key")
    @allure.step("Click {locator_or_element} holding {keyboard_key}")
    async def click_with_holding_keyboard_key(
        self,
        locator_or_element: LocatorOrElement,
        keyboard_key: str,
        *,
        session: Optional[Session] = None,
    ) -> None:
        if keyboard_key not in MODIFIER_KEYS:
            raise InvalidActionMode(keyboard_key, MODIFIER_KEYS, "keyboard_key")
        element = await self._actionable(locator_or_element, session)
        await element.click(modifiers=[keyboard_key], force=True)
        self.log.inform_log(
            f"The automated test makes click with keyboard key/s using: '{keyboard_key}'."
        )

    # =========================================================================
    # Files
    # =========================================================================

    @with_logging("Failed to download the file")
    @allure.step("Download file via: {locator_or_element}")
    async def download_file(
        self,
        locator_or_element: LocatorOrElement,
        download_path: Optional[str] = None,
        *,
        session: Optional[Session] = None,
    ) -> str:
        """
        Click an element that starts a download and wait for it to finish.

        The download listener is armed before the click. Without
        ``download_path`` the file stays in Playwright's temporary location,
        which is removed when the browser context closes.

        Returns:
            Path of the downloaded file
        """
        element = await self._actionable(locator_or_element, session)
        page = self._page(session)
        async with page.expect_download(timeout=self.config.element_timeout) as download_info:
            await element.click(force=True)
        download = await download_info.value

        if download_path is not None:
            await download.save_as(download_path)
            saved_path = str(download_path)
        else:
            saved_path = str(await download.path())

        self.log.inform_log(f"The automated test downloads a file in the: '{saved_path}'.")
        return saved_path

    @with_logging("Failed to upload the file")
    @allure.step("Upload {file_path} to: {locator_or_element}")
    async def upload_file(
        self,
        locator_or_element: LocatorOrElement,
        file_path: Union[str, List[str]],
        *,
        session: Optional[Session] = None,
    ) -> None:
        """Set the file payload of an ``<input type=file>``."""
        # File inputs are often visually hidden behind a styled button.
        element = await self._present(locator_or_element, session)
        await element.set_input_files(file_path)
        self.log.inform_log("The automated test uploads a file successfully.")

    # =========================================================================
    # Alerts
    # =========================================================================

    async def _answer_dialog(
        self,
        locator_or_element: LocatorOrElement,
        session: Optional[Session],
        expected_message: Optional[str],
        respond: Callable[[Dialog], Awaitable[None]],
    ) -> str:
        """
        Click an element that raises a native dialog and answer it.

        The handler is registered before the click; the click and the handler
        are then awaited together, bounded by the element timeout.
        """
        element = await self._actionable(locator_or_element, session)
        page = self._page(session)
        handled: asyncio.Future = asyncio.get_running_loop().create_future()
        fired = False

        async def on_dialog(dialog: Dialog) -> None:
            nonlocal fired
            fired = True
            try:
                message = dialog.message
                if expected_message is not None and message != expected_message:
                    # Close it anyway, an open dialog blocks the page.
                    await dialog.dismiss()
                    raise DialogMismatch(expected_message, message)
                await respond(dialog)
            except Exception as e:
                if not handled.done():
                    handled.set_exception(e)
            else:
                if not handled.done():
                    handled.set_result(message)

        page.once("dialog", on_dialog)
        try:
            await asyncio.wait_for(
                asyncio.gather(element.click(force=True), handled),
                timeout=self.config.element_timeout / 1000,
            )
        finally:
            if not fired:
                page.remove_listener("dialog", on_dialog)
        return handled.result()

    @with_logging("Failed to accept the alert")
    @allure.step("Accept alert raised by: {locator_or_element}")
    async def alert_accept(
        self,
        locator_or_element: LocatorOrElement,
        expected_message: Optional[str] = None,
        fill_value: Optional[str] = None,
        *,
        session: Optional[Session] = None,
    ) -> str:
        """
        Accept the dialog raised by clicking the element.

        Args:
            expected_message: Exact dialog text to assert, if given
            fill_value: Text typed into a prompt dialog before accepting

        Returns:
            The dialog message
        """

        async def accept(dialog: Dialog) -> None:
            if fill_value is None:
                await dialog.accept()
            else:
                await dialog.accept(prompt_text=fill_value)

        message = await self._answer_dialog(locator_or_element, session, expected_message, accept)
        if fill_value is None:
            self.log.inform_log("The automation accepted the Alert pop-up window.")
        else:
            self.log.inform_log(
                f"The automation accepts and fills the value '{fill_value}' in the Alert pop-up window."
            )
        return message

    @with_logging("Failed to accept and fill the alert")
    @allure.step("Fill and accept prompt raised by: {locator_or_element}")
    async def alert_type_value_and_accept(
        self,
        locator_or_element: LocatorOrElement,
        text_value: str,
        expected_message: Optional[str] = None,
        *,
        session: Optional[Session] = None,
    ) -> str:
        async def accept(dialog: Dialog) -> None:
            await dialog.accept(prompt_text=text_value)

        message = await self._answer_dialog(locator_or_element, session, expected_message, accept)
        self.log.inform_log(
            f"The automation accepts and fills the value '{text_value}' in the Alert pop-up window."
        )
        return message

    @with_logging("Failed to dismiss the alert")
    @allure.step("Dismiss alert raised by: {locator_or_element}")
    async def alert_cancel(
        self,
        locator_or_element: LocatorOrElement,
        expected_message: Optional[str] = None,
        *,
        session: Optional[Session] = None,
    ) -> str:
        async def dismiss(dialog: Dialog) -> None:
            await dialog.dismiss()

        message = await self._answer_dialog(locator_or_element, session, expected_message, dismiss)
        self.log.inform_log("The automation dismissed the Alert pop-up window.")
        return message

    # =========================================================================
    # Frames
    # =========================================================================

    @with_logging("Failed to switch to iFrame")
    @allure.step("Switch to iFrame: {i_frame_locator}")
    async def i_frame(
        self,
        i_frame_locator: LocatorOrElement,
        verification_locator: str = "body",
        *,
        session: Optional[Session] = None,
    ) -> FrameLocator:
        """
        Focus an embedded frame.

        Returns:
            A FrameLocator usable as ``session`` for further operations
        """
        current = self._session(session)
        frame_element = await self._actionable(i_frame_locator, session)
        frame = self._frame_of(i_frame_locator, frame_element, current)
        await frame.locator(verification_locator).wait_for(
            state="attached", timeout=self.config.element_timeout
        )
        self.log.inform_log("The automation successfully switched to iFrame.")
        return frame

    @with_logging("Failed to switch to nested iFrame")
    @allure.step("Switch to nested iFrame: {parent_i_frame_locator} > {child_i_frame_locator}")
    async def i_frame_nested(
        self,
        parent_i_frame_locator: LocatorOrElement,
        child_i_frame_locator: LocatorOrElement,
        child_verification_locator: str = "body",
        *,
        session: Optional[Session] = None,
    ) -> FrameLocator:
        """Focus a frame embedded inside another frame."""
        current = self._session(session)
        parent_element = await self._actionable(parent_i_frame_locator, session)
        parent_frame = self._frame_of(parent_i_frame_locator, parent_element, current)

        child_element = resolve(child_i_frame_locator, parent_frame)
        child_frame = self._frame_of(child_i_frame_locator, child_element, parent_frame)
        await child_frame.locator(child_verification_locator).wait_for(
            state="attached", timeout=self.config.element_timeout
        )
        self.log.inform_log("The automation successfully switched to nested iFrame.")
        return child_frame

    # =========================================================================
    # Drop-down Lists
    # =========================================================================

    @with_logging("Failed to select the drop-down value")
    @allure.step("Select {locator_drop_down_value} from: {locator_drop_down_list}")
    async def drop_down_by_double_click(
        self,
        locator_drop_down_list: LocatorOrElement,
        locator_drop_down_value: LocatorOrElement,
        *,
        session: Optional[Session] = None,
    ) -> None:
        """
        Open a custom drop-down and click one of its values.

        No assertion is made on the result; the caller must verify the selection.
        """
        drop_down = await self._actionable(locator_drop_down_list, session)
        await drop_down.click(force=True)
        await self._page(session).wait_for_timeout(self.config.dropdown_settle_wait)
        value = await self._actionable(locator_drop_down_value, session)
        await value.click(force=True)

        self.log.inform_log(
            "The automated test selected successfully selected a value from the drop-down list."
        )
        self.log.alert_log(
            "This method doesn't do any assertion. You need to check if the automation test "
            "selected correct drop-down value. Method name is 'drop_down_by_double_click'."
        )

    @with_logging("Failed to select the drop-down value")
    @allure.step("Select option {drop_down_value} in: {locator_drop_down_list}")
    async def drop_down_old_style(
        self,
        locator_drop_down_list: LocatorOrElement,
        drop_down_value: str,
        *,
        session: Optional[Session] = None,
    ) -> None:
        """Select a native ``<select>`` option by value and verify the selection."""
        drop_down = await self._actionable(locator_drop_down_list, session)
        await drop_down.select_option(drop_down_value)
        selected_value = await drop_down.input_value()
        if drop_down_value not in selected_value:
            raise SelectionMismatch(drop_down_value, selected_value)
        self.log.inform_log(
            f"The automated test selected a value '{drop_down_value}' from the drop-down list."
        )


__all__ = [
    "CHECK_ACTIONS",
    "Dsl",
    "MODIFIER_KEYS",
    "UNCHECK_ACTIONS",
    "with_logging",
]
