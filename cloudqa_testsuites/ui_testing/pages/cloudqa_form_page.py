"""
================================================================================
CloudQA Automation Practice Form Page Object
================================================================================

Page object for the CloudQA "Automation Practice Form".

Every field is located through a fallback chain, ordered from the most stable
identifier (id) to the most structurally fragile selector (positional CSS), so
markup changes degrade to a fallback instead of breaking the test.

Reads use shorter chains than writes.

================================================================================
"""

from __future__ import annotations

import allure
from playwright.sync_api import Locator

from cloudqa_testsuites.ui_testing.framework.page_base import BasePage
from cloudqa_testsuites.ui_testing.framework.strategy import By


class CloudQAFormPage(BasePage):
    """CloudQA practice form page object."""

    READY_SELECTOR = "form"

    @allure.step("Open practice form")
    def navigate_to_form(self, url: str = "") -> "CloudQAFormPage":
        """Navigate to the form and wait for it to render."""
        self.navigate(url or self.base_url)
        return self

    # =========================================================================
    # First Name
    # =========================================================================

    def _first_name_field(self, description: str, for_reading: bool = False) -> Locator:
        strategies = [
            By.id("fname"),
            By.name("First Name"),
            By.xpath("//input[@placeholder='Name']"),
        ]
        if not for_reading:
            strategies.append(By.css("input[class*='form-control']:first-of-type"))
        return self.locator.find_element(description, *strategies)

    @allure.step("Enter first name: {first_name}")
    def enter_first_name(self, first_name: str) -> None:
        field = self._first_name_field("First Name Field")

        def clear_and_type() -> None:
            field.clear()
            field.fill(first_name)

        self.executor.execute("Enter First Name", clear_and_type)

    def get_first_name_value(self) -> str:
        field = self._first_name_field("First Name Field for Reading", for_reading=True)
        return field.input_value() or ""

    # =========================================================================
    # State Dropdown
    # =========================================================================

    @allure.step("Select state: {state_name}")
    def select_state(self, state_name: str) -> None:
        dropdown = self.locator.find_element(
            "State Dropdown",
            By.id("state"),
            By.name("State"),
            By.xpath("//select[contains(@class,'form-control')]"),
            By.css("select[name='State']"),
        )
        self.executor.execute(
            f"Select State: {state_name}",
            lambda: dropdown.select_option(label=state_name),
        )

    def get_selected_state(self) -> str:
        """Visible text of the selected option."""
        dropdown = self.locator.find_element(
            "State Dropdown for Reading",
            By.id("state"),
            By.name("State"),
        )
        return dropdown.evaluate(
            "el => el.selectedIndex >= 0 ? el.options[el.selectedIndex].text : ''"
        )

    # =========================================================================
    # Hobby Checkboxes
    # =========================================================================

    @allure.step("Select hobby: {hobby_name}")
    def select_hobby(self, hobby_name: str) -> None:
        """Check the hobby checkbox; an already checked box is left alone."""
        checkbox = self.locator.find_element(
            f"{hobby_name} Hobby Checkbox",
            By.id(hobby_name),
            By.xpath(f"//input[@value='{hobby_name}']"),
            By.xpath(f"//input[@type='checkbox']/..//span[text()='{hobby_name}']/../input"),
            By.css(f"input[type='checkbox'][value='{hobby_name}']"),
        )

        def click_if_unchecked() -> None:
            if not checkbox.is_checked():
                checkbox.click()

        self.executor.execute(f"Select Hobby: {hobby_name}", click_if_unchecked)

    def is_hobby_selected(self, hobby_name: str) -> bool:
        checkbox = self.locator.find_element(
            f"{hobby_name} Hobby Checkbox for Validation",
            By.id(hobby_name),
            By.xpath(f"//input[@value='{hobby_name}']"),
        )
        return checkbox.is_checked()


__all__ = [
    "CloudQAFormPage",
]
