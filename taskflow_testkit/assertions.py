"""
Composite assertions shared by the TaskFlow AI feature suites.

Each helper fails the enclosing test with an ``AssertionError`` (raised
directly or by Playwright's ``expect``) on the first unmet condition.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from playwright.sync_api import ConsoleMessage, Locator, Page, expect

logger = logging.getLogger(__name__)

INTERACTIVE_TAGS = frozenset({"button", "a", "input", "select", "textarea"})
INTERACTIVE_ROLES = frozenset({"button", "link", "textbox", "combobox"})

CONSOLE_OBSERVATION_MS = 1000
BENIGN_CONSOLE_SUBSTRING = "favicon"


def is_interactive(tag_name: str, role: str | None) -> bool:
    """Return True when an element should be reachable by keyboard."""
    return tag_name.lower() in INTERACTIVE_TAGS or (role is not None and role in INTERACTIVE_ROLES)


def expect_element_to_be_accessible(locator: Locator) -> None:
    """
    Assert that an element is visible, focusable if interactive, and labelled.

    Args:
        locator: Element under test.
    """
    expect(locator).to_be_visible()

    tag_name = locator.evaluate("el => el.tagName.toLowerCase()")
    role = locator.get_attribute("role")
    if is_interactive(tag_name, role):
        locator.focus()
        expect(locator).to_be_focused()

    aria_label = locator.get_attribute("aria-label")
    aria_labelledby = locator.get_attribute("aria-labelledby")
    title = locator.get_attribute("title")
    assert aria_label or aria_labelledby or title, (
        f"<{tag_name}> element has none of aria-label, aria-labelledby or title"
    )


def expect_performance_within_budget(
    action: Callable[[], Any], budget_ms: float, action_name: str
) -> float:
    """
    Run ``action`` and assert it finished within ``budget_ms``.

    Returns:
        Elapsed time in milliseconds.
    """
    start = time.perf_counter()
    action()
    duration = (time.perf_counter() - start) * 1000

    assert duration <= budget_ms, (
        f"{action_name} took {duration:.0f}ms, over budget of {budget_ms}ms"
    )
    logger.info("%s completed in %.0fms (budget: %sms)", action_name, duration, budget_ms)
    return duration


def expect_no_console_errors(page: Page, window_ms: int = CONSOLE_OBSERVATION_MS) -> None:
    """
    Watch the page console for ``window_ms`` and fail on any error message.

    Favicon fetch failures are ignored.  The listener is removed before
    asserting so it never outlives the observation window.
    """
    errors: list[str] = []

    def _on_console(message: ConsoleMessage) -> None:
        if message.type == "error" and BENIGN_CONSOLE_SUBSTRING not in message.text:
            errors.append(message.text)

    page.on("console", _on_console)
    try:
        page.wait_for_timeout(window_ms)
    finally:
        page.remove_listener("console", _on_console)

    assert not errors, f"Console errors logged: {errors}"
