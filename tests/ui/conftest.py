"""
Playwright fixtures for browser-level tests of the test kit itself.

These tests need a real browser but not the TaskFlow AI server: small
HTML pages are served from a fake origin through Playwright's request
interception, so each test controls exactly what the DOM looks like.

Key Concepts Demonstrated:
- Serving fixture pages with context.route (no live server)
- Browser context management
- Fixture pages as plain HTML strings
"""

from collections.abc import Callable, Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page, Route

from tests.ui.fixture_pages import TASK_BOARD_HTML

APP_ORIGIN = "http://taskflow.test"


# -----------------------------------------------------------------------------
# Browser Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def browser_context_args():
    """
    Configure browser context options.

    Returns:
        dict: Browser context configuration pointing at the fake origin.
    """
    return {
        "base_url": APP_ORIGIN,
        "viewport": {"width": 1280, "height": 720},
    }


@pytest.fixture(scope="function")
def context(browser: Browser, browser_context_args: dict) -> Generator[BrowserContext, None, None]:
    """
    Create a fresh browser context for each test.

    Args:
        browser: Playwright browser instance.
        browser_context_args: Context configuration.

    Yields:
        BrowserContext: Fresh browser context.
    """
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def serve_html(context: BrowserContext) -> Callable[[str, str], str]:
    """
    Serve an HTML document at a path on the fake origin.

    Returns:
        Function ``(path, html) -> absolute url``.
    """
    pages: dict[str, str] = {}

    def _handle(route: Route) -> None:
        path = "/" + route.request.url[len(APP_ORIGIN):].lstrip("/").split("?")[0]
        if path in pages:
            route.fulfill(status=200, content_type="text/html", body=pages[path])
        elif path == "/favicon.ico":
            route.fulfill(status=204)
        else:
            route.fulfill(status=404, content_type="text/plain", body="not found")

    context.route(f"{APP_ORIGIN}/**", _handle)

    def _serve(path: str, html: str) -> str:
        pages[path] = html
        return f"{APP_ORIGIN}{path}"

    return _serve


@pytest.fixture
def task_board(page: Page, serve_html) -> Page:
    """Page showing the task board fixture, already loaded."""
    page.goto(serve_html("/", TASK_BOARD_HTML))
    return page
