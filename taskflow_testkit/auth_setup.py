"""
One-time session bootstrap for the TaskFlow AI browser suites.

:func:`authenticate` signs in (or, for builds without a login screen,
waits for the app shell), flags localStorage for test mode and persists
the browser context's cookies and storage to a JSON file.  Every later
test context is created from that file, so it has to be regenerated
whenever the credentials, login flow or storage keys change.

The module also carries the run-level housekeeping that surrounds the
bootstrap: asking the app to reset its test data, scrubbing test keys
from browser storage and removing the persisted session afterwards.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from playwright.sync_api import Browser, Page, expect
from playwright.sync_api import Error as PlaywrightError

from taskflow_testkit.config import Config

logger = logging.getLogger(__name__)

LOGIN_FORM = '[data-testid="login-form"]'
EMAIL_INPUT = '[data-testid="email-input"]'
PASSWORD_INPUT = '[data-testid="password-input"]'
LOGIN_BUTTON = '[data-testid="login-button"]'
DASHBOARD = '[data-testid="dashboard"]'
APP_READY = "main, .app-container, #app"

TEST_MODE_KEY = "playwright_test_mode"
SESSION_ID_KEY = "test_session_id"

TEST_SETUP_ENDPOINT = "/api/test-setup"

_SET_TEST_FLAGS_JS = f"""
() => {{
    localStorage.setItem('{TEST_MODE_KEY}', 'true');
    localStorage.setItem('{SESSION_ID_KEY}', Date.now().toString());
}}
"""

_SCRUB_STORAGE_JS = """
async () => {
    Object.keys(localStorage).forEach(key => {
        if (key.includes('test') || key.includes('playwright')) {
            localStorage.removeItem(key);
        }
    });
    sessionStorage.clear();
    if ('indexedDB' in window && indexedDB.databases) {
        const dbs = await indexedDB.databases();
        for (const db of dbs) {
            if (db.name && db.name.includes('test')) {
                indexedDB.deleteDatabase(db.name);
            }
        }
    }
}
"""


class AuthSetupError(RuntimeError):
    """Raised when the app never reaches a signed-in or ready state."""


def authenticate(
    page: Page,
    storage_state_path: str | Path,
    *,
    email: str,
    password: str,
    timeout: int = 10000,
) -> Path:
    """
    Establish an app-ready session and persist it.

    Args:
        page: Page in a fresh context whose ``base_url`` points at the app.
        storage_state_path: Where to write the serialized context state.
        email: Login email used when a login form is shown.
        password: Login password used when a login form is shown.
        timeout: Milliseconds to wait for the post-login or ready marker.

    Returns:
        Path of the written storage-state file.

    Raises:
        AuthSetupError: Navigation failed, or the dashboard or app shell did not
            appear and settle in time.
    """
    logger.info("Setting up authentication...")

    try:
        page.goto("/")
        expect(page.locator("body")).to_be_visible()

        if page.locator(LOGIN_FORM).is_visible():
            page.fill(EMAIL_INPUT, email)
            page.fill(PASSWORD_INPUT, password)
            page.click(LOGIN_BUTTON)
            expect(page.locator(DASHBOARD)).to_be_visible(timeout=timeout)
        else:
            expect(page.locator(APP_READY).first).to_be_visible(timeout=timeout)

        page.wait_for_load_state("networkidle")
    except (AssertionError, PlaywrightError) as exc:
        raise AuthSetupError(f"Application did not become ready at {page.url}: {exc}") from exc

    page.evaluate(_SET_TEST_FLAGS_JS)

    path = Path(storage_state_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    page.context.storage_state(path=path)

    logger.info("Authentication setup completed, state saved to %s", path)
    return path


def request_test_data_action(page: Page, action: str) -> bool:
    """
    Ask the application to perform a test-data action.

    The endpoint is optional on the server side, so an unreachable or
    rejecting endpoint is logged and reported as ``False``.

    Args:
        page: Page whose context ``base_url`` points at the app.
        action: Action name, e.g. ``clear_test_data``.

    Returns:
        True when the server accepted the request.
    """
    try:
        response = page.request.post(TEST_SETUP_ENDPOINT, data={"action": action})
    except PlaywrightError as exc:
        logger.info("Test setup API not available (%s): %s", action, exc)
        return False

    if not response.ok:
        logger.info("Test setup endpoint rejected %s with HTTP %s", action, response.status)
        return False
    return True


def scrub_browser_storage(page: Page) -> None:
    """Remove test keys from localStorage, clear sessionStorage and test IndexedDB databases."""
    page.evaluate(_SCRUB_STORAGE_JS)


def remove_storage_state(storage_state_path: str | Path) -> bool:
    """Delete the persisted session file; returns whether a file was removed."""
    path = Path(storage_state_path)
    if not path.exists():
        return False
    path.unlink()
    logger.info("Removed %s", path)
    return True


def global_setup(browser: Browser, base_url: str, config: type[Config]) -> Path:
    """
    Reset test data, sign in once and persist the session for the run.

    A failed bootstrap ends the whole pytest session with exit code 1:
    every browser test depends on the persisted session.

    Returns:
        Path of the written storage-state file.
    """
    config.RESULTS_DIR.mkdir(parents=True, exist_ok=True)

    context = browser.new_context(base_url=base_url, ignore_https_errors=True)
    page = context.new_page()
    try:
        request_test_data_action(page, "clear_test_data")
        return authenticate(
            page,
            config.AUTH_STATE_PATH,
            email=config.TEST_EMAIL,
            password=config.TEST_PASSWORD,
            timeout=config.SETUP_TIMEOUT,
        )
    except AuthSetupError as exc:
        pytest.exit(f"Authentication setup failed: {exc}", returncode=1)
    finally:
        context.close()


def global_teardown(browser: Browser, base_url: str, storage_state_path: str | Path) -> None:
    """Scrub test storage, ask the app to drop test data and delete the session file."""
    logger.info("Starting global teardown...")
    context = browser.new_context(
        base_url=base_url, storage_state=str(storage_state_path), ignore_https_errors=True
    )
    try:
        page = context.new_page()
        page.goto("/")
        scrub_browser_storage(page)
        request_test_data_action(page, "cleanup_test_data")
    except PlaywrightError as exc:
        logger.warning("Global teardown failed: %s", exc)
    finally:
        context.close()
        remove_storage_state(storage_state_path)
    logger.info("Global teardown completed")
