"""
Shared pytest fixtures for the TaskFlow AI test suite.

This module contains fixtures and hooks shared across all test modules.
Browser-specific fixtures live in the e2e and ui conftest files.

Key Concepts Demonstrated:
- Test data factories backed by Faker
- Screenshot capture on failure for any test using a page
"""

import logging
from typing import Any

import pytest
from faker import Faker

from taskflow_testkit.config import get_config
from taskflow_testkit.data_generator import generate_task

logger = logging.getLogger(__name__)

# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def task_data() -> dict[str, Any]:
    """
    Provide a generated task record with a readable description.

    Returns:
        Task fixture dictionary.
    """
    return generate_task({"description": fake.sentence(nb_words=8)})


# -----------------------------------------------------------------------------
# Screenshot on Failure
# -----------------------------------------------------------------------------

@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Capture screenshot on test failure.

    This pytest hook captures a screenshot when a browser test fails,
    which is invaluable for debugging test failures.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        if page:
            screenshot_dir = get_config().SCREENSHOT_DIR
            screenshot_dir.mkdir(parents=True, exist_ok=True)

            test_name = item.name.replace("/", "_").replace("::", "_")
            screenshot_path = screenshot_dir / f"{test_name}.png"

            try:
                page.screenshot(path=str(screenshot_path))
                logger.info("Screenshot saved: %s", screenshot_path)
            except Exception as exc:  # pragma: no cover - best effort logging
                logger.warning("Failed to capture screenshot: %s", exc)
