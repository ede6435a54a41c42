"""
Browser test kit for TaskFlow AI.

Helpers shared by the end-to-end suites: test data factories, composite
assertions, the page-bound :class:`TestHelpers` facade and the session
bootstrap that persists a signed-in browser state.
"""

from taskflow_testkit.assertions import (
    expect_element_to_be_accessible,
    expect_no_console_errors,
    expect_performance_within_budget,
)
from taskflow_testkit.auth_setup import AuthSetupError, authenticate
from taskflow_testkit.test_helpers import PerformanceResult, TestHelpers

__all__ = [
    "AuthSetupError",
    "PerformanceResult",
    "TestHelpers",
    "authenticate",
    "expect_element_to_be_accessible",
    "expect_no_console_errors",
    "expect_performance_within_budget",
]
