"""
Test-run configuration module.

This module defines configuration classes for the environments the
TaskFlow AI browser suite runs in (local workstation, CI). Configuration
values are loaded from environment variables with sensible defaults.
"""

import os
from pathlib import Path

# Root of the repository (one level above this package)
BASE_DIR = Path(__file__).resolve().parent.parent


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("BASE_URL", "http://localhost:8080")

    # Persisted browser session written by the auth bootstrap
    AUTH_STATE_PATH: Path = Path(
        os.environ.get("TASKFLOW_AUTH_STATE", BASE_DIR / "tests" / "auth-state.json")
    )

    TEST_EMAIL: str = os.environ.get("TASKFLOW_TEST_EMAIL", "test@taskflow.ai")
    TEST_PASSWORD: str = os.environ.get("TASKFLOW_TEST_PASSWORD", "testpassword123")

    # Timeouts (milliseconds unless noted)
    EXPECT_TIMEOUT: int = 5 * 1000
    ACTION_TIMEOUT: int = 10 * 1000
    NAVIGATION_TIMEOUT: int = 15 * 1000
    SETUP_TIMEOUT: int = 10 * 1000
    WEB_SERVER_TIMEOUT_SECONDS: int = 120

    # Local web server used when nothing is listening on BASE_URL
    WEB_SERVER_COMMAND: list[str] = ["php", "-S", "localhost:8080", "index.php"]
    REUSE_EXISTING_SERVER: bool = True

    RESULTS_DIR: Path = BASE_DIR / "test-results"
    SCREENSHOT_DIR: Path = RESULTS_DIR / "screenshots"
    RESPONSIVE_DIR: Path = RESULTS_DIR / "responsive"

    VIEWPORT: dict = {"width": 1280, "height": 720}


class LocalConfig(Config):
    """Developer workstation configuration."""

    CI: bool = False


class CIConfig(Config):
    """Continuous integration configuration."""

    CI: bool = True

    # Always start a fresh server on CI rather than attaching to a stray one
    REUSE_EXISTING_SERVER: bool = False


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses TASKFLOW_ENV, falling back to "ci" when the
             CI environment variable is set.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("TASKFLOW_ENV") or ("ci" if os.environ.get("CI") else "local")
    return config.get(env, config["default"])
