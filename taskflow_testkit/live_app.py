"""Live application helpers for the browser test suites."""

from __future__ import annotations

import logging
import os
import subprocess
import time
from collections.abc import Generator

import pytest
import requests

from taskflow_testkit.config import Config

logger = logging.getLogger(__name__)


def is_app_ready(url: str, timeout: int = 2) -> bool:
    """Return True when the application root answers without a server error."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code < 500


def wait_for_app_ready(url: str, timeout: int = 60, interval: int = 1) -> None:
    """Poll the application root until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_app_ready(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"TaskFlow AI at {url} not ready after {timeout}s")


def live_app_url(config: type[Config], base_url_env: str = "BASE_URL") -> Generator[str, None, None]:
    """
    Yield a ready application base URL, starting a local server when needed.

    Priority:
    1. Use explicit base URL from `base_url_env` (and wait for readiness).
    2. Reuse a server already answering at `config.BASE_URL`, when allowed.
    3. Start `config.WEB_SERVER_COMMAND`, wait for readiness, then stop it on exit.
    """
    provided_base_url = os.getenv(base_url_env)
    if provided_base_url:
        wait_for_app_ready(provided_base_url)
        yield provided_base_url
        return

    base_url = config.BASE_URL
    if config.REUSE_EXISTING_SERVER and is_app_ready(base_url):
        logger.info("Reusing running application at %s", base_url)
        yield base_url
        return

    try:
        server = subprocess.Popen(
            config.WEB_SERVER_COMMAND,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except FileNotFoundError:
        pytest.skip(
            f"{config.WEB_SERVER_COMMAND[0]} is not installed; set {base_url_env} to run browser tests"
        )

    logger.info("Started %s (pid %s)", " ".join(config.WEB_SERVER_COMMAND), server.pid)
    try:
        wait_for_app_ready(base_url, timeout=config.WEB_SERVER_TIMEOUT_SECONDS)
        yield base_url
    finally:
        server.terminate()
        try:
            server.wait(timeout=10)
        except subprocess.TimeoutExpired:
            server.kill()
