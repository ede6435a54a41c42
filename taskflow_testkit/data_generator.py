"""
Test data factories for TaskFlow AI browser tests.

Every factory returns a plain dictionary built from generated defaults
with caller overrides laid on top key-by-key.  Values that must be
unique for the lifetime of a run (titles, names, emails) embed either a
millisecond timestamp or a random alphanumeric id so that UI lists keyed
by display text never collide.
"""

from __future__ import annotations

import string
import time
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from faker import Faker

fake = Faker()

CHAT_PROMPTS = (
    "How can I improve my productivity today?",
    "What tasks should I prioritize?",
    "Can you help me organize my schedule?",
    "Show me my overdue tasks",
    "Create a task for team meeting preparation",
)

DEFAULT_PROJECT_COLOR = "#3B82F6"


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def random_id(length: int = 13) -> str:
    """Return a lowercase alphanumeric id, e.g. ``k3j9x0q2mz7ta``."""
    return fake.lexify("?" * length, letters=string.ascii_lowercase + string.digits)


def _merge(defaults: dict[str, Any], overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    record = dict(defaults)
    if overrides:
        record.update(overrides)
    return record


def generate_test_data() -> dict[str, Any]:
    """
    Build one set of collision-free identity values.

    Returns:
        Dictionary with ``task_title``, ``project_name``, ``user_email``,
        and the raw ``timestamp`` / ``random_id`` they were derived from.
    """
    timestamp = _timestamp_ms()
    rid = random_id()
    return {
        "task_title": f"Test Task {timestamp}",
        "project_name": f"Test Project {rid}",
        "user_email": f"test+{rid}@taskflow.ai",
        "timestamp": timestamp,
        "random_id": rid,
    }


def generate_task(overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """
    Build a task record.

    Args:
        overrides: Field values that replace the generated defaults.

    Returns:
        Dictionary with ``title``, ``description``, ``priority``,
        ``status``, ``project_id`` and ``due_date`` (plus any extra
        override keys).
    """
    return _merge(
        {
            "title": f"Test Task {_timestamp_ms()}",
            "description": f"Description for test task created at {_now_iso()}",
            "priority": "medium",
            "status": "active",
            "project_id": None,
            "due_date": None,
        },
        overrides,
    )


def generate_project(overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build a project record (``name``, ``description``, ``color``)."""
    return _merge(
        {
            "name": f"Test Project {_timestamp_ms()}",
            "description": "Test project created for automated testing",
            "color": DEFAULT_PROJECT_COLOR,
        },
        overrides,
    )


def generate_user(overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build a user record (``name``, ``email``, ``role``)."""
    rid = random_id()
    return _merge(
        {
            "name": f"Test User {rid}",
            "email": f"test+{rid}@taskflow.ai",
            "role": "user",
        },
        overrides,
    )


def generate_chat_message(overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """
    Build a chat message record.

    The ``content`` is drawn uniformly from :data:`CHAT_PROMPTS` unless
    overridden.
    """
    return _merge(
        {
            "content": fake.random_element(CHAT_PROMPTS),
            "timestamp": _now_iso(),
            "type": "user",
        },
        overrides,
    )
