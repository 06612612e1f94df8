"""Shared pytest fixtures for schemy tests."""

import re
from typing import Any, Dict, List, Tuple

import pytest

from schemy.hooks import HookRegistry


class RecordingPlugin:
    """Plugin recording every hook call as (event, payload)."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Any]] = []

    def plugins_initialized(self, payload):
        self.calls.append(("plugins_initialized", payload))

    def before_parse(self, payload):
        self.calls.append(("before_parse", payload))

    def after_parse(self, payload):
        self.calls.append(("after_parse", payload))

    def before_validate(self, payload):
        self.calls.append(("before_validate", payload))

    def after_validate(self, payload):
        self.calls.append(("after_validate", payload))

    def get_validation_errors(self, payload):
        self.calls.append(("get_validation_errors", payload))

    def get_grouped_validation_errors(self, payload):
        self.calls.append(("get_grouped_validation_errors", payload))

    def events(self) -> List[str]:
        return [event for event, _ in self.calls]


@pytest.fixture
def recording_plugin() -> RecordingPlugin:
    return RecordingPlugin()


@pytest.fixture
def hooks() -> HookRegistry:
    """An isolated hook registry, so tests never touch DEFAULT_HOOKS."""
    return HookRegistry()


@pytest.fixture
def user_declaration() -> Dict[str, Any]:
    """A declaration exercising most rule options."""
    return {
        "name": {"type": str, "required": True, "min": 2, "max": 20},
        "age": {"type": int, "min": 0, "max": 120},
        "email": {"type": str, "regex": re.compile(r"^[^@\s]+@[^@\s]+$")},
        "role": {"type": str, "enum": ["admin", "editor", "viewer"], "default": "viewer"},
        "active": bool,
        "tags": {"type": [str], "max": 3},
        "address": {
            "street": {"type": str, "required": True},
            "zip": {"type": str, "regex": re.compile(r"^\d{5}$")},
        },
    }


@pytest.fixture
def valid_user() -> Dict[str, Any]:
    return {
        "name": "Ada",
        "age": 36,
        "email": "ada@example.com",
        "active": True,
        "tags": ["math", "engines"],
        "address": {"street": "12 St James's Square", "zip": "12345"},
    }
