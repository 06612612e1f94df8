"""Lifecycle hooks for schema compilation and validation.

A plugin is any object exposing one or more callables named after a
``HookEvent`` value (``before_parse``, ``after_validate``...). Each callable
receives a single payload argument; return values are ignored.

Example:
    ```python
    class AuditPlugin:
        def after_validate(self, data):
            audit_log.append(dict(data))

    hooks = HookRegistry()
    hooks.extend(AuditPlugin())
    schema = Schemy({"name": str}, hooks=hooks)
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Sequence, Union


class HookEvent(str, Enum):
    """Points at which the compiler and engine notify plugins."""

    PLUGINS_INITIALIZED = "plugins_initialized"
    BEFORE_PARSE = "before_parse"
    AFTER_PARSE = "after_parse"
    BEFORE_VALIDATE = "before_validate"
    AFTER_VALIDATE = "after_validate"
    GET_VALIDATION_ERRORS = "get_validation_errors"
    GET_GROUPED_VALIDATION_ERRORS = "get_grouped_validation_errors"


class HookRegistry:
    """Ordered collection of plugins notified at lifecycle events.

    Register plugins before compiling any schema that uses the registry and do
    not extend it while a validation is running.
    """

    def __init__(self, plugins: Sequence[Any] = ()) -> None:
        self._plugins: List[Any] = list(plugins)

    @property
    def plugins(self) -> List[Any]:
        return list(self._plugins)

    def extend(self, plugins: Union[Any, Sequence[Any]]) -> None:
        """Register one plugin or a list of plugins.

        Fires ``plugins_initialized`` with the list of newly added plugins.
        """
        added = list(plugins) if isinstance(plugins, (list, tuple)) else [plugins]
        self._plugins.extend(added)
        self.trigger(HookEvent.PLUGINS_INITIALIZED, added)

    def trigger(self, event: HookEvent, payload: Any) -> None:
        """Call every plugin callback registered for an event, in registration order."""
        if not self._plugins:
            return
        name = HookEvent(event).value
        for plugin in self._plugins:
            callback = getattr(plugin, name, None)
            if callable(callback):
                callback(payload)

    def clear(self) -> None:
        self._plugins.clear()

    def __len__(self) -> int:
        return len(self._plugins)


# Registry used by schemas constructed without an explicit one
DEFAULT_HOOKS = HookRegistry()


__all__ = ["HookEvent", "HookRegistry", "DEFAULT_HOOKS"]
