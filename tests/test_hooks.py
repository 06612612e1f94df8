"""Tests for the plugin hook registry."""

import pytest

from schemy import Schemy
from schemy.hooks import DEFAULT_HOOKS, HookEvent, HookRegistry
from schemy.validation import compile_schema


class TestHookRegistry:
    def test_extend_fires_plugins_initialized(self, hooks, recording_plugin):
        hooks.extend(recording_plugin)
        assert recording_plugin.calls == [("plugins_initialized", [recording_plugin])]
        assert hooks.plugins == [recording_plugin]

    def test_extend_with_a_list(self, hooks, recording_plugin):
        class Silent:
            pass

        silent = Silent()
        hooks.extend([silent, recording_plugin])
        assert len(hooks) == 2
        assert recording_plugin.calls == [("plugins_initialized", [silent, recording_plugin])]

    def test_missing_callbacks_are_skipped(self, hooks):
        class OnlyParse:
            def __init__(self):
                self.seen = []

            def before_parse(self, payload):
                self.seen.append(payload)

        plugin = OnlyParse()
        hooks.extend(plugin)
        hooks.trigger(HookEvent.AFTER_VALIDATE, {})
        hooks.trigger(HookEvent.BEFORE_PARSE, "declaration")
        assert plugin.seen == ["declaration"]

    def test_plugins_run_in_registration_order(self, hooks):
        order = []

        class Plugin:
            def __init__(self, name):
                self.name = name

            def before_validate(self, payload):
                order.append(self.name)

        hooks.extend([Plugin("first"), Plugin("second")])
        hooks.trigger(HookEvent.BEFORE_VALIDATE, None)
        assert order == ["first", "second"]

    def test_callback_errors_propagate(self, hooks):
        class Broken:
            def before_parse(self, payload):
                raise RuntimeError("plugin failed")

        hooks.extend(Broken())
        with pytest.raises(RuntimeError, match="plugin failed"):
            compile_schema({"a": str}, hooks=hooks)

    def test_clear(self, hooks, recording_plugin):
        hooks.extend(recording_plugin)
        hooks.clear()
        assert len(hooks) == 0

    def test_events_accept_their_string_values(self, hooks, recording_plugin):
        hooks.extend(recording_plugin)
        hooks.trigger("after_parse", 1)
        assert recording_plugin.calls[-1] == ("after_parse", 1)


def test_lifecycle_order(hooks, recording_plugin):
    hooks.extend(recording_plugin)
    declaration = {"child": {"title": str}}
    schema = Schemy(declaration, hooks=hooks)
    data = {"child": {"title": "x"}}
    schema.validate(data)
    schema.get_validation_errors()
    schema.get_grouped_validation_errors()

    assert recording_plugin.events() == [
        "plugins_initialized",
        "before_parse",
        "after_parse",
        "before_validate",
        "after_validate",
        "get_validation_errors",
        "get_grouped_validation_errors",
    ]
    assert recording_plugin.calls[1][1] is declaration
    assert recording_plugin.calls[2][1] is schema.compiled_schema
    assert recording_plugin.calls[3][1] is data


def test_extend_on_schemy_uses_default_hooks(recording_plugin):
    try:
        Schemy.extend(recording_plugin)
        assert recording_plugin in DEFAULT_HOOKS.plugins
        Schemy({"a": str})
        assert recording_plugin.events() == ["plugins_initialized", "before_parse", "after_parse"]
    finally:
        DEFAULT_HOOKS.clear()


def test_fresh_registry_is_empty():
    assert len(HookRegistry()) == 0
