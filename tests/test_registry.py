"""
Tests for DefinitionRegistry.
"""

import logging

from zenaton.core.registry import DefinitionRegistry, get_task_registry, get_workflow_registry


class Alpha:
    pass


class Beta:
    pass


class TestDefinitionRegistry:
    """Test DefinitionRegistry storage and lookup."""

    def test_set_and_get_class(self):
        """Verify set_class() stores a class under its name."""
        registry = DefinitionRegistry("task")
        registry.set_class("alpha", Alpha)

        assert registry.get_class("alpha") is Alpha
        assert registry.has("alpha")

    def test_get_class_not_found(self):
        """Verify get_class returns None for unknown names."""
        registry = DefinitionRegistry("task")
        assert registry.get_class("nope") is None
        assert not registry.has("nope")

    def test_set_class_overwrites(self):
        """Verify the last class registered under a name wins."""
        registry = DefinitionRegistry("task")
        registry.set_class("dup", Alpha)
        registry.set_class("dup", Beta)

        assert registry.get_class("dup") is Beta
        assert registry.names() == ["dup"]

    def test_overwrite_is_logged(self, caplog):
        registry = DefinitionRegistry("workflow")
        registry.set_class("dup", Alpha)

        with caplog.at_level(logging.WARNING, logger="zenaton.core.registry"):
            registry.set_class("dup", Beta)

        assert "Workflow dup re-registered" in caplog.text

    def test_same_class_twice_is_silent(self, caplog):
        registry = DefinitionRegistry("task")
        registry.set_class("alpha", Alpha)

        with caplog.at_level(logging.WARNING, logger="zenaton.core.registry"):
            registry.set_class("alpha", Alpha)

        assert caplog.text == ""

    def test_reregister_new_name(self):
        """Verify reregister() also works for a name not yet registered."""
        registry = DefinitionRegistry("task")
        registry.reregister("alpha", Alpha)

        assert registry.get_class("alpha") is Alpha

    def test_names(self):
        registry = DefinitionRegistry("task")
        registry.set_class("a", Alpha)
        registry.set_class("b", Beta)

        assert set(registry.names()) == {"a", "b"}


class TestGlobalRegistries:
    """Test the process-wide registries."""

    def test_returns_same_instance(self):
        """Verify the accessors return singletons."""
        assert get_task_registry() is get_task_registry()
        assert get_workflow_registry() is get_workflow_registry()

    def test_tasks_and_workflows_are_separate(self):
        assert get_task_registry() is not get_workflow_registry()
        assert get_task_registry().kind == "task"
        assert get_workflow_registry().kind == "workflow"
