"""Unit tests for the executor registry

Tests cover:
- Default registry contents
- Registration, replacement and unregistration
- Isolation between private registries and the global default
"""

import pytest

from nodeflow.nodes.base import NodeExecutor
from nodeflow.nodes.extra_nodes import SquareRootNodeExecutor
from nodeflow.nodes.registry import NodeRegistry, get_registry

BUILTIN_TYPES = {"inputNode", "mathNode", "textNode", "conditionNode", "outputNode"}


class ConstantExecutor(NodeExecutor):
    """Always returns the same value."""

    node_type = "constantNode"

    def __init__(self, value=42):
        self.value = value

    def execute(self, data, context):
        return self.value


class TestDefaultRegistry:
    """Test the process-wide default registry."""

    def test_builtins_registered(self):
        assert BUILTIN_TYPES <= set(get_registry().list_node_types())

    def test_get_registry_returns_same_instance(self):
        assert get_registry() is get_registry()

    def test_extra_nodes_not_in_default(self):
        assert get_registry().get_executor("squareRootNode") is None

    def test_builtin_metadata(self):
        metadata = get_registry().get_node_metadata("mathNode")
        assert metadata["category"] == "math"
        assert metadata["description"]


class TestRegistryOperations:
    """Test register / get / unregister / list."""

    def test_new_registry_has_builtins(self):
        registry = NodeRegistry()
        assert set(registry.list_node_types()) == BUILTIN_TYPES
        assert len(registry) == 5

    def test_empty_registry(self):
        registry = NodeRegistry(include_builtins=False)
        assert registry.list_node_types() == []

    def test_register_and_get(self):
        registry = NodeRegistry(include_builtins=False)
        executor = ConstantExecutor()
        registry.register(executor, {"category": "test"})

        assert registry.get_executor("constantNode") is executor
        assert "constantNode" in registry
        assert registry.get_node_metadata("constantNode") == {"category": "test"}

    def test_get_unknown_returns_none(self):
        assert NodeRegistry().get_executor("doesNotExist") is None

    def test_last_registration_wins(self):
        registry = NodeRegistry(include_builtins=False)
        registry.register(ConstantExecutor(1))
        second = ConstantExecutor(2)
        registry.register(second)

        assert registry.get_executor("constantNode") is second
        assert registry.list_node_types() == ["constantNode"]

    def test_unregister(self):
        registry = NodeRegistry()
        assert registry.unregister("textNode") is True
        assert registry.get_executor("textNode") is None
        assert registry.unregister("textNode") is False

    def test_register_without_node_type(self):
        class Nameless(NodeExecutor):
            def execute(self, data, context):
                return None

        with pytest.raises(ValueError, match="node_type"):
            NodeRegistry().register(Nameless())


class TestRegistryIsolation:
    """Private registries never leak into the default one."""

    def test_private_registration_not_visible_in_default(self):
        private = NodeRegistry()
        private.register(SquareRootNodeExecutor())

        assert private.get_executor("squareRootNode") is not None
        assert get_registry().get_executor("squareRootNode") is None

    def test_private_unregister_does_not_touch_default(self):
        private = NodeRegistry()
        private.unregister("mathNode")

        assert get_registry().get_executor("mathNode") is not None

    def test_default_extension_is_global(self):
        registry = get_registry()
        registry.register(ConstantExecutor())
        try:
            assert get_registry().get_executor("constantNode") is not None
            assert NodeRegistry().get_executor("constantNode") is None
        finally:
            registry.unregister("constantNode")
