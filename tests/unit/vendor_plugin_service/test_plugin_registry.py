"""
Unit Tests for Plugin Registry

Tests for registration, lookup, activation and configuration.
"""

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from pydantic import ValidationError

from services.vendor_plugin_service.models import PluginType
from services.vendor_plugin_service.plugin_registry import PluginRegistry


class TestLookup:
    """Tests for plugin lookups"""

    def test_default_plugins_in_order(self, registry):
        assert [p.id for p in registry.get_all_plugins()] == [
            "humanitix", "citizen-ticket", "tickethic", "ticketebo",
        ]
        assert len(registry) == 4

    def test_get_plugin(self, registry):
        plugin = registry.get_plugin("tickethic")

        assert plugin.name == "TickEthic"
        assert plugin.type == PluginType.TICKETING
        assert "tickethic" in registry

    def test_get_unknown_plugin(self, registry):
        assert registry.get_plugin("nope") is None
        assert "nope" not in registry

    def test_empty_registry(self):
        registry = PluginRegistry()

        assert registry.get_all_plugins() == []
        assert registry.get_active_plugins() == []


class TestRegister:
    """Tests for register"""

    def test_register_appends(self, registry, make_plugin):
        registry.register(make_plugin("newvendor"))

        assert registry.get_all_plugins()[-1].id == "newvendor"
        assert len(registry) == 5

    def test_register_replaces_in_place(self, registry, make_plugin):
        registry.register(make_plugin("citizen-ticket", description="replaced"))

        assert [p.id for p in registry.get_all_plugins()][1] == "citizen-ticket"
        assert registry.get_plugin("citizen-ticket").description == "replaced"
        assert len(registry) == 4


class TestStatus:
    """Tests for set_plugin_status"""

    def test_disable_and_enable(self, registry):
        assert registry.set_plugin_status("humanitix", False) is True
        assert "humanitix" not in [p.id for p in registry.get_active_plugins()]

        assert registry.set_plugin_status("humanitix", True) is True
        assert len(registry.get_active_plugins()) == 4

    def test_unknown_plugin(self, registry):
        assert registry.set_plugin_status("nope", False) is False


class TestConfigure:
    """Tests for configure_plugin"""

    def test_merges_configuration(self, registry):
        features = list(registry.get_plugin("humanitix").configuration.supported_features)

        assert registry.configure_plugin("humanitix", {"api_key": "k1"}) is True

        configuration = registry.get_plugin("humanitix").configuration
        assert configuration.api_key == "k1"
        assert configuration.supported_features == features

    def test_supports_feature(self, registry):
        assert registry.get_plugin("humanitix").supports("anti-scalping") is True
        assert registry.get_plugin("humanitix").supports("teleportation") is False

    def test_unknown_plugin(self, registry):
        assert registry.configure_plugin("nope", {"api_key": "k"}) is False

    def test_invalid_configuration_rejected(self, registry):
        with pytest.raises(ValidationError):
            registry.configure_plugin("humanitix", {"supported_features": "not-a-list"})
