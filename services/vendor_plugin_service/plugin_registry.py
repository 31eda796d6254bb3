"""
Vendor Plugin Registry

Holds the vendor plugins for the lifetime of the process. Constructed once
at startup and passed to the reward engine and event aggregator.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from .models import PluginConfiguration, VendorPlugin

logger = logging.getLogger(__name__)


class PluginRegistry:
    """In-memory registry of vendor plugins, keyed by plugin id"""

    def __init__(self, plugins: Optional[Iterable[VendorPlugin]] = None):
        self._plugins: Dict[str, VendorPlugin] = {}
        for plugin in plugins or []:
            self.register(plugin)

    def register(self, plugin: VendorPlugin) -> None:
        """Add or replace a plugin; replacing keeps its original position"""
        self._plugins[plugin.id] = plugin
        logger.debug(f"Registered vendor plugin {plugin.id}")

    def get_all_plugins(self) -> List[VendorPlugin]:
        return list(self._plugins.values())

    def get_active_plugins(self) -> List[VendorPlugin]:
        return [plugin for plugin in self._plugins.values() if plugin.is_active]

    def get_plugin(self, plugin_id: str) -> Optional[VendorPlugin]:
        return self._plugins.get(plugin_id)

    def set_plugin_status(self, plugin_id: str, is_active: bool) -> bool:
        """Enable/disable a plugin. Returns False for unknown plugins."""
        plugin = self._plugins.get(plugin_id)
        if not plugin:
            return False
        plugin.is_active = is_active
        logger.info(f"Plugin {plugin_id} {'enabled' if is_active else 'disabled'}")
        return True

    def configure_plugin(self, plugin_id: str, configuration: Dict[str, Any]) -> bool:
        """Merge configuration values into a plugin's existing configuration"""
        plugin = self._plugins.get(plugin_id)
        if not plugin:
            return False
        merged = {**plugin.configuration.model_dump(), **configuration}
        plugin.configuration = PluginConfiguration.model_validate(merged)
        logger.info(f"Updated configuration for plugin {plugin_id}: {sorted(configuration)}")
        return True

    def __contains__(self, plugin_id: object) -> bool:
        return plugin_id in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)


__all__ = ["PluginRegistry"]
