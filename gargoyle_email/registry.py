"""
Notifier registry and factory for Gargoyle Email.

Notifier implementations register under a type name so the host can
select a channel from configuration without knowing its class.
"""

from collections.abc import Callable
from typing import Any

from gargoyle_email.core import Notifier


class PluginRegistry:
    """Mapping of notifier type names to implementation classes."""

    def __init__(self) -> None:
        self._notifiers: dict[str, type[Notifier]] = {}

    def register_notifier(self, type_name: str, cls: type[Notifier]) -> None:
        """Register a notifier implementation."""
        self._notifiers[type_name] = cls

    def get_notifier(self, type_name: str) -> type[Notifier]:
        """Get a notifier class by type name."""
        if type_name not in self._notifiers:
            raise ValueError(f"Unknown notifier type: {type_name}")
        return self._notifiers[type_name]

    def list_plugins(self) -> dict[str, list[str]]:
        """List all registered plugins by category."""
        return {"notifiers": list(self._notifiers.keys())}


# Global registry instance
_registry = PluginRegistry()


def create_notifier(type_name: str, config: Any) -> Notifier:
    """Create a notifier instance from configuration."""
    cls = _registry.get_notifier(type_name)
    return cls(config)


def register_notifier(type_name: str) -> Callable[[type[Notifier]], type[Notifier]]:
    """Decorator to register a notifier class."""
    def decorator(cls: type[Notifier]) -> type[Notifier]:
        _registry.register_notifier(type_name, cls)
        return cls
    return decorator


def get_registry() -> PluginRegistry:
    """Get the global plugin registry."""
    return _registry
