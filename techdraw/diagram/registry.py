"""Registry of placed component instances, keyed by caller-chosen id."""

from __future__ import annotations

import logging

from techdraw.diagram.models import ComponentInstance, Point

logger = logging.getLogger(__name__)


class ComponentRegistry:
    def __init__(self) -> None:
        self._instances: dict[str, ComponentInstance] = {}

    def register(self, instance: ComponentInstance) -> ComponentInstance | None:
        """Store an instance, returning the one it replaced (if any)."""
        previous = self._instances.get(instance.id)
        self._instances[instance.id] = instance
        if previous is not None:
            logger.info("Replaced component %s (%s -> %s)", instance.id, previous.type, instance.type)
        return previous

    def get(self, component_id: str) -> ComponentInstance | None:
        return self._instances.get(component_id)

    def pin(self, component_id: str, pin_name: str) -> Point | None:
        """Absolute position of a pin, or None if the id or pin is unknown."""
        instance = self._instances.get(component_id)
        if instance is None:
            return None
        return instance.pins.get(pin_name)

    def clear(self) -> None:
        self._instances.clear()

    def ids(self) -> list[str]:
        return list(self._instances)

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._instances

    def __len__(self) -> int:
        return len(self._instances)
