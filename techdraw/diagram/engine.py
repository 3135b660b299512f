"""TechDrawEngine — executes placement and connection instructions.

Callers drive the engine with an ordered sequence of ``add`` and ``connect``
calls. Each call runs to completion and writes its primitives straight into
the drawing sink; nothing is batched or deferred. The engine is meant for a
single writer and does no locking.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Union

from techdraw.diagram.models import ComponentConfig, ComponentInstance, Point, Pose
from techdraw.diagram.registry import ComponentRegistry
from techdraw.diagram.routing import manhattan_route, path_data
from techdraw.diagram.sink import DrawingSink, Primitive, SvgDrawingSink, format_number
from techdraw.diagram.style import (
    COLOR_LABEL,
    COLOR_SYMBOL,
    COLOR_WIRE,
    FONT_LABEL,
    LABEL_OFFSET_Y,
    SOLDER_DOT_RADIUS,
    STROKE_PRIMARY,
)
from techdraw.diagram.symbols import Symbol, symbol_for, type_key
from techdraw.errors import DuplicateComponentError
from techdraw.types import ComponentType, DuplicateIdPolicy, EngineState

log = logging.getLogger(__name__)

ConfigLike = Union[ComponentConfig, Mapping[str, Any]]


def place_pins(offsets: Mapping[str, Point], pose: Pose) -> dict[str, Point]:
    """Rotate local pin offsets by ``pose.rotation`` degrees, then translate."""
    theta = math.radians(pose.rotation)
    cos = math.cos(theta)
    sin = math.sin(theta)
    return {
        name: Point(pose.x + px * cos - py * sin, pose.y + px * sin + py * cos)
        for name, (px, py) in offsets.items()
    }


class TechDrawEngine:
    """Placement engine, router and component registry over one drawing sink."""

    def __init__(
        self,
        sink: DrawingSink | None = None,
        duplicate_ids: DuplicateIdPolicy | str = DuplicateIdPolicy.REPLACE,
    ) -> None:
        self.sink = sink if sink is not None else SvgDrawingSink()
        self.registry = ComponentRegistry()
        self.duplicate_ids = DuplicateIdPolicy(duplicate_ids)

    @property
    def state(self) -> EngineState:
        return EngineState.POPULATED if len(self.registry) else EngineState.EMPTY

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def add(self, component_type: str | ComponentType, component_id: str, config: ConfigLike) -> None:
        """Place a component and draw its symbol.

        Re-using an id replaces the earlier instance and its drawing, unless
        the engine was built with ``duplicate_ids="reject"``.
        """
        cfg = config if isinstance(config, ComponentConfig) else ComponentConfig.model_validate(config)

        if self.duplicate_ids is DuplicateIdPolicy.REJECT and component_id in self.registry:
            raise DuplicateComponentError(component_id)

        kind = type_key(component_type)
        symbol = symbol_for(kind)
        pose = cfg.pose
        group = self._draw_symbol(kind, component_id, symbol, pose, cfg.label)

        instance = ComponentInstance(
            id=component_id,
            type=kind,
            pose=pose,
            pins=place_pins(symbol.pins, pose),
            drawing=group,
        )
        previous = self.registry.register(instance)
        if previous is not None and previous.drawing is not None:
            self.sink.remove(previous.drawing)
        self.sink.append(group)

    def connect(self, from_id: str, from_pin: str, to_id: str, to_pin: str) -> None:
        """Draw an orthogonal wire between two placed pins.

        Unknown ids or pin names are logged and skipped; nothing is drawn.
        """
        if from_id not in self.registry or to_id not in self.registry:
            log.warning("Connection failed: invalid IDs %s -> %s", from_id, to_id)
            return

        p1 = self.registry.pin(from_id, from_pin)
        p2 = self.registry.pin(to_id, to_pin)
        if p1 is None or p2 is None:
            log.warning(
                "Connection failed: invalid pins %s.%s -> %s.%s",
                from_id, from_pin, to_id, to_pin,
            )
            return

        wire = Primitive("path", {
            "d": path_data(manhattan_route(p1, p2)),
            "class": "wire",
            "fill": "none",
            "stroke": COLOR_WIRE,
            "stroke-width": STROKE_PRIMARY,
            "data-from": f"{from_id}.{from_pin}",
            "data-to": f"{to_id}.{to_pin}",
        })
        # Wires go behind everything so symbol bodies always paint on top
        self.sink.insert_at_back(wire)
        self.sink.append(_solder_dot(p1))
        self.sink.append(_solder_dot(p2))

    def reset(self) -> None:
        """Forget every component and clear the diagram layer."""
        self.registry.clear()
        self.sink.clear()
        log.debug("Engine reset")

    def get_export(self) -> str:
        """Serialize decoration + diagram to a standalone SVG document."""
        return self.sink.to_svg()

    # ------------------------------------------------------------------
    # Drawing helpers
    # ------------------------------------------------------------------

    def _draw_symbol(
        self,
        kind: str,
        component_id: str,
        symbol: Symbol,
        pose: Pose,
        label: str | None,
    ) -> Primitive:
        transform = (
            f"translate({format_number(pose.x)},{format_number(pose.y)}) "
            f"rotate({format_number(pose.rotation)})"
        )
        group = Primitive("g", {
            "class": "symbol",
            "transform": transform,
            "data-id": component_id,
            "data-type": kind,
        }, children=list(symbol.geometry))

        if label:
            # Counter-rotated so the label reads upright at any orientation
            group.children.append(Primitive("text", {
                "x": 0,
                "y": LABEL_OFFSET_Y,
                "transform": f"rotate({format_number(-pose.rotation)})",
                "text-anchor": "middle",
                "font-size": FONT_LABEL,
                "font-weight": "bold",
                "fill": COLOR_LABEL,
            }, text=label))
        return group


def _solder_dot(p: Point) -> Primitive:
    return Primitive("circle", {
        "cx": p.x, "cy": p.y, "r": SOLDER_DOT_RADIUS, "fill": COLOR_SYMBOL, "class": "solder-dot",
    })
