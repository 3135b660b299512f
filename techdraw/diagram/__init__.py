"""Schematic drawing engine: symbol library, placement, routing, SVG export."""

from techdraw.diagram.engine import TechDrawEngine
from techdraw.diagram.models import ComponentConfig, ComponentInstance, Point, Pose
from techdraw.diagram.sink import DrawingSink, Primitive, SvgDrawingSink
from techdraw.diagram.symbols import SYMBOL_REGISTRY, Symbol, symbol_for

__all__ = [
    "ComponentConfig",
    "ComponentInstance",
    "DrawingSink",
    "Point",
    "Pose",
    "Primitive",
    "SYMBOL_REGISTRY",
    "SvgDrawingSink",
    "Symbol",
    "TechDrawEngine",
    "symbol_for",
]
