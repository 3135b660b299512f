"""Schematic symbol library.

Each symbol is a function that returns a ``Symbol``: the primitives of the
symbol drawn unrotated around the local origin (0, 0), and the local offsets
of its named pins. Placement (translation, rotation) is applied by the engine.
Every call builds fresh primitives, so templates can be drawn many times.
"""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple

from techdraw.diagram.models import Point
from techdraw.diagram.sink import Primitive
from techdraw.diagram.style import (
    COLOR_SYMBOL,
    COLOR_WHITE,
    FONT_PIN_NAME,
    FONT_PIN_SIGN,
    FONT_SIGN,
    PIN_SPACING,
    PIN_STUB,
    STROKE_DETAIL,
    STROKE_HEAVY,
    STROKE_PRIMARY,
)
from techdraw.types import ComponentType

log = logging.getLogger(__name__)


class Symbol(NamedTuple):
    geometry: list[Primitive]
    pins: dict[str, Point]


def _line(x1: float, y1: float, x2: float, y2: float, sw: float = STROKE_PRIMARY) -> Primitive:
    return Primitive("line", {
        "x1": x1, "y1": y1, "x2": x2, "y2": y2,
        "stroke": COLOR_SYMBOL, "stroke-width": sw, "stroke-linecap": "round",
    })


def _path(d: str, sw: float = STROKE_PRIMARY, fill: str = "none") -> Primitive:
    return Primitive("path", {
        "d": d, "fill": fill, "stroke": COLOR_SYMBOL, "stroke-width": sw,
        "stroke-linecap": "round", "stroke-linejoin": "round",
    })


def _solid(d: str) -> Primitive:
    """Filled shape with no outline (diode bodies, arrow heads)."""
    return Primitive("path", {"d": d, "fill": COLOR_SYMBOL, "stroke": "none"})


def _circle(cx: float, cy: float, r: float, fill: str = "none", sw: float = STROKE_PRIMARY) -> Primitive:
    return Primitive("circle", {
        "cx": cx, "cy": cy, "r": r, "fill": fill, "stroke": COLOR_SYMBOL, "stroke-width": sw,
    })


def _rect(x: float, y: float, w: float, h: float, sw: float = STROKE_PRIMARY) -> Primitive:
    return Primitive("rect", {
        "x": x, "y": y, "width": w, "height": h,
        "fill": COLOR_WHITE, "stroke": COLOR_SYMBOL, "stroke-width": sw,
    })


def _text(x: float, y: float, txt: str, size: float, anchor: str = "start") -> Primitive:
    return Primitive("text", {
        "x": x, "y": y, "font-size": size, "text-anchor": anchor, "fill": COLOR_SYMBOL,
    }, text=txt)


def _pins(**offsets: tuple[float, float]) -> dict[str, Point]:
    return {name: Point(*xy) for name, xy in offsets.items()}


# ---------------------------------------------------------------------------
# Passives
# ---------------------------------------------------------------------------

def resistor() -> Symbol:
    """Zig-zag resistor, horizontal leads."""
    geometry = [
        _path("M -30 0 L -20 0 L -15 -10 L -5 10 L 5 -10 L 15 10 L 20 0 L 30 0"),
    ]
    return Symbol(geometry, _pins(left=(-30, 0), right=(30, 0)))


def capacitor() -> Symbol:
    geometry = [
        _line(-5, -15, -5, 15, sw=STROKE_HEAVY),
        _line(5, -15, 5, 15, sw=STROKE_HEAVY),
        _line(-30, 0, -5, 0),
        _line(5, 0, 30, 0),
    ]
    return Symbol(geometry, _pins(left=(-30, 0), right=(30, 0)))


def inductor() -> Symbol:
    """Four half-loop coil."""
    geometry = [
        _path("M -30 0 L -20 0 Q -15 -10 -10 0 Q -5 -10 0 0 Q 5 -10 10 0 Q 15 -10 20 0 L 30 0"),
    ]
    return Symbol(geometry, _pins(left=(-30, 0), right=(30, 0)))


def _diode_body() -> list[Primitive]:
    return [
        _solid("M -10 -10 L -10 10 L 10 0 Z"),
        _line(10, -10, 10, 10, sw=STROKE_HEAVY),
        _line(-30, 0, -10, 0),
        _line(10, 0, 30, 0),
    ]


def diode() -> Symbol:
    """Triangle + bar; anode on the left, cathode on the right."""
    return Symbol(_diode_body(), _pins(anode=(-30, 0), cathode=(30, 0)))


def led() -> Symbol:
    """Diode with two emission arrows above the body."""
    geometry = _diode_body() + [
        _path("M -5 -15 L 5 -25 M 5 -15 L 15 -25", sw=STROKE_DETAIL),
        _path("M 2 -25 L 5 -25 L 5 -22 M 12 -25 L 15 -25 L 15 -22", sw=STROKE_DETAIL),
    ]
    return Symbol(geometry, _pins(anode=(-30, 0), cathode=(30, 0)))


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

def _source_leads() -> list[Primitive]:
    return [
        _line(0, -30, 0, -20),
        _line(0, 20, 0, 30),
    ]


def voltage_source() -> Symbol:
    """Circle with +/- marks; ``top`` is the positive terminal."""
    geometry = [
        _circle(0, 0, 20),
        _text(-5, -5, "+", size=FONT_SIGN),
        _text(-3, 15, "-", size=FONT_SIGN),
    ] + _source_leads()
    return Symbol(geometry, _pins(top=(0, -30), bottom=(0, 30)))


def current_source() -> Symbol:
    """Circle with a downward arrow."""
    geometry = [
        _circle(0, 0, 20),
        _path("M 0 -10 L 0 10 L 5 5 M 0 10 L -5 5"),
    ] + _source_leads()
    return Symbol(geometry, _pins(top=(0, -30), bottom=(0, 30)))


def ground() -> Symbol:
    geometry = [
        _path("M 0 -10 L 0 0 M -15 0 L 15 0 M -10 5 L 10 5 M -5 10 L 5 10"),
    ]
    return Symbol(geometry, _pins(top=(0, -10)))


# ---------------------------------------------------------------------------
# Actives
# ---------------------------------------------------------------------------

def opamp() -> Symbol:
    """Triangle amplifier, inverting input on top."""
    geometry = [
        _path("M -30 -35 L -30 35 L 35 0 Z", fill=COLOR_WHITE),
        _text(-25, -10, "-", size=FONT_PIN_SIGN),
        _text(-25, 20, "+", size=FONT_PIN_SIGN),
        _line(-50, -15, -30, -15),
        _line(-50, 15, -30, 15),
        _line(35, 0, 55, 0),
    ]
    return Symbol(geometry, _pins(in_inv=(-50, -15), in_non=(-50, 15), out=(55, 0)))


def _bjt(arrow: Primitive) -> list[Primitive]:
    return [
        _circle(0, 0, 25, sw=STROKE_DETAIL),
        _line(-15, -15, -15, 15, sw=STROKE_HEAVY),  # base bar
        _line(-30, 0, -15, 0),
        _line(-15, -10, 15, -25),                   # collector
        _line(15, -25, 15, -40),
        _line(-15, 10, 15, 25),                     # emitter
        _line(15, 25, 15, 40),
        arrow,
    ]


def transistor_npn() -> Symbol:
    """NPN: emitter arrow pointing out."""
    geometry = _bjt(_path("M 10 28 L 16 26 L 14 20", fill=COLOR_SYMBOL))
    return Symbol(geometry, _pins(base=(-30, 0), collector=(15, -40), emitter=(15, 40)))


def transistor_pnp() -> Symbol:
    """PNP: emitter arrow pointing in."""
    geometry = _bjt(_path("M -5 10 L -2 16 L -10 16", fill=COLOR_SYMBOL))
    return Symbol(geometry, _pins(base=(-30, 0), collector=(15, -40), emitter=(15, 40)))


def _mosfet(arrow: Primitive) -> list[Primitive]:
    return [
        _circle(0, 0, 25, sw=STROKE_DETAIL),
        _line(-15, -15, -15, 15),   # gate plate
        _line(-5, -15, -5, -5),     # channel segments
        _line(-5, -2, -5, 2),
        _line(-5, 5, -5, 15),
        _line(-30, 0, -15, 0),
        _line(-5, -10, 15, -10),    # drain
        _line(15, -10, 15, -40),
        _line(-5, 10, 15, 10),      # source
        _line(15, 10, 15, 40),
        arrow,
    ]


def mosfet_n() -> Symbol:
    geometry = _mosfet(_solid("M -5 0 L 0 -3 L 0 3 Z"))
    return Symbol(geometry, _pins(gate=(-30, 0), drain=(15, -40), source=(15, 40)))


def mosfet_p() -> Symbol:
    geometry = _mosfet(_solid("M 0 0 L -5 -3 L -5 3 Z"))
    return Symbol(geometry, _pins(gate=(-30, 0), drain=(15, -40), source=(15, 40)))


# ---------------------------------------------------------------------------
# Logic gates
# ---------------------------------------------------------------------------

AND_BODY = "M -30 -25 L -10 -25 A 25 25 0 0 1 -10 25 L -30 25 Z"
OR_BODY = "M -30 -25 Q -10 -25 5 0 Q -10 25 -30 25 Q -20 0 -30 -25"


def _gate_inputs(x_body: float) -> list[Primitive]:
    return [
        _line(-45, -10, x_body, -10),
        _line(-45, 10, x_body, 10),
    ]


def gate_and() -> Symbol:
    geometry = [_path(AND_BODY, fill=COLOR_WHITE)] + _gate_inputs(-30) + [_line(15, 0, 30, 0)]
    return Symbol(geometry, _pins(in1=(-45, -10), in2=(-45, 10), out=(30, 0)))


def gate_nand() -> Symbol:
    geometry = [
        _path(AND_BODY, fill=COLOR_WHITE),
        _circle(20, 0, 5, fill=COLOR_WHITE),
    ] + _gate_inputs(-30) + [_line(25, 0, 35, 0)]
    return Symbol(geometry, _pins(in1=(-45, -10), in2=(-45, 10), out=(35, 0)))


def gate_or() -> Symbol:
    geometry = [_path(OR_BODY, fill=COLOR_WHITE)] + _gate_inputs(-25) + [_line(5, 0, 25, 0)]
    return Symbol(geometry, _pins(in1=(-45, -10), in2=(-45, 10), out=(25, 0)))


def gate_nor() -> Symbol:
    geometry = [
        _path(OR_BODY, fill=COLOR_WHITE),
        _circle(10, 0, 5, fill=COLOR_WHITE),
    ] + _gate_inputs(-25) + [_line(15, 0, 30, 0)]
    return Symbol(geometry, _pins(in1=(-45, -10), in2=(-45, 10), out=(30, 0)))


def gate_xor() -> Symbol:
    """OR body shifted right with a second input curve."""
    geometry = [
        _path("M -25 -25 Q -5 -25 10 0 Q -5 25 -25 25 Q -15 0 -25 -25", fill=COLOR_WHITE),
        _path("M -32 -25 Q -22 0 -32 25"),
    ] + _gate_inputs(-28) + [_line(10, 0, 25, 0)]
    return Symbol(geometry, _pins(in1=(-45, -10), in2=(-45, 10), out=(25, 0)))


def gate_not() -> Symbol:
    geometry = [
        _path("M -20 -15 L -20 15 L 10 0 Z", fill=COLOR_WHITE),
        _circle(15, 0, 5, fill=COLOR_WHITE),
        _line(-35, 0, -20, 0),
        _line(20, 0, 35, 0),
    ]
    return Symbol(geometry, {"in": Point(-35, 0), "out": Point(35, 0)})


# ---------------------------------------------------------------------------
# Composite devices
# ---------------------------------------------------------------------------

def _device_box(title: str, left: list[str], right: list[str], width: float = 80) -> Symbol:
    """Rectangle with named pins on its left and right sides.

    Pins sit on a PIN_SPACING pitch, starting from the top of each side, and
    the box is centred on the origin.
    """
    rows = max(len(left), len(right), 1)
    h = rows * PIN_SPACING + PIN_SPACING
    x0 = -width / 2
    y0 = -h / 2

    geometry = [
        _rect(x0, y0, width, h),
        _text(0, y0 + 12, title, size=FONT_PIN_NAME + 1, anchor="middle"),
    ]
    pins: dict[str, Point] = {}

    for i, name in enumerate(left):
        py = y0 + PIN_SPACING + i * PIN_SPACING
        geometry.append(_line(x0 - PIN_STUB, py, x0, py))
        geometry.append(_text(x0 + 4, py + 3, name, size=FONT_PIN_NAME))
        pins[name] = Point(x0 - PIN_STUB, py)

    for i, name in enumerate(right):
        py = y0 + PIN_SPACING + i * PIN_SPACING
        geometry.append(_line(x0 + width, py, x0 + width + PIN_STUB, py))
        geometry.append(_text(x0 + width - 4, py + 3, name, size=FONT_PIN_NAME, anchor="end"))
        pins[name] = Point(x0 + width + PIN_STUB, py)

    return Symbol(geometry, pins)


def ic_555() -> Symbol:
    """555 timer in DIP order: pins 1-4 down the left, 8-5 down the right."""
    return _device_box("555", ["gnd", "trig", "out", "reset"], ["vcc", "dis", "thr", "ctrl"])


def driver_stepper() -> Symbol:
    """Step/dir stepper driver module."""
    return _device_box(
        "DRIVER",
        ["step", "dir", "enable", "vmot", "gnd"],
        ["a1", "a2", "b1", "b2"],
    )


def arduino_uno() -> Symbol:
    left = ["5v", "3v3", "vin", "gnd"] + [f"a{i}" for i in range(6)]
    right = [f"d{i}" for i in range(14)]
    return _device_box("ARDUINO UNO", left, right, width=100)


def stepper_motor() -> Symbol:
    """Motor circle with two coil pairs: A on the left, B on the right."""
    geometry = [
        _circle(0, 0, 25),
        _text(0, 6, "M", size=FONT_SIGN, anchor="middle"),
        _line(-45, -10, -23, -10),
        _line(-45, 10, -23, 10),
        _line(23, -10, 45, -10),
        _line(23, 10, 45, 10),
    ]
    return Symbol(geometry, _pins(a1=(-45, -10), a2=(-45, 10), b1=(45, -10), b2=(45, 10)))


def antenna() -> Symbol:
    geometry = [
        _line(0, 20, 0, -25),
        _path("M -15 -25 L 0 -5 L 15 -25 Z"),
    ]
    return Symbol(geometry, _pins(feed=(0, 20)))


# ---------------------------------------------------------------------------
# Symbol registry: maps component type strings to template functions
# ---------------------------------------------------------------------------

SYMBOL_REGISTRY: dict[str, Callable[[], Symbol]] = {
    ComponentType.RESISTOR.value: resistor,
    ComponentType.CAPACITOR.value: capacitor,
    ComponentType.INDUCTOR.value: inductor,
    ComponentType.DIODE.value: diode,
    ComponentType.LED.value: led,
    ComponentType.SOURCE_V.value: voltage_source,
    ComponentType.SOURCE_I.value: current_source,
    ComponentType.GND.value: ground,
    ComponentType.OPAMP.value: opamp,
    ComponentType.TRANSISTOR_NPN.value: transistor_npn,
    ComponentType.TRANSISTOR_PNP.value: transistor_pnp,
    ComponentType.MOSFET_N.value: mosfet_n,
    ComponentType.MOSFET_P.value: mosfet_p,
    ComponentType.GATE_AND.value: gate_and,
    ComponentType.GATE_OR.value: gate_or,
    ComponentType.GATE_NOT.value: gate_not,
    ComponentType.GATE_NAND.value: gate_nand,
    ComponentType.GATE_NOR.value: gate_nor,
    ComponentType.GATE_XOR.value: gate_xor,
    ComponentType.ARDUINO_UNO.value: arduino_uno,
    ComponentType.STEPPER_MOTOR.value: stepper_motor,
    ComponentType.DRIVER_STEPPER.value: driver_stepper,
    ComponentType.ANTENNA.value: antenna,
    ComponentType.IC_555.value: ic_555,
}


def type_key(component_type: str | ComponentType) -> str:
    """Plain string tag for a component type."""
    if isinstance(component_type, ComponentType):
        return component_type.value
    return str(component_type)


def symbol_for(component_type: str | ComponentType) -> Symbol:
    """Geometry and pin offsets for a type; empty for unknown types."""
    template = SYMBOL_REGISTRY.get(type_key(component_type))
    if template is None:
        log.warning("Unknown symbol type: %s", component_type)
        return Symbol([], {})
    return template()
