"""Test the symbol library's pin contracts and templates."""

import pytest

from techdraw.diagram.models import Point
from techdraw.diagram.symbols import SYMBOL_REGISTRY, symbol_for
from techdraw.types import ComponentType

EXPECTED_PINS = {
    "resistor": {"left", "right"},
    "capacitor": {"left", "right"},
    "inductor": {"left", "right"},
    "diode": {"anode", "cathode"},
    "led": {"anode", "cathode"},
    "source_v": {"top", "bottom"},
    "source_i": {"top", "bottom"},
    "gnd": {"top"},
    "opamp": {"in_inv", "in_non", "out"},
    "transistor_npn": {"base", "collector", "emitter"},
    "transistor_pnp": {"base", "collector", "emitter"},
    "mosfet_n": {"gate", "drain", "source"},
    "mosfet_p": {"gate", "drain", "source"},
    "gate_not": {"in", "out"},
    "gate_and": {"in1", "in2", "out"},
    "gate_or": {"in1", "in2", "out"},
    "gate_nand": {"in1", "in2", "out"},
    "gate_nor": {"in1", "in2", "out"},
    "gate_xor": {"in1", "in2", "out"},
    "ic_555": {"gnd", "trig", "out", "reset", "vcc", "dis", "thr", "ctrl"},
    "antenna": {"feed"},
    "stepper_motor": {"a1", "a2", "b1", "b2"},
    "driver_stepper": {"step", "dir", "enable", "vmot", "gnd", "a1", "a2", "b1", "b2"},
    "arduino_uno": (
        {"5v", "3v3", "vin", "gnd"}
        | {f"a{i}" for i in range(6)}
        | {f"d{i}" for i in range(14)}
    ),
}


@pytest.mark.parametrize("kind,pins", sorted(EXPECTED_PINS.items()))
def test_pin_names_match_contract(kind, pins):
    assert set(symbol_for(kind).pins) == pins


def test_every_component_type_has_a_template():
    assert set(SYMBOL_REGISTRY) == {t.value for t in ComponentType}
    assert set(EXPECTED_PINS) == set(SYMBOL_REGISTRY)


def test_every_template_draws_something():
    for kind in SYMBOL_REGISTRY:
        assert symbol_for(kind).geometry, kind


def test_two_pin_offsets():
    assert symbol_for("resistor").pins == {"left": Point(-30, 0), "right": Point(30, 0)}
    assert symbol_for("diode").pins == {"anode": Point(-30, 0), "cathode": Point(30, 0)}
    assert symbol_for("source_v").pins == {"top": Point(0, -30), "bottom": Point(0, 30)}
    assert symbol_for("gnd").pins == {"top": Point(0, -10)}


def test_active_and_gate_offsets():
    opamp = symbol_for(ComponentType.OPAMP).pins
    assert opamp["in_inv"] == Point(-50, -15)
    assert opamp["in_non"] == Point(-50, 15)
    assert opamp["out"] == Point(55, 0)

    assert symbol_for("transistor_npn").pins["collector"] == Point(15, -40)
    assert symbol_for("mosfet_p").pins["source"] == Point(15, 40)
    assert symbol_for("gate_nand").pins["out"] == Point(35, 0)
    assert symbol_for("gate_xor").pins["out"] == Point(25, 0)
    assert symbol_for("gate_not").pins["in"] == Point(-35, 0)


def test_ic_555_dip_layout():
    pins = symbol_for("ic_555").pins
    assert pins["gnd"] == Point(-60, -30)
    assert pins["reset"] == Point(-60, 30)
    assert pins["vcc"] == Point(60, -30)
    assert pins["ctrl"] == Point(60, 30)


def test_unknown_type_is_empty_not_an_error(caplog):
    symbol = symbol_for("flux_capacitor")
    assert symbol.geometry == []
    assert symbol.pins == {}
    assert "Unknown symbol type" in caplog.text


def test_templates_return_fresh_primitives():
    first = symbol_for("resistor")
    second = symbol_for("resistor")
    assert first.geometry[0] is not second.geometry[0]
    first.geometry.clear()
    assert symbol_for("resistor").geometry
