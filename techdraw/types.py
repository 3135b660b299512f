"""Shared enums and type aliases."""

from enum import Enum


class ComponentType(str, Enum):
    # Passives
    RESISTOR = "resistor"
    CAPACITOR = "capacitor"
    INDUCTOR = "inductor"
    DIODE = "diode"
    LED = "led"
    # Sources
    SOURCE_V = "source_v"
    SOURCE_I = "source_i"
    GND = "gnd"
    # Actives
    OPAMP = "opamp"
    TRANSISTOR_NPN = "transistor_npn"
    TRANSISTOR_PNP = "transistor_pnp"
    MOSFET_N = "mosfet_n"
    MOSFET_P = "mosfet_p"
    # Logic
    GATE_AND = "gate_and"
    GATE_OR = "gate_or"
    GATE_NOT = "gate_not"
    GATE_NAND = "gate_nand"
    GATE_NOR = "gate_nor"
    GATE_XOR = "gate_xor"
    # Composite devices
    ARDUINO_UNO = "arduino_uno"
    STEPPER_MOTOR = "stepper_motor"
    DRIVER_STEPPER = "driver_stepper"
    ANTENNA = "antenna"
    IC_555 = "ic_555"


class EngineState(str, Enum):
    EMPTY = "empty"
    POPULATED = "populated"


class DuplicateIdPolicy(str, Enum):
    REPLACE = "replace"
    REJECT = "reject"
