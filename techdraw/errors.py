"""Exception hierarchy for the drawing engine and its hosts."""

from __future__ import annotations


class TechDrawError(Exception):
    """Base class for all TechDraw errors."""


class DuplicateComponentError(TechDrawError):
    """Raised by ``add`` in reject mode when the id is already registered."""

    def __init__(self, component_id: str) -> None:
        super().__init__(f"Component id already in use: {component_id!r}")
        self.component_id = component_id


class InstructionError(TechDrawError):
    """Instruction text could not be parsed or contains a forbidden construct."""

    def __init__(self, message: str, lineno: int | None = None) -> None:
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)
        self.lineno = lineno


class GenerationError(TechDrawError):
    """The instruction generation service failed or returned nothing usable."""
