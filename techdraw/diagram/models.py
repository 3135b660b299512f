"""Data model for placed components.

``ComponentConfig`` is the caller-facing placement config and is a pydantic
model so that wrongly-shaped input fails loudly. Values themselves are never
range-checked: any coordinate or rotation is drawn as given.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from techdraw.diagram.sink import Primitive


class Point(NamedTuple):
    x: float
    y: float


@dataclass
class Pose:
    """Position in the logical plane plus rotation in degrees."""

    x: float
    y: float
    rotation: float = 0.0


class ComponentConfig(BaseModel):
    """Placement config passed to ``add``: ``{x, y, rotation?, label?}``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    x: float
    y: float
    rotation: float = Field(
        default=0.0,
        validation_alias=AliasChoices("rotation", "rotate"),
        description="Degrees; conventionally a multiple of 90 but not enforced",
    )
    label: Optional[str] = Field(default=None, description="Text drawn above the symbol")

    @field_validator("label", mode="before")
    @classmethod
    def _stringify_label(cls, value: object) -> object:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def pose(self) -> Pose:
        return Pose(x=self.x, y=self.y, rotation=self.rotation)


@dataclass
class ComponentInstance:
    """A placed component: pose plus absolute pin positions."""

    id: str
    type: str
    pose: Pose
    pins: dict[str, Point] = field(default_factory=dict)
    # The group drawn for this instance, kept so a re-add can remove it
    drawing: Optional[Primitive] = field(default=None, repr=False)

    @property
    def pin_names(self) -> set[str]:
        return set(self.pins)
