"""Vector primitives and the Drawing Sink that collects them.

The sink keeps two layers: host-owned decoration (background grid and the
like) and the engine's own diagram layer. Only the diagram layer is ever
mutated by the engine; ``clear`` leaves decoration alone.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Protocol

from techdraw.diagram.style import CANVAS_HEIGHT, CANVAS_WIDTH, COLOR_BG, FONT_FAMILY

SVG_NS = "http://www.w3.org/2000/svg"

# Control characters and non-characters that XML 1.0 does not allow
_INVALID_XML_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


@dataclass(eq=False)
class Primitive:
    """One SVG element: tag, attributes, optional text and child elements."""

    tag: str
    attrs: dict[str, object] = field(default_factory=dict)
    children: list[Primitive] = field(default_factory=list)
    text: str = ""

    def to_svg(self) -> str:
        attrs = "".join(f' {k}="{_attr_value(v)}"' for k, v in self.attrs.items())
        if not self.children and not self.text:
            return f"<{self.tag}{attrs}/>"
        body = escape_xml(self.text) + "".join(child.to_svg() for child in self.children)
        return f"<{self.tag}{attrs}>{body}</{self.tag}>"


class DrawingSink(Protocol):
    """What the engine needs from a drawing surface."""

    def append(self, primitive: Primitive) -> None: ...

    def insert_at_back(self, primitive: Primitive) -> None: ...

    def remove(self, primitive: Primitive) -> bool: ...

    def clear(self) -> None: ...

    def to_svg(self) -> str: ...


class SvgDrawingSink:
    """In-memory ordered primitive list serialized to a standalone SVG document.

    Draw order is list order: index 0 is painted first (furthest back).
    """

    def __init__(
        self,
        decoration: list[Primitive] | None = None,
        width: float = CANVAS_WIDTH,
        height: float = CANVAS_HEIGHT,
    ) -> None:
        self.width = width
        self.height = height
        self._decoration: list[Primitive] = list(decoration or [])
        self._diagram: list[Primitive] = []

    @property
    def decoration(self) -> list[Primitive]:
        return list(self._decoration)

    @property
    def primitives(self) -> list[Primitive]:
        """Diagram-layer primitives in draw order."""
        return list(self._diagram)

    def __len__(self) -> int:
        return len(self._diagram)

    def append(self, primitive: Primitive) -> None:
        self._diagram.append(primitive)

    def insert_at_back(self, primitive: Primitive) -> None:
        self._diagram.insert(0, primitive)

    def remove(self, primitive: Primitive) -> bool:
        # Identity, not equality: two symbols may be drawn identically.
        for i, existing in enumerate(self._diagram):
            if existing is primitive:
                del self._diagram[i]
                return True
        return False

    def clear(self) -> None:
        self._diagram.clear()

    def to_svg(self) -> str:
        """Flatten decoration + diagram into one SVG document string."""
        w = format_number(self.width)
        h = format_number(self.height)
        lines = [
            f'<svg xmlns="{SVG_NS}" width="{w}" height="{h}" '
            f'viewBox="{format_number(-self.width / 2)} {format_number(-self.height / 2)} {w} {h}" '
            f'style="font-family: {FONT_FAMILY}; background-color: {COLOR_BG};">',
            '<g id="decoration">',
        ]
        lines.extend(p.to_svg() for p in self._decoration)
        lines.append("</g>")
        lines.append('<g id="diagram">')
        lines.extend(p.to_svg() for p in self._diagram)
        lines.append("</g>")
        lines.append("</svg>")
        return "\n".join(lines)


def format_number(value: float) -> str:
    """Render a coordinate compactly: ``-70`` rather than ``-70.0``."""
    value = round(float(value), 4)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def escape_xml(text: str) -> str:
    """Escape special XML characters and drop ones XML 1.0 forbids."""
    return (
        _INVALID_XML_RE.sub("", text)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def _attr_value(value: object) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return escape_xml(str(value))
