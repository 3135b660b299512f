"""Host-side rendering: background decoration, engine wiring, PNG export.

The engine only ever draws into the diagram layer. The dotted background
grid built here is host-owned decoration and survives ``reset``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from techdraw.diagram.engine import TechDrawEngine
from techdraw.diagram.sink import Primitive, SvgDrawingSink
from techdraw.diagram.style import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    COLOR_BG,
    COLOR_GRID,
    GRID_OPACITY,
    GRID_UNIT,
    HIRES_SCALE,
)

if TYPE_CHECKING:
    from techdraw.config import TechDrawConfig

log = logging.getLogger(__name__)


def grid_decoration(
    width: float = CANVAS_WIDTH,
    height: float = CANVAS_HEIGHT,
    unit: float = GRID_UNIT,
) -> list[Primitive]:
    """Background fill plus a dot grid aligned on the logical origin."""
    pattern = Primitive("pattern", {
        "id": "grid-dots",
        "width": unit,
        "height": unit,
        "patternUnits": "userSpaceOnUse",
    }, children=[Primitive("circle", {"cx": 0, "cy": 0, "r": 1, "fill": COLOR_GRID})])

    return [
        Primitive("defs", children=[pattern]),
        Primitive("rect", {
            "x": -width / 2, "y": -height / 2, "width": width, "height": height,
            "fill": COLOR_BG,
        }),
        Primitive("rect", {
            "x": -width / 2, "y": -height / 2, "width": width, "height": height,
            "fill": "url(#grid-dots)", "opacity": GRID_OPACITY,
        }),
    ]


def build_engine(config: TechDrawConfig | None = None) -> TechDrawEngine:
    """Engine over a fresh SVG sink sized and decorated per the config."""
    if config is None:
        from techdraw.config import TechDrawConfig

        config = TechDrawConfig()

    decoration = grid_decoration(config.canvas_width, config.canvas_height) if config.show_grid else []
    sink = SvgDrawingSink(decoration, width=config.canvas_width, height=config.canvas_height)
    return TechDrawEngine(sink, duplicate_ids=config.duplicate_ids)


def render_png(
    svg: str,
    width: float = CANVAS_WIDTH,
    height: float = CANVAS_HEIGHT,
    hires: bool = False,
) -> bytes:
    """Rasterize an exported SVG document via CairoSVG."""
    try:
        import cairosvg
    except ImportError as e:
        raise RuntimeError(
            "cairosvg required for PNG output: pip install cairosvg"
        ) from e
    except OSError as e:
        # Package present but the system cairo library is not
        raise RuntimeError(f"cairo library unavailable for PNG output: {e}") from e

    scale = HIRES_SCALE if hires else 1
    return cairosvg.svg2png(
        bytestring=svg.encode("utf-8"),
        output_width=int(width * scale),
        output_height=int(height * scale),
        background_color=COLOR_BG,
    )


def render_png_to_file(svg: str, path: str, width: float = CANVAS_WIDTH,
                       height: float = CANVAS_HEIGHT, hires: bool = False) -> None:
    """Render PNG to a file path."""
    png_bytes = render_png(svg, width=width, height=height, hires=hires)
    with open(path, "wb") as f:
        f.write(png_bytes)
    log.info("PNG written to %s (%d bytes)", path, len(png_bytes))
