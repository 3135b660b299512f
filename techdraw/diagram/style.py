"""Visual style constants for schematic drawings."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_WIDTH = 1600   # px, default export width
CANVAS_HEIGHT = 1000  # px
HIRES_SCALE = 2       # multiply for high-res PNG output

# Logical plane: origin (0, 0) at the drawing centre
GRID_UNIT = 20        # px, advisory only

# ---------------------------------------------------------------------------
# Line weights
# ---------------------------------------------------------------------------
STROKE_PRIMARY = 2.0   # symbol outlines + wires
STROKE_HEAVY = 3.0     # capacitor plates, diode bars, base bars
STROKE_DETAIL = 1.5    # arrows, body circles

# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------
COLOR_SYMBOL = "#1E293B"   # symbol strokes and fills
COLOR_WIRE = "#334155"     # wire paths
COLOR_LABEL = "#475569"    # component labels
COLOR_WHITE = "#FFFFFF"
COLOR_BG = "#F8FAFC"
COLOR_GRID = "#000000"
GRID_OPACITY = 0.05

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
FONT_FAMILY = "Arial, Helvetica, Liberation Sans, sans-serif"
FONT_LABEL = 12      # component labels
FONT_SIGN = 16       # +/- on sources
FONT_PIN_SIGN = 14   # +/- on op-amp inputs
FONT_PIN_NAME = 8    # pin names on composite devices

# ---------------------------------------------------------------------------
# Symbol / wire geometry
# ---------------------------------------------------------------------------
LABEL_OFFSET_Y = -45   # local y of a component label
SOLDER_DOT_RADIUS = 3  # filled dot at each wire endpoint
PIN_SPACING = 20       # pin pitch on composite device boxes
PIN_STUB = 20          # lead length outside composite device boxes
