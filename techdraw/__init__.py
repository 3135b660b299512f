"""TechDraw — schematic rendering from declarative add/connect instructions."""

__version__ = "0.2.0"
