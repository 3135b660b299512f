"""Test PNG rendering through CairoSVG."""

import builtins
import sys

import pytest

from techdraw.config import TechDrawConfig
from techdraw.diagram.renderer import build_engine, render_png, render_png_to_file

TINY_SVG = '<svg xmlns="http://www.w3.org/2000/svg" width="20" height="10"><rect width="20" height="10"/></svg>'


def _png_or_skip(svg, **kwargs):
    try:
        return render_png(svg, **kwargs)
    except RuntimeError as e:
        pytest.skip(str(e))


def _png_width(png: bytes) -> int:
    # IHDR width follows the 8-byte signature and the chunk header
    return int.from_bytes(png[16:20], "big")


def test_render_png_from_engine_export():
    engine = build_engine(TechDrawConfig(canvas_width=200, canvas_height=100))
    engine.add("resistor", "r1", {"x": 0, "y": 0, "label": "10k"})
    png = _png_or_skip(engine.get_export(), width=200, height=100)
    assert png.startswith(b"\x89PNG")
    assert _png_width(png) == 200


def test_render_png_hires_doubles_size():
    png = _png_or_skip(TINY_SVG, width=20, height=10, hires=True)
    assert _png_width(png) == 40


def test_render_png_to_file(tmp_path):
    _png_or_skip(TINY_SVG, width=20, height=10)
    out = tmp_path / "tiny.png"
    render_png_to_file(TINY_SVG, str(out), width=20, height=10)
    assert out.read_bytes().startswith(b"\x89PNG")


def test_missing_cairosvg_package(monkeypatch):
    monkeypatch.setitem(sys.modules, "cairosvg", None)
    with pytest.raises(RuntimeError, match="cairosvg required"):
        render_png(TINY_SVG)


def test_missing_cairo_system_library(monkeypatch):
    real_import = builtins.__import__

    def fake_import(name, *args, **kwargs):
        if name == "cairosvg":
            raise OSError('no library called "cairo-2" was found')
        return real_import(name, *args, **kwargs)

    monkeypatch.delitem(sys.modules, "cairosvg", raising=False)
    monkeypatch.setattr(builtins, "__import__", fake_import)
    with pytest.raises(RuntimeError, match="cairo library unavailable"):
        render_png(TINY_SVG)
