"""Command-line interface for TechDraw.

Usage:
    techdraw render circuit.td -o schematic.svg
    techdraw render circuit.td -o schematic.png --png [--hires]
    techdraw generate "common emitter amplifier" -o amp.svg [--show-code]
    techdraw symbols [resistor]
    techdraw serve
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from techdraw.config import TechDrawConfig
from techdraw.diagram.engine import TechDrawEngine
from techdraw.diagram.renderer import build_engine, render_png_to_file
from techdraw.diagram.symbols import SYMBOL_REGISTRY, symbol_for
from techdraw.errors import GenerationError, TechDrawError
from techdraw.observability.logging import setup_logging
from techdraw.script import run_script


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    source = Path(path)
    if not source.exists():
        _fail(f"File not found: {path}")
    return source.read_text(encoding="utf-8")


def _execute(code: str, config: TechDrawConfig) -> TechDrawEngine:
    engine = build_engine(config)
    try:
        count = run_script(code, engine)
    except TechDrawError as e:
        _fail(str(e))
    except (TypeError, ValueError) as e:
        # pydantic ValidationError is a ValueError
        _fail(f"invalid instruction arguments: {e}")
    print(f"{count} instructions, {len(engine.registry)} components", file=sys.stderr)
    return engine


def _write_output(engine: TechDrawEngine, args: argparse.Namespace, config: TechDrawConfig) -> None:
    svg = engine.get_export()

    if args.png:
        if not args.output:
            _fail("--png needs an output file (-o)")
        try:
            render_png_to_file(svg, args.output, config.canvas_width, config.canvas_height, hires=args.hires)
        except RuntimeError as e:
            _fail(str(e))
        print(f"PNG written to: {args.output}", file=sys.stderr)
    elif args.output:
        Path(args.output).write_text(svg, encoding="utf-8")
        print(f"SVG written to: {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(svg + "\n")


def cmd_render(args: argparse.Namespace, config: TechDrawConfig) -> None:
    """Run an instruction file and write the drawing."""
    engine = _execute(_read_source(args.script), config)
    _write_output(engine, args, config)


def cmd_generate(args: argparse.Namespace, config: TechDrawConfig) -> None:
    """Generate instructions from a description, then render them."""
    from techdraw.app import create_provider
    from techdraw.llm.generator import generate_instructions

    provider = create_provider(config)
    if provider is None:
        _fail("No Gemini API key configured (set TECHDRAW_GEMINI_API_KEY)")

    try:
        code = asyncio.run(generate_instructions(
            provider,
            args.prompt,
            temperature=config.generation_temperature,
            max_tokens=config.generation_max_tokens,
        ))
    except GenerationError as e:
        _fail(str(e))

    if args.show_code:
        print(code, file=sys.stderr)
        print(file=sys.stderr)

    engine = _execute(code, config)
    _write_output(engine, args, config)


def cmd_symbols(args: argparse.Namespace, config: TechDrawConfig) -> None:
    """List component types and their pins."""
    types = [args.type] if args.type else sorted(SYMBOL_REGISTRY)
    if args.type and args.type not in SYMBOL_REGISTRY:
        _fail(f"Unknown component type: {args.type}")

    print(f"  {'Type':<16} {'Pins'}")
    print(f"  {'---':<16} {'---'}")
    for kind in types:
        pins = symbol_for(kind).pins
        pin_str = ", ".join(f"{name} ({p.x:g},{p.y:g})" for name, p in pins.items())
        print(f"  {kind:<16} {pin_str}")


def cmd_serve(args: argparse.Namespace, config: TechDrawConfig) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run(
        "techdraw.app:create_app",
        factory=True,
        host=args.host or config.host,
        port=args.port or config.port,
        log_level=config.log_level.lower(),
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="techdraw",
        description="Schematic drawing from add/connect instructions",
    )
    parser.add_argument("--config", default="techdraw.yaml", help="YAML config file")
    sub = parser.add_subparsers(dest="command", help="Available commands")

    # render
    p_render = sub.add_parser("render", help="Render an instruction file ('-' for stdin)")
    p_render.add_argument("script", help="Instruction file")
    _add_output_args(p_render)

    # generate
    p_gen = sub.add_parser("generate", help="Generate a schematic from a description")
    p_gen.add_argument("prompt", help="Circuit description")
    p_gen.add_argument("--show-code", action="store_true", help="Print generated instructions")
    _add_output_args(p_gen)

    # symbols
    p_sym = sub.add_parser("symbols", help="List component types and pins")
    p_sym.add_argument("type", nargs="?", default=None, help="Only this type")

    # serve
    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)

    return parser


def _add_output_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--output", "-o", default=None, help="Output file path (default: stdout)")
    p.add_argument("--png", action="store_true", help="Write PNG instead of SVG")
    p.add_argument("--hires", action="store_true", help="High-resolution PNG")


def main(argv: list[str] | None = None) -> None:
    """Entry point for the `techdraw` CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    config = TechDrawConfig.from_yaml(args.config)
    setup_logging(config.log_level)

    commands = {
        "render": cmd_render,
        "generate": cmd_generate,
        "symbols": cmd_symbols,
        "serve": cmd_serve,
    }

    fn = commands.get(args.command)
    if fn:
        fn(args, config)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
