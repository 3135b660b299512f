"""Instruction executor: runs generated instruction text against an engine.

Instruction text is Python call syntax addressed to ``TechDraw``::

    r1 = TechDraw.add('resistor', 'r1', {'x': -100, 'y': 0, 'label': '10k'})
    TechDraw.connect('r1', 'right', 'r2', 'left')

The text is never handed to ``eval``/``exec``. It is parsed with ``ast``,
every statement must be a (optionally assigned) call of a whitelisted
operation, and every argument must be a literal. Only the engine's ``add``
and ``connect`` are reachable.
"""

from __future__ import annotations

import ast
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable

from techdraw.diagram.engine import TechDrawEngine
from techdraw.errors import InstructionError

logger = logging.getLogger(__name__)

ENGINE_NAME = "TechDraw"
ALLOWED_OPERATIONS = ("add", "connect")

# Whole fence lines only; backticks inside string literals are label text
_FENCE_RE = re.compile(r"^[ \t]*```[\w-]*[ \t\r]*$", re.MULTILINE)


@dataclass
class Instruction:
    operation: str
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)
    lineno: int = 0


def strip_code_fences(text: str) -> str:
    """Drop markdown fences a model may wrap around its output."""
    return _FENCE_RE.sub("", text).strip()


def parse_script(source: str, engine_name: str = ENGINE_NAME) -> list[Instruction]:
    """Parse instruction text into a list of instructions without running any."""
    code = strip_code_fences(source)
    try:
        tree = ast.parse(code, mode="exec")
    except SyntaxError as e:
        raise InstructionError(f"invalid syntax: {e.msg}", e.lineno) from e

    return [_to_instruction(_statement_call(stmt), engine_name) for stmt in tree.body]


def run_script(source: str, engine: TechDrawEngine, engine_name: str = ENGINE_NAME) -> int:
    """Execute instruction text in order against ``engine``.

    The whole text is parsed before the first instruction runs. Errors raised
    while running propagate; instructions that already ran stay drawn.
    Returns the number of instructions executed.
    """
    instructions = parse_script(source, engine_name)
    operations: dict[str, Callable[..., None]] = {
        "add": engine.add,
        "connect": engine.connect,
    }
    for instruction in instructions:
        operations[instruction.operation](*instruction.args, **instruction.kwargs)

    logger.info("Executed %d instructions", len(instructions))
    return len(instructions)


def _statement_call(stmt: ast.stmt) -> ast.Call:
    if isinstance(stmt, ast.Expr):
        value = stmt.value
    elif isinstance(stmt, ast.Assign) and all(isinstance(t, ast.Name) for t in stmt.targets):
        value = stmt.value
    else:
        raise InstructionError(f"unsupported statement: {type(stmt).__name__}", stmt.lineno)

    if not isinstance(value, ast.Call):
        raise InstructionError("expected an instruction call", stmt.lineno)
    return value


def _to_instruction(call: ast.Call, engine_name: str) -> Instruction:
    func = call.func
    if not (
        isinstance(func, ast.Attribute)
        and isinstance(func.value, ast.Name)
        and func.value.id == engine_name
    ):
        raise InstructionError(f"only {engine_name}.<operation>(...) calls are allowed", call.lineno)

    if func.attr not in ALLOWED_OPERATIONS:
        raise InstructionError(f"unknown operation: {engine_name}.{func.attr}", call.lineno)

    if any(kw.arg is None for kw in call.keywords):
        raise InstructionError("keyword unpacking is not allowed", call.lineno)

    try:
        args = tuple(ast.literal_eval(arg) for arg in call.args)
        kwargs = {kw.arg: ast.literal_eval(kw.value) for kw in call.keywords}
    except (ValueError, TypeError) as e:
        raise InstructionError(f"arguments must be literals ({e})", call.lineno) from e

    return Instruction(func.attr, args, kwargs, call.lineno)
