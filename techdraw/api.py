"""HTTP REST API — programmatic access to the drawing engine.

Mirrors the commands a host page can send: generate from a prompt, run
instruction text, clear, export, ping. Every mutation runs synchronously
inside an ``async def`` handler, so the single engine sees one writer.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response
from pydantic import BaseModel

from techdraw.config import TechDrawConfig
from techdraw.diagram.engine import TechDrawEngine
from techdraw.diagram.renderer import render_png
from techdraw.errors import GenerationError
from techdraw.llm.base import LLMProvider
from techdraw.llm.generator import generate_instructions
from techdraw.script import run_script

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["api"])

INVALID_CODE_MESSAGE = (
    "The generated code was invalid. Please try describing the circuit differently."
)


class GenerateRequest(BaseModel):
    prompt: str


class RunRequest(BaseModel):
    code: str


class DrawingResponse(BaseModel):
    svg: str
    code: str = ""
    instructions: int = 0
    components: int = 0


def _engine(request: Request) -> TechDrawEngine:
    return request.app.state.engine


def _execute(engine: TechDrawEngine, code: str) -> DrawingResponse:
    engine.reset()
    try:
        count = run_script(code, engine)
    except Exception as e:
        logger.exception("Execution error")
        raise HTTPException(422, f"{INVALID_CODE_MESSAGE} ({e})")
    return DrawingResponse(
        svg=engine.get_export(),
        code=code,
        instructions=count,
        components=len(engine.registry),
    )


@router.post("/generate", response_model=DrawingResponse)
async def generate(req: GenerateRequest, request: Request):
    provider: LLMProvider | None = request.app.state.provider
    config: TechDrawConfig = request.app.state.config
    if provider is None:
        raise HTTPException(503, "No generation provider configured")

    try:
        code = await generate_instructions(
            provider,
            req.prompt,
            temperature=config.generation_temperature,
            max_tokens=config.generation_max_tokens,
        )
    except GenerationError as e:
        raise HTTPException(502, str(e))

    return _execute(_engine(request), code)


@router.post("/run", response_model=DrawingResponse)
async def run(req: RunRequest, request: Request):
    return _execute(_engine(request), req.code)


@router.post("/clear")
async def clear(request: Request):
    _engine(request).reset()
    return {"status": "cleared"}


@router.get("/export")
async def export_svg(request: Request):
    return Response(
        content=_engine(request).get_export(),
        media_type="image/svg+xml",
        headers={"Content-Disposition": 'attachment; filename="schematic.svg"'},
    )


@router.get("/export.png")
async def export_png(request: Request, hires: bool = False):
    config: TechDrawConfig = request.app.state.config
    svg = _engine(request).get_export()
    try:
        # CPU-bound, run in a worker thread
        png = await asyncio.to_thread(
            render_png, svg, config.canvas_width, config.canvas_height, hires,
        )
    except RuntimeError as e:
        raise HTTPException(501, str(e))
    return Response(content=png, media_type="image/png")


@router.get("/ping")
async def ping():
    return {"type": "pong"}
