"""FastAPI application factory — wires config, engine and provider together."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from techdraw import __version__
from techdraw.api import router as api_router
from techdraw.config import TechDrawConfig
from techdraw.diagram.renderer import build_engine
from techdraw.llm.base import LLMProvider

logger = logging.getLogger(__name__)


def create_provider(config: TechDrawConfig) -> LLMProvider | None:
    """Gemini provider if an API key is configured."""
    if not config.gemini_api_key:
        return None
    from techdraw.llm.providers.gemini import GeminiProvider

    return GeminiProvider(config.gemini_api_key, config.gemini_model)


def create_app(
    config: TechDrawConfig | None = None,
    provider: LLMProvider | None = None,
) -> FastAPI:
    """Build and return the FastAPI application."""
    if config is None:
        config = TechDrawConfig.from_yaml()
    if provider is None:
        provider = create_provider(config)

    app = FastAPI(title="TechDraw", version=__version__, docs_url="/docs")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

    # One engine per application: the host owns a single drawing surface
    app.state.config = config
    app.state.engine = build_engine(config)
    app.state.provider = provider

    app.include_router(api_router)

    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "generation": "configured" if provider is not None else "disabled",
        }

    @app.get("/")
    async def root():
        engine = app.state.engine
        return {
            "name": "TechDraw",
            "version": __version__,
            "provider": provider.name() if provider is not None else None,
            "state": engine.state.value,
            "components": len(engine.registry),
        }

    logger.info(
        "TechDraw %s ready (generation: %s)",
        __version__, provider.name() if provider is not None else "disabled",
    )
    return app
