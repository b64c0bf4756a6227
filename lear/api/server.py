"""Lear limerick service: FastAPI application.

Endpoints
---------
========  ==================  =========================================
Method    Path                Purpose
========  ==================  =========================================
GET       ``/health``         Liveness and configured model
POST      ``/api/generate``   Generate limericks (one optional repair)
GET       ``/``               Static front-end, when a directory exists
========  ==================  =========================================

The application is built by :func:`create_app` from an explicit
:class:`~lear.config.config_manager.ServiceConfig`; nothing is read from
the environment here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from fastapi import Body, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from lear import __version__
from lear.api.models import ErrorResponse, GenerateRequest, GenerateResponse, HealthResponse
from lear.config.config_manager import ServiceConfig
from lear.generation.limerick_generator import GenerationError, LimerickGenerator, build_constraints
from lear.llm.base_llm import BaseLLM, LLMError
from lear.llm.llm_factory import create_llm

logger = logging.getLogger(__name__)


def create_app(config: ServiceConfig, llm: Optional[BaseLLM] = None,
               generator: Optional[LimerickGenerator] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Service configuration built once at start-up.
        llm: LLM adapter to use; created from ``config.llm`` when omitted.
        generator: Fully built generator, mainly for tests.

    Returns:
        The configured FastAPI instance.
    """
    if generator is None:
        llm = llm or create_llm(config.llm)
        generator = LimerickGenerator(
            llm,
            temperature=config.generation.temperature,
            repair_temperature=config.generation.repair_temperature,
        )

    app = FastAPI(
        title="Lear limerick service",
        description="Architectural limericks with optional end-word letter keys.",
        version=__version__,
    )
    app.state.config = config
    app.state.generator = generator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        """Report liveness and the configured model identifier."""
        return HealthResponse(ok=True, model=config.llm.model)

    @app.post(
        "/api/generate",
        response_model=GenerateResponse,
        responses={500: {"model": ErrorResponse}},
    )
    def generate(request: Request, payload: Any = Body(default=None)):
        """Generate limericks for one request.

        Runs in the server's threadpool: the provider call blocks, and no
        state is shared between requests.
        """
        body = GenerateRequest.model_validate(payload) if isinstance(payload, dict) else GenerateRequest()
        constraints = build_constraints(
            body.letters, body.count, body.translate,
            max_count=config.generation.max_count,
        )

        try:
            result = request.app.state.generator.generate(constraints)
        except (LLMError, GenerationError) as e:
            logger.exception("Server error: %s", e)
            return JSONResponse(status_code=500, content=ErrorResponse(error=str(e)).model_dump())

        logger.info("Generated %d limerick(s), stages: %s",
                    constraints.count, " -> ".join(s.value for s in result.stages))
        return GenerateResponse(text=result.text)

    # Mounted last so the API routes take precedence over "/".
    static_dir = config.server.static_dir
    if static_dir and Path(static_dir).is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        logger.info("Serving static files from %s", static_dir)

    return app
