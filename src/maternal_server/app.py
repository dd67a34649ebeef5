"""Application factory and CLI entry point.

``create_app()`` builds the FastAPI application with:
  - Lifespan handler that loads the rulesets and builds the scorers once
  - CORS middleware
  - Global exception handlers (InvalidInput / bad body → 400, KeyError → 404)
  - The risk, eligibility and reference routes
  - A ``/health`` endpoint for readiness checks

The ``cli()`` function is the ``maternal-server`` console-script entry point.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from maternal_rulesets.eligibility import EligibilityScorer
from maternal_rulesets.errors import InvalidInput
from maternal_rulesets.risk import RiskScorer
from maternal_rulesets.ruleset import RulesetStore

from maternal_server.config import ServerSettings, load_settings
from maternal_server.errors import (
    generic_error_handler,
    invalid_input_handler,
    key_error_handler,
    request_validation_handler,
)
from maternal_server.routes import register_routes

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Lifespan — runs once at startup/shutdown
# ------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the rulesets and build the scorers at startup.

    Everything is stashed on ``app.state`` for dependency injection.
    Nothing needs tearing down on shutdown.
    """
    settings: ServerSettings = app.state.settings

    store = RulesetStore(ruleset_dir=settings.ruleset_dir)
    store.load()
    logger.info("RulesetStore loaded successfully")

    app.state.store = store
    app.state.risk_scorer = RiskScorer()
    app.state.eligibility_scorer = EligibilityScorer()

    yield

    logger.info("Shutting down")


# ------------------------------------------------------------------
# Factory
# ------------------------------------------------------------------

def create_app(settings: ServerSettings | None = None) -> FastAPI:
    """Build and return the configured FastAPI application."""
    if settings is None:
        settings = load_settings()

    # --- Configure logging ---
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title="Maternal Care Scoring API",
        description="Pregnancy risk tiers and government scheme eligibility",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store settings so the lifespan handler can read them
    app.state.settings = settings

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Exception handlers ---
    app.add_exception_handler(InvalidInput, invalid_input_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(KeyError, key_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    @app.get("/health")
    async def health() -> dict:
        """Readiness check: reports whether the rulesets are loaded."""
        store = getattr(app.state, "store", None)
        if store is None or not store.schemes:
            return {"status": "error", "detail": "rulesets not loaded"}
        return {"status": "ok", "schemes": len(store.schemes)}

    register_routes(app)

    return app


# ------------------------------------------------------------------
# Module-level ASGI export (for uvicorn maternal_server.app:app)
# ------------------------------------------------------------------
app = create_app()


# ------------------------------------------------------------------
# CLI entry point
# ------------------------------------------------------------------

def cli() -> None:
    """Console-script entry point: ``maternal-server``."""
    import uvicorn

    settings = load_settings()
    uvicorn.run(
        "maternal_server.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )
