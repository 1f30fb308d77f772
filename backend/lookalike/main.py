"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lookalike.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.lookalike_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Lookalike",
        description="Avatar composition and matching engine",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Load and freeze the part catalog before the first request
    from lookalike.engine.registry import default_registry

    default_registry()

    from lookalike.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
