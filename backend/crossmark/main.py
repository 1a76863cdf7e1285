"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crossmark.config import settings
from crossmark.engine.registry import load_checks

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.crossmark_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Crossmark",
        description="Ballot cross-mark validator — geometric adjudication of freehand ink",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all check modules to trigger registration
    load_checks()

    from crossmark.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
