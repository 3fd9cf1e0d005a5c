"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from wnb.api.routes import aircraft, envelope, weight_balance  # noqa: E402

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("WNB API %s starting", API_VERSION)
    yield


app = FastAPI(
    title="WNB API",
    description="Weight & balance envelope engine",
    version=API_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(envelope.router, prefix="/api")
app.include_router(aircraft.router, prefix="/api")
app.include_router(weight_balance.router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": API_VERSION}
