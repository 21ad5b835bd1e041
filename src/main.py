"""Main FastAPI application with hexagonal architecture."""

from __future__ import annotations

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from predictor.config import config_from_env

from . import __version__
from .api.rest.routes import router as predictor_router

# Load environment variables
load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    yield
    # Shutdown


app = FastAPI(
    title="Opponent Predictor API",
    description="Match log tracking and next-opponent prediction",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",  # Vite dev server
        "http://localhost:3000",  # Alternative dev port
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    store_path: str


@app.get("/", tags=["meta"])
async def root():
    """API root with information and available endpoints."""
    return {
        "name": "Opponent Predictor API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "health": "GET /health",
            "records": "GET|POST|DELETE /api/records",
            "predict": "POST /api/predictions",
            "opponents": "GET /api/opponents",
            "series": "GET /api/opponents/{name}/series",
        },
    }


@app.get("/health", response_model=HealthResponse, tags=["meta"])
async def health_check():
    """Check API health and configuration status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        store_path=str(config_from_env().store_path),
    )


app.include_router(predictor_router)
