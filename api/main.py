"""
FastAPI Backend for the Chamber Seat Map

Run with: uvicorn api.main:app --reload --port 8000
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from api.config import settings
from api.routes import seats
from seating import build_seating_chart

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    # Startup
    logger.info("Starting Chamber Seat Map API...")
    # Geometry errors propagate and abort startup
    app.state.chart = build_seating_chart()
    yield
    # Shutdown
    logger.info("Shutting down...")


app = FastAPI(
    title="Chamber Seat Map API",
    description="Seat positions and printed seat numbers for the chamber seating chart",
    version="1.0.0",
    lifespan=lifespan,
    redirect_slashes=False,  # Prevent 307 redirects that break CORS
)

# CORS middleware for the rendering frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include routers
app.include_router(seats.router, prefix="/seats", tags=["seats"])


@app.get("/")
async def root():
    """API root."""
    return {
        "status": "ok",
        "service": "chamber-seat-map",
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health():
    """Health check endpoint for load balancers and monitoring."""
    chart = getattr(app.state, "chart", None)
    return {
        "status": "healthy" if chart is not None else "starting",
        "services": {
            "api": True,
            "chart": chart is not None,
        },
        "seat_count": len(chart) if chart is not None else 0,
    }
