"""
API Entry Point for the Content Benchmark Engine

FastAPI application that:
1. Exposes health checks
2. Mounts the benchmarks router (competitor averaging -> exact targets)
"""

import logging
import sys

from fastapi import FastAPI

from src import __version__
from src.utils.config import get_settings

from api.benchmarks import router as benchmarks_router

settings = get_settings()

# Configure logging to stdout
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
    force=True,
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Content Benchmark Engine",
    description="Competitor benchmark averaging and exact content targets",
    version=__version__,
)

app.include_router(benchmarks_router)


@app.get("/")
async def root():
    """Service banner."""
    return {"service": "content-benchmark-engine", "version": __version__}


@app.get("/api/health")
async def health_check():
    """Liveness check."""
    return {"status": "healthy", "environment": settings.ENVIRONMENT}


# ============================================================================
# MAIN
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.analyze:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
    )
