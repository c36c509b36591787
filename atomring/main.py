"""
AtomRing Service - FastAPI Application
Replays caller-chosen field actions and serves the periodic table
"""

import logging

from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .config import get_config
from .errors import AtomRingError, CatalogError, InvalidArgumentError
from .logging_config import setup_logging
from .periodic_table import default_table
from .simulation import SimulationRequest, SimulationResult, simulate

setup_logging()
logger = logging.getLogger(__name__)

SERVICE_VERSION = "1.0.0"

app = FastAPI(
    title="AtomRing Service",
    description="Reaction engine for the circular atom-fusion board",
    version=SERVICE_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_config().cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Service info"""
    return {
        "service": "AtomRing Service",
        "status": "running",
        "version": SERVICE_VERSION,
    }


@app.get("/health")
async def health_check():
    """Health check for container orchestration"""
    return {"status": "healthy"}


@app.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)


@app.get("/atoms/{atomic_number}")
async def get_atom(atomic_number: int):
    """Look up one periodic table entry."""
    try:
        entry = default_table().atom(atomic_number)
    except (CatalogError, InvalidArgumentError) as e:
        raise HTTPException(status_code=404, detail=e.to_dict())
    return {
        "atomic_number": entry.atomic_number,
        "symbol": entry.symbol,
        "name": entry.name,
        "color": entry.color,
    }


@app.post("/field/simulate", response_model=SimulationResult)
async def simulate_field(request: SimulationRequest):
    """
    Apply a sequence of inserts and removes to a fresh field.

    Args:
        request: Initial board tokens and the actions to replay

    Returns:
        SimulationResult with the final board and every listener event
    """
    max_actions = get_config().max_actions
    if len(request.actions) > max_actions:
        raise HTTPException(
            status_code=413,
            detail=f"At most {max_actions} actions per request",
        )

    try:
        return simulate(request)
    except AtomRingError as e:
        logger.warning(f"Rejected simulation: {e}")
        raise HTTPException(status_code=400, detail=e.to_dict())
    except Exception as e:
        logger.error(f"Error simulating field: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_config().port)
