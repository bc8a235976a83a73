# file: backend/main.py

import logging
import aiohttp
import uvicorn
from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional

from backend import config
from backend.atmo_api import fetch_atmo_indices
from backend.models import ErrorResponse, HealthStatus, FETCH_ERROR_MESSAGE

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

@asynccontextmanager
async def lifespan(app: FastAPI) :
    """Check upstream configuration on startup."""
    if not config.ATMO_API_TOKEN :
        logging.warning("ATMO_API_TOKEN is not set, every air quality request will fail")
    logging.info(f"Proxying Atmo API at {config.ATMO_API_URL}")
    yield


app = FastAPI(
    title = "Air Quality - Atmo AURA",
    description = "Proxy to the Atmo Auvergne-Rhône-Alpes air quality indices.",
    version = "0.1",
    lifespan = lifespan
)


@app.get("/api/air-quality", responses={500: {"model": ErrorResponse}})
async def air_quality(
    code_insee: Optional[str] = Query(None, description="INSEE code of the commune (defaults to Lyon)")
):
    """Relay the current Atmo indices of a commune, unchanged."""
    code_insee = code_insee or config.DEFAULT_CODE_INSEE
    try:
        return await fetch_atmo_indices(code_insee)
    except aiohttp.ClientResponseError as e:
        # str(e) carries the request URL, token included
        logging.error(f"Erreur API Atmo for commune {code_insee}: HTTP {e.status} {e.message}")
        return JSONResponse(status_code=500, content={"error": FETCH_ERROR_MESSAGE})
    except Exception as e:
        logging.error(f"Erreur API Atmo for commune {code_insee}: {e}")
        return JSONResponse(status_code=500, content={"error": FETCH_ERROR_MESSAGE})

@app.get("/health", response_model=HealthStatus)
async def health():
    return HealthStatus()

if __name__ == "__main__" :
    uvicorn.run(app, host = "0.0.0.0", port = 8000, log_level="info")
