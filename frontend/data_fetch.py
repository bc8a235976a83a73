#file: frontend/data_fetch.py

import os
import asyncio
import logging

import aiohttp
from dotenv import load_dotenv

from frontend.models import DEFAULT_CODE_INSEE
from frontend.state import DashboardState, Failed, FETCH_ERROR_MESSAGE, state_from_envelope

load_dotenv()

PROXY_URL = os.getenv("PROXY_URL", "http://localhost:8000").rstrip("/")


async def fetch_air_quality(code_insee=DEFAULT_CODE_INSEE):
    """Fetch the Atmo envelope for a commune from the proxy asynchronously."""
    url = f"{PROXY_URL}/api/air-quality"
    async with aiohttp.ClientSession() as session:
        async with session.get(url, params={"code_insee": code_insee}) as response:
            response.raise_for_status()
            return await response.json()


async def load_dashboard_state(code_insee=DEFAULT_CODE_INSEE) -> DashboardState:
    """Run one fetch cycle and return the resulting dashboard state."""
    try:
        payload = await fetch_air_quality(code_insee)
        return state_from_envelope(payload)
    except aiohttp.ClientError as e:
        logging.error(f"[ERROR] Request to air quality proxy failed: {e}")
    except (ValueError, asyncio.TimeoutError) as e:
        logging.error(f"[ERROR] Invalid air quality response: {e}")
    return Failed(FETCH_ERROR_MESSAGE)
