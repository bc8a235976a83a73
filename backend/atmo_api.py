# file: backend/atmo_api.py

import ssl
import logging
from typing import Any, Dict

import aiohttp
import certifi

from backend import config


def build_indices_url(code_insee: str) -> str:
    """Build the Atmo URL for the current indices of a commune."""
    return f"{config.ATMO_API_URL}/communes/{code_insee}/indices/atmo"


async def fetch_atmo_indices(code_insee: str) -> Dict[str, Any]:
    """Fetch the current Atmo indices for a commune and return the raw JSON body.

    Raises on missing token, non-2xx status, network errors and malformed JSON.
    The body is parsed whatever Content-Type the upstream declares.
    """
    if not config.ATMO_API_TOKEN:
        raise ValueError("Missing ATMO_API_TOKEN environment variable")

    params = {"api_token": config.ATMO_API_TOKEN, "date_echeance": "now"}
    headers = {"User-Agent": config.ATMO_USER_AGENT}
    ssl_context = ssl.create_default_context(cafile=certifi.where())

    logging.info(f"Fetching Atmo indices for commune {code_insee}")
    async with aiohttp.ClientSession(connector=aiohttp.TCPConnector(ssl=ssl_context)) as session:
        async with session.get(build_indices_url(code_insee), params=params, headers=headers) as response:
            response.raise_for_status()
            return await response.json(content_type=None)
