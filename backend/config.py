# file: backend/config.py

import os
from dotenv import load_dotenv

load_dotenv()

ATMO_API_URL = os.getenv("ATMO_API_URL", "https://api.atmo-aura.fr/api/v1").rstrip("/")
ATMO_API_TOKEN = os.getenv("ATMO_API_TOKEN")
ATMO_USER_AGENT = os.getenv("ATMO_USER_AGENT", "AirQualityApp/1.0")
DEFAULT_CODE_INSEE = os.getenv("DEFAULT_CODE_INSEE", "69123")  # Lyon
