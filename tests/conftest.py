import copy

import pytest

from backend import config

SAMPLE_READING = {
    "code_insee": "69123",
    "commune_nom": "Lyon",
    "date_echeance": "2025-06-12",
    "indice": 2,
    "qualificatif": "Moyen",
    "couleur_html": "#50CCAA",
    "sous_indices": [
        {"polluant_nom": "NO2", "concentration": 21.4, "indice": 2},
        {"polluant_nom": "O3", "concentration": 68.0, "indice": 3},
        {"polluant_nom": "PM10", "concentration": 12.1, "indice": 1},
        {"polluant_nom": "PM2.5", "concentration": None, "indice": 9},
    ],
}


@pytest.fixture
def sample_reading():
    return copy.deepcopy(SAMPLE_READING)


@pytest.fixture
def sample_envelope():
    return {"success": True, "data": [copy.deepcopy(SAMPLE_READING)]}


@pytest.fixture
def atmo_token(monkeypatch):
    monkeypatch.setattr(config, "ATMO_API_TOKEN", "test-token")
    monkeypatch.setattr(config, "ATMO_API_URL", "https://api.atmo-aura.fr/api/v1")
    return "test-token"
