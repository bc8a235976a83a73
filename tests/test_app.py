import re
from pathlib import Path

import aiohttp
import pytest
from aioresponses import aioresponses
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parent.parent / "frontend" / "app.py")
PROXY_URL = re.compile(r"^https?://[^/]+/api/air-quality\?code_insee=(\d+)$")


@pytest.fixture
def app_test():
    return AppTest.from_file(APP_PATH, default_timeout=30)


def markdown_text(at):
    return [element.value for element in at.markdown]


def fetch_count(mocked):
    return sum(len(calls) for calls in mocked.requests.values())


def test_loaded_page_shows_reading(app_test, sample_envelope):
    with aioresponses() as mocked:
        mocked.get(PROXY_URL, payload=sample_envelope, repeat=True)
        app_test.run()

    assert not app_test.exception
    assert app_test.title[0].value == "Qualité de l'air - Lyon"
    assert "Lyon" in [element.value for element in app_test.subheader]
    assert any(">Moyen<" in text for text in markdown_text(app_test))
    assert any("Indice global : 2" in text for text in markdown_text(app_test))
    assert "2025-06-12" in [element.value for element in app_test.caption]
    assert not app_test.error
    assert app_test.button(key="refresh").label == "Actualiser"


def test_empty_envelope_shows_no_data(app_test):
    with aioresponses() as mocked:
        mocked.get(PROXY_URL, payload={"success": True, "data": []}, repeat=True)
        app_test.run()

    assert not app_test.exception
    assert [element.value for element in app_test.error] == ["Aucune donnée disponible"]
    assert not any("Indice global" in text for text in markdown_text(app_test))


def test_unreachable_proxy_shows_request_error(app_test):
    with aioresponses() as mocked:
        mocked.get(PROXY_URL, exception=aiohttp.ClientConnectionError("refused"), repeat=True)
        app_test.run()

    assert not app_test.exception
    assert [element.value for element in app_test.error] == ["Erreur lors de la récupération des données"]


def test_refresh_fetches_again_with_same_output(app_test, sample_envelope):
    with aioresponses() as mocked:
        mocked.get(PROXY_URL, payload=sample_envelope, repeat=True)
        app_test.run()
        first = markdown_text(app_test)
        assert fetch_count(mocked) == 1

        app_test.button(key="refresh").click().run()

        assert fetch_count(mocked) == 2

    assert not app_test.exception
    assert markdown_text(app_test) == first


def test_rerun_without_refresh_keeps_state(app_test, sample_envelope):
    with aioresponses() as mocked:
        mocked.get(PROXY_URL, payload=sample_envelope, repeat=True)
        app_test.run()
        app_test.run()

        assert fetch_count(mocked) == 1
