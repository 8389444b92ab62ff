"""
Test configuration for the currencylayer tests.
"""

import json
from unittest import mock

import pytest
import requests

from currencylayer.settings import get_settings

TERMS = "https://currencylayer.com/terms"
PRIVACY = "https://currencylayer.com/privacy"


def make_response(payload, status_code: int = 200) -> requests.Response:
    """Build a requests Response carrying ``payload`` as its body."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    response.url = "http://api.currencylayer.com/"
    if isinstance(payload, bytes):
        response._content = payload
    else:
        response._content = json.dumps(payload).encode()
        response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from the user's environment and config file."""
    for name in (
        "CURRENCYLAYER_API_KEY",
        "CURRENCYLAYER_BASE_URL",
        "CURRENCYLAYER_TIMEOUT",
        "CURRENCYLAYER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CURRENCYLAYER_CONFIG_FILE", str(tmp_path / "config.json"))
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def api_key_env(monkeypatch):
    """Provide an API key through the environment."""
    monkeypatch.setenv("CURRENCYLAYER_API_KEY", "env-key")
    get_settings.cache_clear()
    return "env-key"


@pytest.fixture
def mock_send():
    """Patch the HTTP transport; set ``return_value`` or ``side_effect`` per test."""
    with mock.patch.object(requests.Session, "send") as send:
        yield send


@pytest.fixture
def live_payload():
    return {
        "success": True,
        "terms": TERMS,
        "privacy": PRIVACY,
        "timestamp": 1432400348,
        "source": "USD",
        "quotes": {
            "USDAUD": 1.278342,
            "USDEUR": 0.85,
            "USDGBP": 0.645327,
        },
    }


@pytest.fixture
def historical_payload():
    return {
        "success": True,
        "terms": TERMS,
        "privacy": PRIVACY,
        "historical": True,
        "date": "2005-02-01",
        "timestamp": 1107302399,
        "source": "USD",
        "quotes": {
            "USDAED": 3.67266,
            "USDALL": 96.848753,
        },
    }


@pytest.fixture
def convert_payload():
    return {
        "success": True,
        "terms": TERMS,
        "privacy": PRIVACY,
        "query": {"from": "USD", "to": "EUR", "amount": 10},
        "info": {"timestamp": 1430068515, "quote": 0.85},
        "result": 8.5,
    }


@pytest.fixture
def timeframe_payload():
    return {
        "success": True,
        "terms": TERMS,
        "privacy": PRIVACY,
        "timeframe": True,
        "start_date": "2010-03-01",
        "end_date": "2010-03-02",
        "source": "USD",
        "quotes": {
            "2010-03-01": {"USDUSD": 1, "USDGBP": 0.668525, "USDEUR": 0.738541},
            "2010-03-02": {"USDUSD": 1, "USDGBP": 0.668827, "USDEUR": 0.736145},
        },
    }


@pytest.fixture
def change_payload():
    return {
        "success": True,
        "terms": TERMS,
        "privacy": PRIVACY,
        "change": True,
        "start_date": "2005-01-01",
        "end_date": "2010-01-01",
        "source": "USD",
        "quotes": {
            "USDAUD": {
                "start_rate": 1.281802,
                "end_rate": 1.108422,
                "change": -0.1734,
                "change_pct": -13.5261,
            },
            "USDEUR": {
                "start_rate": 0.73426,
                "end_rate": 0.697253,
                "change": -0.037007,
                "change_pct": -5.0399,
            },
        },
    }


@pytest.fixture
def error_payload():
    return {
        "success": False,
        "error": {
            "code": 101,
            "type": "invalid_access_key",
            "info": "You have not supplied a valid API Access Key.",
        },
    }
