import copy

import httpx
import pytest
import pytest_asyncio

from app.core.config import Settings
from app.main import create_app


MOVIE_DATA = {
    "start_time": "2020-03-19T06:48:34+00:00",
    "end_time": "2020-03-19T10:48:34+00:00",
    "attendees": ["bob smith"],
    "movie": "Jaws",
    "rating": "PG-13",
    "runtime": 90,
}

POOL_DATA = {
    "start_time": "2020-07-01T12:00:00Z",
    "end_time": "2020-07-01T18:00:00Z",
    "attendees": ["ann", "ben"],
    "water_temp": 27,
}

DINNER_DATA = {
    "start_time": "2020-03-19T19:00:00+01:00",
    "end_time": "2020-03-19T23:00:00+01:00",
    "attendees": ["carol"],
    "dinner": "lasagne",
}


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, telemetry_enabled=False, **overrides)


@pytest.fixture
def party_data():
    """
    Valid `data` payloads per party type (deep copies; tests may mutate them).
    """
    return {
        "MovieParty": copy.deepcopy(MOVIE_DATA),
        "PoolParty": copy.deepcopy(POOL_DATA),
        "DinnerParty": copy.deepcopy(DINNER_DATA),
    }


async def _client_for(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def client():
    """
    HTTP client against an app that never injects failures.
    """
    async for ac in _client_for(create_app(_settings(prod_failure_rate=0.0))):
        yield ac


@pytest_asyncio.fixture
async def flaky_client():
    """
    HTTP client against an app whose /bookpartyprod always fails.
    """
    async for ac in _client_for(create_app(_settings(prod_failure_rate=1.0))):
        yield ac
