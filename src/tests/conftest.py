# src/tests/conftest.py
import pytest
from httpx import AsyncClient, ASGITransport
from typing import AsyncGenerator
import logging
from scatterviz.main import app

# Set up logging
logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)

@pytest.fixture
def country_records() -> list[dict]:
    return [
        {"Country": "Aland", "GDP": 2_500_000, "Population": 12_000, "LifeExpectancy": 71.2, "Area": 20},
        {"Country": "Borduria", "GDP": 100, "Population": 3_000, "LifeExpectancy": 64.9, "Area": 5},
        {"Country": "Aland", "GDP": 1_250_000, "Population": 8_500, "LifeExpectancy": 73.0, "Area": 50},
        {"Country": "Carpania", "GDP": 640_000, "Population": 4_200, "LifeExpectancy": 80.4, "Area": 0},
    ]

@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    logger.debug("Creating in-process async client")

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        follow_redirects=True,
        timeout=30.0
    ) as client:
        yield client
