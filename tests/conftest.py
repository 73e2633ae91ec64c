"""
Pytest configuration and fixtures
Provides the seating chart and a TestClient for the FastAPI app
"""
import pytest
from typing import Generator
from fastapi.testclient import TestClient

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from seating import SeatingChart, build_seating_chart


@pytest.fixture(scope="session")
def chart() -> SeatingChart:
    return build_seating_chart()


@pytest.fixture(scope="module")
def client() -> Generator[TestClient, None, None]:
    """Create TestClient for the FastAPI app (runs the startup hook)"""
    from api.main import app

    with TestClient(app) as test_client:
        yield test_client
