import pytest
from fastapi.testclient import TestClient

from psricalc.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def corn_trial():
    return {
        "germination_counts": [5, 8, 10],
        "time_points": [3, 5, 7],
        "total_seeds": 15,
        "species": "corn",
    }
