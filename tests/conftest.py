from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.main import app, get_detector
from vision.schemas import LabelResult

from tests.fakes import FakeDetector


@pytest.fixture
def detector():
    return FakeDetector(
        labels=[
            LabelResult(description="Cat", score=0.8),
            LabelResult(description="Animal", score=0.42),
        ]
    )


@pytest.fixture
def client(detector):
    app.dependency_overrides[get_detector] = lambda: detector
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
