"""Pytest fixtures for name clustering tests."""

import pytest

from core.models import Cluster


@pytest.fixture
def diagnoses():
    """Small batch where 'anxiety' is the only word shared by two names."""
    return ["anxiety disorder", "anxiety attack", "dental plaque"]


@pytest.fixture
def mental_health_seed():
    """Predefined cluster with a fixed two-word vocabulary."""
    return Cluster(label="mental health", word_set={"anxiety", "depression"})


@pytest.fixture
def seeds():
    """Two predefined clusters with disjoint vocabularies."""
    return [
        Cluster(label="mental health", word_set={"anxiety", "depression"}),
        Cluster(label="dental", word_set={"dental", "plaque"}),
    ]


@pytest.fixture
def app_client(monkeypatch):
    """FastAPI TestClient with CLUSTER_* defaults cleared."""
    from fastapi.testclient import TestClient
    import api.main as main_module
    for var in ("CLUSTER_K_SHARED", "CLUSTER_K_NOT_SHARED", "CLUSTER_IGNORE"):
        monkeypatch.delenv(var, raising=False)
    return TestClient(main_module.app)
