import pytest

from rest_framework.test import APIClient

from tests.fakes import InMemoryCustomerRepository


@pytest.fixture()
def customer_repo(monkeypatch):
    """In-memory repository injected into every ``CustomerViewSet``."""
    repo = InMemoryCustomerRepository()
    monkeypatch.setattr(
        "modules.customers.views.CustomerMongoRepository", lambda: repo
    )
    return repo


@pytest.fixture()
def mongo_up(monkeypatch):
    """Health checks see a reachable MongoDB."""

    async def ping() -> float:
        return 1.5

    monkeypatch.setattr("modules.core.mongo.ping", ping)


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid
