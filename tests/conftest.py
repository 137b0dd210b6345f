import pytest
from fastapi.testclient import TestClient

from ministore.main import app
from ministore.dependencies import get_ledger
from ministore.services.inventory_service import InventoryLedger


@pytest.fixture(scope="function")
def ledger():
    """Fresh, empty ledger for each test."""
    return InventoryLedger()


@pytest.fixture(scope="function")
def client(ledger):
    """Create test client backed by the test's own ledger."""
    app.dependency_overrides[get_ledger] = lambda: ledger

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
