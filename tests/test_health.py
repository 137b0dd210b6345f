"""Tests for health check endpoints."""


def test_health_check(client):
    """Test basic health check."""
    response = client.get("/api/v1/health/")
    
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_readiness_reports_product_count(client, ledger):
    """Test readiness check reflects the ledger."""
    ledger.add_product("Milk", 2.50, 10)
    
    response = client.get("/api/v1/health/ready")
    
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"]["products"] == 1


def test_root_endpoint(client):
    """Test root endpoint returns API info."""
    response = client.get("/")
    
    assert response.status_code == 200
    data = response.json()
    assert "name" in data
    assert "version" in data
    assert "docs" in data
