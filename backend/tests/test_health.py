from fastapi.testclient import TestClient

from products_api.db.migrations import migrate
from products_api.main import app

client = TestClient(app)


def setup_module(module):
    migrate(reset=True)


def test_health_ok():
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["db"] is True
    assert len(body["schema_fingerprint"]) == 64
