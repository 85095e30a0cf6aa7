from realty.core.config import get_settings
from realty.core.database import Base, engine


def test_init_is_public_and_idempotent(client):
    Base.metadata.drop_all(bind=engine)

    first = client.post("/api/admin/init")
    assert first.status_code == 200
    assert first.json()["success"] is True
    assert set(first.json()["created"]) == {"admins", "properties"}

    second = client.post("/api/admin/init")
    assert second.status_code == 200
    assert second.json()["created"] == []


def test_maintenance_endpoints_require_admin(client):
    assert client.get("/api/admin/check-db").status_code == 401
    assert client.post("/api/admin/recreate-tables", json={"confirmDelete": True}).status_code == 401
    assert client.get("/api/admin/test-db-connection").status_code == 401


def test_check_db_reports_structure(client, auth_headers, create_property):
    create_property()
    res = client.get("/api/admin/check-db", headers=auth_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    checks = body["checks"]
    assert checks["connection"] is True
    assert checks["tableExists"] is True
    assert "VARCHAR" in checks["typeColumn"]["type"].upper()
    assert checks["counts"]["properties"] == 1
    assert checks["sampleData"][0]["type"] == "Жилые помещения"
    assert body["recommendations"] == ["Database structure looks correct"]


def test_check_db_without_properties_table(client, auth_headers):
    from realty.models.property import Property

    Property.__table__.drop(bind=engine)
    res = client.get("/api/admin/check-db", headers=auth_headers)
    assert res.status_code == 404
    assert res.json()["checks"]["tableExists"] is False
    assert "Initialize database by calling POST /api/admin/init" in res.json()["recommendations"]


def test_recreate_tables_requires_confirmation(client, auth_headers, create_property):
    create_property()

    refused = client.post("/api/admin/recreate-tables", json={}, headers=auth_headers)
    assert refused.status_code == 400
    assert "confirmDelete" in refused.json()["message"]

    done = client.post("/api/admin/recreate-tables", json={"confirmDelete": True}, headers=auth_headers)
    assert done.status_code == 200
    assert done.json()["success"] is True
    assert client.get("/api/properties").json()["pagination"]["total"] == 0


def test_db_connection_report_masks_credentials(client, auth_headers):
    res = client.get("/api/admin/test-db-connection", headers=auth_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["diagnostics"]["config"]["password"] == "not set"
    assert body["diagnostics"]["serverInfo"]["dialect"] == "sqlite"
    assert "properties" in body["diagnostics"]["connection"]["details"]["tables"]


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["timestamp"].endswith("Z")
    assert body["uptime"] >= 0


def test_readiness(client, monkeypatch):
    ready = client.get("/api/readiness")
    assert ready.status_code == 200
    assert ready.json()["status"] == "ready"

    monkeypatch.setattr(get_settings(), "S3_BUCKET_NAME", "")
    not_ready = client.get("/api/readiness")
    assert not_ready.status_code == 503
    assert not_ready.json()["status"] == "not ready"
    assert not_ready.json()["missing"] == ["S3_BUCKET_NAME"]


def test_security_headers_and_request_id(client):
    res = client.get("/api/health", headers={"x-request-id": "abc123"})
    assert res.headers["x-request-id"] == "abc123"
    assert res.headers["X-Content-Type-Options"] == "nosniff"
    assert res.headers["X-Frame-Options"] == "DENY"
