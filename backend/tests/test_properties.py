import json

from conftest import property_payload


def test_create_and_get_round_trip(client, create_property):
    created = create_property()
    assert created["_id"]
    assert created["title"] == "Loft near the river"
    assert created["shortDescription"] == "Two-level loft with a terrace."
    assert created["coordinates"] == [55.75, 37.61]
    assert created["investmentReturn"] == 18
    assert created["specifications"] == {
        "rooms": 2,
        "bathrooms": 1,
        "parking": False,
        "balcony": True,
        "elevator": False,
        "furnished": False,
    }
    assert created["views"] == 0
    assert created["formSubmissions"] == 0
    assert created["createdAt"].endswith("Z")

    res = client.get(f"/api/properties/{created['_id']}")
    assert res.status_code == 200
    body = res.json()
    assert body["title"] == created["title"]
    assert body["views"] == 1


def test_create_requires_admin(client):
    res = client.post("/api/properties", json=property_payload())
    assert res.status_code == 401
    assert res.json() == {"message": "Access token required"}


def test_create_ignores_counters_in_payload(client, auth_headers):
    res = client.post(
        "/api/properties",
        json=property_payload(views=500, formSubmissions=40),
        headers=auth_headers,
    )
    assert res.status_code == 201
    assert res.json()["views"] == 0
    assert res.json()["formSubmissions"] == 0


def test_create_coerces_textual_investment_return(create_property):
    created = create_property(investmentReturn="до 25% в год")
    assert created["investmentReturn"] == 25.0

    created = create_property(investmentReturn="по договорённости")
    assert created["investmentReturn"] is None


def test_create_trims_enum_values(create_property):
    created = create_property(type="  Гараж-боксы ", transactionType="Аренда ")
    assert created["type"] == "Гараж-боксы"
    assert created["transactionType"] == "Аренда"


def test_create_rejects_invalid_payloads(client, auth_headers):
    bad_coords = client.post("/api/properties", json=property_payload(coordinates=[120, 10]), headers=auth_headers)
    assert bad_coords.status_code == 400
    assert bad_coords.json()["message"] == "Validation error"
    assert bad_coords.json()["errors"]

    bad_type = client.post("/api/properties", json=property_payload(type="Villa"), headers=auth_headers)
    assert bad_type.status_code == 400

    payload = property_payload()
    del payload["title"]
    missing = client.post("/api/properties", json=payload, headers=auth_headers)
    assert missing.status_code == 400

    negative = client.post("/api/properties", json=property_payload(price=-1), headers=auth_headers)
    assert negative.status_code == 400


def test_get_missing_property_returns_404(client):
    res = client.get("/api/properties/does-not-exist")
    assert res.status_code == 404
    assert res.json() == {"message": "Property not found"}


def test_views_increment_once_per_request(client, create_property):
    prop_id = create_property()["_id"]
    for expected in (1, 2, 3):
        res = client.get(f"/api/properties/{prop_id}")
        assert res.json()["views"] == expected


def test_submit_increments_form_submissions(client, create_property):
    prop_id = create_property()["_id"]

    first = client.post(f"/api/properties/{prop_id}/submit")
    second = client.post(f"/api/properties/{prop_id}/submit")
    assert first.status_code == 200
    assert first.json() == {"message": "Submission recorded", "formSubmissions": 1}
    assert second.json()["formSubmissions"] == 2

    missing = client.post("/api/properties/nope/submit")
    assert missing.status_code == 404


def test_counters_do_not_touch_updated_at(client, create_property):
    created = create_property()
    client.post(f"/api/properties/{created['_id']}/submit")
    res = client.get(f"/api/properties/{created['_id']}")
    assert res.json()["updatedAt"] == created["updatedAt"]


def test_partial_update_keeps_unspecified_fields(client, auth_headers, create_property):
    created = create_property()
    res = client.put(
        f"/api/properties/{created['_id']}",
        json={"price": 9900000, "specifications": {"rooms": 3}},
        headers=auth_headers,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["price"] == 9900000
    assert body["title"] == created["title"]
    assert body["coordinates"] == created["coordinates"]
    assert body["specifications"]["rooms"] == 3
    assert body["specifications"]["bathrooms"] == 1
    assert body["specifications"]["balcony"] is True


def test_update_can_clear_optional_fields(client, auth_headers, create_property):
    created = create_property()
    res = client.put(
        f"/api/properties/{created['_id']}",
        json={"investmentReturn": None, "layout": None, "title": None},
        headers=auth_headers,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["investmentReturn"] is None
    assert body["layout"] is None
    assert body["title"] == created["title"]


def test_update_validates_and_requires_existing_property(client, auth_headers, create_property):
    created = create_property()
    bad = client.put(f"/api/properties/{created['_id']}", json={"coordinates": [0, 200]}, headers=auth_headers)
    assert bad.status_code == 400

    missing = client.put("/api/properties/nope", json={"price": 1}, headers=auth_headers)
    assert missing.status_code == 404


def test_delete_property(client, auth_headers, create_property):
    prop_id = create_property()["_id"]

    res = client.delete(f"/api/properties/{prop_id}", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == {"message": "Property deleted successfully"}

    assert client.get(f"/api/properties/{prop_id}").status_code == 404
    assert client.delete(f"/api/properties/{prop_id}", headers=auth_headers).status_code == 404


def test_toggle_featured(client, auth_headers, create_property):
    prop_id = create_property(isFeatured=False)["_id"]

    first = client.patch(f"/api/properties/{prop_id}/featured", headers=auth_headers)
    assert first.status_code == 200
    assert first.json()["isFeatured"] is True

    second = client.patch(f"/api/properties/{prop_id}/featured", headers=auth_headers)
    assert second.json()["isFeatured"] is False

    assert client.patch("/api/properties/nope/featured", headers=auth_headers).status_code == 404


def test_type_stats(client, create_property):
    create_property(type="Жилые помещения")
    create_property(type="Жилые помещения")
    create_property(type="Гараж-боксы")

    res = client.get("/api/properties/stats/types")
    assert res.status_code == 200
    assert res.json() == {"Жилые помещения": 2, "Гараж-боксы": 1}


def test_missing_table_reports_uninitialized_database(client):
    from realty.models.property import Property
    from realty.core.database import engine

    Property.__table__.drop(bind=engine)
    res = client.get("/api/properties")
    assert res.status_code == 503
    assert res.json() == {"message": "Database not initialized. Please call POST /api/admin/init first."}


def test_unknown_route(client):
    res = client.get("/api/nothing-here")
    assert res.status_code == 404
    assert res.json() == {"message": "Route not found"}


def test_non_finite_numbers_are_rejected(client, auth_headers, create_property):
    headers = {**auth_headers, "Content-Type": "application/json"}
    # httpx refuses to encode Infinity, so the raw body is sent as-is.
    body = json.dumps(property_payload(price=float("inf")))
    res = client.post("/api/properties", content=body, headers=headers)
    assert res.status_code == 400
    assert res.json()["message"] == "Validation error"

    body = json.dumps(property_payload(area=float("nan")))
    assert client.post("/api/properties", content=body, headers=headers).status_code == 400

    prop_id = create_property()["_id"]
    res = client.put(f"/api/properties/{prop_id}", content=json.dumps({"price": float("-inf")}), headers=headers)
    assert res.status_code == 400
    assert client.get(f"/api/properties/{prop_id}").json()["price"] == property_payload()["price"]
