# tests/test_vendors.py


def create_vendor(client, **overrides):
    payload = {"userId": 1, "name": "Ana", "zone": None, "commission": 0.15, **overrides}
    response = client.post("/api/vendors", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_vendor_scenario(client):
    vendor = create_vendor(client)
    assert vendor == {"id": vendor["id"], "userId": 1, "name": "Ana", "zone": None, "commission": "0.15"}


def test_vendor_defaults(client):
    response = client.post("/api/vendors", json={"userId": 1, "name": "Ana"})
    assert response.status_code == 201
    assert response.json()["commission"] == "0.1"
    assert response.json()["zone"] is None


def test_list_vendors_filtered_by_user(client):
    mine = create_vendor(client, userId=5)
    create_vendor(client, userId=6)

    assert len(client.get("/api/vendors").json()) == 2
    assert client.get("/api/vendors", params={"userId": 5}).json() == [mine]


def test_patch_and_delete_vendor(client):
    vendor = create_vendor(client, zone="North")

    response = client.patch(f"/api/vendors/{vendor['id']}", json={"zone": None, "commission": "0.2"})
    assert response.status_code == 200
    assert response.json() == {**vendor, "zone": None, "commission": "0.2"}

    assert client.delete(f"/api/vendors/{vendor['id']}").status_code == 204
    assert client.get(f"/api/vendors/{vendor['id']}").status_code == 404
    assert client.patch(f"/api/vendors/{vendor['id']}", json={"name": "x"}).status_code == 404


def test_assign_customer_requires_admin(client, vendor_headers):
    vendor = create_vendor(client)

    response = client.post(f"/api/vendors/{vendor['id']}/customers", json={"customerId": 3}, headers=vendor_headers)
    assert response.status_code == 403
    assert client.get(f"/api/vendors/{vendor['id']}/customers").json() == []
    assert client.get("/api/vendor-customers").json() == []


def test_assign_customer_requires_authentication(client):
    vendor = create_vendor(client)

    response = client.post(f"/api/vendors/{vendor['id']}/customers", json={"customerId": 3})
    assert response.status_code == 401
    assert client.get(f"/api/vendors/{vendor['id']}/customers").json() == []


def test_unassign_requires_admin(client, admin_headers, vendor_headers):
    vendor = create_vendor(client)
    client.post(f"/api/vendors/{vendor['id']}/customers", json={"customerId": 3}, headers=admin_headers)

    response = client.delete(f"/api/vendors/{vendor['id']}/customers/3", headers=vendor_headers)
    assert response.status_code == 403
    assert len(client.get(f"/api/vendors/{vendor['id']}/customers").json()) == 1


def test_assign_twice_then_unassign_once(client, admin_headers):
    vendor = create_vendor(client)
    url = f"/api/vendors/{vendor['id']}/customers"

    first = client.post(url, json={"customerId": 3}, headers=admin_headers)
    second = client.post(url, json={"customerId": 3}, headers=admin_headers)
    assert first.status_code == second.status_code == 201
    assert first.json()["id"] != second.json()["id"]
    assert first.json()["vendorId"] == vendor["id"]
    assert first.json()["customerId"] == 3
    assert "assignedAt" in first.json()

    assert len(client.get(url).json()) == 2

    assert client.delete(f"{url}/3", headers=admin_headers).status_code == 204
    assert client.get(url).json() == [second.json()]

    # совпадений больше нет, но ответ тот же
    assert client.delete(f"{url}/99", headers=admin_headers).status_code == 204


def test_all_vendor_customers_fan_out(client, admin_headers):
    first = create_vendor(client, name="One")
    second = create_vendor(client, name="Two")

    a = client.post(f"/api/vendors/{first['id']}/customers", json={"customerId": 10}, headers=admin_headers).json()
    b = client.post(f"/api/vendors/{second['id']}/customers", json={"customerId": 11}, headers=admin_headers).json()

    rows = client.get("/api/vendor-customers").json()
    assert sorted(rows, key=lambda r: r["id"]) == sorted([a, b], key=lambda r: r["id"])


def test_fan_out_skips_assignments_of_deleted_vendor(client, admin_headers):
    vendor = create_vendor(client)
    client.post(f"/api/vendors/{vendor['id']}/customers", json={"customerId": 10}, headers=admin_headers)
    client.delete(f"/api/vendors/{vendor['id']}")

    assert client.get("/api/vendor-customers").json() == []
    # сама строка назначения осталась
    assert len(client.get(f"/api/vendors/{vendor['id']}/customers").json()) == 1


def test_patch_vendor_null_commission_rejected(client):
    vendor = create_vendor(client)

    for payload in ({"commission": None}, {"userId": None}, {"name": None}, {"commission": "abc"}):
        response = client.patch(f"/api/vendors/{vendor['id']}", json=payload)
        assert response.status_code == 422, payload
    assert client.get(f"/api/vendors/{vendor['id']}").json() == vendor

    # сводка по-прежнему строится по целой строке продавца
    summary = client.get("/api/reports/summary")
    assert summary.status_code == 200
    assert summary.json()["vendorPerformance"][0]["commission"] == "0.00"


def test_patch_vendor_zone_null_clears_zone(client):
    vendor = create_vendor(client, zone="North")

    response = client.patch(f"/api/vendors/{vendor['id']}", json={"zone": None})
    assert response.status_code == 200
    assert response.json() == {**vendor, "zone": None}
