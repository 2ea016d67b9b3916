import pytest

from utils.seed import seed_catalog


def _sale(**overrides):
    data = {
        "client_name": "Ana Costa",
        "service_id": 1,
        "amount": 45.5,
        "date": "2025-04-10",
        "payment_method": "pix",
    }
    data.update(overrides)
    return data


@pytest.fixture
def seeded(app):
    with app.app_context():
        seed_catalog()


def test_sales_require_admin(client, client_headers):
    assert client.get("/sales").status_code == 403
    assert client.post("/sales", json=_sale(), headers=client_headers).status_code == 403


def test_create_sale_resolves_service_name(client, seeded, admin_headers):
    resp = client.post("/sales", json=_sale(), headers=admin_headers)
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["service_name"] == "Corte de Cabelo"
    assert body["amount"] == 45.5


def test_create_sale_unknown_service(client, admin_headers):
    resp = client.post("/sales", json=_sale(service_id=404), headers=admin_headers)
    assert resp.status_code == 201
    assert resp.get_json()["service_name"] == "Unknown Service"


def test_create_sale_validation(client, admin_headers):
    resp = client.post("/sales", json=_sale(amount=-5, date="2025/04/10"), headers=admin_headers)
    assert resp.status_code == 400
    fields = {d["field"] for d in resp.get_json()["details"]}
    assert {"amount", "date"} <= fields


def test_list_and_filter_sales(client, admin_headers):
    for day in ("2025-04-01", "2025-04-10", "2025-04-20"):
        client.post("/sales", json=_sale(date=day), headers=admin_headers)

    assert len(client.get("/sales").get_json()) == 3

    rows = client.get("/sales/filter?start_date=2025-04-01&end_date=2025-04-10").get_json()
    assert [r["date"] for r in rows] == ["2025-04-01", "2025-04-10"]

    camel = client.get("/sales/filter?startDate=2025-04-10&endDate=2025-04-30").get_json()
    assert [r["date"] for r in camel] == ["2025-04-10", "2025-04-20"]


def test_filter_sales_bad_params(client, admin_headers):
    assert client.get("/sales/filter?start_date=2025-04-01").status_code == 400
    assert client.get("/sales/filter?start_date=2025-04-01&end_date=abril").status_code == 400
