from datetime import datetime

import pytest

from models import db
from models.review import Review
from utils.seed import DEFAULT_CATEGORIES, DEFAULT_PRICE_ITEMS, DEFAULT_REVIEWS, seed_catalog


@pytest.fixture
def seeded(app):
    with app.app_context():
        seed_catalog()


def test_seed_is_idempotent(app):
    with app.app_context():
        first = seed_catalog()
        assert first == len(DEFAULT_CATEGORIES) + 3 + len(DEFAULT_PRICE_ITEMS) + len(DEFAULT_REVIEWS)
        assert seed_catalog() == 0


def test_categories(client, seeded):
    rows = client.get("/categories").get_json()
    assert [c["name"] for c in rows] == [name for name, _ in DEFAULT_CATEGORIES]


def test_services(client, seeded):
    all_services = client.get("/services/all").get_json()
    assert len(all_services) == 3
    featured = client.get("/services/featured").get_json()
    assert all(s["featured"] for s in featured)

    hair_id = client.get("/categories").get_json()[0]["id"]
    hair = client.get(f"/services/{hair_id}").get_json()
    assert [s["name"] for s in hair] == ["Corte de Cabelo"]


def test_prices(client, seeded):
    rows = client.get("/prices").get_json()
    assert len(rows) == len(DEFAULT_PRICE_ITEMS)

    nails_id = client.get("/categories").get_json()[1]["id"]
    nails = client.get(f"/prices/{nails_id}").get_json()
    assert len(nails) == 5
    assert all(p["category_id"] == nails_id for p in nails)


def test_empty_catalog(client):
    assert client.get("/categories").get_json() == []
    assert client.get("/services/99").get_json() == []
    assert client.get("/reviews").get_json() == []


def test_seeded_reviews(client, seeded):
    rows = client.get("/reviews").get_json()
    assert sorted(r["client_name"] for r in rows) == sorted(name for name, _, _ in DEFAULT_REVIEWS)
    assert all(1 <= r["rating"] <= 5 for r in rows)


def test_reviews_newest_first(app, client):
    with app.app_context():
        db.session.add_all([
            Review(client_name="Antiga", rating=4, comment="Atendimento muito bom.", created_at=datetime(2025, 1, 5)),
            Review(client_name="Recente", rating=5, comment="Adorei o resultado final!", created_at=datetime(2025, 3, 1)),
        ])
        db.session.commit()

    rows = client.get("/reviews").get_json()
    assert [r["client_name"] for r in rows] == ["Recente", "Antiga"]
    assert rows[0]["likes"] == 0
