from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from sba504.api.app import app
from sba504.engine.crossover import crossover_month


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestCalculate:
    def test_defaults(self, client, canonical_scenario):
        resp = client.post("/api/v1/calculate", json={})
        assert resp.status_code == 200
        data = resp.json()
        assert data["property_type"] == "office"
        assert data["crossover_month"] == crossover_month(canonical_scenario)
        assert Decimal(data["monthly_rent"]) == Decimal("5000.00")
        assert len(data["payment_comparison"]) == 21
        assert len(data["equity_breakdown"]) == 11

    def test_amounts_quantized_to_cents(self, client):
        data = client.post("/api/v1/calculate", json={}).json()
        payments = data["payments"]
        # 1,000,000 * 1.1% / 12
        assert Decimal(payments["property_tax"]) == Decimal("916.67")
        for key in ("first_mortgage", "sba_loan", "insurance", "total"):
            assert Decimal(payments[key]).as_tuple().exponent == -2

    def test_effective_payment_below_total(self, client):
        data = client.post("/api/v1/calculate", json={}).json()
        assert Decimal(data["effective_monthly_payment"]) < Decimal(data["payments"]["total"])

    def test_overrides(self, client):
        resp = client.post("/api/v1/calculate", json={
            "purchase_price": 2_000_000,
            "property_type": "industrial",
            "first_mortgage_term": 25,
            "occupancy_years": 5,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["property_type"] == "industrial"
        assert len(data["equity_breakdown"]) == 6
        assert Decimal(data["equity_breakdown"][0]["down_payment"]) == Decimal("200000.00")

    def test_unoffered_term_is_bad_request(self, client):
        resp = client.post("/api/v1/calculate", json={"first_mortgage_term": 15})
        assert resp.status_code == 400
        assert "First mortgage term" in resp.json()["detail"]

    @pytest.mark.parametrize("field,value", [
        ("purchase_price", 50_000),
        ("down_payment_pct", 5),
        ("sba_rate", 9),
        ("tax_bracket", 50),
        ("occupancy_years", 0),
        ("property_type", "warehouse"),
    ])
    def test_out_of_range_rejected(self, client, field, value):
        resp = client.post("/api/v1/calculate", json={field: value})
        assert resp.status_code == 422


class TestCrossover:
    def test_split_into_years_and_months(self, client, canonical_scenario):
        resp = client.post("/api/v1/crossover", json={})
        assert resp.status_code == 200
        data = resp.json()
        month = crossover_month(canonical_scenario)
        assert data["crossover_month"] == month
        assert data["years"] == month // 12
        assert data["months"] == month % 12

    def test_expensive_rent_crosses_in_first_quarter(self, client):
        """$50K rent overtakes the $100K down payment plus ~$2.1K/mo net cost in month 3."""
        data = client.post("/api/v1/crossover", json={"monthly_rent": 50_000}).json()
        assert data["crossover_month"] == 3
        assert data["years"] == 0
        assert data["months"] == 3

    def test_no_crossover(self, client):
        """Flat $1K rent never overtakes a 25% down payment; years and months stay null."""
        resp = client.post("/api/v1/crossover", json={
            "monthly_rent": 1000,
            "annual_rent_increase": 0,
            "appreciation_rate": 0,
            "down_payment_pct": 25,
        })
        assert resp.status_code == 200
        assert resp.json() == {"crossover_month": -1, "years": None, "months": None}
