"""API tests against the FastAPI app with the market source stubbed."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from src.api.app import app
from src.api.deps import get_market_source
from src.data.static import StaticMarketDataSource
from src.models.market import MarketData

MARKET = MarketData(
    conventional_interest_rate=Decimal("6.75"),
    fha_interest_rate=Decimal("6.25"),
    property_tax_rate=Decimal("1.25"),
    property_insurance_annual=Decimal("1200"),
)


class EmptySource:
    async def get_market_data(self, location):
        return None


@pytest.fixture
def client():
    app.dependency_overrides[get_market_source] = lambda: StaticMarketDataSource(MARKET)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def payload():
    return {
        "borrower": {"annual_income": "100000", "fico_score": 720, "monthly_debts": "500"},
        "loan": {
            "loan_type": "conventional",
            "ltv": "80",
            "base_interest_rate": "6.75",
            "property_tax_rate": "1.25",
            "property_insurance_annual": "1200",
        },
        "location": {"city": "Columbus", "state": "OH", "zip_code": "43215"},
    }


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestCalculate:
    def test_canonical(self, client, payload):
        resp = client.post("/api/v1/affordability", json=payload)
        assert resp.status_code == 200
        data = resp.json()
        assert Decimal(data["max_dti"]) == Decimal("40")
        assert Decimal(data["adjusted_interest_rate"]) == Decimal("7")
        assert Decimal(data["max_home_price"]) > 0
        assert [s["loan_type"] for s in data["scenarios"]] == ["fha", "conventional", "conventional"]
        assert {a["source"] for a in data["dti_adjustments"]} == {"creditHistory", "ltv"}
        assert data["back_end_status"]["status"] == "normal"

    def test_structured_factors(self, client, payload):
        payload["borrower"]["fico_score"] = 780
        payload["borrower"]["compensating_factors"] = {
            "cashReserves": "6+ months",
            "residualIncome": "meets VA guidelines",
        }
        data = client.post("/api/v1/affordability", json=payload).json()
        assert Decimal(data["max_dti"]) == Decimal("45")

    def test_legacy_factor_list(self, client, payload):
        payload["borrower"]["fico_score"] = 650
        payload["borrower"]["compensating_factors"] = ["reserves"]
        payload["loan"]["ltv"] = "90"
        data = client.post("/api/v1/affordability", json=payload).json()
        assert Decimal(data["max_dti"]) == Decimal("45")

    def test_missing_location(self, client, payload):
        payload["location"] = {"city": "Columbus"}
        resp = client.post("/api/v1/affordability", json=payload)
        assert resp.status_code == 422
        assert resp.json()["detail"]["missing"] == "location"

    def test_missing_rate(self, client, payload):
        del payload["loan"]["base_interest_rate"]
        resp = client.post("/api/v1/affordability", json=payload)
        assert resp.status_code == 422
        assert resp.json()["detail"]["missing"] == "interest_rate"

    def test_zero_affordability_is_not_an_error(self, client, payload):
        payload["borrower"]["monthly_debts"] = "5000"
        resp = client.post("/api/v1/affordability", json=payload)
        assert resp.status_code == 200
        assert Decimal(resp.json()["max_home_price"]) == 0

    def test_fico_out_of_range(self, client, payload):
        payload["borrower"]["fico_score"] = 900
        assert client.post("/api/v1/affordability", json=payload).status_code == 422


class TestQuote:
    def test_uses_market_data(self, client, payload):
        quote = {
            "borrower": payload["borrower"],
            "location": payload["location"],
            "loan_type": "conventional",
            "ltv": "80",
        }
        direct = client.post("/api/v1/affordability", json=payload).json()
        quoted = client.post("/api/v1/affordability/quote", json=quote).json()
        assert quoted["max_home_price"] == direct["max_home_price"]

    def test_fha_quote_has_mip(self, client, payload):
        quote = {
            "borrower": payload["borrower"],
            "location": payload["location"],
            "loan_type": "fha",
            "ltv": "96.5",
        }
        data = client.post("/api/v1/affordability/quote", json=quote).json()
        assert Decimal(data["financial_details"]["mortgage_insurance_rate"]) == Decimal("0.55")
        assert Decimal(data["financial_details"]["upfront_mip_amount"]) > 0

    def test_incomplete_location(self, client, payload):
        quote = {"borrower": payload["borrower"], "location": {"city": "Columbus"}, "ltv": "80"}
        resp = client.post("/api/v1/affordability/quote", json=quote)
        assert resp.status_code == 422
        assert resp.json()["detail"]["missing"] == "location"

    def test_no_market_data(self, client, payload):
        app.dependency_overrides[get_market_source] = lambda: EmptySource()
        quote = {"borrower": payload["borrower"], "location": payload["location"], "ltv": "80"}
        assert client.post("/api/v1/affordability/quote", json=quote).status_code == 404


class TestValidateEndpoint:
    def test_valid(self, client, payload):
        data = client.post("/api/v1/affordability/validate", json=payload).json()
        assert data["valid"] is True
        assert data["missing"] is None
        assert len(data["factor_issues"]) == 6

    def test_invalid(self, client, payload):
        payload["borrower"]["annual_income"] = "0"
        data = client.post("/api/v1/affordability/validate", json=payload).json()
        assert data["valid"] is False
        assert data["missing"] == "income"
        assert "Step 2" in data["message"]


class TestRateEndpoint:
    def test_breakdown(self, client):
        resp = client.post("/api/v1/affordability/rate", json={
            "base_interest_rate": "6.75", "fico_score": 720, "ltv": "80",
        })
        data = resp.json()
        assert Decimal(data["fico_adjustment"]) == Decimal("0.125")
        assert Decimal(data["ltv_adjustment"]) == Decimal("0.125")
        assert Decimal(data["adjusted_interest_rate"]) == Decimal("7")
        assert data["offered"] is True

    def test_not_offered(self, client):
        data = client.post("/api/v1/affordability/rate", json={
            "base_interest_rate": "6.75", "fico_score": 600, "ltv": "80",
        }).json()
        assert data["offered"] is False


class TestLimitsEndpoint:
    def test_fha(self, client):
        data = client.get("/api/v1/affordability/limits/fha").json()
        assert Decimal(data["base_dti"]) == Decimal("43")
        assert Decimal(data["dti_cap"]) == Decimal("57")
        assert Decimal(data["back_end_limit"]) == Decimal("43")
        assert Decimal(data["max_ltv"]) == Decimal("96.5")
        assert data["min_fico"] == 500

    def test_strong_factors(self, client):
        data = client.get("/api/v1/affordability/limits/fha", params={"strong_factors": True}).json()
        assert Decimal(data["back_end_limit"]) == Decimal("57")

    def test_unknown_loan_type(self, client):
        assert client.get("/api/v1/affordability/limits/va").status_code == 422


class TestMarketLookup:
    def test_lookup(self, client):
        resp = client.post("/api/v1/market/lookup", json={
            "city": "Columbus", "state": "OH", "zip_code": "43215",
        })
        assert resp.status_code == 200
        assert Decimal(resp.json()["fha_interest_rate"]) == Decimal("6.25")

    def test_incomplete(self, client):
        resp = client.post("/api/v1/market/lookup", json={"city": "Columbus"})
        assert resp.status_code == 422
