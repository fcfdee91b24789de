"""
API tests for conversion and asset endpoints.

Tests cover:
- Health and root endpoints
- Asset catalogue
- POST /convert (results, undefined results, defaults, validation)
- POST /convert/swap
"""

import pytest
from fastapi.testclient import TestClient

from tests.conftest import conversion_payload


class TestMeta:
    """Tests for / and /health."""

    def test_health_check(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client: TestClient):
        data = client.get("/").json()
        assert data["docs"] == "/docs"
        assert data["version"] == "0.1.0"


class TestAssetsAPI:
    """Tests for GET /assets."""

    def test_list_assets(self, client: TestClient):
        response = client.get("/assets")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 3
        by_code = {a["code"]: a for a in data["assets"]}
        assert by_code["G"]["label"] == "Gold (XAU)"
        assert by_code["G"]["unit"] == "USD/oz"
        assert by_code["S"]["unit"] == "USD/oz"
        assert by_code["B"]["unit"] == "USD"
        assert by_code["B"]["name"] == "bitcoin"
        assert by_code["B"]["presets"] == [30000, 50000, 65000, 100000]


class TestConvertAPI:
    """Tests for POST /convert."""

    def test_convert_bitcoin_to_gold(self, client: TestClient):
        """
        GIVEN a BTC price of 65000, precision 2 and a rate of 35
        WHEN I POST /convert
        THEN the gold price and its THB value are returned
        """
        response = client.post("/convert", json=conversion_payload())

        assert response.status_code == 200
        data = response.json()
        assert data["result"] == 1783.755
        assert data["rounded_result"] == 1783.76
        assert data["thb_value"] == 62431.6
        assert data["formatted_result"] == "1,783.76"
        assert data["formatted_thb"] == "62,431.60"
        assert data["formatted_exchange_rate"] == "35"
        assert data["source_unit"] == "USD"
        assert data["target_unit"] == "USD/oz"

    def test_convert_accepts_numbers(self, client: TestClient):
        response = client.post(
            "/convert",
            json=conversion_payload(source="G", target="S", value=1800, precision=2, exchange_rate=0),
        )
        data = response.json()
        assert data["rounded_result"] == 23.79
        assert data["thb_value"] is None
        assert data["formatted_thb"] is None

    def test_same_asset_returns_null_result(self, client: TestClient):
        response = client.post("/convert", json=conversion_payload(source="G", target="G", value="1800"))

        assert response.status_code == 200
        data = response.json()
        assert data["result"] is None
        assert data["rounded_result"] is None
        assert data["formatted_result"] is None

    @pytest.mark.parametrize("value", ["", "abc", None])
    def test_invalid_value_returns_null_result(self, client: TestClient, value):
        response = client.post("/convert", json=conversion_payload(value=value))

        assert response.status_code == 200
        assert response.json()["result"] is None

    @pytest.mark.parametrize("value", [True, False])
    def test_boolean_value_returns_null_result(self, client: TestClient, value):
        """
        GIVEN a JSON boolean as the source value
        WHEN I POST /convert
        THEN it is treated as invalid input, not as 1 or 0
        """
        response = client.post("/convert", json=conversion_payload(value=value))

        assert response.status_code == 200
        data = response.json()
        assert data["source_value"] is None
        assert data["result"] is None
        assert data["thb_value"] is None

    def test_boolean_exchange_rate_hides_thb(self, client: TestClient):
        response = client.post("/convert", json=conversion_payload(exchange_rate=True))

        assert response.status_code == 200
        data = response.json()
        assert data["rounded_result"] == 1783.76
        assert data["exchange_rate"] == 0.0
        assert data["thb_value"] is None

    def test_fractional_precision_is_truncated(self, client: TestClient):
        """
        GIVEN a JSON precision of 2.5
        WHEN I POST /convert
        THEN the precision is truncated to 2 instead of being rejected
        """
        response = client.post("/convert", json=conversion_payload(precision=2.5))

        assert response.status_code == 200
        data = response.json()
        assert data["precision"] == 2
        assert data["rounded_result"] == 1783.76

    def test_defaults_when_fields_omitted(self, client: TestClient):
        response = client.post("/convert", json={"value": "65000"})

        data = response.json()
        assert data["source_asset"] == "B"
        assert data["target_asset"] == "G"
        assert data["precision"] == 2
        assert data["exchange_rate"] == 35.0

    def test_precision_is_clamped(self, client: TestClient):
        response = client.post("/convert", json=conversion_payload(precision="12"))
        assert response.json()["precision"] == 8

    def test_unknown_asset_returns_422(self, client: TestClient):
        response = client.post("/convert", json=conversion_payload(source="X"))
        assert response.status_code == 422


class TestSwapAPI:
    """Tests for POST /convert/swap."""

    def test_swap_converts_the_other_way(self, client: TestClient):
        response = client.post("/convert/swap", json=conversion_payload(value="1784.21"))

        assert response.status_code == 200
        data = response.json()
        assert data["source_asset"] == "G"
        assert data["target_asset"] == "B"
        assert data["rounded_result"] == 0.0
