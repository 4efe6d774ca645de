"""
API route tests through the FastAPI test client.

The record store and settings store are mocked (see conftest).
"""

from unittest.mock import patch

from tests.factories import SubmissionFactory
from exceptions import DatabaseError, HistorySourceError, OptionSourceError


class TestOptionRoutes:

    def test_get_options(self, test_client, mock_sheets, sample_dropdown_payload):
        mock_sheets.fetch_dropdown_data.return_value = sample_dropdown_payload

        response = test_client.get("/api/options")

        assert response.status_code == 200
        body = response.json()
        assert body["productGroups"][0] == {"value": "kurta-set", "label": "Kurta Set", "alias": "KT"}
        assert [o["value"] for o in body["sizes"]] == ["S", "M", "L", "XL"]

    def test_source_down_returns_503(self, test_client, mock_sheets):
        mock_sheets.fetch_dropdown_data.side_effect = OptionSourceError("down")

        response = test_client.post("/api/options/refresh")

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "OPTION_SOURCE_ERROR"


class TestSkuRoutes:

    def test_preview(self, test_client, mock_sheets, sample_dropdown_payload, complete_record_data):
        mock_sheets.fetch_dropdown_data.return_value = sample_dropdown_payload

        response = test_client.post("/api/skus/preview", json=complete_record_data)

        assert response.status_code == 200
        assert response.json() == {
            "sku": "WKT-BK-XL-101-DL-CT-PR-VND001-RWCC",
            "complete": True,
            "missingFields": [],
        }

    def test_preview_empty_body(self, test_client):
        response = test_client.post("/api/skus/preview", json={})

        assert response.status_code == 200
        assert response.json()["sku"] == "-".join(
            ["---", "---", "--", "---", "---", "---", "---", "------", "----"]
        )
        assert len(response.json()["missingFields"]) == 10

    def test_submit(self, test_client, mock_sheets, mock_supabase, sample_dropdown_payload,
                    complete_record_data):
        mock_sheets.fetch_dropdown_data.return_value = sample_dropdown_payload
        mock_supabase.set_table_data("settings", [{"key": "last_style_number", "value": "101"}])

        response = test_client.post("/api/skus", json={**complete_record_data, "username": "asha"})

        assert response.status_code == 201
        body = response.json()
        assert body["sku"] == "WKT-BK-XL-101-DL-CT-PR-VND001-RWCC"
        assert body["submission"]["createdBy"] == "asha"
        assert body["nextRecord"]["style"] == "102"
        mock_sheets.submit.assert_called_once()

    def test_submit_incomplete(self, test_client, mock_sheets):
        response = test_client.post(
            "/api/skus",
            json={"productGroup": "Kurta", "cost": "500", "username": "asha"}
        )

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "SKU_INCOMPLETE"
        assert error["details"]["missing_fields"][0] == "Product Category"
        mock_sheets.submit.assert_not_called()

    def test_submit_without_username(self, test_client, complete_record_data):
        response = test_client.post("/api/skus", json=complete_record_data)

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "USERNAME_REQUIRED"

    def test_next_style(self, test_client):
        response = test_client.get("/api/skus/next-style")

        assert response.status_code == 200
        assert response.json() == {"style": "100"}

    def test_peek_style_does_not_consume(self, test_client, mock_supabase):
        mock_supabase.set_table_data("settings", [{"key": "last_style_number", "value": "120"}])

        first = test_client.get("/api/skus/next-style/peek")
        second = test_client.get("/api/skus/next-style/peek")

        assert first.json() == second.json() == {"style": "121"}
        assert mock_supabase.table("settings").updates == []
        assert mock_supabase.table("settings").inserted == []

    def test_settings_store_unreachable(self, test_client, complete_record_data):
        with patch(
            "services.style_number_service.get_supabase_client",
            side_effect=DatabaseError("connect", "Failed to connect to Supabase")
        ):
            response = test_client.post("/api/skus/preview", json=complete_record_data)

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "DATABASE_ERROR"

    def test_encode_cost(self, test_client):
        response = test_client.get("/api/skus/cost/encode", params={"cost": "1500"})

        assert response.json() == {"cost": "1500", "code": "RWCC"}

    def test_encode_cost_with_suffix(self, test_client):
        response = test_client.get("/api/skus/cost/encode", params={"cost": "500/-"})

        assert response.json() == {"cost": "500/-", "code": "WCC"}

    def test_decode_cost(self, test_client):
        response = test_client.get("/api/skus/cost/decode", params={"code": "wcc"})

        assert response.json() == {"code": "wcc", "cost": 500}


class TestHistoryRoutes:

    def test_filters(self, test_client, mock_sheets):
        mock_sheets.fetch_submissions.return_value = [
            SubmissionFactory.create(color="Black", vendor_code="VND001"),
            SubmissionFactory.create(color="Red", vendor_code="VND002"),
            SubmissionFactory.create(color="Red", vendor_code="VND001"),
        ]

        response = test_client.get("/api/history", params={"q": "red", "vendorCode": "001"})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 3
        assert body["matched"] == 1
        assert body["data"][0]["vendorCode"] == "VND001"

    def test_store_down(self, test_client, mock_sheets):
        mock_sheets.fetch_submissions.side_effect = HistorySourceError("down")

        response = test_client.get("/api/history")

        assert response.status_code == 503


class TestDashboardRoutes:

    def test_summary(self, test_client, mock_sheets):
        mock_sheets.fetch_submissions.return_value = [
            SubmissionFactory.create(cost="100", color="Black"),
            SubmissionFactory.create(cost="300", color="Black"),
            SubmissionFactory.create(cost="900", color="Red"),
        ]

        response = test_client.get("/api/dashboard/summary", params={"max_cost": 500})

        assert response.status_code == 200
        body = response.json()
        assert body["totalSkus"] == 2
        assert body["avgCost"] == 200.0
        assert body["colorCounts"] == [{"name": "Black", "value": 2}]


class TestHealth:

    def test_health(self, test_client, mock_supabase):
        mock_supabase.set_table_data("settings", [{"key": "last_style_number", "value": "120"}])

        response = test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"]["settings_count"] == 1
        assert body["record_store"] == {"configured": True}

    def test_root(self, test_client):
        response = test_client.get("/")

        assert response.status_code == 200
        assert "history" in response.json()["endpoints"]
