"""
Unit tests for history filtering and HistoryService.

Run: pytest tests/unit/test_history_service.py -v
"""

import pytest

from services.history_service import HistoryService, filter_submissions
from models.history import HistoryFilters
from models.sku import SKUSubmission
from exceptions import HistorySourceError

from tests.factories import SubmissionFactory


@pytest.fixture
def records() -> list[SKUSubmission]:
    rows = [
        SubmissionFactory.create(sku="WKT-BK-M-100-DL-CT-PR-VND001-WCC", color="Black", created_by="asha"),
        SubmissionFactory.create(sku="MAB-RD-L-101-MU-SI-SL-VND002-RCC", product_group="Abaya",
                                 product_category="Men", color="Red", cost="100", created_by="ravi",
                                 vendor_code="VND002"),
        SubmissionFactory.create(sku="WDP-PK-S-102-DL-CT-EM-VND001-RWCC", product_group="Dupatta",
                                 color="Pink", fabric="Silk", cost="1500", created_by="Asha"),
    ]
    return [SKUSubmission.model_validate(row) for row in rows]


class TestFilterSubmissions:
    """Tests for filter_submissions()"""

    def test_no_filters_returns_all_in_order(self, records):
        assert filter_submissions(records) == records

    def test_column_filter_on_sku(self, records):
        result = filter_submissions(records, "", {"sku": "ab"})
        assert [r.product_group for r in result] == ["Abaya"]

    def test_global_query_no_match(self, records):
        assert filter_submissions(records, "xyz", {}) == []

    def test_global_query_searches_group_category_color(self, records):
        assert [r.color for r in filter_submissions(records, "dupatta")] == ["Pink"]
        assert [r.color for r in filter_submissions(records, "MEN")] == ["Black", "Red", "Pink"]
        assert [r.color for r in filter_submissions(records, "red")] == ["Red"]

    def test_global_query_ignores_other_fields(self, records):
        """Fabric is not part of the global search."""
        assert filter_submissions(records, "silk") == []

    def test_global_query_is_trimmed(self, records):
        assert len(filter_submissions(records, "  pink  ")) == 1
        assert filter_submissions(records, "   ") == records

    def test_column_filters_combine_with_and(self, records):
        result = filter_submissions(records, "", {"createdBy": "asha", "fabric": "cotton"})
        assert [r.color for r in result] == ["Black"]

    def test_global_and_column_filters_combine(self, records):
        result = filter_submissions(records, "vnd001", {"color": "pink"})
        assert [r.color for r in result] == ["Pink"]

    def test_empty_filters_ignored(self, records):
        assert filter_submissions(records, "", {"sku": "", "color": ""}) == records

    def test_attribute_names_accepted(self, records):
        result = filter_submissions(records, "", {"vendor_code": "002"})
        assert [r.color for r in result] == ["Red"]

    def test_unknown_filter_ignored(self, records):
        assert filter_submissions(records, "", {"warehouse": "x"}) == records

    def test_missing_fields_treated_as_empty(self):
        sparse = [SKUSubmission.model_validate({"sku": "ONLY-SKU", "cost": None})]

        assert filter_submissions(sparse, "only") == sparse
        assert filter_submissions(sparse, "", {"color": "red"}) == []
        assert filter_submissions(sparse, "", {"cost": "1"}) == []

    def test_numeric_cells_filter_as_text(self):
        stored = [SKUSubmission.model_validate({"sku": "X", "cost": 1500, "style": 101})]
        assert filter_submissions(stored, "", {"cost": "150", "style": "01"}) == stored


class TestHistoryService:

    def test_search(self, mock_sheets):
        mock_sheets.fetch_submissions.return_value = [
            SubmissionFactory.create(color="Black"),
            SubmissionFactory.create(color="Red"),
        ]
        service = HistoryService()

        result = service.search(query="", filters=HistoryFilters(color="red"))

        assert result.total == 2
        assert result.matched == 1
        assert result.data[0].color == "Red"

    def test_get_all_parses_rows(self, mock_sheets):
        mock_sheets.fetch_submissions.return_value = [SubmissionFactory.create(created_by="ravi")]
        service = HistoryService()

        records = service.get_all()

        assert records[0].created_by == "ravi"

    def test_source_error_propagates(self, mock_sheets):
        mock_sheets.fetch_submissions.side_effect = HistorySourceError("down")
        service = HistoryService()

        with pytest.raises(HistorySourceError):
            service.search(query="x")


class TestHistoryFilters:

    def test_active_skips_empty(self):
        filters = HistoryFilters(sku="AB", vendor_code="", created_by="asha")
        assert filters.active() == {"sku": "AB", "created_by": "asha"}


class TestStoredCellTypes:

    def test_boolean_cell_read_as_text(self):
        record = SKUSubmission.model_validate({"sku": "AB-1", "cost": "500", "nature": True})

        assert record.nature == "TRUE"
        assert filter_submissions([record], "", {"nature": "true"}) == [record]

    def test_unreadable_row_skipped(self, mock_sheets):
        mock_sheets.fetch_submissions.return_value = [
            SubmissionFactory.create(color="Black"),
            {**SubmissionFactory.create(color="Red"), "size": ["M", "L"]},
            SubmissionFactory.create(color="Pink", nature=False),
        ]
        service = HistoryService()

        result = service.search(query="")

        assert [r.color for r in result.data] == ["Black", "Pink"]
        assert result.total == 2
        assert result.data[1].nature == "FALSE"
