"""
Shared test fixtures.
"""

import os
import sys
from pathlib import Path

# Add backend directory to Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Settings are loaded at import time; provide required values
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")
os.environ.setdefault("SHEETS_SCRIPT_URL", "https://script.google.com/macros/s/test/exec")

import pytest
from unittest.mock import MagicMock, patch
from datetime import datetime
from typing import Generator

from integrations.sheets import SheetsClient

# ===================
# MOCK SUPABASE CLIENT
# ===================

class MockSupabaseResponse:
    """Mock Supabase query response."""

    def __init__(self, data: list = None, count: int = None):
        self.data = data or []
        self.count = count if count is not None else len(self.data)


class MockSupabaseQuery:
    """Mock Supabase query builder with chainable methods."""

    def __init__(self, table: "MockSupabaseTable", data: list = None):
        self._table = table
        self._data = data or []

    def select(self, *args, **kwargs):
        return self

    def insert(self, data):
        if isinstance(data, dict):
            data = [data]
        rows = []
        for item in data:
            row = dict(item)
            row["id"] = "test-uuid-123"
            row["created_at"] = datetime.utcnow().isoformat() + "Z"
            rows.append(row)
        self._table.inserted.extend(rows)
        self._data = rows
        return self

    def update(self, data):
        self._table.updates.append(dict(data))
        self._data = [{**item, **data} for item in self._data] or [dict(data)]
        return self

    def eq(self, column, value):
        return self

    def execute(self) -> MockSupabaseResponse:
        return MockSupabaseResponse(data=self._data)


class MockSupabaseTable:
    """Mock Supabase table that records writes."""

    def __init__(self, data: list = None):
        self._data = data or []
        self.inserted: list[dict] = []
        self.updates: list[dict] = []

    def select(self, *args, **kwargs):
        return MockSupabaseQuery(self, [dict(row) for row in self._data])

    def insert(self, data):
        return MockSupabaseQuery(self).insert(data)

    def update(self, data):
        return MockSupabaseQuery(self, [dict(row) for row in self._data]).update(data)


class MockSupabaseClient:
    """Mock Supabase client."""

    def __init__(self):
        self._tables: dict[str, MockSupabaseTable] = {}

    def set_table_data(self, table_name: str, data: list):
        """Configure mock data for a table."""
        self._tables[table_name] = MockSupabaseTable(data)

    def table(self, name: str) -> MockSupabaseTable:
        """Get mock table (created empty on first use)."""
        return self._tables.setdefault(name, MockSupabaseTable())


# ===================
# FIXTURES
# ===================

@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Drop cached service instances between tests."""
    monkeypatch.setattr("integrations.sheets._sheets_client", None)
    monkeypatch.setattr("services.option_service._option_service", None)
    monkeypatch.setattr("services.style_number_service._style_number_service", None)
    monkeypatch.setattr("services.submission_service._submission_service", None)
    monkeypatch.setattr("services.history_service._history_service", None)
    monkeypatch.setattr("services.dashboard_service._dashboard_service", None)


@pytest.fixture
def mock_supabase() -> MockSupabaseClient:
    """
    Create a mock Supabase client.

    Usage:
        def test_something(mock_supabase):
            mock_supabase.set_table_data("settings", [
                {"key": "last_style_number", "value": "104"}
            ])
    """
    return MockSupabaseClient()


@pytest.fixture
def mock_db(mock_supabase) -> Generator:
    """
    Patch the database client with mock.

    Usage:
        def test_something(mock_db, mock_supabase):
            mock_supabase.set_table_data("settings", [...])
            # Now any code using get_supabase_client() gets the mock
    """
    with patch("config.database.get_supabase_client", return_value=mock_supabase):
        with patch("services.style_number_service.get_supabase_client", return_value=mock_supabase):
            yield mock_supabase


@pytest.fixture
def mock_sheets() -> Generator:
    """
    Replace the Apps Script client with a MagicMock.

    Usage:
        def test_something(mock_sheets):
            mock_sheets.fetch_submissions.return_value = [...]
    """
    client = MagicMock(spec=SheetsClient)
    client.fetch_dropdown_data.return_value = {}
    client.fetch_submissions.return_value = []
    with patch("integrations.sheets._sheets_client", client):
        yield client


@pytest.fixture
def sample_dropdown_payload() -> dict:
    """Raw option payload as the Apps Script sends it."""
    return {
        "Product Group": [
            {"value": "kurta-set", "label": "Kurta Set", "alias": "KT"},
            {"value": "Dupatta", "label": "Dupatta", "alias": "DP"},
            "Saree",
        ],
        "Product Categories": [
            {"value": "Women", "label": "Women", "alias": "W"},
            {"label": "Men", "alias": "M"},
        ],
        "Colors": [
            {"value": "Maroon", "alias": "MR"},
            "Black",
        ],
        "Size": ["S", "M", "L", "XL"],
        "Location": [{"value": "Delhi", "label": "Delhi", "alias": "DL"}],
        "Fabrics": [{"value": "Cotton", "label": "Cotton", "alias": "CT"}],
        "Nature": ["Printed", {"value": "Handwork", "alias": "HW"}],
        "Vendor Code": [{"value": "Vendor One", "label": "Vendor One", "alias": "VND001"}],
    }


@pytest.fixture
def complete_record_data() -> dict:
    """All ten fields filled in, camelCase as the frontend sends them."""
    return {
        "productGroup": "Kurta Set",
        "productCategory": "Women",
        "color": "Black",
        "size": "XL",
        "style": "101",
        "location": "Delhi",
        "fabric": "Cotton",
        "nature": "Printed",
        "vendorCode": "Vendor One",
        "cost": "1500",
    }


# ===================
# API TEST CLIENT
# ===================

@pytest.fixture
def test_client(mock_db, mock_sheets):
    """
    Create FastAPI test client with mocked settings store and sheets.

    Usage:
        def test_endpoint(test_client, mock_sheets):
            mock_sheets.fetch_submissions.return_value = [...]
            response = test_client.get("/api/history")
    """
    from fastapi.testclient import TestClient
    from main import app

    return TestClient(app)
