"""
Test suite for the SKU Generator API.

Run all tests: pytest
Run unit tests only: pytest tests/unit/
Run specific file: pytest tests/unit/test_sku_service.py -v
"""
