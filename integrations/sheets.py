"""
Google Apps Script web app client.

The record store is a Google Sheet fronted by an Apps Script web app:

    GET  {url}                         -> {"success": true, "data": {<category>: [...]}}
    GET  {url}?action=getSubmissions   -> {"success": true, "data": [<submission>, ...]}
    POST {url}  (form-encoded record)  -> any 2xx means stored
"""

from typing import Any, Optional
import requests
import structlog

from config import settings
from exceptions import (
    OptionSourceError,
    HistorySourceError,
    SubmissionFailedError,
)

logger = structlog.get_logger(__name__)


class SheetsClient:
    """
    Thin HTTP client for the Apps Script endpoints.

    Returns raw payloads; canonicalization happens in the services.
    """

    def __init__(self, script_url: Optional[str] = None, timeout: Optional[int] = None):
        self.script_url = script_url if script_url is not None else settings.sheets_script_url
        self.timeout = timeout or settings.sheets_timeout_seconds

    def _get_data(self, params: Optional[dict] = None) -> Any:
        """GET the script and unwrap the {success, data} envelope."""
        response = requests.get(self.script_url, params=params, timeout=self.timeout)
        response.raise_for_status()

        result = response.json()

        if not isinstance(result, dict) or not result.get("success") or result.get("data") is None:
            error = result.get("error") if isinstance(result, dict) else None
            raise ValueError(error or "Response missing data")

        return result["data"]

    def fetch_dropdown_data(self) -> dict:
        """
        Fetch raw dropdown option data.

        Returns:
            Raw category -> entries mapping, as sent by the script

        Raises:
            OptionSourceError: If the script is unconfigured or the request fails
        """
        if not self.script_url:
            raise OptionSourceError("Google Script URL not configured")

        logger.info("fetching_dropdown_data")

        try:
            data = self._get_data()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error("dropdown_fetch_failed", error=str(e), error_type=type(e).__name__)
            raise OptionSourceError(f"Failed to fetch dropdown data: {e}")

        if not isinstance(data, dict):
            logger.error("dropdown_payload_invalid", payload_type=type(data).__name__)
            raise OptionSourceError("Dropdown data is not an object")

        logger.info("dropdown_data_fetched", categories=len(data))
        return data

    def fetch_submissions(self) -> list[dict]:
        """
        Fetch all stored SKU submissions.

        Returns:
            Raw submission dicts in store order

        Raises:
            HistorySourceError: If the script is unconfigured or the request fails
        """
        if not self.script_url:
            raise HistorySourceError("Google Script URL not configured")

        logger.info("fetching_submissions")

        try:
            data = self._get_data(params={"action": "getSubmissions"})
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error("submissions_fetch_failed", error=str(e), error_type=type(e).__name__)
            raise HistorySourceError(f"Failed to fetch submissions: {e}")

        if not isinstance(data, list):
            logger.error("submissions_payload_invalid", payload_type=type(data).__name__)
            raise HistorySourceError("Submissions data is not a list")

        submissions = [row for row in data if isinstance(row, dict)]
        logger.info("submissions_fetched", count=len(submissions), skipped=len(data) - len(submissions))
        return submissions

    def submit(self, fields: dict[str, str], username: str) -> None:
        """
        Post one record to the store.

        Args:
            fields: SKU and raw attribute fields, camelCase keys
            username: Submitting user

        Raises:
            SubmissionFailedError: If the script is unconfigured or the request fails
        """
        if not self.script_url:
            raise SubmissionFailedError("Google Script URL not configured")

        form = {key: (value or "") for key, value in fields.items()}
        form["username"] = username

        logger.info("submitting_sku", sku=form.get("sku"), username=username)

        try:
            response = requests.post(self.script_url, data=form, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error("sku_submit_failed", sku=form.get("sku"), error=str(e))
            raise SubmissionFailedError(f"Failed to submit SKU: {e}")

        logger.info("sku_submit_accepted", sku=form.get("sku"), status=response.status_code)


# Singleton instance
_sheets_client: Optional[SheetsClient] = None


def get_sheets_client() -> SheetsClient:
    """Get or create SheetsClient instance."""
    global _sheets_client
    if _sheets_client is None:
        _sheets_client = SheetsClient()
    return _sheets_client
