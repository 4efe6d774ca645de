"""
SKU submission service.

Preview, validate and submit attribute records. The record itself is
stored by the Apps Script record store; this service only decides
whether it may be sent and what SKU it carries.
"""

from typing import Optional
import structlog

from integrations.sheets import get_sheets_client
from models.sku import (
    REQUIRED_FIELDS,
    SKUFormData,
    SKUSubmission,
    SKUPreviewResponse,
    SKUSubmitResponse,
)
from services.alias_service import AliasResolver
from services.option_service import get_option_service
from services.sku_service import assemble_sku, missing_fields
from services.style_number_service import get_style_number_service
from exceptions import DatabaseError, SKUIncompleteError, MissingUsernameError

logger = structlog.get_logger(__name__)


class SubmissionService:
    """
    SKU submission business logic.

    Wires the pure SKU functions to the option cache, the style
    counter and the record store.
    """

    def __init__(self):
        self.client = get_sheets_client()
        self.option_service = get_option_service()
        self.style_numbers = get_style_number_service()

    def _resolver(self) -> AliasResolver:
        return AliasResolver(self.option_service.get_options_or_empty())

    def preview(self, record: SKUFormData) -> SKUPreviewResponse:
        """
        Assemble the SKU for the current fields.

        Args:
            record: Attribute record, possibly incomplete

        Returns:
            SKU plus completeness report
        """
        missing = missing_fields(record)
        return SKUPreviewResponse(
            sku=assemble_sku(record, self._resolver()),
            complete=not missing,
            missing_fields=missing
        )

    def new_record(self) -> SKUFormData:
        """Blank record with the next style number filled in."""
        return SKUFormData(style=self.style_numbers.next())

    def submit(self, record: SKUFormData, username: str) -> SKUSubmitResponse:
        """
        Validate, assemble and store a record.

        Args:
            record: Complete attribute record
            username: Submitting user

        Returns:
            Stored submission and a fresh record for the next entry

        Raises:
            SKUIncompleteError: If any field is empty
            MissingUsernameError: If username is blank
            SubmissionFailedError: If the record store call fails
        """
        missing = missing_fields(record)
        if missing:
            logger.warning("sku_submit_incomplete", missing=missing)
            raise SKUIncompleteError(missing)

        if not username or not username.strip():
            raise MissingUsernameError()

        sku = assemble_sku(record, self._resolver())
        attributes = {name for name, _ in REQUIRED_FIELDS}
        fields = record.model_dump(by_alias=True, include=attributes)
        fields["sku"] = sku

        self.client.submit(fields, username.strip())

        logger.info("sku_submitted", sku=sku, username=username)

        submission = SKUSubmission(
            **record.model_dump(include=attributes),
            sku=sku,
            created_by=username.strip()
        )

        try:
            next_record = self.new_record()
        except DatabaseError as e:
            # Stored already; the user can still type a style number
            logger.error("next_style_number_failed", sku=sku, error=e.message)
            next_record = SKUFormData()

        return SKUSubmitResponse(
            sku=sku,
            submission=submission,
            next_record=next_record
        )


# Singleton instance
_submission_service: Optional[SubmissionService] = None


def get_submission_service() -> SubmissionService:
    """Get or create SubmissionService instance."""
    global _submission_service
    if _submission_service is None:
        _submission_service = SubmissionService()
    return _submission_service
