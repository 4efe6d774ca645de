"""
Style number counter.

Issues sequential 3-digit style numbers ("100", "101", ...) across
sessions. The last issued number lives in the `settings` table.

Read and write are separate requests, so two callers racing on the
same row can both receive the same number. Style numbers are a
convenience default, not a uniqueness guarantee.
"""

from typing import Optional
import structlog

from config import get_supabase_client, settings
from exceptions import DatabaseError

logger = structlog.get_logger(__name__)


class StyleNumberService:
    """
    Persisted style-number counter.

    Backed by one key in the settings table.
    """

    def __init__(self):
        self.db = get_supabase_client()
        self.table = "settings"
        self.key = settings.style_number_key
        self.start = settings.style_number_start

    def _read_last(self) -> Optional[str]:
        """Read the stored value, or None if the key is absent."""
        try:
            response = (
                self.db.table(self.table)
                .select("key, value")
                .eq("key", self.key)
                .execute()
            )
        except Exception as e:
            logger.error("style_number_read_failed", key=self.key, error=str(e))
            raise DatabaseError("select", str(e))

        if not response.data:
            return None
        return response.data[0].get("value")

    def _following(self, last: Optional[str]) -> int:
        """Number that follows the stored value, never below the start."""
        try:
            candidate = int(str(last).strip()) + 1
        except (TypeError, ValueError):
            candidate = self.start
        return max(candidate, self.start)

    def peek(self) -> str:
        """Style number the next call to next() would issue."""
        return f"{self._following(self._read_last()):03d}"

    def next(self) -> str:
        """
        Issue the next style number.

        Returns:
            Zero-padded style number, e.g. "101"

        Raises:
            DatabaseError: If the settings table cannot be read or written
        """
        last = self._read_last()
        number = self._following(last)
        value = str(number)

        try:
            if last is None:
                self.db.table(self.table).insert({
                    "key": self.key,
                    "value": value,
                    "description": "Last issued SKU style number",
                    "category": "general",
                }).execute()
            else:
                (
                    self.db.table(self.table)
                    .update({"value": value})
                    .eq("key", self.key)
                    .execute()
                )
        except Exception as e:
            logger.error("style_number_write_failed", key=self.key, error=str(e))
            raise DatabaseError("update", str(e))

        logger.info("style_number_issued", style=value, previous=last)
        return f"{number:03d}"


# Singleton instance
_style_number_service: Optional[StyleNumberService] = None


def get_style_number_service() -> StyleNumberService:
    """Get or create StyleNumberService instance."""
    global _style_number_service
    if _style_number_service is None:
        _style_number_service = StyleNumberService()
    return _style_number_service
