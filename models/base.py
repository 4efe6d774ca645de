"""
Base schemas for all models.

JSON payloads use camelCase keys (the record store and the frontend
both speak camelCase); Python attributes stay snake_case.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base for all schemas.
    
    Features:
        - Auto-trim whitespace from strings
        - Validate on attribute assignment
        - camelCase aliases, populate by either name
    """
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        validate_assignment=True,
        alias_generator=to_camel,
        populate_by_name=True
    )
