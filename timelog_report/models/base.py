"""Base model for all data models in the timelog report.

This module provides a base Pydantic model with common configuration
and helper methods for serialization/deserialization.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Serialization to/from dictionaries
    - Population by field name or alias (``from`` is a Python keyword)

    Example:
        >>> class Contributor(BaseDataModel):
        ...     id: str
        ...     name: str
        >>> user = Contributor(id="gid://gitlab/User/1", name="Alice")
        >>> user.model_dump()
        {'id': 'gid://gitlab/User/1', 'name': 'Alice'}
    """

    model_config = ConfigDict(
        # Validate on assignment to catch errors early
        validate_assignment=True,
        strict=False,
        # Unknown fields are rejected
        extra="forbid",
        # Allow both field names and aliases on input
        populate_by_name=True,
        frozen=False,
    )
