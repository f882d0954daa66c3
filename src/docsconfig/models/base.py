"""Base model shared by the output models.

Example:
    >>> from docsconfig.models.base import DocsConfigModel
    >>> class Tiny(DocsConfigModel):
    ...     name: str
    >>> Tiny(name="along").name
    'along'
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DocsConfigModel(BaseModel):
    """Base model with standard configuration.

    Whitespace is never stripped: example text and snippets are emitted
    verbatim, trailing newlines included.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )
