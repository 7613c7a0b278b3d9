"""
Common base models and utilities.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


class CodecBaseModel(BaseModel):
    """Base model for codec results."""

    model_config = ConfigDict(
        frozen=True,
    )

    def to_dict(self) -> dict:
        """Convert model to a JSON-compatible dict."""
        return self.model_dump(mode="json")


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)
