"""
Result models for EAN-13 validation and generation.
"""

from datetime import datetime

from pydantic import Field, model_validator

from eancodec.models.base import CodecBaseModel, utc_now


class CodeCheck(CodecBaseModel):
    """Outcome of validating an untrusted EAN-13 candidate."""

    candidate: str = Field(..., description="Value as supplied by the caller")
    normalized: str = Field("", description="Candidate with surrounding whitespace removed")
    is_valid: bool = Field(False, description="Whether the candidate is a valid EAN-13")
    error: str = Field("", description="Reason for rejection, empty when valid")


class GeneratedCode(CodecBaseModel):
    """
    A freshly generated EAN-13 code.

    Uniqueness is not guaranteed; callers that need it must keep
    their own allocation table.
    """

    code: str = Field(..., pattern=r"^[0-9]{13}$", description="Full 13-digit code")
    prefix: str = Field(..., pattern=r"^[0-9]{3}$", description="Normalized 3-digit prefix")
    product_id: int | None = Field(None, ge=0, description="Product id, None for random codes")
    check_digit: int = Field(..., ge=0, le=9)
    generated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_parts(self) -> "GeneratedCode":
        if not self.code.startswith(self.prefix):
            raise ValueError("Code does not start with its prefix")
        if int(self.code[-1]) != self.check_digit:
            raise ValueError("Code does not end with its check digit")
        return self

    @property
    def payload(self) -> str:
        """First 12 digits of the code."""
        return self.code[:12]
