"""
Pydantic models for codec results.
"""

from eancodec.models.base import CodecBaseModel, utc_now
from eancodec.models.code import CodeCheck, GeneratedCode

__all__ = [
    "CodecBaseModel",
    "utc_now",
    "CodeCheck",
    "GeneratedCode",
]
