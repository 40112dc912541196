"""Pydantic models for zap requests and responses."""

from zap.models.types import Uint256, validate_uint256
from zap.models.zap import ZapRequest, ZapResponse

__all__ = ["Uint256", "validate_uint256", "ZapRequest", "ZapResponse"]
