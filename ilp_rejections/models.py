"""Pydantic models for rejection payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ilp_rejections.codes import ErrorCode, lookup


class RejectionMessage(BaseModel):
    """Structured description of why a packet was rejected.

    Mirrors the fields of an ILP Reject packet. Additional protocol-specific
    fields are kept as-is so collaborators can attach their own context.

    Example:
        >>> reject = RejectionMessage(message='Insufficient liquidity', code='T04')
        >>> reject.error_code.display_name
        'Insufficient Liquidity'
    """

    model_config = ConfigDict(frozen=True, extra='allow', populate_by_name=True)

    message: str
    code: str | None = None
    triggered_by: str | None = Field(default=None, alias='triggeredBy')
    data: bytes = b''
    forwarded_by: tuple[str, ...] = Field(default=(), alias='forwardedBy')

    @property
    def error_code(self) -> ErrorCode | None:
        return lookup(self.code)
