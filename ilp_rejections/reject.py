"""Conversion between raised errors and reject payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ilp_rejections.codes import ErrorCode
from ilp_rejections.errors import RejectionError, as_bytes
from ilp_rejections.models import RejectionMessage


def error_to_reject(address: str, error: BaseException) -> RejectionMessage:
    """Build the reject payload to send back for ``error``.

    Errors without an ILP code are reported as ``F00``. A ``RejectionError``
    whose payload names the node that triggered it is being forwarded: it keeps
    that node and its original code, and ``address`` is appended to the
    payload's ``forwardedBy`` list.

    Args:
        address: Own ILP address, used as ``triggeredBy``.
        error: The error raised while handling a packet.

    Returns:
        Reject payload describing ``error``.
    """
    code = getattr(error, 'ilp_error_code', None) or ErrorCode.F00_BAD_REQUEST
    triggered_by = address
    forwarded_by: tuple[str, ...] = ()
    if isinstance(error, RejectionError):
        # Unknown codes from a peer are passed on untouched
        code = error.ilp_error_code or error.code or code
        forwarded_by = error.forwarded_by
        if error.triggered_by is not None:
            triggered_by = error.triggered_by
            forwarded_by = (*forwarded_by, address)

    message = getattr(error, 'message', None)
    if not isinstance(message, str):
        message = str(error)

    return RejectionMessage(
        code=str(code),
        triggered_by=triggered_by,
        message=message,
        data=as_bytes(getattr(error, 'ilp_error_data', None)),
        forwarded_by=forwarded_by,
    )


def reject_to_error(reject: RejectionMessage | Mapping[str, Any]) -> RejectionError:
    """Wrap a reject received from a peer so it can be raised."""
    return RejectionError(reject)
