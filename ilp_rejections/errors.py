"""Custom exception hierarchy for Interledger rejections."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Sequence

from ilp_rejections.codes import ErrorCode, lookup


class ConnectorError(Exception):
    """Base exception for all connector errors.

    Args:
        message: Human-readable error message.
        cause: Optional underlying exception that caused this error.
    """

    kind: ClassVar[str] = 'Connector'
    ilp_error_code: ErrorCode | None = None
    ilp_error_data: bytes = b''

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self._message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def message(self) -> str:
        return self._message

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), self.args, self.__dict__)

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        if self.cause is not None:
            self.__cause__ = self.cause


class InvalidArgumentError(ConnectorError, ValueError):
    """Raised when an error type is constructed from malformed input."""

    kind = 'InvalidArgument'


class RejectionError(ConnectorError):
    """Raised when a packet was rejected, carrying the rejection payload.

    The payload is kept as given so handlers can inspect its fields (code,
    triggering address, data) rather than parsing the message text.

    Args:
        rejection_message: Mapping with a ``'message'`` key, or any object
            exposing a ``message`` attribute.

    Raises:
        InvalidArgumentError: If the payload is missing or has no text message.
    """

    kind = 'Rejection'

    def __init__(self, rejection_message: Any) -> None:
        super().__init__(_rejection_text(rejection_message))
        self._rejection_message = rejection_message

    @property
    def rejection_message(self) -> Any:
        return self._rejection_message

    @property
    def ilp_error_code(self) -> ErrorCode | None:  # type: ignore[override]
        return lookup(self.code)

    @property
    def code(self) -> str | None:
        """Code as given in the payload, including codes missing from the table."""
        code = _field(self._rejection_message, 'code')
        return code if isinstance(code, str) and code else None

    @property
    def triggered_by(self) -> str | None:
        for name in ('triggered_by', 'triggeredBy'):
            address = _field(self._rejection_message, name)
            if isinstance(address, str) and address:
                return address
        return None

    @property
    def forwarded_by(self) -> tuple[str, ...]:
        for name in ('forwarded_by', 'forwardedBy'):
            addresses = _field(self._rejection_message, name)
            if isinstance(addresses, (list, tuple)):
                return tuple(address for address in addresses if isinstance(address, str))
        return ()

    @property
    def ilp_error_data(self) -> bytes:  # type: ignore[override]
        return as_bytes(_field(self._rejection_message, 'data'))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._rejection_message,))


def as_bytes(data: Any) -> bytes:
    """Return ``data`` as bytes; anything that is not binary or text becomes empty."""
    if isinstance(data, str):
        return data.encode()
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    return b''


def _field(payload: Any, name: str) -> Any:
    if isinstance(payload, Mapping):
        return payload.get(name)
    return getattr(payload, name, None)


def _rejection_text(payload: Any) -> str:
    if payload is None:
        raise InvalidArgumentError('rejection_message is required')
    missing = object()
    if isinstance(payload, Mapping):
        message = payload.get('message', missing)
    else:
        message = getattr(payload, 'message', missing)
    if message is missing:
        raise InvalidArgumentError('rejection_message has no message field')
    if not isinstance(message, str):
        raise InvalidArgumentError(
            f'rejection_message.message must be text, got {type(message).__name__}'
        )
    return message


class InvalidAmountSpecifiedError(ConnectorError):
    ilp_error_code = ErrorCode.F00_BAD_REQUEST


class NotAPeerError(ConnectorError):
    ilp_error_code = ErrorCode.F00_BAD_REQUEST


class InvalidPacketError(ConnectorError):
    ilp_error_code = ErrorCode.F01_INVALID_PACKET


class InvalidJsonBodyError(ConnectorError):
    """Raised when a JSON body fails schema validation."""

    ilp_error_code = ErrorCode.F01_INVALID_PACKET

    def __init__(self, message: str, validation_errors: Sequence[Any] = ()) -> None:
        super().__init__(message)
        self.validation_errors = list(validation_errors)


class NoRouteFoundError(ConnectorError):
    ilp_error_code = ErrorCode.F02_UNREACHABLE


class UnacceptableAmountError(ConnectorError):
    ilp_error_code = ErrorCode.F03_INVALID_AMOUNT


class UnacceptableExpiryError(ConnectorError):
    ilp_error_code = ErrorCode.F03_INVALID_AMOUNT


class MaxPacketAmountExceededError(ConnectorError):
    ilp_error_code = ErrorCode.F08_AMOUNT_TOO_LARGE


class InvalidFulfillmentError(ConnectorError):
    ilp_error_code = ErrorCode.T00_INTERNAL_ERROR


class RemoteQuoteError(ConnectorError):
    ilp_error_code = ErrorCode.T00_INTERNAL_ERROR


class LedgerNotConnectedError(ConnectorError):
    ilp_error_code = ErrorCode.T01_LEDGER_UNREACHABLE


class ThroughputExceededError(ConnectorError):
    ilp_error_code = ErrorCode.T04_INSUFFICIENT_LIQUIDITY


class RateLimitExceededError(ConnectorError):
    ilp_error_code = ErrorCode.T05_RATE_LIMITED


class InsufficientTimeoutError(ConnectorError):
    ilp_error_code = ErrorCode.R02_INSUFFICIENT_TIMEOUT
