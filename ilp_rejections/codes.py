"""Interledger error codes and their classes."""

from __future__ import annotations

from enum import Enum


class ErrorClass(str, Enum):
    """Error classes encoded by the first letter of an ILP error code."""

    FINAL = ('F', 'Final')
    TEMPORARY = ('T', 'Temporary')
    RELATIVE = ('R', 'Relative')

    def __new__(cls, value: str, label: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.display_name = label
        return obj

    def __str__(self) -> str:
        return self.display_name


class ErrorCode(str, Enum):
    """ILP error codes with their human-friendly names."""

    F00_BAD_REQUEST = ('F00', 'Bad Request')
    F01_INVALID_PACKET = ('F01', 'Invalid Packet')
    F02_UNREACHABLE = ('F02', 'Unreachable')
    F03_INVALID_AMOUNT = ('F03', 'Invalid Amount')
    F04_INSUFFICIENT_DESTINATION_AMOUNT = ('F04', 'Insufficient Destination Amount')
    F05_WRONG_CONDITION = ('F05', 'Wrong Condition')
    F06_UNEXPECTED_PAYMENT = ('F06', 'Unexpected Payment')
    F07_CANNOT_RECEIVE = ('F07', 'Cannot Receive')
    F08_AMOUNT_TOO_LARGE = ('F08', 'Amount Too Large')
    F99_APPLICATION_ERROR = ('F99', 'Application Error')

    T00_INTERNAL_ERROR = ('T00', 'Internal Error')
    T01_LEDGER_UNREACHABLE = ('T01', 'Ledger Unreachable')
    T02_LEDGER_BUSY = ('T02', 'Ledger Busy')
    T03_CONNECTOR_BUSY = ('T03', 'Connector Busy')
    T04_INSUFFICIENT_LIQUIDITY = ('T04', 'Insufficient Liquidity')
    T05_RATE_LIMITED = ('T05', 'Rate Limited')
    T99_APPLICATION_ERROR = ('T99', 'Application Error')

    R00_TRANSFER_TIMED_OUT = ('R00', 'Transfer Timed Out')
    R01_INSUFFICIENT_SOURCE_AMOUNT = ('R01', 'Insufficient Source Amount')
    R02_INSUFFICIENT_TIMEOUT = ('R02', 'Insufficient Timeout')
    R99_APPLICATION_ERROR = ('R99', 'Application Error')

    def __new__(cls, value: str, label: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.display_name = label
        return obj

    def __str__(self) -> str:
        return self.value

    @property
    def error_class(self) -> ErrorClass:
        return ErrorClass(self.value[0])

    @property
    def retryable(self) -> bool:
        """Only temporary errors may succeed when the same packet is sent again."""
        return self.error_class is ErrorClass.TEMPORARY


def lookup(code: str | None) -> ErrorCode | None:
    """Return the known error code for ``code``, or ``None`` if it is not in the table."""
    if not isinstance(code, str) or not code:
        return None
    try:
        return ErrorCode(code)
    except ValueError:
        return None
