"""Structured errors for Interledger packet rejections."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover - fallback only triggers when metadata missing
    __version__: str = version('ilp-rejections')
except PackageNotFoundError:  # pragma: no cover
    __version__ = '0.1.0'

from .codes import ErrorClass, ErrorCode  # noqa: E402
from .errors import ConnectorError, InvalidArgumentError, RejectionError  # noqa: E402
from .handler import ErrorHandler  # noqa: E402
from .models import RejectionMessage  # noqa: E402
from .reject import error_to_reject, reject_to_error  # noqa: E402

__all__ = [
    'ConnectorError',
    'ErrorClass',
    'ErrorCode',
    'ErrorHandler',
    'InvalidArgumentError',
    'RejectionError',
    'RejectionMessage',
    'error_to_reject',
    'reject_to_error',
    '__version__',
]
