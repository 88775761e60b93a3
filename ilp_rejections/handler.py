"""Middleware that turns errors raised while handling a packet into rejects."""

from __future__ import annotations

from typing import Any, Awaitable, Callable

from ilp_rejections.config import Config
from ilp_rejections.errors import RejectionError
from ilp_rejections.log import create_logger
from ilp_rejections.models import RejectionMessage
from ilp_rejections.reject import error_to_reject

NextHandler = Callable[[Any], Awaitable[Any]]


class ErrorHandler:
    """Outermost packet middleware.

    Any exception raised further down the pipeline is converted into a reject
    that can be sent back to the sender, so no error escapes as a dropped
    packet. Cancellation is not an error and is re-raised.

    Example:
        >>> handler = ErrorHandler(Config(ilp_address='g.connector'))
        >>> reply = await handler(prepare, forward_to_next_hop)
    """

    def __init__(self, config: Config, *, account_id: str | None = None) -> None:
        self._address = config.ilp_address
        component = 'error-handler-middleware'
        if account_id:
            component = f'{component}[{account_id}]'
        self._log = create_logger(component)

    async def __call__(self, packet: Any, next_handler: NextHandler) -> Any:
        try:
            return await next_handler(packet)
        except Exception as exc:
            return self._reject(exc)

    def _reject(self, exc: Exception) -> RejectionMessage:
        reject = error_to_reject(self._address, exc)
        if isinstance(exc, RejectionError):
            self._log.info(
                'forwarding rejection',
                ilp_error_code=reject.code,
                triggered_by=reject.triggered_by,
                message=reject.message,
            )
        else:
            self._log.debug(
                'error in data handler, creating rejection',
                ilp_error_code=reject.code,
                error=repr(exc),
            )
        return reject
