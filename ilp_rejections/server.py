"""FastMCP server for looking up and explaining ILP rejections."""

from __future__ import annotations

from typing import Annotated, Any, Awaitable, Callable

from fastmcp import FastMCP
from pydantic import Field

from ilp_rejections.codes import ErrorClass, ErrorCode
from ilp_rejections.config import Config
from ilp_rejections.errors import RejectionError
from ilp_rejections.log import create_logger
from ilp_rejections.models import RejectionMessage

ErrorClassParam = Annotated[
    ErrorClass | None,
    Field(description='Optional error class filter: F (final), T (temporary) or R (relative).'),
]


def describe_code(code: ErrorCode) -> dict[str, Any]:
    return {
        'code': code.value,
        'name': code.display_name,
        'error_class': code.error_class.value,
        'retryable': code.retryable,
    }


def explain(error: RejectionError) -> dict[str, Any]:
    """Summarize a rejection error for display."""
    code = error.ilp_error_code
    payload: dict[str, Any] = {
        'kind': error.kind,
        'message': error.message,
        'code': str(code) if code else error.code,
        'name': None,
        'error_class': None,
        'retryable': False,
        'triggered_by': error.triggered_by,
    }
    if code is not None:
        payload.update(describe_code(code))
    return payload


def create_server(config: Config | None = None) -> FastMCP:
    """Create and configure the FastMCP server for ILP rejection lookups.

    Args:
        config: Configuration instance. If None, will be created from environment.

    Returns:
        Configured FastMCP server instance ready to serve MCP clients.

    Example:
        >>> server = create_server(Config(ilp_address='g.connector'))
        >>> server.run()
    """

    config = config or Config.from_env()
    log = create_logger('server')

    mcp = FastMCP(name='ilp-rejections')

    def register_tool(
        *,
        name: str,
        description: str,
    ) -> Callable[
        [Callable[..., Awaitable[dict[str, Any]]]], Callable[..., Awaitable[dict[str, Any]]]
    ]:
        def decorator(
            func: Callable[..., Awaitable[dict[str, Any]]],
        ) -> Callable[..., Awaitable[dict[str, Any]]]:
            return mcp.tool(
                name=name,
                description=description,
                annotations={'readOnlyHint': True, 'idempotentHint': True},
            )(func)

        return decorator

    @register_tool(
        name='ilp_error_codes',
        description=(
            'List Interledger error codes with their names, error class and whether '
            'the sender may retry. Optionally filter by error class.'
        ),
    )
    async def ilp_error_codes(error_class: ErrorClassParam = None) -> dict[str, Any]:
        codes = [
            describe_code(code)
            for code in ErrorCode
            if error_class is None or code.error_class is error_class
        ]
        return {'codes': codes}

    @register_tool(
        name='ilp_explain_rejection',
        description=(
            'Explain an Interledger reject: validates the payload and returns its '
            'error kind, code name, error class and whether it is retryable. '
            f"triggered_by defaults to this node's address ({config.ilp_address})."
        ),
    )
    async def ilp_explain_rejection(
        message: str,
        code: str | None = None,
        triggered_by: str | None = None,
    ) -> dict[str, Any]:
        rejection = RejectionMessage(
            message=message,
            code=code,
            triggered_by=triggered_by or config.ilp_address,
        )
        error = RejectionError(rejection)
        log.debug('explaining rejection', ilp_error_code=code)
        return explain(error)

    return mcp
