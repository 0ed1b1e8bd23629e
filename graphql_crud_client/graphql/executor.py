"""
Dispatch built requests to the execution interface and unwrap the responses.
"""

import inspect
import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from graphql_crud_client.core.types import Many, OperationKind, OperationRequest

from .exceptions import ExecutionError
from .request_builder import BuiltRequest, build_request

logger = logging.getLogger(__name__)

ExecuteCallable = Callable[[str, Dict[str, Any], Any], Union[Any, Awaitable[Any]]]


def unwrap_response(result: Any, operation_name: str, many: bool) -> Union[Optional[Dict], List[Dict]]:
    """
    Strip the ``{operation_name: payload}`` envelope.

    Accepts either the envelope itself or a raw transport body with ``data``
    and ``errors`` keys. Field values are never touched.

    Raises:
        ExecutionError: If the body carries errors or lacks the operation key
    """
    if not isinstance(result, Mapping):
        raise ExecutionError(f"Unexpected response type {type(result).__name__}", operation=operation_name)

    if result.get("errors"):
        raise ExecutionError(f"GraphQL errors: {result['errors']}", operation=operation_name, errors=result["errors"])

    envelope = result
    if operation_name not in envelope and isinstance(envelope.get("data"), Mapping):
        envelope = envelope["data"]

    if operation_name not in envelope:
        raise ExecutionError("Response is missing the operation result", operation=operation_name)

    payload = envelope[operation_name]
    if many:
        return list(payload) if payload is not None else []
    return payload


class QueryExecutor:
    """
    Runs one request per call against an injected execution interface.

    The interface is called as ``execute(document, variables, context)`` and may be
    a coroutine function or a plain callable.
    """

    def __init__(self, execute: ExecuteCallable):
        if not callable(execute):
            raise TypeError("execute must be callable")
        self.execute = execute

    async def _run(self, built: BuiltRequest, context: Any) -> Any:
        operation = built.operation_name
        logger.debug(f"Executing {operation}")
        try:
            result = self.execute(built.document, built.variables, context)
            if inspect.isawaitable(result):
                result = await result
        except ExecutionError as e:
            if e.operation is None:
                e.operation = operation
            logger.error(f"Execution failed for {operation}: {e.message}")
            raise
        except Exception as e:
            logger.error(f"Execution failed for {operation}: {e}")
            raise ExecutionError(f"Execution failed: {e}", operation=operation) from e
        return result

    async def dispatch(self, request: OperationRequest, context: Any = None) -> Union[Optional[Dict], List[Dict]]:
        """
        Build, execute and unwrap a single request.

        Args:
            request: The operation to perform
            context: Execution context, passed through unmodified

        Returns:
            A record (or None) for singular requests, a list of records for plural ones
        """
        built = build_request(request)

        if request.kind is not OperationKind.READ and isinstance(request.cardinality, Many) and not request.cardinality:
            logger.debug(f"Skipping {built.operation_name}: no items given")
            return []

        result = await self._run(built, context)
        return unwrap_response(result, built.operation_name, built.many)
