"""Exceptions raised by the GraphQL CRUD client."""

from typing import Any, List, Optional


class GraphQLClientError(Exception):
    """Base class for all client errors."""


class AuthenticationError(GraphQLClientError):
    """Raised when a request needs credentials that are not available."""


class ExecutionError(GraphQLClientError):
    """
    Raised when the execution interface rejects a request.

    Args:
        message: Human readable description of the failure
        operation: Generated operation name that failed, e.g. ``createTest``
        errors: Raw GraphQL ``errors`` list, when the backend returned one
    """

    def __init__(self, message: str, operation: Optional[str] = None, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.errors = errors or []

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message
