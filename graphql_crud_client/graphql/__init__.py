"""GraphQL module for document building and execution."""

from .client import GraphQLClient
from .exceptions import AuthenticationError, ExecutionError, GraphQLClientError
from .executor import QueryExecutor, unwrap_response
from .mutation_builder import MutationBuilder
from .names import ListNames
from .query_builder import QueryBuilder
from .request_builder import BuiltRequest, build_request, build_template
from .template import OperationTemplate, format_return_fields

__all__ = [
    "GraphQLClient",
    "QueryExecutor",
    "QueryBuilder",
    "MutationBuilder",
    "ListNames",
    "OperationTemplate",
    "BuiltRequest",
    "build_request",
    "build_template",
    "format_return_fields",
    "unwrap_response",
    "AuthenticationError",
    "ExecutionError",
    "GraphQLClientError",
]
