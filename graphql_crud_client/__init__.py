"""Create, read, update and delete list items through a GraphQL execution interface."""

from .core import ExecutionContext, ItemUpdate, Many, Settings, Single
from .graphql import AuthenticationError, ExecutionError, GraphQLClient, GraphQLClientError, QueryExecutor
from .operations import (
    create_item,
    create_items,
    delete_item,
    delete_items,
    get_item,
    get_items,
    update_item,
    update_items,
)

__all__ = [
    "create_item",
    "create_items",
    "get_item",
    "get_items",
    "update_item",
    "update_items",
    "delete_item",
    "delete_items",
    "ExecutionContext",
    "ItemUpdate",
    "Many",
    "Single",
    "Settings",
    "GraphQLClient",
    "QueryExecutor",
    "AuthenticationError",
    "ExecutionError",
    "GraphQLClientError",
]
