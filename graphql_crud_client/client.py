"""
CRUD client - facade over the request builders and the query executor.

Binds one execution interface and a default execution context so callers
only pass the list name, the payload and the fields they want back.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from graphql_crud_client import operations
from graphql_crud_client.auth import AuthenticationProvider, TokenAuthProvider
from graphql_crud_client.core.config import Settings
from graphql_crud_client.core.types import ExecutionContext, ItemUpdate
from graphql_crud_client.graphql import GraphQLClient
from graphql_crud_client.graphql.executor import ExecuteCallable
from graphql_crud_client.graphql.template import DEFAULT_RETURN_FIELDS

logger = logging.getLogger(__name__)


class CrudClient:
    """
    Create, read, update and delete items of any list.

    Either inject an ``execute(document, variables, context)`` callable or give an
    ``api_endpoint`` to use the bundled HTTP ``GraphQLClient``.
    """

    def __init__(
        self,
        execute: Optional[ExecuteCallable] = None,
        api_endpoint: Optional[str] = None,
        auth_provider: Optional[AuthenticationProvider] = None,
        context: Any = None,
        timeout: float = 30.0,
    ):
        """
        Initialize the client.

        Args:
            execute: Execution interface; takes precedence over ``api_endpoint``
            api_endpoint: GraphQL endpoint for the bundled HTTP transport
            auth_provider: Authentication provider for the HTTP transport
            context: Default execution context passed with every call
            timeout: HTTP request timeout in seconds
        """
        self._client = None
        if execute is None:
            if not api_endpoint:
                raise ValueError("Either execute or api_endpoint must be provided")
            self._client = GraphQLClient(api_endpoint, auth_provider, timeout=timeout)
            execute = self._client.execute

        self.execute = execute
        self.context = context

    @classmethod
    def from_settings(cls, settings: Settings) -> "CrudClient":
        auth_provider = TokenAuthProvider(settings.api_token) if settings.api_token else None
        context = ExecutionContext(schema_name=settings.schema_name)
        logger.info(f"Using GraphQL endpoint {settings.api_endpoint}")
        return cls(
            api_endpoint=settings.api_endpoint,
            auth_provider=auth_provider,
            context=context,
            timeout=settings.timeout,
        )

    @property
    def graphql_client(self) -> Optional[GraphQLClient]:
        """The bundled HTTP transport, when one is in use."""
        return self._client

    def _context(self, context: Any) -> Any:
        return self.context if context is None else context

    async def create_item(
        self,
        list_name: str,
        item: Mapping[str, Any],
        return_fields: operations.ReturnFields = DEFAULT_RETURN_FIELDS,
        context: Any = None,
        plural: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        return await operations.create_item(
            self.execute, list_name, item, return_fields, self._context(context), plural=plural
        )

    async def create_items(
        self,
        list_name: str,
        items: Sequence[Mapping[str, Any]],
        return_fields: operations.ReturnFields = DEFAULT_RETURN_FIELDS,
        context: Any = None,
        plural: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        return await operations.create_items(
            self.execute, list_name, items, return_fields, self._context(context), plural=plural
        )

    async def get_item(
        self,
        list_name: str,
        item_id: str,
        return_fields: operations.ReturnFields = DEFAULT_RETURN_FIELDS,
        context: Any = None,
        plural: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        return await operations.get_item(
            self.execute, list_name, item_id, return_fields, self._context(context), plural=plural
        )

    async def get_items(
        self,
        list_name: str,
        return_fields: operations.ReturnFields = DEFAULT_RETURN_FIELDS,
        where: Optional[Mapping[str, Any]] = None,
        sort_by: Optional[Union[str, Sequence[str]]] = None,
        first: Optional[int] = None,
        skip: Optional[int] = None,
        context: Any = None,
        plural: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        return await operations.get_items(
            self.execute,
            list_name,
            return_fields,
            where=where,
            sort_by=sort_by,
            first=first,
            skip=skip,
            context=self._context(context),
            plural=plural,
        )

    async def update_item(
        self,
        list_name: str,
        item: Union[ItemUpdate, Mapping[str, Any]],
        return_fields: operations.ReturnFields = DEFAULT_RETURN_FIELDS,
        context: Any = None,
        plural: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        return await operations.update_item(
            self.execute, list_name, item, return_fields, self._context(context), plural=plural
        )

    async def update_items(
        self,
        list_name: str,
        items: Sequence[Union[ItemUpdate, Mapping[str, Any]]],
        return_fields: operations.ReturnFields = DEFAULT_RETURN_FIELDS,
        context: Any = None,
        plural: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        return await operations.update_items(
            self.execute, list_name, items, return_fields, self._context(context), plural=plural
        )

    async def delete_item(
        self,
        list_name: str,
        item_id: str,
        return_fields: operations.ReturnFields = DEFAULT_RETURN_FIELDS,
        context: Any = None,
        plural: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        return await operations.delete_item(
            self.execute, list_name, item_id, return_fields, self._context(context), plural=plural
        )

    async def delete_items(
        self,
        list_name: str,
        items: Sequence[str],
        return_fields: operations.ReturnFields = DEFAULT_RETURN_FIELDS,
        context: Any = None,
        plural: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        return await operations.delete_items(
            self.execute, list_name, items, return_fields, self._context(context), plural=plural
        )
