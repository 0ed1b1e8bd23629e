"""HTTP execution interface for a GraphQL endpoint."""

import logging
from typing import Any, Dict, Optional

import aiohttp
import requests

from graphql_crud_client.auth import AuthenticationProvider
from graphql_crud_client.core.types import ExecutionContext

from .exceptions import AuthenticationError, ExecutionError

logger = logging.getLogger(__name__)


class GraphQLClient:
    """
    Sends documents to a GraphQL endpoint over HTTP.

    ``execute`` matches the execution interface expected by ``QueryExecutor``;
    ``request`` is its synchronous counterpart and can be injected the same way.
    """

    def __init__(
        self,
        api_endpoint: str,
        auth_provider: Optional[AuthenticationProvider] = None,
        timeout: float = 30.0,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize the client.

        Args:
            api_endpoint: GraphQL endpoint URL
            auth_provider: Authentication provider used when the context carries no token
            timeout: Request timeout in seconds
            session: Optional aiohttp session reused across ``execute`` calls
        """
        if not api_endpoint:
            raise ValueError("API endpoint cannot be empty")
        self.api_endpoint = api_endpoint
        self.auth_provider = auth_provider
        self.timeout = timeout
        self._session = session

    def _headers(self, context: Optional[ExecutionContext]) -> Dict[str, str]:
        token = context.auth_token if context is not None else None
        if not token and self.auth_provider is not None:
            if not self.auth_provider.is_authenticated():
                raise AuthenticationError("Not authenticated. Call authenticate() first.")
            token = self.auth_provider.get_id_token()

        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = token
        if context is not None:
            if context.schema_name:
                headers["X-Schema-Name"] = context.schema_name
            headers.update(context.headers)
        return headers

    @staticmethod
    def _payload(document: str, variables: Optional[Dict]) -> Dict[str, Any]:
        return {"query": document, "variables": variables or {}}

    @staticmethod
    def _check_body(result: Dict[str, Any]) -> Dict[str, Any]:
        if result.get("errors"):
            logger.error(f"GraphQL errors: {result['errors']}")
            raise ExecutionError(f"GraphQL errors: {result['errors']}", errors=result["errors"])
        return result.get("data") or {}

    def request(
        self, document: str, variables: Optional[Dict] = None, context: Optional[ExecutionContext] = None
    ) -> Dict[str, Any]:
        """
        Execute a document synchronously.

        Returns:
            The ``data`` mapping of the response
        """
        headers = self._headers(context)

        try:
            response = requests.post(
                self.api_endpoint, headers=headers, json=self._payload(document, variables), timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {self.api_endpoint} failed: {e}")
            raise

        if response.status_code != 200:
            logger.error(f"HTTP Error {response.status_code}: {response.text}")
            raise ExecutionError(f"HTTP Error {response.status_code}: {response.text}")

        return self._check_body(response.json())

    async def request_async(
        self,
        session: aiohttp.ClientSession,
        document: str,
        variables: Optional[Dict] = None,
        context: Optional[ExecutionContext] = None,
    ) -> Dict[str, Any]:
        """Execute a document on an existing aiohttp session."""
        headers = self._headers(context)

        try:
            async with session.post(
                self.api_endpoint,
                headers=headers,
                json=self._payload(document, variables),
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                if response.status != 200:
                    text = await response.text()
                    logger.error(f"HTTP Error {response.status}: {text}")
                    raise ExecutionError(f"HTTP Error {response.status}: {text}")
                result = await response.json()
        except aiohttp.ClientError as e:
            logger.error(f"Request to {self.api_endpoint} failed: {e}")
            raise

        return self._check_body(result)

    async def execute(
        self, document: str, variables: Optional[Dict] = None, context: Optional[ExecutionContext] = None
    ) -> Dict[str, Any]:
        if self._session is not None:
            return await self.request_async(self._session, document, variables, context)

        async with aiohttp.ClientSession() as session:
            return await self.request_async(session, document, variables, context)
