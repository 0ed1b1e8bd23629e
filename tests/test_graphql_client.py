"""Tests for the HTTP GraphQLClient"""

import pytest
import aiohttp
import requests
from unittest.mock import AsyncMock, Mock, patch

from graphql_crud_client.auth import TokenAuthProvider
from graphql_crud_client.core.types import ExecutionContext
from graphql_crud_client.graphql import AuthenticationError, ExecutionError, GraphQLClient


def make_authenticated_client():
    client = GraphQLClient("https://test.com")
    mock_auth = Mock()
    mock_auth.is_authenticated.return_value = True
    mock_auth.get_id_token.return_value = "test-token"
    client.auth_provider = mock_auth
    return client


def make_response(status_code=200, body=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = body
    response.text = text
    return response


class TestInit:

    def test_rejects_empty_endpoint(self):
        with pytest.raises(ValueError, match="API endpoint cannot be empty"):
            GraphQLClient("")


class TestHeaders:

    def test_authentication_error_raised(self):
        """Auth provider that is not authenticated blocks the request"""
        client = GraphQLClient("https://test.com", auth_provider=TokenAuthProvider())

        with pytest.raises(AuthenticationError, match="Not authenticated"):
            client.request("query { test }")

    def test_context_token_takes_precedence(self):
        client = make_authenticated_client()
        context = ExecutionContext(auth_token="ctx-token", schema_name="testing", headers={"X-Trace": "abc"})

        with patch("requests.post", return_value=make_response(body={"data": {}})) as mock_post:
            client.request("query { test }", context=context)

        headers = mock_post.call_args.kwargs["headers"]
        assert headers["Authorization"] == "ctx-token"
        assert headers["X-Schema-Name"] == "testing"
        assert headers["X-Trace"] == "abc"
        client.auth_provider.get_id_token.assert_not_called()

    def test_provider_token_used_without_context(self):
        client = make_authenticated_client()

        with patch("requests.post", return_value=make_response(body={"data": {}})) as mock_post:
            client.request("query { test }")

        assert mock_post.call_args.kwargs["headers"]["Authorization"] == "test-token"

    def test_no_auth_header_without_provider_or_token(self):
        client = GraphQLClient("https://test.com")

        with patch("requests.post", return_value=make_response(body={"data": {}})) as mock_post:
            client.request("query { test }")

        assert "Authorization" not in mock_post.call_args.kwargs["headers"]


class TestRequest:

    def test_returns_data(self):
        client = make_authenticated_client()
        body = {"data": {"allTests": [{"name": "test"}]}}

        with patch("requests.post", return_value=make_response(body=body)) as mock_post:
            result = client.request("query { allTests { name } }", {"where": {"name": "test"}})

        assert result == {"allTests": [{"name": "test"}]}
        assert mock_post.call_args.kwargs["json"] == {
            "query": "query { allTests { name } }",
            "variables": {"where": {"name": "test"}},
        }

    def test_graphql_error_raised(self):
        client = make_authenticated_client()

        with patch("requests.post", return_value=make_response(body={"errors": [{"message": "GraphQL Error"}]})):
            with pytest.raises(ExecutionError, match="GraphQL errors") as exc_info:
                client.request("query { test }")

        assert exc_info.value.errors == [{"message": "GraphQL Error"}]

    def test_http_error_status_code(self):
        client = make_authenticated_client()

        with patch("requests.post", return_value=make_response(status_code=500, text="Internal Server Error")):
            with pytest.raises(ExecutionError, match="HTTP Error 500"):
                client.request("query { test }")

    def test_connection_error_propagates(self):
        client = make_authenticated_client()

        with patch("requests.post", side_effect=requests.exceptions.ConnectionError("Connection failed")):
            with pytest.raises(requests.exceptions.ConnectionError, match="Connection failed"):
                client.request("query { test }")

    def test_timeout_is_passed(self):
        client = GraphQLClient("https://test.com", timeout=5)

        with patch("requests.post", return_value=make_response(body={"data": {}})) as mock_post:
            client.request("query { test }")

        assert mock_post.call_args.kwargs["timeout"] == 5


class TestRequestAsync:

    @pytest.mark.asyncio
    async def test_authentication_error_async(self):
        client = GraphQLClient("https://test.com", auth_provider=TokenAuthProvider())

        async with aiohttp.ClientSession() as session:
            with pytest.raises(AuthenticationError, match="Not authenticated"):
                await client.request_async(session, "query { test }")

    @pytest.mark.asyncio
    async def test_returns_data_async(self):
        client = make_authenticated_client()

        async with aiohttp.ClientSession() as session:
            mock_response = AsyncMock()
            mock_response.status = 200
            mock_response.json = AsyncMock(return_value={"data": {"createTest": {"id": "1"}}})

            with patch.object(session, "post") as mock_post:
                mock_post.return_value.__aenter__.return_value = mock_response

                result = await client.request_async(session, "mutation { createTest { id } }")

        assert result == {"createTest": {"id": "1"}}

    @pytest.mark.asyncio
    async def test_graphql_error_async(self):
        client = make_authenticated_client()

        async with aiohttp.ClientSession() as session:
            mock_response = AsyncMock()
            mock_response.status = 200
            mock_response.json = AsyncMock(return_value={"errors": [{"message": "GraphQL Error"}]})

            with patch.object(session, "post") as mock_post:
                mock_post.return_value.__aenter__.return_value = mock_response

                with pytest.raises(ExecutionError, match="GraphQL errors"):
                    await client.request_async(session, "query { test }")

    @pytest.mark.asyncio
    async def test_http_error_status_code_async(self):
        client = make_authenticated_client()

        async with aiohttp.ClientSession() as session:
            mock_response = AsyncMock()
            mock_response.status = 500
            mock_response.text = AsyncMock(return_value="Internal Server Error")

            with patch.object(session, "post") as mock_post:
                mock_post.return_value.__aenter__.return_value = mock_response

                with pytest.raises(ExecutionError, match="HTTP Error 500"):
                    await client.request_async(session, "query { test }")

    @pytest.mark.asyncio
    async def test_connection_error_async(self):
        client = make_authenticated_client()

        async with aiohttp.ClientSession() as session:
            with patch.object(session, "post", side_effect=aiohttp.ClientConnectionError("Connection failed")):
                with pytest.raises(aiohttp.ClientConnectionError, match="Connection failed"):
                    await client.request_async(session, "query { test }")


class TestExecute:

    @pytest.mark.asyncio
    async def test_execute_uses_given_session(self):
        session = Mock()
        client = GraphQLClient("https://test.com", session=session)
        context = ExecutionContext()

        with patch.object(client, "request_async", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = {"allTests": []}

            result = await client.execute("query { allTests { id } }", {}, context)

        assert result == {"allTests": []}
        mock_request.assert_awaited_once_with(session, "query { allTests { id } }", {}, context)

    @pytest.mark.asyncio
    async def test_execute_opens_session_per_call(self):
        client = GraphQLClient("https://test.com")

        with patch.object(client, "request_async", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = {"Test": None}

            result = await client.execute("query { Test { id } }", {"id": "1"})

        assert result == {"Test": None}
        assert isinstance(mock_request.call_args[0][0], aiohttp.ClientSession)
