"""Unit tests for the edge function insights client."""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from vybe.adapter.error import InsightsProviderError
from vybe.adapter.insights import SupabaseInsightsClient
from vybe.domain.value import UserId


@pytest.fixture
def client():
    return SupabaseInsightsClient(
        functions_url="http://localhost:54321/functions/v1/",
        anon_key="anon-key",
        timeout=5.0,
    )


def _response(status_code=200, body=None):
    response = MagicMock()
    response.status_code = status_code
    response.text = "error body"
    response.json = MagicMock(return_value=body)
    return response


class TestSupabaseInsightsClient:
    """Tests for SupabaseInsightsClient.fetch_insights."""

    def test_endpoint_joins_function_name(self, client):
        """Should strip the trailing slash before appending the function."""
        assert client.endpoint == (
            "http://localhost:54321/functions/v1/get-ai-insights"
        )

    @pytest.mark.asyncio
    async def test_returns_insights_member(self, client):
        """Should post the user ID and return the insights payload."""
        insights = {"userId": "u1", "totalDates": 3, "avgRating": "4.2"}

        with patch("httpx.AsyncClient") as mock_client:
            post = AsyncMock(return_value=_response(body={"insights": insights}))
            mock_client.return_value.__aenter__.return_value.post = post

            result = await client.fetch_insights(UserId("u1"))

            assert result == insights
            post.assert_called_once_with(
                "http://localhost:54321/functions/v1/get-ai-insights",
                json={"userId": "u1"},
                headers={
                    "apikey": "anon-key",
                    "Authorization": "Bearer anon-key",
                    "Content-Type": "application/json",
                },
                timeout=5.0,
            )

    @pytest.mark.asyncio
    async def test_null_insights_are_passed_through(self, client):
        """A null payload is a valid answer."""
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=_response(body={"insights": None})
            )

            assert await client.fetch_insights(UserId("u1")) is None

    @pytest.mark.asyncio
    async def test_non_200_raises(self, client):
        """Should raise InsightsProviderError on error status."""
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=_response(status_code=500)
            )

            with pytest.raises(InsightsProviderError, match="500"):
                await client.fetch_insights(UserId("u1"))

    @pytest.mark.asyncio
    async def test_transport_error_raises(self, client):
        """Network failures should surface as InsightsProviderError."""
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=httpx.ConnectError("connection refused")
            )

            with pytest.raises(InsightsProviderError, match="HTTP error"):
                await client.fetch_insights(UserId("u1"))

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self, client):
        """Should raise when the body is not JSON."""
        response = _response()
        response.json = MagicMock(side_effect=ValueError("not json"))

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=response
            )

            with pytest.raises(InsightsProviderError, match="invalid JSON"):
                await client.fetch_insights(UserId("u1"))

    @pytest.mark.asyncio
    async def test_missing_insights_key_raises(self, client):
        """Should raise when the body has no insights member."""
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=_response(body={"error": "Failed to get insights"})
            )

            with pytest.raises(InsightsProviderError, match="no insights"):
                await client.fetch_insights(UserId("u1"))
