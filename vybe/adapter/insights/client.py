"""Insights provider clients.

The production client calls the ``get-ai-insights`` edge function, which
aggregates the user's learning data into a single insights payload.
"""

import asyncio
from dataclasses import dataclass
from typing import Any

import httpx
import logfire

from vybe.adapter.error import InsightsProviderError
from vybe.domain.model import InsightsPayload
from vybe.domain.service import InsightsProvider
from vybe.domain.value import UserId


class SupabaseInsightsClient(InsightsProvider):
    """Edge function client for AI insights."""

    def __init__(
        self,
        functions_url: str,
        anon_key: str,
        function_name: str = "get-ai-insights",
        timeout: float = 30.0,
    ) -> None:
        """Initialize insights client.

        Args:
            functions_url: Base URL of the edge functions endpoint
            anon_key: Public API key
            function_name: Name of the insights function
            timeout: Request timeout in seconds
        """
        self.functions_url = functions_url.rstrip("/")
        self.anon_key = anon_key
        self.function_name = function_name
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.functions_url}/{self.function_name}"

    async def fetch_insights(self, user_id: UserId) -> InsightsPayload:
        """Invoke the insights function for a user.

        Args:
            user_id: User to compute insights for

        Returns:
            The ``insights`` member of the function response (may be None)

        Raises:
            InsightsProviderError: If the call fails or the body is malformed
        """
        logfire.info(
            "Fetching AI insights", user_id=user_id, function=self.function_name
        )

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.endpoint,
                    json={"userId": user_id},
                    headers={
                        "apikey": self.anon_key,
                        "Authorization": f"Bearer {self.anon_key}",
                        "Content-Type": "application/json",
                    },
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error(
                "Insights function HTTP error",
                function=self.function_name,
                error=str(e),
            )
            raise InsightsProviderError(
                f"HTTP error calling {self.function_name}: {e}"
            )

        if response.status_code != 200:
            logfire.error(
                "Insights function call failed",
                function=self.function_name,
                status_code=response.status_code,
                error=response.text,
            )
            raise InsightsProviderError(
                f"{self.function_name} failed: {response.status_code}"
            )

        try:
            body = response.json()
        except ValueError:
            raise InsightsProviderError(f"{self.function_name} returned invalid JSON")

        if not isinstance(body, dict) or "insights" not in body:
            raise InsightsProviderError(
                f"{self.function_name} response has no insights"
            )

        logfire.info("AI insights received", user_id=user_id)
        return body["insights"]


@dataclass
class ScriptedResponse:
    """One canned answer for MockInsightsClient.

    Attributes:
        payload: Value to return
        delay: Seconds to sleep before answering
        error: Raised instead of returning the payload
        release: If set, the call waits for this event before answering
    """

    payload: Any = None
    delay: float = 0.0
    error: Exception | None = None
    release: asyncio.Event | None = None


class MockInsightsClient(InsightsProvider):
    """Mock insights client for testing.

    Returns deterministic payloads without making real API calls. Answers
    can be scripted per user and are consumed in call order.
    """

    def __init__(self) -> None:
        self.calls: list[UserId] = []
        self._scripts: dict[UserId, list[ScriptedResponse]] = {}

    def script(self, user_id: str, *responses: ScriptedResponse) -> None:
        """Queue answers for a user's next calls."""
        self._scripts.setdefault(UserId(user_id), []).extend(responses)

    def call_count(self, user_id: str) -> int:
        """Number of fetches issued for a user."""
        return sum(1 for called in self.calls if called == user_id)

    async def fetch_insights(self, user_id: UserId) -> InsightsPayload:
        """Return the next scripted answer, or the default payload."""
        self.calls.append(user_id)

        queue = self._scripts.get(user_id)
        if queue:
            response = queue.pop(0)
        else:
            response = ScriptedResponse(payload=self.default_payload(user_id))

        if response.release is not None:
            await response.release.wait()
        if response.delay:
            await asyncio.sleep(response.delay)
        if response.error is not None:
            raise response.error
        return response.payload

    @staticmethod
    def default_payload(user_id: str) -> dict[str, Any]:
        """Insights for a user with no rated dates yet."""
        return {
            "userId": user_id,
            "totalDates": 0,
            "successfulDates": 0,
            "avgRating": "0.0",
            "aiAccuracy": "0",
            "learningProgress": 0,
            "confidenceLevel": "low",
            "textInsights": [],
            "featureWeights": None,
            "topSuccessPatterns": [],
            "topFailurePatterns": [],
        }
