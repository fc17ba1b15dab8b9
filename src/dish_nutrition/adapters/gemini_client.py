"""Google Gemini generateContent client."""

from dataclasses import dataclass

import httpx

from dish_nutrition.services.ingredients import AIClient

EMPTY_RESPONSE_TEXT = "No response received from AI."


@dataclass
class HttpxGeminiClient(AIClient):
    """HTTPX-backed Gemini text client."""

    api_key: str
    model: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, model: str, base_url: str) -> "HttpxGeminiClient":
        """Create a Gemini client with a managed httpx session."""
        return cls(
            api_key=api_key,
            model=model,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
        )

    async def generate(self, prompt: str) -> str:
        """Send prompt and return the first candidate's text."""
        url = f"{self.base_url}/models/{self.model}:generateContent"
        response = await self.http_client.post(
            url,
            # Header, not ?key=, so the key stays out of HTTPStatusError messages.
            headers={"x-goog-api-key": self.api_key},
            json={"contents": [{"parts": [{"text": prompt}]}]},
            timeout=60,
        )
        response.raise_for_status()
        return _candidate_text(response.json()) or EMPTY_RESPONSE_TEXT

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _candidate_text(payload: dict[str, object]) -> str | None:
    """Return candidates[0].content.parts[0].text, if present."""
    candidates = payload.get("candidates") or []
    if not candidates:
        return None
    content = candidates[0].get("content") or {}
    parts = content.get("parts") or []
    if not parts:
        return None
    return parts[0].get("text")
