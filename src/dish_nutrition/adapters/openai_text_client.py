"""OpenAI Responses API client for plain-text completions."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from dish_nutrition.services.ingredients import AIClient


@dataclass
class OpenAITextClient(AIClient):
    """Text client backed by OpenAI Responses API."""

    client: AsyncOpenAI
    model: str

    @classmethod
    def create(cls, api_key: str, model: str) -> "OpenAITextClient":
        """Create an OpenAI text client."""
        return cls(client=AsyncOpenAI(api_key=api_key), model=model)

    async def generate(self, prompt: str) -> str:
        """Call OpenAI Responses API and return the output text."""
        response = await self.client.responses.create(model=self.model, input=prompt)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return output_text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
