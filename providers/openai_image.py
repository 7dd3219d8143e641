from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from dotenv import load_dotenv
from openai import AsyncOpenAI

from .base import ImageGenerationError, to_data_url

# gpt-image models only accept three sizes; pick the closest orientation.
SIZE_BY_ASPECT_RATIO = {
    "16:9": "1536x1024",
    "4:3": "1536x1024",
    "1:1": "1024x1024",
    "3:4": "1024x1536",
    "9:16": "1024x1536",
}


@dataclass
class OpenAIImageProvider:
    name: str = "openai"
    model: str = "gpt-image-1-mini"
    quality: str = "medium"
    client: Optional[Any] = None

    def __post_init__(self):
        if self.client is None:
            load_dotenv()
            # Reads OPENAI_API_KEY from environment / .env automatically
            self.client = AsyncOpenAI()

    async def generate_banner_image(self, prompt: str, aspect_ratio: str) -> str:
        size = SIZE_BY_ASPECT_RATIO.get(aspect_ratio)
        if size is None:
            raise ValueError(f"Unsupported aspect ratio: {aspect_ratio}")

        # gpt-image-1-mini always returns b64, no response_format param.
        response = await self.client.images.generate(
            model=self.model,
            prompt=prompt,
            size=size,
            quality=self.quality,
            n=1,
        )

        if not response.data or not response.data[0].b64_json:
            raise ImageGenerationError(f"OpenAI returned no image for aspect ratio {aspect_ratio}")
        return to_data_url(response.data[0].b64_json)

    async def aclose(self) -> None:
        await self.client.close()
