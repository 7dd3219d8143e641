from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

from dotenv import load_dotenv
from google import genai
from google.genai import types

from .base import ImageGenerationError, to_data_url


@dataclass
class GeminiImagenProvider:
    name: str = "gemini"
    model: str = "imagen-4.0-generate-001"
    image_size: str = "1K"
    client: Optional[Any] = None

    def __post_init__(self):
        if self.client is None:
            load_dotenv()
            # genai.Client() picks up GEMINI_API_KEY from the environment
            self.client = genai.Client()

    def _config(self, aspect_ratio: str) -> types.GenerateImagesConfig:
        # One image per call: each banner format is its own request.
        return types.GenerateImagesConfig(
            number_of_images=1,
            aspect_ratio=aspect_ratio,
            image_size=self.image_size,
        )

    async def generate_banner_image(self, prompt: str, aspect_ratio: str) -> str:
        resp = await self.client.aio.models.generate_images(
            model=self.model,
            prompt=prompt,
            config=self._config(aspect_ratio),
        )

        images = getattr(resp, "generated_images", None) or []
        if not images or images[0].image is None or not images[0].image.image_bytes:
            raise ImageGenerationError(f"Imagen returned no image for aspect ratio {aspect_ratio}")

        return to_data_url(images[0].image.image_bytes)

    async def aclose(self) -> None:
        # Older google-genai releases have no aclose() on the async client.
        aclose = getattr(self.client.aio, "aclose", None)
        if aclose is not None:
            await aclose()
