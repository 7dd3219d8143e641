from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

from providers.base import ImageProvider
from providers.gemini_imagen import GeminiImagenProvider
from providers.openai_image import OpenAIImageProvider

load_dotenv()

PROVIDERS = ("gemini", "openai")

# ---------------------------------------------------------------------------
# Environment  (.env for local dev; API keys are read by the SDKs themselves)
# ---------------------------------------------------------------------------

DEFAULT_PROVIDER   = os.environ.get("BANNER_PROVIDER", "gemini")
IMAGEN_MODEL       = os.environ.get("IMAGEN_MODEL", "imagen-4.0-generate-001")
OPENAI_IMAGE_MODEL = os.environ.get("OPENAI_IMAGE_MODEL", "gpt-image-1-mini")
IMAGE_SIZE         = os.environ.get("IMAGE_SIZE", "1K")


def load_provider(provider_name: Optional[str] = None) -> ImageProvider:
    name = provider_name or DEFAULT_PROVIDER
    if name == "gemini":
        return GeminiImagenProvider(model=IMAGEN_MODEL, image_size=IMAGE_SIZE)
    if name == "openai":
        return OpenAIImageProvider(model=OPENAI_IMAGE_MODEL)
    raise ValueError(f"provider_name must be one of {', '.join(PROVIDERS)}, got {name!r}")
