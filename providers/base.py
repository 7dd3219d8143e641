from __future__ import annotations
import base64
from io import BytesIO
from typing import Protocol

from PIL import Image

DATA_URL_PREFIX = "data:image/png;base64,"


class ImageGenerationError(RuntimeError):
    """Raised when a provider answers without a usable image."""


class ImageProvider(Protocol):
    name: str

    async def generate_banner_image(self, prompt: str, aspect_ratio: str) -> str:
        """Generate exactly one image for `aspect_ratio` and return it as an image URL."""
        ...


def to_data_url(img_data: bytes | str) -> str:
    # 1) normalize to raw bytes (SDKs return either base64 str or bytes)
    if isinstance(img_data, str):
        raw = base64.b64decode(img_data)
    else:
        raw = img_data

    # 2) decode as an image (handles png/jpg/webp), then re-encode as PNG
    img = Image.open(BytesIO(raw))
    buf = BytesIO()
    img.save(buf, format="PNG")
    return DATA_URL_PREFIX + base64.b64encode(buf.getvalue()).decode("ascii")


def decode_data_url(image_url: str) -> bytes:
    header, sep, payload = image_url.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError(f"Not a base64 data URL: {image_url[:40]}...")
    return base64.b64decode(payload)


async def close_provider(provider: ImageProvider) -> None:
    """Release the provider's client, if it holds one."""
    aclose = getattr(provider, "aclose", None)
    if aclose is not None:
        await aclose()
