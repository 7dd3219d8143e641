"""Tests for the image provider adapters, with the SDK clients mocked out."""

import asyncio
import base64
from io import BytesIO
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import httpx
import pytest
from openai import AsyncOpenAI
from PIL import Image

from banners.orchestrator import BannerGenerator
from providers.base import DATA_URL_PREFIX, ImageGenerationError, decode_data_url, to_data_url
from providers.gemini_imagen import GeminiImagenProvider
from providers.openai_image import SIZE_BY_ASPECT_RATIO, OpenAIImageProvider


def _image_size(image_url):
    return Image.open(BytesIO(decode_data_url(image_url))).size


# ---------------------------------------------------------------------------
# Data URLs
# ---------------------------------------------------------------------------


def test_to_data_url_accepts_bytes_and_base64(png_bytes):
    from_bytes = to_data_url(png_bytes)
    from_b64 = to_data_url(base64.b64encode(png_bytes).decode("ascii"))

    assert from_bytes.startswith(DATA_URL_PREFIX)
    assert from_bytes == from_b64
    assert _image_size(from_bytes) == (4, 2)


def test_to_data_url_reencodes_jpeg_as_png():
    buf = BytesIO()
    Image.new("RGB", (8, 8), (0, 0, 255)).save(buf, format="JPEG")

    url = to_data_url(buf.getvalue())

    assert url.startswith("data:image/png;base64,")
    assert Image.open(BytesIO(decode_data_url(url))).format == "PNG"


def test_decode_data_url_rejects_plain_urls():
    with pytest.raises(ValueError, match="Not a base64 data URL"):
        decode_data_url("https://images.test/1:1")


# ---------------------------------------------------------------------------
# Gemini Imagen
# ---------------------------------------------------------------------------


def _gemini_client(response):
    client = Mock()
    client.aio.models.generate_images = AsyncMock(return_value=response)
    return client


@pytest.mark.asyncio
async def test_gemini_requests_one_image_in_the_given_ratio(png_bytes):
    response = SimpleNamespace(
        generated_images=[SimpleNamespace(image=SimpleNamespace(image_bytes=png_bytes))]
    )
    client = _gemini_client(response)
    provider = GeminiImagenProvider(client=client, model="imagen-test")

    url = await provider.generate_banner_image("a bike", "9:16")

    assert _image_size(url) == (4, 2)
    kwargs = client.aio.models.generate_images.await_args.kwargs
    assert kwargs["model"] == "imagen-test"
    assert kwargs["prompt"] == "a bike"
    assert kwargs["config"].aspect_ratio == "9:16"
    assert kwargs["config"].number_of_images == 1


@pytest.mark.asyncio
async def test_gemini_without_images_raises():
    provider = GeminiImagenProvider(client=_gemini_client(SimpleNamespace(generated_images=[])))

    with pytest.raises(ImageGenerationError, match="16:9"):
        await provider.generate_banner_image("a bike", "16:9")


# ---------------------------------------------------------------------------
# OpenAI
# ---------------------------------------------------------------------------


def _openai_client(response):
    client = Mock()
    client.images.generate = AsyncMock(return_value=response)
    return client


@pytest.mark.asyncio
@pytest.mark.parametrize("ratio", ["16:9", "1:1", "3:4"])
async def test_openai_maps_ratio_to_supported_size(ratio, png_bytes):
    b64 = base64.b64encode(png_bytes).decode("ascii")
    client = _openai_client(SimpleNamespace(data=[SimpleNamespace(b64_json=b64)]))
    provider = OpenAIImageProvider(client=client)

    url = await provider.generate_banner_image("a bike", ratio)

    assert url.startswith(DATA_URL_PREFIX)
    assert client.images.generate.await_args.kwargs["size"] == SIZE_BY_ASPECT_RATIO[ratio]


@pytest.mark.asyncio
async def test_openai_rejects_unknown_ratio():
    provider = OpenAIImageProvider(client=_openai_client(None))

    with pytest.raises(ValueError, match="21:9"):
        await provider.generate_banner_image("a bike", "21:9")


@pytest.mark.asyncio
async def test_openai_empty_response_raises():
    provider = OpenAIImageProvider(client=_openai_client(SimpleNamespace(data=[])))

    with pytest.raises(ImageGenerationError):
        await provider.generate_banner_image("a bike", "1:1")


def test_openai_client_is_fresh_for_every_event_loop(png_bytes):
    """Each click in the form runs its own asyncio.run; clients must not leak across loops."""
    b64 = base64.b64encode(png_bytes).decode("ascii")

    def handler(request):
        return httpx.Response(200, json={"created": 0, "data": [{"b64_json": b64}]})

    clients = []

    def factory():
        client = AsyncOpenAI(
            api_key="test-key",
            base_url="http://images.test/v1",
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )
        clients.append(client)
        return OpenAIImageProvider(client=client)

    gen = BannerGenerator(provider_factory=factory)

    asyncio.run(gen.generate_banners())
    assert len(gen.generated_banners) == 5
    assert gen.error is None

    asyncio.run(gen.generate_banners())
    assert len(gen.generated_banners) == 5
    assert gen.error is None

    assert len(clients) == 2
    assert all(client.is_closed() for client in clients)


@pytest.mark.asyncio
async def test_gemini_aclose_releases_async_client():
    client = _gemini_client(None)
    client.aio.aclose = AsyncMock()
    provider = GeminiImagenProvider(client=client)

    await provider.aclose()

    client.aio.aclose.assert_awaited_once()
