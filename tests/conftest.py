"""Shared fixtures: an in-memory image provider and a tiny PNG."""

import asyncio
import base64
from io import BytesIO

import pytest
from PIL import Image

from providers.base import DATA_URL_PREFIX


def make_png(size=(4, 2)) -> bytes:
    buf = BytesIO()
    Image.new("RGB", size, (200, 30, 30)).save(buf, format="PNG")
    return buf.getvalue()


class FakeProvider:
    """Records every call and answers with a URL tagged by the requested ratio."""

    name = "fake"

    def __init__(self, fail_ratios=(), gate=None, real_png=False):
        self.fail_ratios = set(fail_ratios)
        self.gate = gate
        self.real_png = real_png
        self.calls = []

    async def generate_banner_image(self, prompt, aspect_ratio):
        self.calls.append((prompt, aspect_ratio))
        if self.gate is not None:
            await self.gate.wait()
        else:
            await asyncio.sleep(0)
        if aspect_ratio in self.fail_ratios:
            raise RuntimeError(f"quota exceeded for {aspect_ratio}")
        if self.real_png:
            return DATA_URL_PREFIX + base64.b64encode(make_png()).decode("ascii")
        return f"https://images.test/{aspect_ratio}"


@pytest.fixture
def png_bytes():
    return make_png()


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def make_provider():
    return FakeProvider
