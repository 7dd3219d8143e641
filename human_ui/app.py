"""
human_ui/app.py
---------------
Streamlit form for generating a product's banner set.

Run from the project root:
    streamlit run human_ui/app.py

Features
--------
- Product description + product URL inputs (pre-filled with an example)
- Pick one of four design templates; its style guidance goes into every prompt
- One click generates all five formats concurrently
- Shows every banner that succeeded, plus a notice when some formats failed
- Download button per banner
"""
from __future__ import annotations

import asyncio
import os

import streamlit as st
from dotenv import load_dotenv

from banners.config import DEFAULT_PROVIDER, load_provider
from banners.orchestrator import BannerGenerator
from providers.base import decode_data_url

load_dotenv()

# ---------------------------------------------------------------------------
# Deployment config  (st.secrets for Streamlit Cloud, .env for local dev)
# ---------------------------------------------------------------------------

def _cfg(key: str) -> str:
    """Read from st.secrets (Streamlit Cloud) with fallback to os.environ (.env)."""
    try:
        val = st.secrets[key]
        return str(val) if val else os.environ.get(key, "")
    except (KeyError, AttributeError, FileNotFoundError):
        return os.environ.get(key, "")

# The SDK clients only look at the environment.
for _key in ("GEMINI_API_KEY", "OPENAI_API_KEY"):
    _val = _cfg(_key)
    if _val:
        os.environ.setdefault(_key, _val)

PROVIDER_NAME = _cfg("BANNER_PROVIDER") or DEFAULT_PROVIDER


def get_generator() -> BannerGenerator:
    """Return the form controller, kept in Streamlit session state across reruns.

    Each click runs its own `asyncio.run` loop, so the provider (and its async
    SDK client) is built fresh per round rather than cached.
    """
    if "banner_generator" not in st.session_state:
        st.session_state["banner_generator"] = BannerGenerator(
            provider_factory=lambda: load_provider(PROVIDER_NAME)
        )
    return st.session_state["banner_generator"]


def icon_svg(path_data: str, size: int = 28) -> str:
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 24 24" '
        f'stroke-width="1.5" stroke="currentColor" width="{size}" height="{size}">'
        f'<path stroke-linecap="round" stroke-linejoin="round" d="{path_data}"/></svg>'
    )


# ---------------------------------------------------------------------------
# Page setup
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Banner Studio",
    page_icon="🖼️",
    layout="wide",
)

generator = get_generator()

st.title("Banner Studio")
st.caption("Describe your product, pick a style, and get a banner for every ad format.")

# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

cols = st.columns([3, 2])
with cols[0]:
    generator.update_description(
        st.text_area("Product description", value=generator.product_description, height=140)
    )
    generator.update_url(st.text_input("Product URL", value=generator.product_url))

with cols[1]:
    names = [t.name for t in generator.templates]
    picked = st.radio(
        "Design template",
        options=names,
        index=names.index(generator.selected_template.name),
        captions=[t.description for t in generator.templates],
    )
    generator.select_template(picked)
    st.markdown(icon_svg(generator.selected_template.icon), unsafe_allow_html=True)

# ---------------------------------------------------------------------------
# Generate
# ---------------------------------------------------------------------------

st.divider()

can_generate = bool(generator.product_description.strip()) and not generator.is_loading
if st.button("✨ Generate banners", type="primary", disabled=not can_generate):
    with st.spinner(f"Generating {len(generator.formats)} banner formats..."):
        asyncio.run(generator.generate_banners())

if generator.error:
    st.error(generator.error)

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

banners = generator.generated_banners
if banners:
    st.subheader("Your banners")
    grid = st.columns(min(len(banners), 3))
    for i, banner in enumerate(banners):
        raw = decode_data_url(banner.image_url)
        with grid[i % len(grid)]:
            st.image(raw, caption=f"{banner.name} ({banner.aspect_ratio})")
            st.download_button(
                "Download",
                data=raw,
                file_name=f"{banner.aspect_ratio.replace(':', 'x')}.png",
                mime="image/png",
                key=f"download_{banner.aspect_ratio}",
            )
elif not generator.error:
    st.caption("No banners yet. Fill in the form and hit Generate.")
