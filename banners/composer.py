"""
banners/composer.py
-------------------
Prompt assembly for one banner format.

Every prompt is the fixed preamble, the product description and URL, the
selected template's style guidance, then the target aspect ratio and format
label. Pure string building: no I/O, no failure modes.
"""
from __future__ import annotations

from dataclasses import dataclass

from .catalog import BannerFormat, DesignTemplate

PROMPT_PREAMBLE = (
    "Create a visually stunning, professional banner ad for a product.\n"
    "The ad should be clean, modern, and eye-catching, suitable for a high-end brand.\n"
    "Avoid text overlays, as text will be added later. "
    "Focus on compelling product imagery and a suitable background.\n"
)


@dataclass(frozen=True)
class GenerationRequest:
    prompt: str
    aspect_ratio: str


def build_base_prompt(description: str, url: str, template: DesignTemplate) -> str:
    return (
        f"{PROMPT_PREAMBLE}\n"
        f'Product Description: "{description}"\n'
        f'Product Website (for context): "{url}"\n\n'
        f"IMPORTANT DESIGN STYLE: {template.prompt_fragment}\n"
    )


def build_format_prompt(base_prompt: str, fmt: BannerFormat) -> str:
    return (
        f"{base_prompt}\n"
        f'Generate the ad in a {fmt.aspect_ratio} aspect ratio, suitable for a "{fmt.name}" ad format.'
    )


def compose_request(
    description: str,
    url: str,
    template: DesignTemplate,
    fmt: BannerFormat,
) -> GenerationRequest:
    """Build the complete request for one banner format."""
    prompt = build_format_prompt(build_base_prompt(description, url, template), fmt)
    return GenerationRequest(prompt=prompt, aspect_ratio=fmt.aspect_ratio)
