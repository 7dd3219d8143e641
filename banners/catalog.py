"""
banners/catalog.py
------------------
Static configuration: the five banner formats and four design templates.

Both tables are read-only for the lifetime of the process. Order matters:
formats are dispatched (and displayed) in the order listed here, and the
first template is the default selection.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence, Tuple

AspectRatio = Literal["16:9", "4:3", "1:1", "3:4", "9:16"]

ASPECT_RATIOS: Tuple[str, ...] = ("16:9", "4:3", "1:1", "3:4", "9:16")

DEFAULT_DESCRIPTION = (
    "A high-performance electric mountain bike with a sleek carbon fiber frame, "
    "long-lasting battery, and all-terrain tires."
)
DEFAULT_URL = "www.electricbikes.com/peak-rider-x"


@dataclass(frozen=True)
class BannerFormat:
    name: str
    aspect_ratio: AspectRatio
    description: str


@dataclass(frozen=True)
class DesignTemplate:
    name: str
    description: str
    icon: str  # SVG path data
    prompt_fragment: str


# ---------------------------------------------------------------------------
# Formats
# ---------------------------------------------------------------------------

BANNER_FORMATS: Tuple[BannerFormat, ...] = (
    BannerFormat("Leaderboard / Banner", "16:9", "Wide format for top of page"),
    BannerFormat("Medium Rectangle", "4:3", "Versatile, common format"),
    BannerFormat("Square", "1:1", "Ideal for social media feeds"),
    BannerFormat("Portrait", "3:4", "Vertical format for sidebars"),
    BannerFormat("Skyscraper", "9:16", "Tall format for mobile screens"),
)

# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

DESIGN_TEMPLATES: Tuple[DesignTemplate, ...] = (
    DesignTemplate(
        name="Minimalist & Clean",
        description="Focus on whitespace, simplicity, and the core product.",
        icon=(
            "M3.75 6A2.25 2.25 0 001.5 8.25v7.5A2.25 2.25 0 003.75 18h16.5"
            "A2.25 2.25 0 0022.5 15.75v-7.5A2.25 2.25 0 0020.25 6H3.75z"
        ),
        prompt_fragment=(
            "The design style must be minimalist and clean. Emphasize negative space, "
            "use a simple and muted color palette, and focus on the product as the single "
            "hero element. The overall feeling should be modern, airy, and sophisticated."
        ),
    ),
    DesignTemplate(
        name="Bold & Vibrant",
        description="Use energetic colors and dynamic layouts to grab attention.",
        icon="M3.75 13.5l10.5-11.25L12 10.5h8.25L9.75 21.75 12 13.5H3.75z",
        prompt_fragment=(
            "The design style must be bold and vibrant. Use a high-contrast, energetic "
            "color palette with dynamic shapes and a layout that creates a sense of "
            "excitement and movement. The ad should be eye-catching and demand attention."
        ),
    ),
    DesignTemplate(
        name="Elegant & Luxurious",
        description="Sophisticated look with premium textures and refined fonts.",
        icon=(
            "M9.813 15.904L9 18.75l-.813-2.846a4.5 4.5 0 00-3.09-3.09L2.25 12"
            "l2.846-.813a4.5 4.5 0 003.09-3.09L9 5.25l.813 2.846a4.5 4.5 0 003.09 3.09"
            "L15.75 12l-2.846.813a4.5 4.5 0 00-3.09 3.09z"
        ),
        prompt_fragment=(
            "The design style must be elegant and luxurious. Use a rich, sophisticated "
            "color palette (like deep blues, golds, or silvers), premium textures (like "
            "marble or silk), and a sense of classic, high-end design. The product should "
            "look aspirational and premium."
        ),
    ),
    DesignTemplate(
        name="Futuristic & Techy",
        description="Sleek, modern aesthetic with neon accents and abstract graphics.",
        icon=(
            "M8.25 3v1.5M4.5 8.25H3m18 0h-1.5M4.5 12H3m18 0h-1.5m-15 3.75H3m18 0h-1.5"
            "M8.25 19.5V21M12 3v1.5m0 15V21m3.75-18v1.5m0 15V21m-9-1.5h10.5a2.25 2.25 0 "
            "002.25-2.25V8.25a2.25 2.25 0 00-2.25-2.25H8.25a2.25 2.25 0 00-2.25 2.25v7.5"
            "a2.25 2.25 0 002.25 2.25z"
        ),
        prompt_fragment=(
            "The design style must be futuristic and tech-focused. Incorporate elements "
            "like glowing neon lines, abstract digital patterns, dark backgrounds with "
            "bright accents, and a sleek, high-tech aesthetic. The ad should feel "
            "innovative and cutting-edge."
        ),
    ),
)


def find_template(name: str, templates: Sequence[DesignTemplate] = DESIGN_TEMPLATES) -> DesignTemplate:
    for template in templates:
        if template.name == name:
            return template
    raise KeyError(f"Unknown design template: {name!r}")
