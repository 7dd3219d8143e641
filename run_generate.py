from __future__ import annotations
import asyncio
import csv
import logging
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from banners.catalog import DEFAULT_DESCRIPTION, DEFAULT_URL, DESIGN_TEMPLATES
from banners.config import DEFAULT_PROVIDER, PROVIDERS, load_provider
from banners.orchestrator import Banner, BannerGenerator
from providers.base import decode_data_url


def banner_filename(banner: Banner) -> str:
    return banner.aspect_ratio.replace(":", "x") + ".png"


def write_banners(banners: List[Banner], out_dir: Path, provider_name: str) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    log_path = out_dir / "banners.csv"

    with log_path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=["name", "aspect_ratio", "image_path", "provider"])
        writer.writeheader()

        for banner in tqdm(banners, desc="writing banners"):
            image_path = out_dir / banner_filename(banner)
            image_path.write_bytes(decode_data_url(banner.image_url))
            writer.writerow({
                "name": banner.name,
                "aspect_ratio": banner.aspect_ratio,
                "image_path": str(image_path),
                "provider": provider_name,
            })
    return log_path


def main(
    description: str,
    url: str,
    template: str,
    provider_name: str,
    out_dir: Optional[str] = None,
) -> int:
    generator = BannerGenerator(provider_factory=lambda: load_provider(provider_name))
    generator.update_description(description)
    generator.update_url(url)
    generator.select_template(template)

    print(f"[RUN] provider={provider_name} template={generator.selected_template.name} "
          f"formats={len(generator.formats)}")
    asyncio.run(generator.generate_banners())

    banners = generator.generated_banners
    for banner in banners:
        print(f"[INFO] {banner.aspect_ratio:>5}  {banner.name}")

    if out_dir and banners:
        log_path = write_banners(banners, Path(out_dir), provider_name)
        print(f"Done. Log: {log_path}")

    if generator.error:
        print(f"[ERROR] {generator.error}")
        return 1
    return 0


if __name__ == "__main__":
    import argparse
    ap = argparse.ArgumentParser(description="Generate a set of product banners in every configured format.")
    ap.add_argument("--description", default=DEFAULT_DESCRIPTION)
    ap.add_argument("--url", default=DEFAULT_URL)
    ap.add_argument("--template", default=DESIGN_TEMPLATES[0].name,
                    choices=[t.name for t in DESIGN_TEMPLATES])
    ap.add_argument("--provider", default=DEFAULT_PROVIDER, choices=list(PROVIDERS))
    ap.add_argument("--out_dir", default=None)
    ap.add_argument("--list_templates", action="store_true")
    args = ap.parse_args()

    if args.list_templates:
        for t in DESIGN_TEMPLATES:
            print(f"{t.name:<22} {t.description}")
        raise SystemExit(0)

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(name)s: %(message)s")
    raise SystemExit(main(args.description, args.url, args.template, args.provider, args.out_dir))
