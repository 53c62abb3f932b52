"""Image format conversion."""

from __future__ import annotations

from pathlib import Path

from PIL import Image


def webp_to_jpg(input_path: str | Path, output_path: str | Path) -> None:
    """Decode a WebP file and save it as JPEG at quality 80."""
    with Image.open(input_path, formats=["WEBP"]) as image:
        image.convert("RGB").save(output_path, "JPEG", quality=80)