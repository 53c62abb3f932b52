import pytest
from PIL import Image, UnidentifiedImageError

from clikshop.image import webp_to_jpg


def test_webp_to_jpg(tmp_path):
    source = tmp_path / "local.webp"
    target = tmp_path / "local.jpg"
    Image.new("RGB", (4, 3), (255, 0, 0)).save(source, "WEBP")
    webp_to_jpg(source, target)
    with Image.open(target) as result:
        assert result.format == "JPEG"
        assert result.size == (4, 3)


def test_webp_with_alpha(tmp_path):
    source = tmp_path / "alpha.webp"
    target = tmp_path / "alpha.jpg"
    Image.new("RGBA", (2, 2), (0, 0, 255, 128)).save(source, "WEBP")
    webp_to_jpg(source, target)
    with Image.open(target) as result:
        assert result.mode == "RGB"


def test_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        webp_to_jpg(tmp_path / "local.webp", tmp_path / "local.jpg")


def test_non_webp_input(tmp_path):
    source = tmp_path / "image.png"
    Image.new("RGB", (2, 2)).save(source, "PNG")
    with pytest.raises(UnidentifiedImageError):
        webp_to_jpg(source, tmp_path / "out.jpg")