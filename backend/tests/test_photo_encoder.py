import base64
import io

import pytest
from PIL import Image

from exceptions import ValidationError
from services.photo_encoder import PhotoEncoder


def _image_bytes(size, mode="RGB", fmt="PNG"):
    buffer = io.BytesIO()
    Image.new(mode, size, color=(200, 30, 30) if mode == "RGB" else (200, 30, 30, 128)).save(buffer, format=fmt)
    return buffer.getvalue()


def _decode(encoded):
    return Image.open(io.BytesIO(base64.b64decode(encoded)))


def test_large_image_shrinks_into_box_keeping_ratio():
    encoded = PhotoEncoder(300, 300).encode(_image_bytes((800, 400)), "wide.png")

    image = _decode(encoded)
    assert image.format == "JPEG"
    assert image.size == (300, 150)


def test_small_image_keeps_size():
    image = _decode(PhotoEncoder(300, 300).encode(_image_bytes((120, 80))))

    assert image.size == (120, 80)


def test_transparent_image_becomes_rgb_jpeg():
    image = _decode(PhotoEncoder().encode(_image_bytes((50, 50), mode="RGBA"), "alpha.png"))

    assert image.format == "JPEG"
    assert image.mode == "RGB"


def test_no_content_gives_none():
    assert PhotoEncoder().encode(None) is None
    assert PhotoEncoder().encode(b"") is None


def test_non_image_is_rejected():
    with pytest.raises(ValidationError, match="not a valid image"):
        PhotoEncoder().encode(b"definitely not an image", "notes.txt")
