"""
Photo Encoder Service

Turns uploaded photo bytes into the Base64 JPEG text stored on a business card.
Images larger than the bounding box are shrunk to fit it (aspect ratio kept);
smaller images keep their size.
"""

import base64
import io
import logging
from typing import Optional

from PIL import Image, UnidentifiedImageError

from config.app_config import PHOTO_MAX_WIDTH, PHOTO_MAX_HEIGHT, PHOTO_JPEG_QUALITY
from exceptions import ValidationError

logger = logging.getLogger(__name__)


class PhotoEncoder:
    """
    Resizes and re-encodes photos as Base64 JPEG.
    """

    def __init__(
        self,
        max_width: int = PHOTO_MAX_WIDTH,
        max_height: int = PHOTO_MAX_HEIGHT,
        quality: int = PHOTO_JPEG_QUALITY,
    ):
        """
        Initialize photo encoder.

        Args:
            max_width: Bounding box width in pixels
            max_height: Bounding box height in pixels
            quality: JPEG quality (1-95)
        """
        self.max_size = (max_width, max_height)
        self.quality = quality

    def encode(self, content: Optional[bytes], filename: Optional[str] = None) -> Optional[str]:
        """
        Encode an uploaded photo.

        Args:
            content: Raw bytes of the uploaded file
            filename: Original file name, used for log and error context

        Returns:
            Base64 text of the JPEG, or None when no photo was uploaded

        Raises:
            ValidationError: If the bytes are not a readable image
        """
        if not content:
            return None

        try:
            with Image.open(io.BytesIO(content)) as image:
                image.load()
                original_size = image.size
                image.thumbnail(self.max_size, Image.Resampling.LANCZOS)
                if image.mode != 'RGB':
                    image = image.convert('RGB')
                buffer = io.BytesIO()
                image.save(buffer, format='JPEG', quality=self.quality)
                final_size = image.size
        except (UnidentifiedImageError, OSError) as e:
            logger.warning(f"Rejected photo upload {filename or '<unnamed>'}: {e}")
            raise ValidationError(
                "Photo file is not a valid image.",
                invalid_fields={"photo": filename or str(e)},
            ) from e

        logger.debug(f"Encoded photo {filename or '<unnamed>'}: {original_size} -> {final_size}")
        return base64.b64encode(buffer.getvalue()).decode('ascii')
