"""Image payload helpers"""
import base64
import binascii
import re
from typing import Optional, Tuple

# data:image/jpeg;base64,....
_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.DOTALL)

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/webp", "image/heic", "image/heif"}
MAX_IMAGE_BYTES = 7 * 1024 * 1024


def decode_image(payload: str, mime_type: Optional[str] = None) -> Tuple[bytes, str]:
    """
    Decode a base64 image or data URL sent by the browser.

    The data URL's own MIME type wins over ``mime_type``.
    Raises ValueError for anything that is not a usable image.
    """
    if not payload:
        raise ValueError("Image is empty")

    data = payload.strip()
    match = _DATA_URL_RE.match(data)
    if match:
        mime_type = match.group("mime")
        data = match.group("data")

    mime_type = (mime_type or "image/jpeg").lower()
    if mime_type not in ALLOWED_IMAGE_TYPES:
        raise ValueError(f"Unsupported image type: {mime_type}")

    try:
        image_bytes = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("Image is not valid base64")

    if not image_bytes:
        raise ValueError("Image is empty")
    if len(image_bytes) > MAX_IMAGE_BYTES:
        raise ValueError("Image is too large")
    return image_bytes, mime_type
