"""Image payload checks."""

from io import BytesIO

from PIL import Image
from pillow_heif import register_heif_opener  # type: ignore[import-untyped]

register_heif_opener()


def is_valid_image(content: bytes) -> bool:
    """Check if bytes hold an image that can be opened by PIL.

    Args:
        content: Raw file content

    Returns:
        True if the content is a valid image, False otherwise
    """
    try:
        with Image.open(BytesIO(content)) as img:
            img.verify()
    except Exception:
        return False
    else:
        return True
