"""Square rasterization of sliding-tile images."""

import base64
import io
import re
from pathlib import Path
from typing import Optional, Union

from PIL import Image

ImageSource = Union[str, Path, bytes, Image.Image]

_DATA_URL = re.compile(r"^data:image/[\w.+-]+;base64,(?P<data>.+)$", re.DOTALL)


def _open(source: ImageSource) -> Image.Image:
    if isinstance(source, Image.Image):
        return source
    if isinstance(source, bytes):
        return Image.open(io.BytesIO(source))
    if isinstance(source, str):
        match = _DATA_URL.match(source)
        if match:
            return Image.open(io.BytesIO(base64.b64decode(match.group("data"))))
    return Image.open(Path(source))


def crop_square(image: Image.Image) -> Image.Image:
    """Center-crop an image to its largest square."""
    size = min(image.width, image.height)
    left = (image.width - size) // 2
    top = (image.height - size) // 2
    return image.crop((left, top, left + size, top + size))


def rasterize_square(source: ImageSource, max_size: Optional[int] = None) -> str:
    """
    Crop an image to a centered square and encode it as a PNG data URL.

    The data URL is what gets embedded in exported artifacts, so the
    original upload is never needed again.

    Args:
        source: File path, raw bytes, PIL image or an image data URL
        max_size: Optional edge length to downscale to

    Returns:
        A ``data:image/png;base64,...`` string
    """
    if isinstance(source, Image.Image):
        square = crop_square(source.convert("RGBA"))
    else:
        with _open(source) as image:
            square = crop_square(image.convert("RGBA"))
    if max_size is not None and square.width > max_size:
        square = square.resize((max_size, max_size), Image.Resampling.LANCZOS)

    buffer = io.BytesIO()
    square.save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")
