import logging
import os

from .image import QrStyle, SymbolImage
from .png import PngQrImage
from .svg import SvgQrImage


logger = logging.getLogger(__name__)

image_classes = {
    "svg": SvgQrImage,
    "png": PngQrImage
}


def save(code, path, style=None, file_type=None):
    """Render code into path, file type taken from the extension unless
    given"""
    if file_type is None:
        file_type = os.path.splitext(path)[1].lstrip(".").lower()
    image_class = image_classes.get(file_type)
    if image_class is None:
        raise ValueError(
            "Unknown image file type {!r}".format(file_type)
        )
    image = image_class(code, style)
    with open(path, image.file_open_mode) as image_file:
        image.write(image_file)
    logger.debug("Saved %dx%d %s image to %s", image.image_width,
                 image.image_height, file_type, path)
    return image
