"""Backend-independent textures and loading them from image files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from PIL import Image

from .log import SC_WARNING_ON, Level, log


class TextureError(RuntimeError):
    """Raised when a texture cannot be loaded."""


_KEPT_MODES = {"L", "LA", "RGB", "RGBA"}
_GREY_MODES = {"1", "I", "I;16", "I;16B", "I;16L", "F"}


def _normalise(image: Image.Image) -> Image.Image:
    """Convert an image to 8-bit grey, grey+alpha, RGB or RGBA."""
    if image.mode in _KEPT_MODES:
        return image
    if image.mode in _GREY_MODES:
        return image.convert("L")
    if image.mode == "PA" or (image.mode == "P" and "transparency" in image.info):
        return image.convert("RGBA")
    if image.mode in {"P", "CMYK", "YCbCr", "LAB", "HSV"}:
        return image.convert("RGB")
    return image.convert("RGBA")


class Texture(ABC):
    """A 2D texture with a size and channel count, filled from raw pixel bytes."""

    def __init__(self) -> None:
        self.width = 0
        self.height = 0
        self.channel_count = 0

    def init(self, width: int, height: int, channel_count: int) -> None:
        self.width = width
        self.height = height
        self.channel_count = channel_count
        self._init()

    def update(self, data: bytes, width: Optional[int] = None, height: Optional[int] = None) -> None:
        """Upload pixel data, recreating the texture first if a new size is given."""
        if width is not None or height is not None:
            if width is None or height is None:
                raise TypeError("width and height must be given together")
            if width != self.width or height != self.height:
                self._dispose()
                self.init(width, height, self.channel_count)

        if SC_WARNING_ON and (self.width == 0 or self.height == 0):
            log(Level.WARNING, "Texture not initialized", engine=True)
        self._update(data)

    def load_from_file(self, path) -> None:
        """Load an image file and upload its pixels, top row first."""
        try:
            with Image.open(path) as image:
                image.load()
                pixels = _normalise(image)
                pixels.load()
        except (OSError, ValueError) as exc:
            log(Level.FATAL, "Failed to load texture: ", path, engine=True)
            raise TextureError(f"failed to load texture: {path}") from exc

        self.init(pixels.width, pixels.height, len(pixels.getbands()))
        self.update(pixels.tobytes())

    @abstractmethod
    def _init(self) -> None:
        """Create the backend texture for the current size and channel count."""

    @abstractmethod
    def _update(self, data: bytes) -> None:
        """Upload pixel data to the backend texture."""

    @abstractmethod
    def _dispose(self) -> None:
        """Release the backend texture."""

    @abstractmethod
    def bind(self, slot: int) -> None:
        """Bind the texture to a texture unit."""