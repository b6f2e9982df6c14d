"""Decoding GIF animations and scaling their frames."""

from __future__ import annotations

import io
from dataclasses import dataclass, field

from PIL import Image, ImageSequence, UnidentifiedImageError


@dataclass
class Animation:
    """Decoded GIF frames with their delays in milliseconds.

    ``loop_count`` follows the GIF convention: -1 when the file carries no
    looping extension, 0 to loop forever, otherwise the stored count.
    """

    frames: list[Image.Image] = field(default_factory=list)
    delays: list[int] = field(default_factory=list)
    loop_count: int = -1


def decode_gif(data: bytes) -> Animation:
    """Decode every frame of a GIF held in ``data``.

    Raises ValueError if the data is not a readable GIF.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            if img.format != "GIF":
                raise ValueError(f"not a GIF image (format: {img.format})")
            loop_count = int(img.info.get("loop", -1))
            frames: list[Image.Image] = []
            delays: list[int] = []
            for frame in ImageSequence.Iterator(img):
                frames.append(frame.convert("RGBA"))
                delays.append(int(frame.info.get("duration", 0)))
    except (UnidentifiedImageError, OSError, EOFError) as exc:
        raise ValueError(f"invalid GIF data: {exc}") from exc
    return Animation(frames=frames, delays=delays, loop_count=loop_count)


def resize_image(img: Image.Image, width: int, height: int) -> Image.Image:
    """Scale ``img`` to exactly ``width`` x ``height`` with nearest-neighbour sampling."""
    width, height = max(width, 0), max(height, 0)
    if not width or not height:
        return Image.new("RGBA", (width, height))
    return img.convert("RGBA").resize((width, height), Image.Resampling.NEAREST)