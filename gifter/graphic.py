"""Drawing images with the kitty terminal graphics protocol."""

from __future__ import annotations

import base64
import io
import logging
from typing import TextIO

from PIL import Image

log = logging.getLogger(__name__)

_CHUNK_SIZE = 4096


def _encode_png(img: Image.Image, what: str) -> bytes:
    buf = io.BytesIO()
    try:
        img.save(buf, "PNG")
    except (OSError, ValueError) as exc:
        raise OSError(f"Error encoding {what} to PNG: {exc}") from exc
    return buf.getvalue()


def kitty_write_png(
    stream: TextIO, png_bytes: bytes, width: int, height: int, image_id: int
) -> None:
    """Send PNG data to ``stream`` as kitty graphics escape sequences."""
    encoded = base64.b64encode(png_bytes).decode("ascii")
    total = len(encoded)
    for off in range(0, total, _CHUNK_SIZE):
        chunk = encoded[off : off + _CHUNK_SIZE]
        end = off + len(chunk)
        first, last = off == 0, end == total
        if first and last:
            control = f"a=T,f=100,s={width},v={height},i={image_id},q=2"
        elif first:
            control = f"a=T,f=100,s={width},v={height},i={image_id},m=1,q=2"
        elif last:
            control = f"m=0,i={image_id},q=2"
        else:
            control = f"m=1,i={image_id},q=2"
        try:
            stream.write(f"\033_G{control};{chunk}\033\\")
        except OSError as exc:
            log.error(
                "Error writing PNG chunk %d-%d (%d bytes): %s", off, end, len(chunk), exc
            )
            raise


def probe_graphics(stream: TextIO) -> None:
    """Draw a small red square to check that the terminal accepts graphics."""
    img = Image.new("RGBA", (10, 10), (255, 0, 0, 255))
    data = _encode_png(img, "test image")
    log.info("Encoded test PNG: %d bytes", len(data))
    stream.write("\033[H")
    kitty_write_png(stream, data, 10, 10, 1)


def display_image(
    stream: TextIO, img: Image.Image, width: int, height: int, image_id: int
) -> None:
    """Draw ``img`` at the top-left of the terminal."""
    data = _encode_png(img, "frame")
    if not data:
        raise ValueError("Encoded PNG frame is empty")
    stream.write("\033[H")
    kitty_write_png(stream, data, width, height, image_id)