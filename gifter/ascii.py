"""Rendering images as text using character gradients."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image

if TYPE_CHECKING:
    from gifter.processor import Context

GRAD_NORMAL = " .,:;ilwW#@$%"
GRAD_ASCII2 = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "
GRAD_SHADED = " .:;░▒▓█"
GRAD_BORDERED = " .:-┼┤├┴┬┘└┐┌│"
GRAD_BLOCKY = " .:;▋▊▉█"


def _premultiplied(value: int, alpha: int) -> int:
    return ((value * 0x101) * (alpha * 0x101) // 0xFFFF) >> 8


def image_to_ascii(img: Image.Image, context: Context) -> str:
    """Render ``img`` as lines of gradient characters, optionally coloured."""
    rgba = img.convert("RGBA")
    img_w, img_h = rgba.size
    pixels = rgba.load()

    # Terminal cells are roughly twice as tall as wide.
    width = context.width // 2
    height = context.height // 2
    x_scale = img_w / width if width else 0.0
    y_scale = img_h / height if height else 0.0
    last = len(context.grad) - 1

    lines = []
    for y in range(height):
        cells = []
        src_y = int(y * y_scale)
        for x in range(width):
            src_x = int(x * x_scale)
            if src_x >= img_w or src_y >= img_h:
                cells.append(" ")
                continue
            r, g, b, a = pixels[src_x, src_y]
            r, g, b = (_premultiplied(c, a) for c in (r, g, b))
            gray = 0.3 * r + 0.59 * g + 0.11 * b
            gray = (gray / 255.0) ** context.gamma
            ch = context.grad[int(gray * last + 0.5)]
            if context.color:
                cells.append(f"\033[38;2;{r};{g};{b}m{ch}\033[0m")
            else:
                cells.append(ch)
        lines.append("".join(cells) + "\n")
    return "".join(lines)