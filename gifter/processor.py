"""Loading GIFs and playing them in the terminal."""

from __future__ import annotations

import itertools
import sys
import time
from dataclasses import dataclass
from pathlib import Path

from gifter.animation import Animation, decode_gif, resize_image
from gifter.ascii import (
    GRAD_ASCII2,
    GRAD_BLOCKY,
    GRAD_BORDERED,
    GRAD_NORMAL,
    GRAD_SHADED,
    image_to_ascii,
)
from gifter.graphic import display_image, probe_graphics
from gifter.httpclient import DownloadError, download_gif

_ANIMATION_ID = 1
_MIN_DELAY_MS = 50

_STYLES = {
    "shaded": (GRAD_SHADED, 1.0),
    "bordered": (GRAD_BORDERED, 1.0),
    "blocky": (GRAD_BLOCKY, 1.0),
    "ascii2": (GRAD_ASCII2, 2.2),
    "normal": (GRAD_NORMAL, 1.0),
}


@dataclass
class Options:
    """Settings chosen on the command line."""

    file_path: str = ""
    styles: str = "ascii2"
    mode: str = "ascii"
    width: int = 90
    height: int = 90
    color: bool = False


@dataclass
class Context:
    """Everything needed to render frames."""

    width: int = 90
    height: int = 90
    gamma: float = 1.0
    color: bool = False
    styles: str = ""
    grad: str = ""
    mode: str = "ascii"


def context_from_options(opts: Options) -> Context:
    """Build a rendering context, picking the gradient for the chosen style."""
    grad, gamma = "", 1.0
    if opts.mode == "ascii":
        if opts.styles in _STYLES:
            grad, gamma = _STYLES[opts.styles]
        else:
            print(f'Warning: unknown style "{opts.styles}", defaulting to ascii2')
            grad, gamma = _STYLES["ascii2"]
    return Context(
        width=opts.width,
        height=opts.height,
        gamma=gamma,
        color=opts.color,
        styles=opts.styles,
        grad=grad,
        mode=opts.mode,
    )


def _load(file_path: str) -> Animation:
    if file_path.startswith(("http://", "https://")):
        try:
            animation = download_gif(file_path)
        except DownloadError as exc:
            raise DownloadError(f"error downloading GIF from {file_path}: {exc}") from exc
        print(f"Successfully downloaded GIF from {file_path}")
        return animation

    try:
        data = Path(file_path).read_bytes()
    except OSError as exc:
        raise OSError(f"error opening file {file_path}: {exc}") from exc
    print(f"File size of {file_path}: {len(data)} bytes")
    try:
        return decode_gif(data)
    except ValueError as exc:
        raise ValueError(f"error decoding GIF {file_path}: {exc}") from exc


def execute(opts: Options) -> None:
    """Load the GIF named in ``opts`` and play it."""
    print(f"Processing file: {opts.file_path}")
    print(f"Input dimensions: width={opts.width}, height={opts.height}")
    print(f"Color output: {str(opts.color).lower()}")
    print(f"Mode: {opts.mode}")
    if opts.mode == "ascii":
        if opts.styles:
            print(f"Using style: {opts.styles}")
        else:
            print("No style provided, using default")
    print(f"Processing started for file: {opts.file_path} with style: {opts.styles}")

    if opts.mode == "graphic":
        try:
            probe_graphics(sys.stdout)
        except (OSError, ValueError) as exc:
            print(f"Error in Kitty graphics test: {exc}", file=sys.stderr)
            print(
                "Warning: Kitty graphics test failed. Ensure you're using Kitty terminal.",
                file=sys.stderr,
            )
            raise SystemExit(1) from exc

    animation = _load(opts.file_path)
    display_gif(animation, context_from_options(opts))


def display_gif(animation: Animation, context: Context) -> None:
    """Play ``animation`` on standard output as text or kitty graphics."""
    print(
        "Note: Displaying GIF in graphical mode. "
        "Use a terminal like Kitty or iTerm2 for best results."
    )
    if context.mode == "graphic":
        sys.stdout.write("\033[H")
        clear_terminal()
    else:
        print("Displaying GIF in ASCII mode.")

    loops = {-1: 0, 0: -1}.get(animation.loop_count, animation.loop_count)
    frames = [resize_image(f, context.width, context.height) for f in animation.frames]
    passes = itertools.count() if loops == -1 else range(loops)

    for _ in passes:
        for index, (frame, delay) in enumerate(zip(frames, animation.delays)):
            if context.mode == "graphic":
                try:
                    display_image(
                        sys.stdout, frame, context.width, context.height, _ANIMATION_ID
                    )
                except (OSError, ValueError) as exc:
                    print(f"Error displaying frame {index}: {exc}", file=sys.stderr)
                    continue
            else:
                art = image_to_ascii(frame, context)
                clear_terminal()
                sys.stdout.write(art)
            time.sleep(max(_MIN_DELAY_MS, delay) / 1000)


def clear_terminal() -> None:
    """Clear the screen and scrollback, then reset the terminal."""
    sys.stdout.write("\033[H\033[2J")
    sys.stdout.write("\033[3J")
    sys.stdout.write("\033c")
    sys.stdout.flush()