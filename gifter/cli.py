"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys

from gifter.httpclient import DownloadError
from gifter.processor import Options, execute

_HELP_LINES = (
    "Usage:",
    "  gifter [options] <file_path>.gif | <URL>",
    "",
    "Options:",
    "  -m, --mode=MODE        Output mode: ascii or graphic (optional, default: ascii)",
    "  -s, --styles=STYLE     Styles to use for ASCII mode: normal, ascii2, shaded, "
    "bordered, blocky (optional, default: ascii2)",
    "  -w, --width=WIDTH      Set output width (optional, default: 90)",
    "  -h, --height=HEIGHT    Set output height (optional, default: 90)",
    "  -c, --color            Enable color output for ASCII mode (optional, default: false)",
    "  --help                 Show this help message",
    "",
    "Example:",
    "  gifter --mode=ascii --styles=ascii2 --width=80 --height=40 path/to/file.gif",
    "  gifter --mode=graphic https://example.com/animation.gif",
    "  gifter --mode=graphic --height=120 --width=90 https://example.com/animation.gif",
)


def _build_parser(defaults: Options) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gifter", add_help=False, allow_abbrev=False)
    parser.add_argument("-help", "--help", dest="help", action="store_true")
    parser.add_argument("-s", "--s", dest="styles", default=defaults.styles)
    parser.add_argument("-m", "--m", "-mode", "--mode", dest="mode", default=defaults.mode)
    parser.add_argument("-w", "--w", "-width", "--width", dest="width", type=int, default=defaults.width)
    parser.add_argument(
        "-h", "--h", "-height", "--height", dest="height", type=int, default=defaults.height
    )
    parser.add_argument("-c", "--c", "-color", "--color", dest="color", action="store_true")
    parser.add_argument("paths", nargs="*")
    return parser


def print_help() -> str:
    """Write usage information to standard output and return it."""
    text = "\n".join(_HELP_LINES) + "\n"
    sys.stdout.write(text)
    return text


def main(argv: list[str] | None = None) -> int:
    """Run the viewer and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    ns = _build_parser(Options()).parse_args(args)

    if ns.help:
        print_help()
        return 0

    opts = Options(
        file_path=ns.paths[0] if ns.paths else "",
        styles=ns.styles,
        mode=ns.mode,
        width=ns.width,
        height=ns.height,
        color=ns.color,
    )
    if not opts.file_path:
        print("Error: <file_path>.gif is required")
        print_help()
        return 1

    print(f"Processing file: {opts.file_path}")

    lowered = opts.file_path.lower()
    if not lowered.endswith(".gif") and not lowered.startswith(("http://", "https://")):
        print("Error: Input must be a .gif file or a URL starting with http:// or https://")
        return 1

    if opts.mode not in ("ascii", "graphic"):
        print(f"Error: Invalid mode \"{opts.mode}\". Must be 'ascii' or 'graphic'")
        return 1

    if not opts.styles and opts.mode == "ascii":
        print("Using default styles: ascii2")
        opts.styles = "ascii2"

    if opts.width < 0 or opts.height < 0:
        print("Error: Width and height must be positive")
        return 1

    try:
        execute(opts)
    except (OSError, ValueError, DownloadError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())