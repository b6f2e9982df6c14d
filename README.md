# gifter

Play animated GIFs in your terminal, either as ASCII art (optionally in
24-bit colour) or as real images through the Kitty graphics protocol.

## Installation

```
pip install .
```

## Usage

```
gifter [options] <file_path>.gif | <URL>
```

The input is either a local file whose name ends in `.gif` or an `http://` /
`https://` URL. A URL must answer with status 200 and a `Content-Type` that
contains `image/gif`.

### Options

| Option                          | Meaning                                                         | Default  |
|---------------------------------|-----------------------------------------------------------------|----------|
| `-m`, `-mode`, `--mode MODE`    | Output mode: `ascii` or `graphic`                               | `ascii`  |
| `-s`, `--s STYLE`               | ASCII style: `normal`, `ascii2`, `shaded`, `bordered`, `blocky` | `ascii2` |
| `-w`, `-width`, `--width WIDTH` | Output width                                                    | `90`     |
| `-h`, `-height`, `--height HEIGHT` | Output height                                                | `90`     |
| `-c`, `-color`, `--color`       | Colour each ASCII character with its pixel's colour             | off      |
| `-help`, `--help`               | Show the help message                                           |          |

Note that `-h` sets the height; use `--help` for help. Options with a value
may also be written as `--width=80`.

An unknown style falls back to `ascii2` with a warning. Each frame is first
scaled to WIDTH x HEIGHT; in ASCII mode one character then stands for a 2x2
block, so `-w 80 -h 40` gives 40 columns by 20 rows of text.

The command exits with status 1 when no input is given, when the input is
neither a `.gif` file nor an `http(s)` URL, when the mode is not `ascii` or
`graphic`, when a width or height is negative, or when the GIF cannot be
opened, downloaded or decoded.

### Examples

```
gifter -s ascii2 --width=80 --height=40 path/to/file.gif
gifter -w 80 -h 40 -c -s shaded example.gif
gifter --mode=graphic --height=120 --width=90 https://example.com/animation.gif
```

Graphic mode needs a terminal that understands the Kitty graphics protocol.
It draws a small red test square first and stops with status 1 if that fails.

### Timing and looping

Each frame is shown for its own delay, but never less than 50 ms. A GIF
marked to loop forever plays until you press Ctrl+C; one with a loop count
of N plays N passes. A GIF without a looping extension plays no passes.

## Using it from Python

```python
from gifter.processor import Options, execute

execute(Options(file_path="example.gif", width=80, height=40, color=True, styles="shaded"))
```

The pieces are also usable on their own:

- `gifter.animation.decode_gif(data)` turns GIF bytes into an `Animation`
  (`frames`, `delays` in milliseconds, `loop_count`); it raises `ValueError`
  for data that is not a GIF. `resize_image(img, width, height)` scales with
  nearest-neighbour sampling.
- `gifter.ascii.image_to_ascii(img, context)` renders one image as text using
  a `gifter.processor.Context`; `context_from_options(opts)` builds one.
- `gifter.graphic.display_image(stream, img, width, height, image_id)` and
  `kitty_write_png(...)` write Kitty graphics escape sequences to a text
  stream; `probe_graphics(stream)` draws the test square.
- `gifter.httpclient.download_gif(url)` fetches and decodes a GIF, raising
  `DownloadError` on failure.
- `gifter.processor.display_gif(animation, context)` plays an `Animation`
  on standard output.

## Running the tests

```
pip install .[test]
pytest
```