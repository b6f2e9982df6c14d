"""Play animated GIFs in the terminal as ASCII art or Kitty graphics."""

__version__ = "0.1.0"