"""Fetching GIF animations over HTTP."""

from __future__ import annotations

import urllib.error
import urllib.request

from gifter.animation import Animation, decode_gif


class DownloadError(Exception):
    """A GIF could not be fetched or decoded from a URL."""


def download_gif(url: str) -> Animation:
    """Download and decode the GIF at ``url``."""
    try:
        with urllib.request.urlopen(url) as resp:
            if resp.status != 200:
                raise DownloadError(f"Unexpected status code {resp.status} for {url}")
            content_type = resp.headers.get("Content-Type", "")
            if "image/gif" not in content_type:
                raise DownloadError(
                    f"URL {url} does not point to a GIF (Content-Type: {content_type})"
                )
            try:
                data = resp.read()
            except OSError as exc:
                raise DownloadError(f"Error reading GIF data from {url}: {exc}") from exc
    except urllib.error.HTTPError as exc:
        raise DownloadError(f"Unexpected status code {exc.code} for {url}") from exc
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise DownloadError(f"Error fetching GIF from {url}: {exc}") from exc

    try:
        return decode_gif(data)
    except ValueError as exc:
        raise DownloadError(f"Error decoding GIF from {url}: {exc}") from exc