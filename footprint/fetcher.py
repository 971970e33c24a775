"""Download the emissions dataset to local storage.

A single blocking GET; the response body is streamed verbatim into the
destination file. There is no retry and no integrity check: a truncated
body only shows up later as rows the parser drops.
"""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from .errors import DestinationUnwritable, TransportFailure

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


def fetch(url: str, destination: Path, timeout: float | None = None) -> int:
    """Download *url* into *destination*, overwriting it.

    The destination is opened before the request is made, so an unwritable
    path fails fast without touching the network.

    Parameters
    ----------
    url : str
        Source URL of the CSV dataset.
    destination : Path
        Local file to create or overwrite.
    timeout : float | None
        Socket timeout in seconds. ``None`` blocks indefinitely.

    Returns
    -------
    int
        Number of bytes written.

    Raises
    ------
    DestinationUnwritable
        If *destination* cannot be opened for writing.
    TransportFailure
        On connection, DNS, TLS, or non-success HTTP status errors.
    """
    try:
        out = open(destination, "wb")
    except OSError as e:
        raise DestinationUnwritable(f"Failed to open file for writing: {destination}") from e

    written = 0
    with out:
        logger.info("Downloading %s -> %s", url, destination)
        try:
            with requests.get(url, stream=True, timeout=timeout) as response:
                response.raise_for_status()
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        out.write(chunk)
                        written += len(chunk)
        except requests.RequestException as e:
            raise TransportFailure(f"Download failed: {e}") from e
        except OSError as e:
            # RequestException is itself an OSError, so this must come second.
            raise DestinationUnwritable(f"Failed writing to {destination}: {e}") from e

    logger.info("Downloaded %s bytes", f"{written:,}")
    return written
