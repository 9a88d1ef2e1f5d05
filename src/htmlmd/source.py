"""Reading HTML from bytes and files, writing Markdown files."""

import codecs
import logging
import re
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)

_CHARSET_PATTERN = re.compile(rb"""charset=["']?([^"'\s>;/]+)""", re.IGNORECASE)


def detect_encoding(data: bytes) -> str:
    """
    Detect character encoding of an HTML document.

    A byte order mark wins; otherwise the first charset= declaration in
    the first 2 KiB is used. Defaults to UTF-8.
    """
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding

    match = _CHARSET_PATTERN.search(data[:2048])
    if match:
        return match.group(1).decode("ascii", errors="ignore").strip() or "utf-8"
    return "utf-8"


def decode_html(data: bytes, encoding: Optional[str] = None) -> str:
    """
    Decode raw HTML bytes to text.

    Args:
        data: Raw HTML bytes
        encoding: Encoding to use instead of detecting one

    Returns:
        Decoded text; undecodable bytes become U+FFFD
    """
    encoding = encoding or detect_encoding(data)
    try:
        return data.decode(encoding, errors="replace")
    except LookupError:
        logger.warning(f"Unknown encoding {encoding!r}, decoding as UTF-8")
        return data.decode("utf-8", errors="replace")


def read_html(path: Union[str, Path], encoding: Optional[str] = None) -> str:
    """Read and decode an HTML file."""
    path = Path(path)
    data = path.read_bytes()
    logger.debug(f"Read {len(data)} bytes from {path}")
    return decode_html(data, encoding)


def write_markdown(path: Union[str, Path], markdown: str) -> Path:
    """Write Markdown as UTF-8, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(markdown, encoding="utf-8")
    logger.debug(f"Wrote {len(markdown)} characters to {path}")
    return path
