"""
Human-readable URL rendering.

Shortens URLs for display in audit results: trims the path to its last few
segments, elides hash-like tokens and long numbers, and caps the length.
"""

import re
from typing import Optional

from pydantic import BaseModel, Field

from .config import get_config
from .parsing import ParsedURL, try_parse_url

ELLIPSIS = "…"

# Hash-like tokens are cut down to a short recognizable prefix
_HEX_HASH_RE = re.compile(r"([a-f0-9]{7})[a-f0-9]{13}[a-f0-9]*")
_MIXED_TOKEN_RE = re.compile(r"([a-zA-Z0-9\-_]{9})(?:[a-zA-Z0-9\-_]{10,})")
_LONG_NUMBER_RE = re.compile(r"(\d{3})\d{6,}")
_ELLIPSES_RE = re.compile(f"{ELLIPSIS}+")


class DisplayNameOptions(BaseModel):
    """Options for get_url_display_name."""

    num_path_parts: Optional[int] = Field(
        None,
        description="Trailing path segments to keep (default from config, 0 keeps all)",
    )
    preserve_query: bool = Field(True, description="Keep the query string")
    preserve_host: bool = Field(False, description="Prefix the host")


def format_display_name(
    parsed: ParsedURL, options: Optional[DisplayNameOptions] = None
) -> str:
    """
    Render a parsed URL as a short display name.

    Args:
        parsed: Parsed URL
        options: Formatting options

    Returns:
        Display string, at most display.max_length characters
    """
    options = options or DisplayNameOptions()
    display_config = get_config().display

    num_path_parts = options.num_path_parts
    if num_path_parts is None:
        num_path_parts = display_config.default_num_path_parts

    if parsed.scheme in ("about", "data"):
        name = parsed.href
    else:
        name = parsed.pathname
        parts = [part for part in name.split("/") if part]
        if num_path_parts and len(parts) > num_path_parts:
            name = ELLIPSIS + "/".join(parts[-num_path_parts:])

        if options.preserve_host:
            name = f"{parsed.host}/{name[1:] if name.startswith('/') else name}"

        if options.preserve_query:
            name = f"{name}{parsed.search}"

    name = _HEX_HASH_RE.sub(rf"\1{ELLIPSIS}", name)
    name = _MIXED_TOKEN_RE.sub(rf"\1{ELLIPSIS}", name)
    name = _LONG_NUMBER_RE.sub(rf"\1{ELLIPSIS}", name)
    name = _ELLIPSES_RE.sub(ELLIPSIS, name)

    return _truncate(name, display_config.max_length)


def _truncate(name: str, max_length: int) -> str:
    """Elide the query first, then the middle of the name keeping the extension."""
    if len(name) > max_length and "?" in name:
        name = re.sub(r"\?([^=]*)(=)?.*", rf"?\1\2{ELLIPSIS}", name, count=1)
        if len(name) > max_length:
            name = re.sub(r"\?.*", f"?{ELLIPSIS}", name, count=1)

    if len(name) > max_length:
        dot_index = name.rfind(".")
        if dot_index >= 0:
            keep = max(max_length - 1 - (len(name) - dot_index), 0)
            name = name[:keep] + ELLIPSIS + name[dot_index:]
        else:
            name = name[: max_length - 1] + ELLIPSIS

    return name


def get_url_display_name(url: str, options: Optional[DisplayNameOptions] = None) -> str:
    """
    Render a URL string as a short display name.

    Returns the input unchanged if it cannot be parsed.
    """
    parsed = try_parse_url(url)
    if parsed is None:
        return url

    return format_display_name(parsed, options)


def elide_data_uri(url: str) -> str:
    """
    Limit data: URIs to display.data_uri_max_length characters.

    Any other string, parseable or not, is returned untouched.
    """
    parsed = try_parse_url(url)
    if parsed is None or parsed.scheme != "data":
        return url
    return url[: get_config().display.data_uri_max_length]
