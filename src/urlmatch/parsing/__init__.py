"""
URL and query-string parsing.

Provides the parsed-URL value that every comparison is built on.
"""

from .search_params import SearchParams
from .url_parser import (
    DEFAULT_PORTS,
    ParsedURL,
    URLParseError,
    parse_url,
    try_parse_url,
)

__all__ = [
    "parse_url",
    "try_parse_url",
    "ParsedURL",
    "URLParseError",
    "SearchParams",
    "DEFAULT_PORTS",
]
