"""
urlmatch: URL comparison and root-domain classification for page audits.

Decides whether two observed URLs refer to the same host, origin, root
domain, or document (ignoring fragments).
"""

from .comparison import (
    INVALID_URL_DEBUG_STRING,
    equal_with_excluded_fragments,
    get_origin,
    hosts_match,
    is_valid,
    origins_match,
    rewrite_chrome_internal_url,
    root_domains_match,
)
from .display import DisplayNameOptions, elide_data_uri, get_url_display_name
from .parsing import ParsedURL, SearchParams, URLParseError, parse_url

__all__ = [
    "is_valid",
    "hosts_match",
    "origins_match",
    "get_origin",
    "root_domains_match",
    "equal_with_excluded_fragments",
    "rewrite_chrome_internal_url",
    "elide_data_uri",
    "get_url_display_name",
    "DisplayNameOptions",
    "parse_url",
    "ParsedURL",
    "URLParseError",
    "SearchParams",
    "INVALID_URL_DEBUG_STRING",
]
