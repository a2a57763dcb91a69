"""
URL comparison.

Predicates for host, origin, root-domain and fragment-insensitive equality.
"""

from .normalizer import rewrite_chrome_internal_url
from .predicates import (
    INVALID_URL_DEBUG_STRING,
    equal_with_excluded_fragments,
    get_origin,
    hosts_match,
    is_valid,
    origins_match,
    root_domains_match,
)

__all__ = [
    "is_valid",
    "hosts_match",
    "origins_match",
    "get_origin",
    "root_domains_match",
    "equal_with_excluded_fragments",
    "rewrite_chrome_internal_url",
    "INVALID_URL_DEBUG_STRING",
]
