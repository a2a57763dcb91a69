"""
URL comparison predicates.

Every function here is total: a string that fails to parse never raises,
it makes the predicate return False (or None for get_origin).
"""

import logging
from typing import Optional

from ..domains import DEFAULT_SUFFIX_TABLE, is_tld_plus_one_domain, root_domain
from ..parsing import URLParseError, parse_url, try_parse_url
from .normalizer import rewrite_chrome_internal_url

logger = logging.getLogger(__name__)

INVALID_URL_DEBUG_STRING = (
    "Unable to determine the URL of some script executions. "
    "It's possible a Chrome extension or other eval'd code is the source."
)


def is_valid(url: str) -> bool:
    """Check whether a string parses as a URL."""
    return try_parse_url(url) is not None


def hosts_match(url_a: str, url_b: str) -> bool:
    """Check whether two URLs have the same host (hostname and port)."""
    try:
        return parse_url(url_a).host == parse_url(url_b).host
    except URLParseError as e:
        logger.debug(f"hosts_match: {e}")
        return False


def origins_match(url_a: str, url_b: str) -> bool:
    """Check whether two URLs have the same origin."""
    try:
        return parse_url(url_a).origin == parse_url(url_b).origin
    except URLParseError as e:
        logger.debug(f"origins_match: {e}")
        return False


def get_origin(url: str) -> Optional[str]:
    """
    Get the origin of a URL.

    Schemes such as data: and file: have the opaque origin "null", which is
    not useful to callers, so a URL without a host yields None.

    Args:
        url: Raw URL string

    Returns:
        Serialized origin (e.g. "https://example.com:8443"), or None
    """
    parsed = try_parse_url(url)
    if parsed is None:
        return None

    return (parsed.host and parsed.origin) or None


def root_domains_match(url_a: str, url_b: str) -> bool:
    """
    Check whether two URLs share a root (registrable) domain.

    "www.example.com" and "cdn.example.com" match; for TLDs with second-level
    suffixes three labels are compared, so "a.example.co.uk" and
    "b.example.co.uk" match but "example.co.uk" and "other.co.uk" do not.

    Args:
        url_a: First URL
        url_b: Second URL

    Returns:
        True if both root domains are identical
    """
    try:
        parsed_a = parse_url(url_a)
        parsed_b = parse_url(url_b)
    except URLParseError as e:
        logger.debug(f"root_domains_match: {e}")
        return False

    if not parsed_a.hostname or not parsed_b.hostname:
        return False

    root_a = root_domain(
        parsed_a.hostname, is_tld_plus_one_domain(url_a, DEFAULT_SUFFIX_TABLE)
    )
    root_b = root_domain(
        parsed_b.hostname, is_tld_plus_one_domain(url_b, DEFAULT_SUFFIX_TABLE)
    )

    return root_a == root_b


def equal_with_excluded_fragments(url_a: str, url_b: str) -> bool:
    """
    Check whether two URLs are equal, ignoring fragments.

    chrome:// URLs are rewritten to their canonical form first.
    """
    url_a = rewrite_chrome_internal_url(url_a)
    url_b = rewrite_chrome_internal_url(url_b)

    try:
        parsed_a = parse_url(url_a).without_fragment()
        parsed_b = parse_url(url_b).without_fragment()
    except URLParseError as e:
        logger.debug(f"equal_with_excluded_fragments: {e}")
        return False

    return parsed_a.href == parsed_b.href
