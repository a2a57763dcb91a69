"""
Root-domain classification.

Decides how many trailing labels of a hostname make up its registrable
("root") domain: two by default, three when the hostname sits under a
second-level public suffix listed in the exception table.
"""

import re
from typing import Optional

from ..config import get_config
from ..parsing import try_parse_url
from .suffixes import DEFAULT_SUFFIX_TABLE, SuffixExceptionTable


def _exception_pattern(labels, tld: str, anchored: bool) -> "re.Pattern[str]":
    alternation = "|".join(re.escape(label) for label in labels)
    pattern = rf"\.({alternation})\.{re.escape(tld)}"
    if anchored:
        pattern += "$"
    return re.compile(pattern)


def is_tld_plus_one_domain(
    url: str,
    table: SuffixExceptionTable = DEFAULT_SUFFIX_TABLE,
    hostname_only: Optional[bool] = None,
) -> bool:
    """
    Check whether a URL's host is registered under a second-level suffix.

    By default the exception pattern (".co.uk", ".ac.nz", ...) is searched for
    anywhere in the URL string, so a matching path or query also counts.
    With hostname_only the pattern must end the parsed hostname.

    Args:
        url: Raw URL string
        table: Suffix exception lookup
        hostname_only: Restrict matching to the hostname (default: from config)

    Returns:
        True if the root domain should use three labels
    """
    parsed = try_parse_url(url)
    if parsed is None or not parsed.hostname:
        return False

    tld = parsed.hostname.split(".")[-1]
    labels = table.lookup(tld)
    if not labels:
        return False

    if hostname_only is None:
        hostname_only = get_config().domain.hostname_only_tld_match

    if hostname_only:
        return bool(_exception_pattern(labels, tld, anchored=True).search(parsed.hostname))
    return bool(_exception_pattern(labels, tld, anchored=False).search(url))


def root_domain(hostname: str, tld_plus_one: bool = False) -> str:
    """
    Get the root domain of a hostname.

    Args:
        hostname: Parsed hostname (e.g. "www.example.co.uk")
        tld_plus_one: Whether the TLD uses a second-level suffix

    Returns:
        Last 3 labels if tld_plus_one, else last 2 (e.g. "example.co.uk")
    """
    labels = hostname.split(".")
    return ".".join(labels[-3:] if tld_plus_one else labels[-2:])
