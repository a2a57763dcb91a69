"""
Internal-page URL rewriting.

Chrome lets a chrome:// page pushState its way to a different chrome:// URL,
so the settings page is requested as chrome://chrome/settings/ but reports
chrome://settings as its document URL. Rewriting both to the short form
lets them compare equal.
"""

from typing import Optional

CHROME_SCHEME_PREFIX = "chrome://"
NESTED_CHROME_PREFIX = "chrome://chrome/"


def rewrite_chrome_internal_url(url: Optional[str]) -> Optional[str]:
    """
    Collapse a chrome:// URL to its canonical short form.

    Args:
        url: Raw URL string (None and non-chrome URLs are returned as-is)

    Returns:
        URL without a trailing slash or a nested "chrome/" segment
    """
    if not url or not url.startswith(CHROME_SCHEME_PREFIX):
        return url

    # Chrome serializes these with a trailing slash, the URL standard does not
    if url.endswith("/"):
        url = url[:-1]

    if url.startswith(NESTED_CHROME_PREFIX):
        url = CHROME_SCHEME_PREFIX + url[len(NESTED_CHROME_PREFIX) :]

    return url
