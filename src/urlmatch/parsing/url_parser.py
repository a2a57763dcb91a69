"""
URL parsing.

Wraps urllib.parse with the stricter rules of a browser URL parser:
- A scheme is required ("example.com" alone is not a URL)
- Network schemes must carry a host
- Hosts are lowercased and converted to punycode
- Default ports are dropped and origins are derived from scheme + host
- Network paths have dot segments resolved and are percent-encoded
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import Optional
from urllib.parse import quote, urlsplit

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")

# Characters a browser refuses inside a host
_FORBIDDEN_HOST_CHARS = frozenset(" <>^|%\\\t\n\r\x00")

# Characters left as-is when percent-encoding paths and queries
_PATH_SAFE_CHARS = "/%:@!$&'()*+,;=~[]|^"
_QUERY_SAFE_CHARS = "/?%:@!$&()*+,;=~[]|^`{}\\"

# Default ports for network schemes
DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ftp": 21,
    "ws": 80,
    "wss": 443,
}


class URLParseError(ValueError):
    """Raised when a string is not a syntactically valid URL."""


@dataclass(frozen=True)
class ParsedURL:
    """
    Parsed URL components.

    Attributes:
        scheme: Lowercase scheme without the trailing colon
        username: User name from the authority, or empty
        password: Password from the authority, or empty
        hostname: Lowercase host without port (punycode for IDN)
        port: Port number (None if absent or default for scheme)
        path: Path component
        query: Query string without the leading "?"
        fragment: Fragment without the leading "#"
        has_authority: Whether the URL was written with "//"
        has_query: Whether the URL contained "?", even with an empty query
    """

    scheme: str
    username: str
    password: str
    hostname: str
    port: Optional[int]
    path: str
    query: str
    fragment: str
    has_authority: bool
    has_query: bool = False

    # Schemes whose origin is a (scheme, host, port) tuple
    NETWORK_SCHEMES = ("http", "https", "ftp", "ws", "wss")

    @property
    def protocol(self) -> str:
        return f"{self.scheme}:"

    @property
    def host(self) -> str:
        """Hostname plus the port, when one is set."""
        if self.port is not None:
            return f"{self.hostname}:{self.port}"
        return self.hostname

    @property
    def origin(self) -> str:
        """Serialized origin, or "null" for opaque origins (data:, file:, ...)."""
        if self.scheme == "blob":
            # blob: URLs take the origin of the URL they wrap
            inner = try_parse_url(self.path)
            if inner is not None and inner.scheme in ("http", "https"):
                return inner.origin
            return "null"

        if self.scheme in self.NETWORK_SCHEMES and self.hostname:
            return f"{self.scheme}://{self.host}"
        return "null"

    @property
    def pathname(self) -> str:
        return self.path

    @property
    def search(self) -> str:
        return f"?{self.query}" if self.query else ""

    @property
    def hash(self) -> str:
        return f"#{self.fragment}" if self.fragment else ""

    @property
    def href(self) -> str:
        """Serialize back to a full URL string."""
        result = self.protocol
        if self.has_authority:
            userinfo = ""
            if self.username or self.password:
                userinfo = self.username
                if self.password:
                    userinfo = f"{userinfo}:{self.password}"
                userinfo += "@"
            result = f"{result}//{userinfo}{self.host}"

        query = f"?{self.query}" if self.has_query or self.query else ""
        return f"{result}{self.path}{query}{self.hash}"

    def without_fragment(self) -> "ParsedURL":
        """Return a copy with the fragment cleared."""
        return replace(self, fragment="")

    def __str__(self) -> str:
        return self.href


def parse_url(url: str) -> ParsedURL:
    """
    Parse a URL string.

    Args:
        url: Raw URL string

    Returns:
        ParsedURL with scheme, host and path normalized

    Raises:
        URLParseError: If the string is not a valid URL
    """
    if not url or not isinstance(url, str):
        raise URLParseError(f"Invalid URL: {url!r}")

    url = url.strip()
    match = _SCHEME_RE.match(url)
    if not match:
        raise URLParseError(f"Invalid URL: {url!r} (missing scheme)")

    scheme = match.group(0)[:-1].lower()
    is_network = scheme in ParsedURL.NETWORK_SCHEMES
    if is_network:
        url = _normalize_authority_slashes(url, len(scheme) + 1)

    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError as e:
        raise URLParseError(f"Failed to parse URL {url!r}: {e}") from e

    hostname = _normalize_hostname(parts.hostname, url)

    if is_network and not hostname:
        raise URLParseError(f"Invalid URL: {url!r} (missing host)")

    if port is not None and port == DEFAULT_PORTS.get(scheme):
        port = None

    path = parts.path
    query = parts.query
    if is_network:
        path = _normalize_path(path)
        query = quote(query, safe=_QUERY_SAFE_CHARS)

    return ParsedURL(
        scheme=scheme,
        username=parts.username or "",
        password=parts.password or "",
        hostname=hostname,
        port=port,
        path=path,
        query=query,
        fragment=parts.fragment,
        has_authority=url[len(scheme) + 1 :].startswith("//"),
        has_query="?" in url.split("#", 1)[0],
    )


def _normalize_authority_slashes(url: str, scheme_end: int) -> str:
    """
    Rewrite the slashes after "scheme:" to exactly "//".

    Browsers read "\\" as "/" before the query in network URLs and accept
    any number of slashes, so "http:example.com" and "https:\\\\a.com\\x"
    are both valid.
    """
    rest = url[scheme_end:]
    end = len(rest)
    for marker in ("?", "#"):
        index = rest.find(marker)
        if index >= 0:
            end = min(end, index)

    rest = rest[:end].replace("\\", "/") + rest[end:]
    return url[:scheme_end] + "//" + rest.lstrip("/")


def _normalize_path(path: str) -> str:
    """
    Normalize path: resolve ./ and ../, percent-encode disallowed characters.

    Empty segments are kept, so "/a//b" stays as it is.
    """
    if not path:
        return "/"

    segments = path.split("/")[1:]
    normalized = []
    for index, segment in enumerate(segments):
        is_last = index == len(segments) - 1
        if segment == "..":
            if normalized:
                normalized.pop()
            if is_last:
                normalized.append("")
        elif segment == ".":
            if is_last:
                normalized.append("")
        else:
            normalized.append(segment)

    return quote("/" + "/".join(normalized), safe=_PATH_SAFE_CHARS)


def _normalize_hostname(hostname: Optional[str], url: str) -> str:
    """
    Normalize host: lowercase and convert to punycode if needed.

    IPv6 literals keep their brackets so that host and origin serialize
    the way a browser shows them.
    """
    if not hostname:
        return ""

    if _FORBIDDEN_HOST_CHARS.intersection(hostname):
        raise URLParseError(f"Invalid URL: {url!r} (forbidden host character)")

    if ":" in hostname:
        return f"[{hostname}]"

    if not hostname.isascii():
        try:
            hostname = hostname.encode("idna").decode("ascii")
        except UnicodeError as e:
            raise URLParseError(f"Invalid URL: {url!r} (bad host: {e})") from e

    return hostname.lower()


def try_parse_url(url: str) -> Optional[ParsedURL]:
    """Parse a URL, returning None instead of raising on failure."""
    try:
        return parse_url(url)
    except URLParseError as e:
        logger.debug(f"Could not parse URL: {e}")
        return None
