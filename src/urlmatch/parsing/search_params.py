"""
Query-string parsing.

Provided for callers that need to inspect query parameters of audited URLs;
the comparison predicates do not use it.
"""

from typing import Iterator, List, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

from .url_parser import parse_url


class SearchParams:
    """
    Ordered, multi-valued view of a query string.

    Usage:
        params = SearchParams("?b=2&a=1&b=3")
        params.get("b")      # "2"
        params.get_all("b")  # ["2", "3"]
        str(params.sorted()) # "a=1&b=2&b=3"
    """

    def __init__(self, query: str = ""):
        if query.startswith("?"):
            query = query[1:]
        self._pairs: List[Tuple[str, str]] = parse_qsl(query, keep_blank_values=True)

    @classmethod
    def from_url(cls, url: str) -> "SearchParams":
        """
        Build from the query component of a URL.

        Raises:
            URLParseError: If the URL cannot be parsed
        """
        return cls(parse_url(url).query)

    def get(self, name: str) -> Optional[str]:
        """Get the first value for a name, or None."""
        for key, value in self._pairs:
            if key == name:
                return value
        return None

    def get_all(self, name: str) -> List[str]:
        return [value for key, value in self._pairs if key == name]

    def has(self, name: str) -> bool:
        return any(key == name for key, _ in self._pairs)

    def keys(self) -> List[str]:
        return [key for key, _ in self._pairs]

    def items(self) -> List[Tuple[str, str]]:
        return list(self._pairs)

    def sorted(self) -> "SearchParams":
        """Return a copy ordered by name; values of one name keep their order."""
        result = SearchParams()
        result._pairs = sorted(self._pairs, key=lambda pair: pair[0])
        return result

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __str__(self) -> str:
        return urlencode(self._pairs)

    def __repr__(self) -> str:
        return f"SearchParams({str(self)!r})"
