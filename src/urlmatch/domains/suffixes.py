"""
Second-level public suffix exceptions.

Some country-code TLDs are not registrable directly below the TLD: names are
registered under a second-level suffix instead (example.co.uk, example.ac.nz).
This table lists those suffixes for a fixed set of TLDs. It is an
approximation of the Public Suffix List, not a replacement for it: any TLD
missing here is treated as having a two-label registrable domain.
"""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

TLD_PLUS_ONE_EXCEPTIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "ar": ("com", "edu", "gob", "int", "mil", "mar", "net", "org", "tur", "musica"),
        "at": ("co", "or", "priv", "ac"),
        "fr": ("avocat", "aeroport", "veterinaire"),
        "nz": ("ac", "co", "school", "cri", "govt", "mil", "parliament"),
        "il": ("org", "k12", "gov", "muni", "idf"),
        "ru": ("com", "edu", "gob", "int", "mil", "mar", "net", "org", "tur", "musica"),
        "za": ("ac", "gov", "law", "mil", "nom", "school", "net"),
        "kr": (
            "ac", "co", "es", "go", "hs", "kg", "mil", "ms", "ne", "or", "pe", "re",
            "sc", "busan", "chungbuk", "chungnam", "daegu", "daejeon", "gangwon",
            "gwangju", "gyeongbuk", "gyeonggi", "gyeongnam", "incheon", "jeju",
            "jeonbuk", "jeonnam", "seoul", "ulsan",
        ),
        "es": ("org", "gob"),
        "tr": (
            "com", "info", "biz", "net", "org", "web", "gen", "tv", "av", "dr",
            "bbs", "name", "tel", "gov", "bel", "pol", "mil", "k12", "edu", "kep",
            "nc", "gov.nc",
        ),
        "ua": ("gov", "com", "in", "org", "net", "edu"),
        "uk": (
            "co", "org", "me", "ltd", "plc", "net", "sch", "ac", "gov", "mod",
            "mil", "nhs", "police",
        ),
    }
)


class SuffixExceptionTable:
    """
    Read-only lookup of second-level suffix exceptions by TLD.

    Usage:
        table = SuffixExceptionTable()
        table.lookup("uk")   # ("co", "org", ...)
        table.lookup("com")  # None
    """

    def __init__(self, exceptions: Optional[Mapping[str, Tuple[str, ...]]] = None):
        """
        Args:
            exceptions: TLD -> second-level labels (default: built-in table)
        """
        if exceptions is None:
            exceptions = TLD_PLUS_ONE_EXCEPTIONS
        self._exceptions = MappingProxyType(
            {tld: tuple(labels) for tld, labels in exceptions.items()}
        )

    def lookup(self, tld: str) -> Optional[Tuple[str, ...]]:
        """
        Get the second-level suffix labels for a TLD.

        Args:
            tld: Top-level domain label without dots (e.g. "uk")

        Returns:
            Tuple of labels in table order, or None for standard TLDs
        """
        return self._exceptions.get(tld)

    def tlds(self) -> Iterator[str]:
        return iter(self._exceptions)

    def __contains__(self, tld: str) -> bool:
        return tld in self._exceptions

    def __len__(self) -> int:
        return len(self._exceptions)


DEFAULT_SUFFIX_TABLE = SuffixExceptionTable()
