"""
Registrable-domain classification.

Handles the second-level suffix exception table and root-domain derivation.
"""

from .classifier import is_tld_plus_one_domain, root_domain
from .suffixes import DEFAULT_SUFFIX_TABLE, TLD_PLUS_ONE_EXCEPTIONS, SuffixExceptionTable

__all__ = [
    "SuffixExceptionTable",
    "DEFAULT_SUFFIX_TABLE",
    "TLD_PLUS_ONE_EXCEPTIONS",
    "is_tld_plus_one_domain",
    "root_domain",
]
