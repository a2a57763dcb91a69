"""
URL Comparison

Compare two URLs under every notion of sameness urlmatch supports.

Usage:
    python examples/compare_urls.py https://a.example.co.uk/x https://b.example.co.uk/y
    python examples/compare_urls.py chrome://chrome/settings/ chrome://settings
    python examples/compare_urls.py --display https://example.com/a/b/c/app.js?v=1
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from urlmatch import (  # noqa: E402
    elide_data_uri,
    equal_with_excluded_fragments,
    get_origin,
    get_url_display_name,
    hosts_match,
    is_valid,
    origins_match,
    root_domains_match,
)
from urlmatch.config import get_config  # noqa: E402

logger = logging.getLogger(__name__)


def compare(url_a: str, url_b: str) -> None:
    """Print every comparison for a pair of URLs."""
    print("=" * 80)
    print(f"A: {elide_data_uri(url_a)}")
    print(f"B: {elide_data_uri(url_b)}")
    print("=" * 80)

    for label, url in (("A", url_a), ("B", url_b)):
        if not is_valid(url):
            logger.warning(f"URL {label} is not a valid URL")
        print(f"  origin({label}): {get_origin(url)}")

    print(f"  hosts match:        {hosts_match(url_a, url_b)}")
    print(f"  origins match:      {origins_match(url_a, url_b)}")
    print(f"  root domains match: {root_domains_match(url_a, url_b)}")
    print(f"  equal (no #frag):   {equal_with_excluded_fragments(url_a, url_b)}")


def main():
    parser = argparse.ArgumentParser(description="Compare URLs")
    parser.add_argument("urls", nargs="+", help="URLs to compare (pairs) or display")
    parser.add_argument(
        "--display", action="store_true", help="Print display names instead"
    )
    parser.add_argument(
        "--path-parts", type=int, default=None, help="Path segments in display names"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=get_config().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.display:
        from urlmatch import DisplayNameOptions

        options = DisplayNameOptions(num_path_parts=args.path_parts)
        for url in args.urls:
            print(f"{url} -> {get_url_display_name(url, options)}")
        return 0

    if len(args.urls) != 2:
        parser.error("exactly two URLs are required for comparison")

    compare(args.urls[0], args.urls[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())
