#!/usr/bin/env python3
"""
Run the freshness audit on the article export and print a summary.

Usage:
    python scripts/audit_freshness.py
    python scripts/audit_freshness.py --csv exports/articles.csv --output-dir outputs
"""

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv
load_dotenv()

from content_freshness import config
from content_freshness.collection.pipeline import load_articles_from_csv
from content_freshness.errors import ArticleSourceError
from content_freshness.output.exports import export_all
from content_freshness.output.report import format_summary, get_freshness_summary


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score blog articles for editorial freshness")
    parser.add_argument(
        "--csv",
        default=config.ARTICLES_CSV_PATH,
        help=f"Article export to audit (default: {config.ARTICLES_CSV_PATH})",
    )
    parser.add_argument(
        "--output-dir",
        help="Write CSV/JSON exports to this directory",
    )
    parser.add_argument(
        "--as-of",
        help="Reference date YYYY-MM-DD (default: now)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped rows")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    now = None
    if args.as_of:
        now = datetime.strptime(args.as_of, "%Y-%m-%d").replace(tzinfo=timezone.utc)

    try:
        collection = load_articles_from_csv(args.csv, now=now)
    except ArticleSourceError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1

    print(format_summary(get_freshness_summary(collection.articles)))

    if args.output_dir:
        paths = export_all(collection, args.output_dir)
        print(f"\nCreated {len(paths)} files in {args.output_dir}")
        for path in paths:
            print(f"  - {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
