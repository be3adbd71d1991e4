"""
Shared pytest fixtures for Freshness Audit tests.

This module provides common fixtures used across test files:
- A pinned reference instant
- Sample export rows and a CSV writer
- An ArticleRecord factory
"""

import csv
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add src to path for package imports
PROJECT_ROOT = Path(__file__).parent.parent
SRC_ROOT = PROJECT_ROOT / "src"
sys.path.insert(0, str(SRC_ROOT))

from content_freshness.models import ArticleRecord, ContentType, Freshness


REFERENCE_NOW = datetime(2025, 6, 15, tzinfo=timezone.utc)

EXPORT_HEADER = ["Post title", "Post URL", "Publish date", "Categories", "Tags"]


# =============================================================================
# TIME FIXTURES
# =============================================================================

@pytest.fixture
def now():
    """Reference instant all age calculations are pinned to."""
    return REFERENCE_NOW


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_rows():
    """Export rows covering the main content types, in file order."""
    return [
        {
            "Post title": "What is a Stablecoin? A Beginner's Guide",
            "Post URL": "https://example.com/blog/what-is-a-stablecoin",
            "Publish date": "1 Aug 2024",
            "Categories": "",
            "Tags": "",
        },
        {
            "Post title": "How to Buy Crypto in 2023",
            "Post URL": "https://example.com/blog/how-to-buy-crypto-2023",
            "Publish date": "01/10/2023",
            "Categories": "",
            "Tags": "",
        },
        {
            "Post title": "Transak Partners with MetaMask to Launch New Feature",
            "Post URL": "https://example.com/blog-old/transak-metamask",
            "Publish date": "1 Dec 2022",
            "Categories": "",
            "Tags": "",
        },
        {
            "Post title": "Ethereum Price Prediction 2024",
            "Post URL": "https://example.com/blog/eth-price-prediction-2024",
            "Publish date": "2024-04-01",
            "Categories": "",
            "Tags": "",
        },
    ]


@pytest.fixture
def write_export(tmp_path):
    """Write rows to a CSV export and return its path."""
    def _write(rows, header=None, name="articles.csv"):
        header = header or EXPORT_HEADER
        path = tmp_path / name
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=header, extrasaction="ignore")
            writer.writeheader()
            for row in rows:
                writer.writerow(row)
        return path
    return _write


@pytest.fixture
def make_article():
    """Factory for ArticleRecord with sensible defaults."""
    def _make(**overrides):
        fields = {
            "id": 0,
            "title": "What is DeFi?",
            "url": "https://example.com/blog/what-is-defi",
            "publish_date": "2024-01-15",
            "publish_timestamp": 1705276800000,
            "categories": ("Learning Hub",),
            "tags": ("DeFi",),
            "age_months": 5,
            "content_type": ContentType.EVERGREEN,
            "freshness": Freshness.FRESH,
            "reasoning": "Evergreen explainer — concepts don't expire quickly",
        }
        fields.update(overrides)
        return ArticleRecord(**fields)
    return _make
