"""
Article pipeline for the Freshness Audit

Orchestrates one load of the article export:
1. Drop rows without title/URL, outside the blog, or with unparseable dates
2. Classify each title (categories, tags, content type)
3. Score freshness against the reference instant
4. Assign ids in file order, then sort newest first

Every call rebuilds the collection from scratch. Nothing is cached between
calls and the returned collection is immutable, so concurrent loads (e.g. a
hot reload while the dashboard renders) never see each other's state.
"""

import logging
import math
from collections import Counter
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Mapping, Optional, Union

from content_freshness import config
from content_freshness.classification.freshness import assess_freshness
from content_freshness.classification.local_classifier import classify_title
from content_freshness.collection.dates import (
    compute_age_months,
    ensure_utc,
    parse_date,
    to_epoch_millis,
    to_iso_date,
)
from content_freshness.collection.loader import read_articles_csv, split_list_cell
from content_freshness.models import ArticleRecord


logger = logging.getLogger(__name__)

SKIP_MISSING_FIELDS = "missing_title_or_url"
SKIP_OUT_OF_SCOPE = "out_of_scope_url"
SKIP_BAD_DATE = "unparseable_date"


@dataclass(frozen=True)
class ArticleCollection:
    """Result of one load: sorted articles plus their vocabularies."""

    articles: tuple[ArticleRecord, ...]
    categories: tuple[str, ...]
    tags: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.articles)

    def __iter__(self):
        return iter(self.articles)

    def to_dict(self) -> dict:
        """Payload for the dashboard."""
        return {
            "articles": [article.to_dict() for article in self.articles],
            "categories": list(self.categories),
            "tags": list(self.tags),
        }


def _cell(row: Mapping, column: str) -> str:
    value = row.get(column)
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    return str(value).strip()


def is_blog_url(url: str) -> bool:
    """Whether the URL belongs to an audited blog section."""
    return any(marker in url for marker in config.BLOG_PATH_MARKERS)


def _screen_row(row: Mapping) -> tuple[Optional[str], Optional[datetime]]:
    """(skip reason, parsed publish date); the reason is None for kept rows."""
    title = _cell(row, config.COLUMN_TITLE)
    url = _cell(row, config.COLUMN_URL)
    if not title or not url:
        return SKIP_MISSING_FIELDS, None
    if not is_blog_url(url):
        return SKIP_OUT_OF_SCOPE, None
    published = parse_date(_cell(row, config.COLUMN_PUBLISH_DATE))
    if published is None:
        return SKIP_BAD_DATE, None
    return None, published


def _build_record(row: Mapping, article_id: int, published: datetime, now: datetime) -> ArticleRecord:
    title = _cell(row, config.COLUMN_TITLE)
    url = _cell(row, config.COLUMN_URL)
    age_months = compute_age_months(published, now)

    classification = classify_title(
        title,
        explicit_categories=split_list_cell(_cell(row, config.COLUMN_CATEGORIES)),
        explicit_tags=split_list_cell(_cell(row, config.COLUMN_TAGS)),
    )
    verdict = assess_freshness(
        title, age_months, classification.content_type, current_year=now.year
    )

    return ArticleRecord(
        id=article_id,
        title=title,
        url=url,
        publish_date=to_iso_date(published),
        publish_timestamp=to_epoch_millis(published),
        categories=classification.categories,
        tags=classification.tags,
        age_months=age_months,
        content_type=classification.content_type,
        freshness=verdict.freshness,
        reasoning=verdict.reasoning,
    )


def build_article(row: Mapping, article_id: int, now: datetime) -> Optional[ArticleRecord]:
    """
    Build one ArticleRecord from an export row.

    Args:
        row: {column: value} dict from the export
        article_id: Id to assign if the row survives filtering
        now: Reference instant for age and current year

    Returns:
        ArticleRecord, or None if the row is filtered out
    """
    reason, published = _screen_row(row)
    if reason is not None:
        return None
    return _build_record(row, article_id, published, ensure_utc(now))


def get_all_categories(articles: Iterable[ArticleRecord]) -> list[str]:
    """Sorted distinct categories across articles."""
    return sorted({c for article in articles for c in article.categories})


def get_all_tags(articles: Iterable[ArticleRecord]) -> list[str]:
    """Sorted distinct tags across articles."""
    return sorted({t for article in articles for t in article.tags})


def load_articles(
    rows: Iterable[Mapping],
    now: Optional[datetime] = None,
) -> ArticleCollection:
    """
    Classify and score export rows.

    Args:
        rows: Row dicts keyed by the export's column names
        now: Reference instant (default: current UTC time)

    Returns:
        ArticleCollection sorted by publish time, newest first
    """
    now = ensure_utc(now) if now is not None else datetime.now(timezone.utc)

    articles = []
    skipped = Counter()
    for position, row in enumerate(rows):
        reason, published = _screen_row(row)
        if reason is not None:
            skipped[reason] += 1
            logger.debug("Skipping row %d: %s", position, reason)
            continue
        articles.append(_build_record(row, len(articles), published, now))

    # sorted() is stable, so equal timestamps keep file order
    articles = sorted(articles, key=lambda a: a.publish_timestamp, reverse=True)

    logger.info(
        "Loaded %d articles (skipped %d: %s)",
        len(articles),
        sum(skipped.values()),
        dict(skipped),
    )

    return ArticleCollection(
        articles=tuple(articles),
        categories=tuple(get_all_categories(articles)),
        tags=tuple(get_all_tags(articles)),
    )


def load_articles_from_csv(
    csv_path: Optional[Union[str, Path]] = None,
    now: Optional[datetime] = None,
) -> ArticleCollection:
    """
    Load, classify and score the article export.

    Raises:
        ArticleSourceError: The export itself could not be read
    """
    return load_articles(read_articles_csv(csv_path), now=now)
