"""
Export Functions for Freshness Audit Deliverables

Writes the scored article collection for people who don't use the dashboard.
All exports use UTF-8 encoding.

Output files:
- articles_freshness.csv: One row per article, newest first
- freshness_counts.csv: Articles per freshness tier and content type
- articles.json: Dashboard payload (articles + category/tag vocabularies)
"""

import csv
import json
from pathlib import Path
from typing import Union

from content_freshness.collection.pipeline import ArticleCollection
from content_freshness.models import ContentType, Freshness


ARTICLE_COLUMNS = [
    "id",
    "title",
    "url",
    "publish_date",
    "age_months",
    "content_type",
    "freshness",
    "reasoning",
    "categories",
    "tags",
]

LIST_JOINER = ", "


def export_articles_csv(
    collection: ArticleCollection,
    output_path: Union[str, Path],
) -> Path:
    """
    Export scored articles to CSV.

    Args:
        collection: Result of load_articles()
        output_path: Path for output CSV file

    Returns:
        Path to created file
    """
    output_path = Path(output_path)

    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(ARTICLE_COLUMNS)

        for article in collection.articles:
            writer.writerow([
                article.id,
                article.title,
                article.url,
                article.publish_date,
                article.age_months,
                article.content_type.value,
                article.freshness.value,
                article.reasoning,
                LIST_JOINER.join(article.categories),
                LIST_JOINER.join(article.tags),
            ])

    return output_path


def export_freshness_counts(
    collection: ArticleCollection,
    output_path: Union[str, Path],
) -> Path:
    """
    Export a freshness x content-type count matrix to CSV.

    Every tier and every content type appears, including zero counts.
    """
    output_path = Path(output_path)
    content_types = list(ContentType)

    counts = {(tier, ctype): 0 for tier in Freshness for ctype in content_types}
    for article in collection.articles:
        counts[(article.freshness, article.content_type)] += 1

    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["freshness"] + [c.value for c in content_types] + ["total"])

        for tier in Freshness:
            row_counts = [counts[(tier, ctype)] for ctype in content_types]
            writer.writerow([tier.value] + row_counts + [sum(row_counts)])

    return output_path


def export_articles_json(
    collection: ArticleCollection,
    output_path: Union[str, Path],
) -> Path:
    """Export the dashboard payload (camelCase keys) to JSON."""
    output_path = Path(output_path)
    output_path.write_text(
        json.dumps(collection.to_dict(), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return output_path


def export_all(
    collection: ArticleCollection,
    output_dir: Union[str, Path],
) -> list[Path]:
    """
    Export all deliverables in one call.

    Args:
        collection: Result of load_articles()
        output_dir: Directory to write files into (created if missing)

    Returns:
        List of paths to created files
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    return [
        export_articles_csv(collection, output_dir / "articles_freshness.csv"),
        export_freshness_counts(collection, output_dir / "freshness_counts.csv"),
        export_articles_json(collection, output_dir / "articles.json"),
    ]
