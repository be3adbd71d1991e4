"""
Freshness summary report

Headline numbers for the audit: how many articles sit in each tier, which
content types dominate, and which primary categories carry the most
overdue articles.
"""

from typing import Iterable

import pandas as pd

from content_freshness.models import ArticleRecord, ContentType, Freshness


def articles_to_dataframe(articles: Iterable[ArticleRecord]) -> pd.DataFrame:
    """One row per article with the columns the summary needs."""
    records = [
        {
            "id": a.id,
            "title": a.title,
            "primary_category": a.primary_category,
            "content_type": a.content_type.value,
            "freshness": a.freshness.value,
            "severity": a.freshness.severity,
            "age_months": a.age_months,
        }
        for a in articles
    ]
    columns = ["id", "title", "primary_category", "content_type", "freshness", "severity", "age_months"]
    return pd.DataFrame(records, columns=columns)


def format_age(months: int) -> str:
    """Human-readable age: '< 1 mo', '7 mo', '2y', '2y 3mo'."""
    if months < 1:
        return "< 1 mo"
    if months < 12:
        return f"{months} mo"
    years, rest = divmod(months, 12)
    return f"{years}y {rest}mo" if rest else f"{years}y"


def get_freshness_summary(articles: Iterable[ArticleRecord]) -> dict:
    """
    Compute summary statistics for a scored collection.

    Returns:
        {
            "total_articles": int,
            "by_freshness": {tier: count},        # all four tiers
            "by_content_type": {type: count},     # all four types
            "time_sensitive_count": int,
            "needs_attention_by_category": {category: count},  # stale + needs-update
            "mean_age_months": float | None,
        }
    """
    df = articles_to_dataframe(articles)

    by_freshness = (
        df["freshness"].value_counts()
        .reindex([f.value for f in Freshness], fill_value=0)
    )
    by_content_type = (
        df["content_type"].value_counts()
        .reindex([c.value for c in ContentType], fill_value=0)
    )

    overdue = df[df["severity"] >= Freshness.STALE.severity]
    by_category = overdue.groupby("primary_category").size().sort_values(ascending=False)

    return {
        "total_articles": int(len(df)),
        "by_freshness": {k: int(v) for k, v in by_freshness.items()},
        "by_content_type": {k: int(v) for k, v in by_content_type.items()},
        "time_sensitive_count": int(by_content_type[ContentType.TIME_SENSITIVE.value]),
        "needs_attention_by_category": {k: int(v) for k, v in by_category.items()},
        "mean_age_months": round(float(df["age_months"].mean()), 1) if len(df) else None,
    }


def format_summary(summary: dict) -> str:
    """Plain-text rendering of get_freshness_summary() for the terminal."""
    lines = [
        "=== Freshness Audit ===",
        f"Total articles: {summary['total_articles']:,}",
    ]
    if summary["mean_age_months"] is not None:
        lines.append(f"Mean age: {format_age(int(summary['mean_age_months']))}")

    lines.append("\nBy freshness:")
    for tier, count in summary["by_freshness"].items():
        lines.append(f"  {tier}: {count:,}")

    lines.append("\nBy content type:")
    for ctype, count in summary["by_content_type"].items():
        lines.append(f"  {ctype}: {count:,}")

    if summary["needs_attention_by_category"]:
        lines.append("\nStale or outdated, by primary category:")
        for category, count in summary["needs_attention_by_category"].items():
            lines.append(f"  {category}: {count:,}")

    return "\n".join(lines)
