"""Exports and reporting for the freshness audit."""

from .exports import export_all, export_articles_csv, export_articles_json, export_freshness_counts
from .report import format_age, format_summary, get_freshness_summary
