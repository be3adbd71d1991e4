"""
Article Export Loader

Loads the CMS article export (CSV with a header row) into plain row dicts.
Only file-level problems raise here; row-level filtering happens in the
pipeline.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from content_freshness import config
from content_freshness.errors import ArticleSourceError


logger = logging.getLogger(__name__)


def read_articles_csv(csv_path: Optional[Union[str, Path]] = None) -> list[dict]:
    """
    Read the article export into a list of row dicts.

    All cells are read as strings; missing cells become "". Only the
    recognized columns are kept, in file order.

    Args:
        csv_path: Path to the export (default: config.ARTICLES_CSV_PATH)

    Returns:
        List of {column: value} dicts, one per data row

    Raises:
        ArticleSourceError: File missing, unreadable, empty, or without
            the required header columns
    """
    path = Path(csv_path if csv_path is not None else config.ARTICLES_CSV_PATH)
    if not path.is_file():
        raise ArticleSourceError("Article export not found", path)

    logger.info("Reading article export from %s", path)
    try:
        df = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError as exc:
        raise ArticleSourceError("Article export is empty", path) from exc
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as exc:
        raise ArticleSourceError(f"Could not parse article export: {exc}", path) from exc

    missing = [c for c in config.REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ArticleSourceError(f"Missing required columns: {missing}", path)

    # Keep only columns that exist
    columns = [
        c for c in config.REQUIRED_COLUMNS + config.OPTIONAL_COLUMNS
        if c in df.columns
    ]
    rows = df[columns].to_dict(orient="records")
    logger.debug("Read %d rows from %s", len(rows), path)
    return rows


def split_list_cell(value: Optional[str]) -> list[str]:
    """Split a comma-separated Categories/Tags cell, dropping blanks."""
    if not value or not str(value).strip():
        return []
    parts = str(value).split(config.LIST_SEPARATOR)
    return [part.strip() for part in parts if part.strip()]
