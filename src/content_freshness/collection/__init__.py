"""Loading and scoring the article export."""

from .dates import parse_date, compute_age_months
from .loader import read_articles_csv
from .pipeline import (
    ArticleCollection,
    load_articles,
    load_articles_from_csv,
    get_all_categories,
    get_all_tags,
)
