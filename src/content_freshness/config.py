"""
Configuration for the Blog Content Freshness Audit

HOW TO USE THIS FILE:
--------------------
1. Point ARTICLES_CSV_PATH at your CMS export (or set it in .env)
2. Review the freshness thresholds below - do they match your editorial policy?
3. Keyword rules for categories, tags and content types live next to the
   classifier (classification/local_classifier.py)

You generally don't need to change anything else.
"""

import os


# =============================================================================
# INPUT FILE
# =============================================================================
# Where the CMS export lives, relative to the working directory.
# Override with the ARTICLES_CSV_PATH environment variable.

DEFAULT_CSV_PATH = os.path.join("public", "articles.csv")
ARTICLES_CSV_PATH = os.getenv("ARTICLES_CSV_PATH", DEFAULT_CSV_PATH)

# Editorial overrides entered from the dashboard (JSON, keyed by article id)
DEFAULT_OVERRIDES_PATH = os.path.join("public", "overrides.json")
OVERRIDES_PATH = os.getenv("OVERRIDES_PATH", DEFAULT_OVERRIDES_PATH)


# =============================================================================
# CSV COLUMNS
# =============================================================================
# Header names are matched exactly (case-sensitive). Unknown columns are ignored.

COLUMN_TITLE = "Post title"
COLUMN_URL = "Post URL"
COLUMN_PUBLISH_DATE = "Publish date"
COLUMN_CATEGORIES = "Categories"
COLUMN_TAGS = "Tags"

REQUIRED_COLUMNS = [COLUMN_TITLE, COLUMN_URL, COLUMN_PUBLISH_DATE]
OPTIONAL_COLUMNS = [COLUMN_CATEGORIES, COLUMN_TAGS]

# Separator used inside the Categories / Tags cells
LIST_SEPARATOR = ","


# =============================================================================
# URL SCOPE
# =============================================================================
# Only rows whose URL contains one of these markers are audited.
# Landing pages, docs and other site sections are skipped.

BLOG_PATH_MARKERS = [
    "/blog/",
    "/blog-old/",
]


# =============================================================================
# BRAND
# =============================================================================
# Mentions of the publishing brand separate partnership announcements
# ("X teams up with Transak") from generic explainers.

BRAND_NAMES = [
    "transak",
]


# =============================================================================
# AGE
# =============================================================================
# Age is measured in average-length months, floored.

DAYS_PER_MONTH = 30.44


# =============================================================================
# FRESHNESS THRESHOLDS (months)
# =============================================================================
# Each content type ages on its own ladder. An article is "fresh" below the
# first threshold, "aging" below the second, "stale" below the third and
# "needs-update" beyond that.

# Evergreen explainers: concepts don't expire quickly
EVERGREEN_FRESH_MONTHS = 24
EVERGREEN_AGING_MONTHS = 36
EVERGREEN_STALE_MONTHS = 48

# Semi-evergreen guides: product UIs and steps drift
SEMI_EVERGREEN_FRESH_MONTHS = 12
SEMI_EVERGREEN_AGING_MONTHS = 18
SEMI_EVERGREEN_STALE_MONTHS = 24

# Years that make a guide read as outdated no matter how old it is
OUTDATED_TITLE_YEARS = (2020, 2024)

# A guide titled with this year turns stale once older than the limit below
EXPIRING_TITLE_YEAR = 2025
EXPIRING_TITLE_MAX_AGE_MONTHS = 12

# Time-sensitive content: events, predictions, year roundups
TIME_SENSITIVE_FRESH_MONTHS = 6
TIME_SENSITIVE_AGING_MONTHS = 12
EVENT_MAX_AGE_MONTHS = 3

# Year tokens recognized in titles
TITLE_YEAR_RANGE = (2020, 2039)

# News never degrades; these only pick the rationale text
NEWS_RECENT_MONTHS = 6
NEWS_HISTORICAL_MONTHS = 12
