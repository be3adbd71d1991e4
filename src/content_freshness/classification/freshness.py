"""
Freshness assessment

Turns (title, age, content type) into a freshness tier plus a one-line
rationale for the dashboard. Each content type owns its threshold ladder;
thresholds live in config so editors can tune them.

The only outside input is the reference year, and it is passed in by the
caller. Same arguments, same verdict, same wording.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from content_freshness import config
from content_freshness.classification.local_classifier import YEAR_PATTERN
from content_freshness.models import ContentType, Freshness


OUTDATED_YEAR_PATTERN = re.compile(
    r"\b(?:"
    + "|".join(str(y) for y in range(config.OUTDATED_TITLE_YEARS[0], config.OUTDATED_TITLE_YEARS[1] + 1))
    + r")\b"
)
EXPIRING_YEAR_PATTERN = re.compile(r"\b" + str(config.EXPIRING_TITLE_YEAR) + r"\b")
EVENT_PATTERN = re.compile(r"countdown|upcoming", re.IGNORECASE)


@dataclass(frozen=True)
class FreshnessVerdict:
    freshness: Freshness
    reasoning: str


@dataclass(frozen=True)
class ThresholdLadder:
    """
    Age thresholds (months) for one content type.

    Below `fresh_below` is fresh, below `aging_below` is aging, below
    `stale_below` is stale, anything older needs an update. Without a
    stale step, aging goes straight to needs-update.
    """
    fresh_below: int
    aging_below: int
    stale_below: Optional[int] = None

    def tier(self, age_months: int) -> Freshness:
        if age_months < self.fresh_below:
            return Freshness.FRESH
        if age_months < self.aging_below:
            return Freshness.AGING
        if self.stale_below is not None and age_months < self.stale_below:
            return Freshness.STALE
        return Freshness.NEEDS_UPDATE


EVERGREEN_LADDER = ThresholdLadder(
    config.EVERGREEN_FRESH_MONTHS,
    config.EVERGREEN_AGING_MONTHS,
    config.EVERGREEN_STALE_MONTHS,
)
SEMI_EVERGREEN_LADDER = ThresholdLadder(
    config.SEMI_EVERGREEN_FRESH_MONTHS,
    config.SEMI_EVERGREEN_AGING_MONTHS,
    config.SEMI_EVERGREEN_STALE_MONTHS,
)
TIME_SENSITIVE_LADDER = ThresholdLadder(
    config.TIME_SENSITIVE_FRESH_MONTHS,
    config.TIME_SENSITIVE_AGING_MONTHS,
)

EVERGREEN_REASONS = {
    Freshness.FRESH: "Evergreen explainer — concepts don't expire quickly",
    Freshness.AGING: "Evergreen but aging — may benefit from refreshed examples or links",
    Freshness.STALE: "Evergreen topic but quite old — review for accuracy and outdated references",
    Freshness.NEEDS_UPDATE: "Evergreen topic but very old — likely has outdated info, screenshots, or broken links",
}
SEMI_EVERGREEN_REASONS = {
    Freshness.FRESH: "Recent guide — likely still accurate",
    Freshness.AGING: "Guide may have outdated UI screenshots or steps",
    Freshness.STALE: "Product UIs and processes likely changed since publication",
    Freshness.NEEDS_UPDATE: "Old guide — high chance of outdated steps, UI changes, or broken links",
}
TIME_SENSITIVE_REASONS = {
    Freshness.FRESH: "Recent time-sensitive content",
    Freshness.AGING: "Time-sensitive content aging — verify relevance",
    Freshness.NEEDS_UPDATE: "Time-sensitive content past its shelf life",
}

OUTDATED_YEAR_REASON = "Title references an older year — reads as outdated to visitors"
EXPIRING_YEAR_REASON = f"Title references {config.EXPIRING_TITLE_YEAR} — will soon read as outdated"
EVENT_PASSED_REASON = "Event/countdown content — the event has passed"
NEWS_RECENT_REASON = "Recent news"
NEWS_HISTORICAL_REASON = "News — doesn't need updating (historical record)"
NEWS_ARCHIVE_REASON = "News/press release — historical record, no update needed"


def find_title_year(title: str) -> Optional[int]:
    """First year token (within TITLE_YEAR_RANGE) in the title."""
    match = YEAR_PATTERN.search(title or "")
    return int(match.group(1)) if match else None


def _assess_evergreen(title: str, age_months: int, current_year: int) -> FreshnessVerdict:
    tier = EVERGREEN_LADDER.tier(age_months)
    return FreshnessVerdict(tier, EVERGREEN_REASONS[tier])


def _assess_semi_evergreen(title: str, age_months: int, current_year: int) -> FreshnessVerdict:
    if OUTDATED_YEAR_PATTERN.search(title):
        return FreshnessVerdict(Freshness.NEEDS_UPDATE, OUTDATED_YEAR_REASON)
    if EXPIRING_YEAR_PATTERN.search(title) and age_months > config.EXPIRING_TITLE_MAX_AGE_MONTHS:
        return FreshnessVerdict(Freshness.STALE, EXPIRING_YEAR_REASON)
    tier = SEMI_EVERGREEN_LADDER.tier(age_months)
    return FreshnessVerdict(tier, SEMI_EVERGREEN_REASONS[tier])


def _assess_time_sensitive(title: str, age_months: int, current_year: int) -> FreshnessVerdict:
    year = find_title_year(title)
    if year is not None:
        if year < current_year - 1:
            return FreshnessVerdict(
                Freshness.NEEDS_UPDATE,
                f"References {year} — clearly outdated, needs a {current_year} refresh or archival",
            )
        if year < current_year:
            return FreshnessVerdict(
                Freshness.STALE,
                f"References {year} — becoming outdated, consider updating for {current_year}",
            )
        if year == current_year:
            return FreshnessVerdict(
                Freshness.FRESH,
                f"Current year ({year}) content — still relevant",
            )
        # Future years fall through to the event and age checks

    if EVENT_PATTERN.search(title) and age_months > config.EVENT_MAX_AGE_MONTHS:
        return FreshnessVerdict(Freshness.NEEDS_UPDATE, EVENT_PASSED_REASON)

    tier = TIME_SENSITIVE_LADDER.tier(age_months)
    return FreshnessVerdict(tier, TIME_SENSITIVE_REASONS[tier])


def _assess_news(title: str, age_months: int, current_year: int) -> FreshnessVerdict:
    # News is a historical record: the tier never degrades, only the wording
    if age_months < config.NEWS_RECENT_MONTHS:
        return FreshnessVerdict(Freshness.FRESH, NEWS_RECENT_REASON)
    if age_months < config.NEWS_HISTORICAL_MONTHS:
        return FreshnessVerdict(Freshness.FRESH, NEWS_HISTORICAL_REASON)
    return FreshnessVerdict(Freshness.FRESH, NEWS_ARCHIVE_REASON)


ASSESSORS = {
    ContentType.EVERGREEN: _assess_evergreen,
    ContentType.SEMI_EVERGREEN: _assess_semi_evergreen,
    ContentType.TIME_SENSITIVE: _assess_time_sensitive,
    ContentType.NEWS: _assess_news,
}


def assess_freshness(
    title: str,
    age_months: int,
    content_type: ContentType,
    current_year: Optional[int] = None,
) -> FreshnessVerdict:
    """
    Assess how urgently an article needs an editorial refresh.

    Args:
        title: Article title (year tokens and event wording matter)
        age_months: Whole months since publication, >= 0
        content_type: Result of detect_content_type()
        current_year: Reference year (default: current UTC year)

    Returns:
        FreshnessVerdict with tier and rationale
    """
    if age_months < 0:
        raise ValueError(f"age_months must be >= 0, got {age_months}")
    if current_year is None:
        current_year = datetime.now(timezone.utc).year

    assessor = ASSESSORS[ContentType(content_type)]
    return assessor(title or "", age_months, current_year)
