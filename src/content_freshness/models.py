"""
Data model for the freshness audit.

ArticleRecord is the only entity. Records are frozen: anything the
dashboard layers on top (editorial overrides) lives in a separate store
keyed by id and never touches these fields.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContentType(str, Enum):
    """Why an article ages the way it does."""

    EVERGREEN = "evergreen"
    SEMI_EVERGREEN = "semi-evergreen"
    TIME_SENSITIVE = "time-sensitive"
    NEWS = "news"


class Freshness(str, Enum):
    """Editorial freshness tier, ordered by severity."""

    FRESH = "fresh"
    AGING = "aging"
    STALE = "stale"
    NEEDS_UPDATE = "needs-update"

    @property
    def severity(self) -> int:
        """0 for fresh up to 3 for needs-update."""
        return list(Freshness).index(self)


class ArticleRecord(BaseModel):
    """A classified and scored blog article."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    title: str = Field(min_length=1)
    url: str = Field(min_length=1)
    publish_date: str = Field(serialization_alias="publishDate")
    publish_timestamp: int = Field(serialization_alias="publishTimestamp")
    categories: tuple[str, ...] = Field(min_length=1)
    tags: tuple[str, ...] = ()
    age_months: int = Field(ge=0, serialization_alias="ageMonths")
    content_type: ContentType = Field(serialization_alias="contentType")
    freshness: Freshness
    reasoning: str = Field(min_length=1)

    @field_validator("categories", "tags")
    @classmethod
    def _no_blank_or_duplicate_labels(cls, labels: tuple[str, ...]) -> tuple[str, ...]:
        seen = set()
        for label in labels:
            key = label.strip().lower()
            if not key:
                raise ValueError("labels must not be empty")
            if key in seen:
                raise ValueError(f"duplicate label: {label!r}")
            seen.add(key)
        return labels

    @property
    def primary_category(self) -> str:
        return self.categories[0]

    def to_dict(self) -> dict:
        """Presentation payload with camelCase keys and plain lists."""
        return self.model_dump(mode="json", by_alias=True)
