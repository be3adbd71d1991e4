"""
Editorial overrides

Editors can disagree with the classifier from the dashboard ("this guide is
actually fine"). Their verdicts are stored in a small JSON file keyed by
article id and layered on top of the pipeline output at render time. The
ArticleRecords themselves are never modified.

Writes follow read-modify-write under a lock and replace the file
atomically, so a concurrent reload never reads a half-written store.
"""

import json
import logging
import os
import tempfile
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Mapping, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from content_freshness import config
from content_freshness.models import ArticleRecord, ContentType, Freshness


logger = logging.getLogger(__name__)


class ArticleOverride(BaseModel):
    """An editor's correction for one article."""

    freshness: Optional[Freshness] = None
    content_type: Optional[ContentType] = None
    note: Optional[str] = None
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class OverrideState(BaseModel):
    """On-disk shape of the override store."""

    overrides: dict[int, ArticleOverride] = Field(default_factory=dict)


class OverrideStore:
    """JSON-file store of ArticleOverride entries keyed by article id."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path if path is not None else config.OVERRIDES_PATH)
        self._lock = threading.Lock()

    def load(self) -> OverrideState:
        """
        Load the store from disk.

        Returns empty state if the file doesn't exist or is corrupt.
        """
        if not self.path.exists():
            return OverrideState()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return OverrideState.model_validate(data)
        except (json.JSONDecodeError, ValidationError):
            logger.warning("Corrupt override store at %s, starting fresh", self.path)
            return OverrideState()

    def _save(self, state: OverrideState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=self.path.name, suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(state.model_dump_json(indent=2))
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def all(self) -> dict[int, ArticleOverride]:
        return dict(self.load().overrides)

    def get(self, article_id: int) -> Optional[ArticleOverride]:
        return self.load().overrides.get(article_id)

    def set(
        self,
        article_id: int,
        freshness: Optional[Union[Freshness, str]] = None,
        content_type: Optional[Union[ContentType, str]] = None,
        note: Optional[str] = None,
    ) -> ArticleOverride:
        """
        Create or replace the override for one article.

        Raises:
            ValueError: Nothing to override, or an unknown tier/type
        """
        if freshness is None and content_type is None and not note:
            raise ValueError("Override needs a freshness, content_type or note")

        override = ArticleOverride(
            freshness=Freshness(freshness) if freshness is not None else None,
            content_type=ContentType(content_type) if content_type is not None else None,
            note=note,
        )
        with self._lock:
            state = self.load()
            state.overrides[article_id] = override
            self._save(state)
        logger.info("Saved override for article %d", article_id)
        return override

    def clear(self, article_id: int) -> bool:
        """Remove an override. Returns False if there was none."""
        with self._lock:
            state = self.load()
            if article_id not in state.overrides:
                return False
            del state.overrides[article_id]
            self._save(state)
        logger.info("Cleared override for article %d", article_id)
        return True


def apply_overrides(
    articles: Iterable[ArticleRecord],
    overrides: Mapping[int, ArticleOverride],
) -> list[dict]:
    """
    Presentation rows with overrides layered on top.

    Each row is the article's to_dict() plus effectiveFreshness,
    effectiveContentType and the override itself (or None). The
    classifier's own verdict stays under freshness/contentType.
    """
    rows = []
    for article in articles:
        row = article.to_dict()
        override = overrides.get(article.id)
        row["effectiveFreshness"] = row["freshness"]
        row["effectiveContentType"] = row["contentType"]
        row["override"] = None
        if override is not None:
            if override.freshness is not None:
                row["effectiveFreshness"] = override.freshness.value
            if override.content_type is not None:
                row["effectiveContentType"] = override.content_type.value
            row["override"] = override.model_dump(mode="json")
        rows.append(row)
    return rows
