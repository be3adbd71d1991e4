"""Errors raised while loading the article export."""

from pathlib import Path
from typing import Optional, Union


class ArticleSourceError(ValueError):
    """The article export could not be read as a whole.

    Per-row problems never raise; they drop the row. This error means the
    file itself is missing, unreadable or lacks the expected header, so the
    caller must not mistake the failure for an empty blog.
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{message} ({self.path})"
        super().__init__(message)
