"""Title classification and freshness scoring."""

from .local_classifier import (
    classify_title,
    detect_content_type,
    infer_categories,
    infer_tags,
    TitleClassification,
)
from .freshness import assess_freshness, FreshnessVerdict
from .tags import canonicalize_tag, canonicalize_tags
