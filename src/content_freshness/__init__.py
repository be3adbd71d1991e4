"""
Content Freshness - Blog Article Freshness Audit

Classifies blog articles exported to CSV by content type, category and tag,
then scores how urgently each one needs an editorial refresh.
"""

# Note: config is imported via direct path to avoid circular imports
# Use: from content_freshness import config

__version__ = "1.0.0"
