"""
Local Title Classifier for the Freshness Audit

Infers categories, tags and a content type from an article title using
ordered keyword/regex rules. No NLP: every decision can be traced back to
one row of the tables below.

Key principles:
- Rule tables are evaluated top to bottom in the declared order
- Category and tag rules are independent: every rule that fires contributes
- Content-type rules short-circuit: the first rule that applies decides
- Explicit CSV categories/tags always win over inference (blank = absent)
"""

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from content_freshness import config
from content_freshness.classification.tags import canonicalize_tags, dedupe_labels
from content_freshness.models import ContentType


BRAND_PATTERN = r"\b(?:" + "|".join(re.escape(b) for b in config.BRAND_NAMES) + r")\b"
BRAND_ADJACENT_PATTERNS = (
    r"\b(?:on|via|with|using) " + BRAND_PATTERN,
    BRAND_PATTERN + r" (?:to|now|becomes|brings|makes|provides|adds|enables)\b",
)

_first_year, _last_year = config.TITLE_YEAR_RANGE
YEAR_PATTERN = re.compile(
    r"\b(" + "|".join(str(y) for y in range(_first_year, _last_year + 1)) + r")\b"
)

PARTNERSHIP_PHRASES = (
    r"\bpartner",
    r"\bintegrat",
    r"\bcollaborat",
    r"\bjoins forces\b",
    r"\bteams up\b",
)


@dataclass(frozen=True)
class KeywordRule:
    """
    One row of a category or tag table.

    Fires when any pattern matches, every `requires` pattern matches and no
    `excludes` pattern matches.
    """
    label: str
    patterns: tuple[str, ...]
    requires: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        return (
            _matches_any(text, self.patterns)
            and all(re.search(p, text) for p in self.requires)
            and not _matches_any(text, self.excludes)
        )


@dataclass(frozen=True)
class ContentTypeRule:
    """
    One step of the content-type decision order.

    Applies when a title pattern matches or a category contains one of the
    category markers. With `downgrade_on_year`, a year in the title turns
    the outcome into semi-evergreen.
    """
    name: str
    content_type: ContentType
    patterns: tuple[str, ...] = ()
    category_markers: tuple[str, ...] = ()
    downgrade_on_year: bool = False

    def applies(self, text: str, categories: Sequence[str]) -> bool:
        if _matches_any(text, self.patterns):
            return True
        return any(
            marker in category
            for category in categories
            for marker in self.category_markers
        )

    def resolve(self, text: str) -> ContentType:
        if self.downgrade_on_year and YEAR_PATTERN.search(text):
            return ContentType.SEMI_EVERGREEN
        return self.content_type


@dataclass(frozen=True)
class TitleClassification:
    categories: tuple[str, ...]
    tags: tuple[str, ...]
    content_type: ContentType


# =============================================================================
# CATEGORY RULES
# =============================================================================

CATEGORY_PODCAST = "Podcast"
CATEGORY_STABLECOINS = "Stablecoins"
CATEGORY_LISTINGS = "New Listings"
CATEGORY_PARTNERSHIPS = "Partnerships"
CATEGORY_PRODUCT = "Product Updates"
CATEGORY_NEWS = "News & Press Release"
CATEGORY_RESEARCH = "Research and Analysis"
CATEGORY_THOUGHT_LEADER = "Thought Leader"
CATEGORY_LEARNING = "Learning Hub"

CATEGORY_RULES = (
    KeywordRule(CATEGORY_PODCAST, (
        r"masters of web3", r"\bep\s?\d+", r"\bpodcast",
    )),
    KeywordRule(CATEGORY_STABLECOINS, (
        r"\b(?:usdt|usdc|pyusd|rlusd|usdg|eurc|usde|dai)\b",
    )),
    KeywordRule(CATEGORY_LISTINGS, (
        r"\bnew listings?\b", r"\bnow listed\b", r"\blisted on\b", r"\blists \$",
    )),
    KeywordRule(CATEGORY_PARTNERSHIPS, PARTNERSHIP_PHRASES, requires=(BRAND_PATTERN,)),
    KeywordRule(CATEGORY_PRODUCT, (
        r"\btransak (?:one|stream)\b", r"\bnew features?\b", r"\bintroduc(?:es|ing)\b",
        r"\blaunch(?:es|ed)?\b", r"\bnow supports\b", r"\bcheckout now\b",
        r"\bproduct updates?\b",
    )),
    KeywordRule(CATEGORY_NEWS, (
        # Announcements
        r"\bannounc", r"\bsecures\b", r"\bexpands\b", r"\bwelcomes\b",
        r"\bmilestone", r"\bgrowth\b", r"\bis now\b", r"\bnow (?:available|live|on|integrated)\b",
        r"\bincident\b", r"\bmaintenance\b", r"\bupdate on\b",
        # Regulatory
        r"\blicen[cs]e", r"\bregistration\b", r"\bfintrac\b", r"\bfca\b", r"\bfiu-",
        r"\bsoc 2\b", r"\biso/iec\b", r"\bcertified\b", r"\bcompliance\b",
        # Fundraising
        r"\braises\b", r"\bseries [a-z]\b", r"\bfundrais", r"\bstrategic round\b",
    )),
    KeywordRule(CATEGORY_RESEARCH, (
        r"\breports?\b", r"\bstate of\b", r"\bresearch\b", r"\banalysis\b",
        r"\bprice predictions?\b", r"\bforecast", r"\boutlook\b",
    )),
    KeywordRule(
        CATEGORY_THOUGHT_LEADER,
        (r"\bthoughts on\b", r"\bopinion\b", r"\bfuture of\b"),
        excludes=(r"\bwhat is\b",),
    ),
    KeywordRule(CATEGORY_LEARNING, (
        # How-to and explainers
        r"^what (?:is|are|does|makes)\b", r"^how (?:to|do|does|can)\b",
        r"\bexplain", r"\bguide\b", r"\bhandbook\b", r"\btutorial\b",
        r"\bbeginner", r"\b101\b", r"\bdecoding\b", r"\bunderstanding\b",
        r"\bbreaking down\b", r"\bdeep dive\b", r"\bstep-by-step\b",
        # Comparisons
        r"\bvs\b", r"\bcomparing\b", r"\bdifference\b",
        # Listicles
        r"^top \d", r"^\d+ (?:best|ways|challenges|reasons|incredible)\b",
        # Events
        r"\bevents?\b", r"\bdevcon\b", r"\btoken2049\b", r"\bethdenver\b", r"\bconference\b",
    )),
)

# Only consulted when no rule above fired; first match wins.
CATEGORY_FALLBACK_RULES = (
    KeywordRule(CATEGORY_PARTNERSHIPS, BRAND_ADJACENT_PATTERNS),
    KeywordRule(CATEGORY_LEARNING, (
        r"\b(?:crypto|blockchain|web3|defi|stablecoins?|tokens?|wallets?|nfts?)\b",
        r"\b(?:bitcoin|btc|ethereum|eth|solana|sol)\b",
    )),
)
DEFAULT_CATEGORY = CATEGORY_NEWS


# =============================================================================
# TAG RULES
# =============================================================================

TAG_RULES = (
    # Product features
    KeywordRule("Transak One", (r"\btransak one\b",)),
    KeywordRule("Off Ramp", (
        r"\btransak stream\b", r"\boff.?ramp", r"\bsell crypto\b", r"\bcash out\b",
        r"\bcrypto.to.fiat\b",
    )),
    KeywordRule("On-Ramp", (
        r"\bon.?ramp", r"\bbuy crypto\b", r"\bfiat.to.crypto\b", r"\bpurchas",
    )),
    KeywordRule("NFT Checkout", (r"\bnft checkout\b", r"\bnft marketplace\b")),

    # Topics, chains and assets
    KeywordRule("NFT", (r"\bnfts?\b",)),
    KeywordRule("Gaming", (r"\bgaming\b", r"\bgames?\b", r"\bplay.to.earn\b", r"\bp2e\b", r"\bgamefi\b")),
    KeywordRule("DeFi", (r"\bdefi\b", r"\bdecentralized finance\b")),
    KeywordRule("Tokens & Standards", (
        r"\bstablecoins?\b", r"\b(?:usdt|usdc|pyusd|rlusd|usdg|eurc)\b",
    )),
    KeywordRule("Wallets", (r"\bwallets?\b",)),
    KeywordRule("Layer 2", (r"\blayer 2\b", r"\bl2s?\b", r"\bzkevm\b", r"\brollups?\b", r"\bsuperchain\b")),
    KeywordRule("Ethereum", (r"\bethereum\b", r"\beth\b")),
    KeywordRule("Bitcoin", (r"\bbitcoin\b", r"\bbtc\b")),
    KeywordRule("Solana", (r"\bsolana\b", r"\bsol\b")),
    KeywordRule("Memecoins", (
        r"\bmeme.?coins?\b", r"\bpepe\b", r"\bbonk\b", r"\bpnut\b", r"\btrump\b",
        r"\bmelania\b", r"\bmoodeng\b",
    )),
    KeywordRule("Airdrops", (r"\bairdrops?\b",)),
    KeywordRule("RWA", (r"\brwas?\b", r"\btokeniz", r"\breal.world.assets?\b", r"\btreasury bills?\b")),
    KeywordRule("Payments", (r"\bpayments?\b", r"\bpay\b", r"\bpayfi\b", r"\bcross.border\b", r"\bremittance")),
    KeywordRule("Staking", (r"\bstaking\b", r"\brestaking\b", r"\byield\b")),
    KeywordRule("Adoption", (r"\bneobanks?\b", r"\bfintech\b", r"\bembedded finance\b")),
    KeywordRule("AI", (r"\bai agents?\b", r"\bai crypto\b")),

    # Compliance and security
    KeywordRule("Compliance", (
        r"\bkyc\b", r"\bcompliance\b", r"\bregulat", r"\blicen[cs]e", r"\bfca\b",
        r"\bgenius act\b", r"\bmica\b", r"\bclarity act\b", r"\btravel rule\b",
    )),
    KeywordRule("Security", (r"\bsecurity\b", r"\bscams?\b", r"\battacks?\b", r"\bpoison", r"\bincident\b")),

    # Regional expansion
    KeywordRule("Expansions", (
        r"\baustralia\b", r"\bindia\b", r"\bhong kong\b", r"\bphilippines\b",
        r"\bthailand\b", r"\bhawaii\b", r"\bafrica\b", r"\buk\b", r"\bu\.s\.",
        r"\busa\b", r"\bunited states\b", r"\bsingapore\b",
    )),

    # Partner brands
    KeywordRule("Partners", (
        r"\bmetamask\b", r"\bphantom\b", r"\bledger\b", r"\bzengo\b", r"\bcoinbase\b",
        r"\btrust ?wallet\b", r"\bveworld\b", r"\btokenpocket\b",
    )),

    # Formats
    KeywordRule("How-To Guides", (r"\bhow to\b", r"\bstep.by.step\b")),
    KeywordRule("Blockchain 101", (r"\bexplain", r"\bwhat is\b", r"\bwhat are\b", r"\b101\b", r"\bbeginner")),
)


# =============================================================================
# CONTENT TYPE RULES
# =============================================================================
# Order matters: earlier rules take precedence and short-circuit.

CONTENT_TYPE_RULES = (
    ContentTypeRule(
        "news",
        ContentType.NEWS,
        patterns=PARTNERSHIP_PHRASES + (
            r"\bpowers\b", r"\blaunches\b", r"\bsecures\b", r"\bexpands\b",
            r"\braises\b", r"\blists \$",
            r"\bnow (?:available|live|on|integrated)\b", r"\bis now\b", r"\bnow supports\b",
        ),
        category_markers=("news", "press"),
    ),
    ContentTypeRule(
        "time-sensitive",
        ContentType.TIME_SENSITIVE,
        patterns=(
            YEAR_PATTERN.pattern,
            r"\bcountdown\b", r"\bupcoming events?\b", r"\bdevcon\b", r"\btoken2049\b",
            r"\bethdenver\b", r"\bprice predictions?\b", r"\bforecast", r"\bq[1-4]\b",
        ),
    ),
    ContentTypeRule(
        "explainer",
        ContentType.EVERGREEN,
        patterns=(
            r"^what (?:is|are|does|makes)\b",
            r"\bexplained\b", r"\bexplainer\b",
            r"\ba (?:beginner(?:'s)?|simple|comprehensive|detailed|step-by-step) guide\b",
            r"\bhow (?:does|do|to choose|to set up|to enable)\b",
            r"\bvs\b",
            r"\bunderstanding\b", r"\bdecoding\b", r"\bbreaking down\b",
        ),
        downgrade_on_year=True,
    ),
    ContentTypeRule("how-to", ContentType.SEMI_EVERGREEN, patterns=(r"^how to\b",)),
    ContentTypeRule("podcast", ContentType.EVERGREEN, category_markers=("podcast",)),
    ContentTypeRule(
        "case-study",
        ContentType.SEMI_EVERGREEN,
        patterns=(r"\bcase stud",),
        category_markers=("case stud",),
    ),
)
DEFAULT_CONTENT_TYPE = ContentType.SEMI_EVERGREEN


def _normalize_text(text: Optional[str]) -> str:
    """
    Normalize a title for matching.
    Lowercases, straightens curly quotes and collapses whitespace.
    """
    if not text:
        return ""
    text = text.replace("’", "'").replace("‘", "'")
    return " ".join(text.lower().split())


def _matches_any(text: str, patterns: Sequence[str]) -> bool:
    return any(re.search(pattern, text) for pattern in patterns)


def _clean_explicit(labels: Optional[Sequence[str]]) -> list[str]:
    if not labels:
        return []
    return dedupe_labels(label for label in labels if label is not None)


def find_matching_rules(title: str, rules: Sequence[KeywordRule]) -> list[KeywordRule]:
    """Rules from `rules` that fire on `title`, in table order."""
    text = _normalize_text(title)
    return [rule for rule in rules if rule.matches(text)]


def infer_categories(title: str) -> list[str]:
    """
    Infer categories from a title.

    Every matching rule contributes its label (first-match order, no
    duplicates). When nothing matches, the fallback table picks exactly
    one label, defaulting to news.
    """
    labels = dedupe_labels(rule.label for rule in find_matching_rules(title, CATEGORY_RULES))
    if labels:
        return labels

    fallback = find_matching_rules(title, CATEGORY_FALLBACK_RULES)
    if fallback:
        return [fallback[0].label]
    return [DEFAULT_CATEGORY]


def infer_tags(title: str) -> list[str]:
    """Infer canonical topical tags from a title. May be empty."""
    return canonicalize_tags(rule.label for rule in find_matching_rules(title, TAG_RULES))


def detect_content_type(title: str, categories: Sequence[str]) -> ContentType:
    """
    Decide why an article ages the way it does.

    Args:
        title: Article title
        categories: Final categories of the article (explicit or inferred)

    Returns:
        Content type from the first applicable rule, else semi-evergreen
    """
    text = _normalize_text(title)
    lowered = [c.lower() for c in categories]
    for rule in CONTENT_TYPE_RULES:
        if rule.applies(text, lowered):
            return rule.resolve(text)
    return DEFAULT_CONTENT_TYPE


def classify_title(
    title: str,
    explicit_categories: Optional[Sequence[str]] = None,
    explicit_tags: Optional[Sequence[str]] = None,
) -> TitleClassification:
    """
    Classify a single article title.

    Explicit categories/tags from the export are used when they still hold
    something after trimming; otherwise they are inferred from the title.
    Tags are canonicalized either way.

    Args:
        title: Article title
        explicit_categories: Categories from the export (optional)
        explicit_tags: Tags from the export (optional)

    Returns:
        TitleClassification with categories, tags and content type
    """
    categories = _clean_explicit(explicit_categories) or infer_categories(title)

    cleaned_tags = _clean_explicit(explicit_tags)
    tags = canonicalize_tags(cleaned_tags) if cleaned_tags else infer_tags(title)

    return TitleClassification(
        categories=tuple(categories),
        tags=tuple(tags),
        content_type=detect_content_type(title, categories),
    )
