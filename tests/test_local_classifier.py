"""
Tests for local_classifier.py - Title classification

Verifies that the local classifier correctly:
- Infers categories from ordered rules (all matches kept, fallback otherwise)
- Infers and canonicalizes tags
- Picks the content type by strict decision order
- Prefers explicit export values unless they are blank
"""

import pytest

from content_freshness.classification import local_classifier
from content_freshness.classification.local_classifier import (
    CATEGORY_RULES,
    CONTENT_TYPE_RULES,
    classify_title,
    detect_content_type,
    infer_categories,
    infer_tags,
)
from content_freshness.models import ContentType


class TestNormalizeText:
    """Tests for text normalization."""

    def test_normalize_lowercase(self):
        """Should convert to lowercase."""
        assert local_classifier._normalize_text("WHAT IS DEFI") == "what is defi"

    def test_normalize_whitespace(self):
        """Should normalize multiple spaces."""
        assert local_classifier._normalize_text("what   is\n\tdefi") == "what is defi"

    def test_normalize_curly_quotes(self):
        """Should straighten curly apostrophes."""
        assert local_classifier._normalize_text("A Beginner’s Guide") == "a beginner's guide"

    def test_normalize_none(self):
        """Should handle None."""
        assert local_classifier._normalize_text(None) == ""


class TestInferCategories:
    """Tests for category inference."""

    def test_podcast(self):
        """Podcast markers should map to Podcast."""
        assert infer_categories("Masters of Web3 Ep 12: Building in Public") == ["Podcast"]

    def test_partnership_with_brand(self):
        """Partnership phrasing plus a brand mention should fire with product phrasing."""
        result = infer_categories("Transak Partners with MetaMask to Launch New Feature")
        assert result == ["Partnerships", "Product Updates"]

    def test_partnership_without_brand(self):
        """Partnership phrasing alone should not produce Partnerships."""
        result = infer_categories("MetaMask Partners with Ledger")
        assert "Partnerships" not in result
        assert result == ["News & Press Release"]

    def test_multiple_rules_keep_table_order(self):
        """All firing rules should contribute in table order."""
        result = infer_categories("USDC Now Live on Transak: A Step-by-Step Guide")
        assert result == ["Stablecoins", "News & Press Release", "Learning Hub"]

    def test_explainer(self):
        """Explainers should land in Learning Hub."""
        assert infer_categories("What is a Stablecoin? A Beginner's Guide") == ["Learning Hub"]

    def test_price_prediction_is_research(self):
        """Price predictions should be research, not news."""
        assert infer_categories("Ethereum Price Prediction 2024") == ["Research and Analysis"]

    def test_thought_leader_excludes_what_is(self):
        """'What is the future of' is an explainer, not thought leadership."""
        assert infer_categories("What is the Future of Payments?") == ["Learning Hub"]

    def test_fallback_brand_adjacent(self):
        """Brand-adjacent mentions should fall back to Partnerships."""
        assert infer_categories("Buy Bitcoin with Transak") == ["Partnerships"]

    def test_fallback_crypto_vocabulary(self):
        """Generic crypto vocabulary should fall back to Learning Hub."""
        assert infer_categories("Why Wallets Matter") == ["Learning Hub"]

    def test_fallback_default(self):
        """Titles without any signal should default to news."""
        assert infer_categories("Our Holiday Schedule") == ["News & Press Release"]

    def test_never_empty_and_unique(self):
        """Inference should always return unique labels."""
        for title in ["", "Transak", "What is DeFi? DeFi Explained", "Top 10 Wallets Guide"]:
            result = infer_categories(title)
            assert result
            assert len(result) == len(set(result))

    def test_rules_are_independently_testable(self):
        """Each category rule can be checked on its own."""
        podcast_rule = CATEGORY_RULES[0]
        assert podcast_rule.label == "Podcast"
        assert podcast_rule.matches("masters of web3 ep 3")
        assert not podcast_rule.matches("what is defi")


class TestInferTags:
    """Tests for tag inference."""

    def test_explainer_tags(self):
        """Should tag stablecoin explainers."""
        assert infer_tags("What is a Stablecoin? A Beginner's Guide") == [
            "Tokens & Standards",
            "Blockchain 101",
        ]

    def test_chain_partner_and_format_tags(self):
        """Should tag chains, partner brands and how-tos in table order."""
        assert infer_tags("How to Buy Bitcoin and ETH on MetaMask") == [
            "Ethereum",
            "Bitcoin",
            "Partners",
            "How-To Guides",
        ]

    def test_word_boundaries(self):
        """'sol' should not match inside 'solution'."""
        assert "Solana" not in infer_tags("A Payment Solution for Merchants")

    def test_no_tags(self):
        """Titles without vocabulary should have no tags."""
        assert infer_tags("Our Holiday Schedule") == []


class TestDetectContentType:
    """Tests for the content-type decision order."""

    def test_news_category(self):
        """A news/press category should decide news."""
        assert detect_content_type("Top Wallets", ["Press"]) == ContentType.NEWS

    def test_partnership_phrasing_is_news(self):
        """Partnership phrasing should decide news."""
        title = "Transak Partners with MetaMask to Launch New Feature"
        assert detect_content_type(title, ["Partnerships"]) == ContentType.NEWS

    def test_now_live_is_news(self):
        """'now live' phrasing should decide news."""
        assert detect_content_type("Solana Pay Now Live", ["Learning Hub"]) == ContentType.NEWS

    def test_year_is_time_sensitive(self):
        """A year in the title should decide time-sensitive."""
        title = "Ethereum Price Prediction 2024"
        assert detect_content_type(title, ["Research and Analysis"]) == ContentType.TIME_SENSITIVE

    def test_news_beats_year(self):
        """Earlier rules take precedence over later ones."""
        assert detect_content_type("Transak Raises Series A in 2022", []) == ContentType.NEWS

    def test_event_is_time_sensitive(self):
        """Named events should decide time-sensitive."""
        assert detect_content_type("See You at Devcon", ["Learning Hub"]) == ContentType.TIME_SENSITIVE

    def test_explainer_is_evergreen(self):
        """Conceptual explainers should be evergreen."""
        title = "What is a Stablecoin? A Beginner's Guide"
        assert detect_content_type(title, ["Learning Hub"]) == ContentType.EVERGREEN

    def test_comparison_is_evergreen(self):
        """'vs' comparisons should be evergreen."""
        assert detect_content_type("Custodial vs Non-Custodial Wallets", ["Learning Hub"]) == ContentType.EVERGREEN

    def test_explainer_with_year_downgrades(self):
        """The explainer rule downgrades to semi-evergreen when a year is present."""
        explainer_rule = CONTENT_TYPE_RULES[2]
        assert explainer_rule.name == "explainer"
        assert explainer_rule.resolve("bitcoin explained 2024") == ContentType.SEMI_EVERGREEN
        assert explainer_rule.resolve("bitcoin explained") == ContentType.EVERGREEN

    def test_how_to_is_semi_evergreen(self):
        """'How to' guides should be semi-evergreen."""
        assert detect_content_type("How to Buy USDT", ["Learning Hub"]) == ContentType.SEMI_EVERGREEN

    def test_podcast_category_is_evergreen(self):
        """Podcast episodes should be evergreen."""
        title = "Masters of Web3 Ep 12: Building in Public"
        assert detect_content_type(title, ["Podcast"]) == ContentType.EVERGREEN

    def test_case_study_category(self):
        """Case studies should be semi-evergreen."""
        assert detect_content_type("Scaling Checkout", ["Case Studies"]) == ContentType.SEMI_EVERGREEN

    def test_default(self):
        """Anything else should be semi-evergreen."""
        assert detect_content_type("Our Holiday Schedule", ["Learning Hub"]) == ContentType.SEMI_EVERGREEN


class TestClassifyTitle:
    """Tests for the combined classification."""

    def test_infers_when_no_explicit_values(self):
        """Should infer everything from the title."""
        result = classify_title("What is a Stablecoin? A Beginner's Guide")
        assert result.categories == ("Learning Hub",)
        assert result.tags == ("Tokens & Standards", "Blockchain 101")
        assert result.content_type == ContentType.EVERGREEN

    def test_blank_explicit_values_count_as_absent(self):
        """Explicit lists that are blank after trimming should fall back to inference."""
        result = classify_title("What is DeFi?", explicit_categories=["  ", ""], explicit_tags=[" "])
        assert result.categories == ("Learning Hub",)
        assert "DeFi" in result.tags

    def test_explicit_categories_deduplicated(self):
        """Explicit categories should be deduplicated case-insensitively."""
        result = classify_title(
            "What is DeFi?",
            explicit_categories=["Learning Hub", "learning hub", "Ethereum"],
        )
        assert result.categories == ("Learning Hub", "Ethereum")

    def test_explicit_tags_canonicalized(self):
        """Explicit tags should be canonicalized and deduplicated."""
        result = classify_title("What is DeFi?", explicit_tags=["on ramp", "Onramp", "NFTs"])
        assert result.tags == ("On-Ramp", "NFT")

    def test_explicit_category_drives_content_type(self):
        """Content type should use the final categories."""
        result = classify_title("What is DeFi?", explicit_categories=["Press Release"])
        assert result.content_type == ContentType.NEWS

    @pytest.mark.parametrize("title", [
        "How to Buy Crypto in 2023",
        "Transak Partners with MetaMask to Launch New Feature",
        "Ethereum Price Prediction 2024",
    ])
    def test_categories_never_empty(self, title):
        """Every title should end up with at least one category."""
        assert classify_title(title).categories
