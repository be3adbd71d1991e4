"""
Tag canonicalization

CMS exports accumulate near-duplicate tags ("On Ramp", "on-ramp", "Onramp").
Every tag, whether typed by an editor or inferred from the title, is mapped
to one preferred label per concept before it reaches the dashboard.
"""

from types import MappingProxyType
from typing import Iterable


# Keys are lowercased with whitespace collapsed. Unknown tags pass through.
TAG_SYNONYMS = MappingProxyType({
    # Products
    "transak one": "Transak One",
    "off ramp": "Off Ramp",
    "off-ramp": "Off Ramp",
    "offramp": "Off Ramp",
    "off ramps": "Off Ramp",
    "on ramp": "On-Ramp",
    "on-ramp": "On-Ramp",
    "onramp": "On-Ramp",
    "on ramps": "On-Ramp",
    "on-ramps": "On-Ramp",
    "nft checkout": "NFT Checkout",

    # Topics
    "nft": "NFT",
    "nfts": "NFT",
    "gaming": "Gaming",
    "web3 gaming": "Gaming",
    "defi": "DeFi",
    "de-fi": "DeFi",
    "tokens & standards": "Tokens & Standards",
    "tokens and standards": "Tokens & Standards",
    "stablecoin": "Tokens & Standards",
    "stablecoins": "Tokens & Standards",
    "wallet": "Wallets",
    "wallets": "Wallets",
    "compliance": "Compliance",
    "regulation": "Compliance",
    "regulations": "Compliance",
    "security": "Security",
    "layer 2": "Layer 2",
    "layer-2": "Layer 2",
    "layer2": "Layer 2",
    "l2": "Layer 2",
    "l2s": "Layer 2",
    "ethereum": "Ethereum",
    "bitcoin": "Bitcoin",
    "solana": "Solana",
    "memecoin": "Memecoins",
    "memecoins": "Memecoins",
    "meme coin": "Memecoins",
    "meme coins": "Memecoins",
    "airdrop": "Airdrops",
    "airdrops": "Airdrops",
    "rwa": "RWA",
    "rwas": "RWA",
    "real world assets": "RWA",
    "real-world assets": "RWA",
    "payment": "Payments",
    "payments": "Payments",
    "staking": "Staking",
    "adoption": "Adoption",
    "ai": "AI",
    "expansion": "Expansions",
    "expansions": "Expansions",
    "partner": "Partners",
    "partners": "Partners",
    "partnership": "Partners",
    "partnerships": "Partners",

    # Formats
    "how to": "How-To Guides",
    "how-to": "How-To Guides",
    "how to guide": "How-To Guides",
    "how-to guide": "How-To Guides",
    "how to guides": "How-To Guides",
    "how-to guides": "How-To Guides",
    "blockchain 101": "Blockchain 101",
    "blockchain101": "Blockchain 101",
    "crypto 101": "Blockchain 101",
})


def _synonym_key(tag: str) -> str:
    return " ".join(tag.lower().split())


def canonicalize_tag(tag: str) -> str:
    """Preferred label for a tag, or the trimmed tag itself if unknown."""
    return TAG_SYNONYMS.get(_synonym_key(tag), tag.strip())


def dedupe_labels(labels: Iterable[str]) -> list[str]:
    """
    Drop blank and repeated labels, keeping first-seen order.

    Repeats are compared case-insensitively; the first spelling wins.
    """
    seen = set()
    result = []
    for label in labels:
        label = label.strip()
        key = label.lower()
        if not key or key in seen:
            continue
        seen.add(key)
        result.append(label)
    return result


def canonicalize_tags(tags: Iterable[str]) -> list[str]:
    """Canonicalize and deduplicate a list of tags."""
    return dedupe_labels(canonicalize_tag(tag) for tag in tags)
