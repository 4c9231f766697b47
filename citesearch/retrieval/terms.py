"""Search term generation from a topic and optional platform."""

# Generic business vocabulary appended after topic-derived terms as a recall fallback
BUSINESS_TERMS = (
    "strategy",
    "growth",
    "leadership",
    "innovation",
    "business",
    "management",
    "team",
    "success",
)

MIN_TOKEN_LENGTH = 4


def generate_search_terms(topic: str, platform: str | None = None) -> tuple[str, ...]:
    """Derive the deduplicated, lowercase search term set for a topic.

    Order: the full topic, its tokens longer than 3 characters, the
    platform (if given), then BUSINESS_TERMS. The first term is the
    primary topic signal used by the relevance scorer.
    """
    if not topic or not topic.strip():
        raise ValueError("topic must not be empty")

    candidates = [topic.strip().lower()]
    candidates.extend(
        token.lower() for token in topic.split() if len(token) >= MIN_TOKEN_LENGTH
    )
    if platform and platform.strip():
        candidates.append(platform.strip().lower())
    candidates.extend(BUSINESS_TERMS)

    return tuple(dict.fromkeys(candidates))
