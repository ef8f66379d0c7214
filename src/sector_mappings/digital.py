"""
NAICS Industry → Digital Delivery Score

Rules:
- First matching keyword rule wins
- Otherwise the sector default applies
- Otherwise DEFAULT_DIGITAL_SCORE
- Scores are a coarse default table, not business logic
"""

DEFAULT_DIGITAL_SCORE = 0.5

# -------------------------------------------------------------------
# KEYWORD RULES (title, case-insensitive)
# -------------------------------------------------------------------
# Format: (score, [keywords], reason)

DIGITAL_KEYWORD_RULES = [
    (1.0,
     ["computer", "software", "web", "data processing", "internet"],
     "Computer / IT / online service"),
]

# -------------------------------------------------------------------
# SECTOR DEFAULTS
# -------------------------------------------------------------------

SECTOR_DIGITAL_SCORES: dict[str, float] = {
    "51": 0.9,   # Information
    "52": 0.8,   # Finance and Insurance
    "54": 0.7,   # Professional, Scientific, and Technical
    "61": 0.6,   # Educational
    "62": 0.5,   # Health Care
    "48": 0.5,   # Transportation
    "49": 0.5,   # Transportation / Warehousing
    "72": 0.3,   # Accommodation and Food
    "81": 0.3,   # Other (personal) services
}


def infer_digital_score(*, title: str | None, sector_code: str | None) -> float:
    text = (title or "").lower()

    for score, keywords, _reason in DIGITAL_KEYWORD_RULES:
        if any(k in text for k in keywords):
            return score

    return SECTOR_DIGITAL_SCORES.get(sector_code or "", DEFAULT_DIGITAL_SCORE)


def describe_digital_score(score: float) -> tuple[str, str]:
    """
    Returns (level, delivery phrase) for a score.
    """
    if score >= 0.7:
        return "high", "primarily digital/remote delivery"
    if score >= 0.4:
        return "medium", "hybrid delivery with digital components"
    return "low", "primarily in-person service delivery"
