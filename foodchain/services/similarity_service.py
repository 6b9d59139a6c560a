"""
Similarity Service

Handles food similarity logic including:
- Weighted similarity scoring between two foods
- Human-readable match reasons
- Candidate filtering, ranking and truncation
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from foodchain.services.similarity_constants import (
    CATEGORY_WEIGHT,
    ALLERGEN_WEIGHT,
    SAFETY_WEIGHT,
    NAME_WEIGHT,
    MIN_SIMILARITY_SCORE,
    MAX_SIMILAR_RESULTS,
    FALLBACK_REASON,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoodRecord:
    id: str
    name: str
    is_safe: bool
    category: Optional[str] = None
    allergens: FrozenSet[str] = field(default_factory=frozenset)
    owner_id: Optional[str] = None
    is_try_bite: bool = False


@dataclass(frozen=True)
class SimilarityResult:
    id: str
    name: str
    category: Optional[str]
    similarity_score: float
    reasons: Tuple[str, ...] = ()
    is_try_bite: bool = False
    allergens: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "similarity_score": self.similarity_score,
            "reasons": list(self.reasons),
            "is_try_bite": self.is_try_bite,
            "allergens": list(self.allergens),
        }


def tokenize_name(name: Optional[str]) -> FrozenSet[str]:
    """Lower-case a name and split it on whitespace runs."""
    return frozenset((name or "").lower().split())


def jaccard(a: FrozenSet[str], b: FrozenSet[str]) -> float:
    """|a & b| / |a | b|, or 0.0 when both sets are empty."""
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


def round_score(value: float) -> float:
    """Round to two decimals, halves rounding up."""
    return float(Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _same_category(source: FoodRecord, candidate: FoodRecord) -> bool:
    if not source.category or not candidate.category:
        return False
    return source.category == candidate.category


def category_score(source: FoodRecord, candidate: FoodRecord) -> float:
    return CATEGORY_WEIGHT if _same_category(source, candidate) else 0.0


def allergen_score(source: FoodRecord, candidate: FoodRecord) -> float:
    # Neither side having known allergens counts as a full match
    if not source.allergens and not candidate.allergens:
        return ALLERGEN_WEIGHT
    return jaccard(source.allergens, candidate.allergens) * ALLERGEN_WEIGHT


def safety_score(source: FoodRecord, candidate: FoodRecord) -> float:
    return SAFETY_WEIGHT if source.is_safe == candidate.is_safe else 0.0


def name_score(source: FoodRecord, candidate: FoodRecord) -> float:
    return jaccard(tokenize_name(source.name), tokenize_name(candidate.name)) * NAME_WEIGHT


def calculate_similarity_score(source: FoodRecord, candidate: FoodRecord) -> float:
    """
    Calculate how similar a candidate food is to the source food.

    The score is a weighted sum of four dimensions: category match,
    allergen overlap, safety-status match and name token overlap.
    Missing category or allergens never raise, they only lower the
    contribution of their dimension.

    Args:
        source: Food the suggestions are for
        candidate: Food being considered as a suggestion

    Returns:
        Score in [0, 1] rounded to two decimals
    """
    total = (
        category_score(source, candidate)
        + allergen_score(source, candidate)
        + safety_score(source, candidate)
        + name_score(source, candidate)
    )
    return round_score(min(max(total, 0.0), 1.0))


def similarity_reasons(source: FoodRecord, candidate: FoodRecord) -> List[str]:
    """
    Explain which dimensions contributed to a match.

    Returns:
        Reasons in dimension order, or a single fallback reason
    """
    reasons = []

    if _same_category(source, candidate):
        reasons.append(f"Both are {candidate.category}")

    if not source.allergens and not candidate.allergens:
        reasons.append("Neither has known allergens")
    else:
        shared = sorted(source.allergens & candidate.allergens)
        if shared:
            reasons.append(f"Shares allergens: {', '.join(shared)}")

    if source.is_safe == candidate.is_safe:
        reasons.append("Both are safe foods" if source.is_safe else "Neither is a safe food yet")

    if source.is_try_bite and candidate.is_try_bite:
        reasons.append("Both are try-bite foods")

    shared_tokens = sorted(tokenize_name(source.name) & tokenize_name(candidate.name))
    if shared_tokens:
        reasons.append(f"Similar name: {' '.join(shared_tokens)}")

    return reasons or [FALLBACK_REASON]


def rank_similar_foods(
    source: FoodRecord,
    candidates: Iterable[FoodRecord],
    min_score: float = MIN_SIMILARITY_SCORE,
    limit: int = MAX_SIMILAR_RESULTS
) -> List[SimilarityResult]:
    """
    Score candidates against the source and keep the best matches.

    Candidates sharing the source id are skipped. Results scoring at or
    below ``min_score`` are dropped, the rest are sorted by score
    descending (ties keep candidate order) and cut to ``limit``.

    Args:
        source: Food the suggestions are for
        candidates: Foods from the same owner scope
        min_score: Exclusive lower bound on kept scores
        limit: Maximum number of results

    Returns:
        Ranked list of similarity results, possibly empty
    """
    results = []
    scored = 0

    for candidate in candidates:
        if candidate.id == source.id:
            continue

        scored += 1
        score = calculate_similarity_score(source, candidate)
        if score <= min_score:
            continue

        results.append(SimilarityResult(
            id=candidate.id,
            name=candidate.name,
            category=candidate.category,
            similarity_score=score,
            reasons=tuple(similarity_reasons(source, candidate)),
            is_try_bite=candidate.is_try_bite,
            allergens=tuple(sorted(candidate.allergens)),
        ))

    # sorted() is stable, reverse=True keeps input order among equal scores
    ranked = sorted(results, key=lambda r: r.similarity_score, reverse=True)[:limit]

    logger.debug(
        f"Ranked {scored} candidates for food {source.id}: "
        f"{len(results)} above threshold, returning {len(ranked)}"
    )
    return ranked
