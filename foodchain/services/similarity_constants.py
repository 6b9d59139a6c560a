"""
Similarity Service Constants

Weights and result-shaping limits for food similarity ranking.
"""

# Per-dimension weights, sum to 1.0
CATEGORY_WEIGHT = 0.4
ALLERGEN_WEIGHT = 0.2
SAFETY_WEIGHT = 0.2
NAME_WEIGHT = 0.2

# Results scoring at or below this are dropped
MIN_SIMILARITY_SCORE = 0.2

# Maximum number of suggestions returned
MAX_SIMILAR_RESULTS = 20

# Maximum candidates fetched per owner scope
MAX_CANDIDATE_FOODS = 200

FALLBACK_REASON = "General similarity"
