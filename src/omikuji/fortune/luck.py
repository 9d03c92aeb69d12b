"""
Luck categories for the 16 luck scores.

The category order matches the order of the score slots in the digest and
is part of the output contract.
"""

from collections import OrderedDict
from typing import Dict, List, Sequence, Tuple

from omikuji import config

LUCK_CATEGORIES = (
    "wish",
    "awaited_person",
    "lost_article",
    "travel",
    "business",
    "study",
    "speculation",
    "dispute",
    "love",
    "moving",
    "childbirth",
    "health",
    "marriage",
    "work",
    "money",
    "friendship",
)


def named_scores(scores: Sequence[int]) -> Dict[str, int]:
    """Pair each luck score with its category, in slot order."""
    if len(scores) != len(LUCK_CATEGORIES):
        raise ValueError(
            f"Expected {len(LUCK_CATEGORIES)} luck scores, got {len(scores)}"
        )
    return OrderedDict(zip(LUCK_CATEGORIES, scores))


def top_scores(
    scores: Sequence[int], n: int = config.SHORT_SCORE_COUNT
) -> List[Tuple[str, int]]:
    """
    Return the n highest luck scores as (category, score) pairs.

    Ties keep category order.
    """
    if n <= 0:
        raise ValueError("Number of scores must be positive")
    ranked = sorted(named_scores(scores).items(), key=lambda item: -item[1])
    return ranked[:n]
