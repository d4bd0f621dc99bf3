"""Min/max score scaling shared by ranking and query scoring."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_EPSILON = 1e-5


def normalize_scores(
    scores: Sequence[float],
    *,
    smaller_is_better: bool = False,
    epsilon: float = DEFAULT_EPSILON,
) -> list[float]:
    """Scale raw scores into [0, 1] so the best score becomes 1.0.

    Larger-is-better divides by the maximum (floored at ``epsilon``).
    Smaller-is-better divides the smallest positive score by each score;
    non-positive scores mean "no credit" and map to 0.0.
    """

    if not scores:
        return []

    if not smaller_is_better:
        high = max(max(scores), epsilon)
        return [score / high for score in scores]

    positive = [score for score in scores if score > 0]
    if not positive:
        return [0.0 for _ in scores]
    low = min(positive)
    return [low / max(score, epsilon) if score > 0 else 0.0 for score in scores]
