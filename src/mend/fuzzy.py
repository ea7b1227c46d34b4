"""Closest-match ranking over a candidate vocabulary."""

from __future__ import annotations

from collections.abc import Iterable
from difflib import SequenceMatcher

DEFAULT_MAX_RESULTS = 3
DEFAULT_MIN_RATIO = 0.6


def closest_matches(
    target: str,
    candidates: Iterable[str],
    max_results: int = DEFAULT_MAX_RESULTS,
    min_ratio: float = DEFAULT_MIN_RATIO,
) -> list[str]:
    """Return the candidates most similar to `target`, best first.

    Similarity is the Ratcliff/Obershelp ratio from `difflib`. Unlike
    `difflib.get_close_matches`, equal scores keep the original candidate
    order, so the result is stable for a fixed input.
    """

    if max_results <= 0:
        raise ValueError(f"max_results must be > 0: {max_results!r}")
    if not 0.0 <= min_ratio <= 1.0:
        raise ValueError(f"min_ratio must be in [0.0, 1.0]: {min_ratio!r}")

    matcher = SequenceMatcher()
    matcher.set_seq2(target)
    scored: list[tuple[float, int, str]] = []
    for index, candidate in enumerate(candidates):
        matcher.set_seq1(candidate)
        # cheap upper bounds first
        if matcher.real_quick_ratio() < min_ratio or matcher.quick_ratio() < min_ratio:
            continue
        ratio = matcher.ratio()
        if ratio >= min_ratio:
            scored.append((ratio, index, candidate))

    scored.sort(key=lambda item: (-item[0], item[1]))
    return [candidate for _, _, candidate in scored[:max_results]]


def closest_match(
    target: str,
    candidates: Iterable[str],
    min_ratio: float = DEFAULT_MIN_RATIO,
    default: str | None = None,
) -> str | None:
    """Return the single best candidate, or `default` when nothing is close enough."""

    matches = closest_matches(target, candidates, max_results=1, min_ratio=min_ratio)
    return matches[0] if matches else default
