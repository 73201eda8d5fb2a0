"""
Longest common substring of a collection of sequences.

The first sequence is the reference: the result is always a window of it. A
common substring of length L implies common substrings of every shorter
length, so the maximal length is found by binary search, and the leftmost
reference window of that length is returned.
"""

from typing import Callable, Iterable, List, Optional, Set, Union

from motifkit._logging import get_logger, log_search
from motifkit.exceptions import EmptyCollection
from motifkit.matching.prefix import contains
from motifkit.sequence.sequence import Sequence, as_text, shared_alphabet

logger = get_logger(__name__)

CONTAINMENT_METHODS = ("hash", "kmp")


def _windows(text: str, length: int) -> Set[str]:
    return {text[i:i + length] for i in range(len(text) - length + 1)}


def _first_common_window(
    reference: str,
    others: List[str],
    length: int,
    method: str,
) -> Optional[str]:
    """Leftmost length-`length` window of reference occurring in all of `others`."""
    if method == "hash":
        window_sets = [_windows(text, length) for text in others]

        def occurs_everywhere(candidate: str) -> bool:
            return all(candidate in windows for windows in window_sets)
    else:
        def occurs_everywhere(candidate: str) -> bool:
            return all(contains(text, candidate) for text in others)

    checked: Set[str] = set()
    for i in range(len(reference) - length + 1):
        candidate = reference[i:i + length]
        if candidate in checked:
            continue
        if occurs_everywhere(candidate):
            return candidate
        checked.add(candidate)
    return None


def longest_common_substring(
    sequences: Iterable[Union[str, Sequence]],
    method: str = "hash",
) -> Optional[str]:
    """
    Find a longest substring shared by every sequence.

    Args:
        sequences: Non-empty collection of sequences; the first is the reference
        method: Containment test, "hash" (window sets) or "kmp" (prefix-function scan)

    Returns:
        The leftmost longest common window of the reference, or None if the
        sequences share no symbol

    Raises:
        EmptyCollection: If no sequences are given
        AlphabetError: If the Sequence inputs use different alphabets
        ValueError: If method is unknown

    Example:
        >>> longest_common_substring(["GATTACA", "TAGACCA", "ATACA"])
        'TA'
    """
    if method not in CONTAINMENT_METHODS:
        raise ValueError(f"Unknown containment method: {method}")

    sequences = list(sequences)
    shared_alphabet(sequences)
    texts = [as_text(seq) for seq in sequences]
    if not texts:
        raise EmptyCollection()

    reference, others = texts[0], texts[1:]
    shortest = min(len(text) for text in texts)

    # Invariant: a common window of length `lo` exists (best holds it);
    # none of length `hi + 1` does.
    best: Optional[str] = None
    lo, hi = 0, shortest
    while lo < hi:
        mid = (lo + hi + 1) // 2
        found = _first_common_window(reference, others, mid, method)
        if found is None:
            hi = mid - 1
        else:
            lo, best = mid, found

    log_search(
        logger,
        "longest_common_substring",
        sequences=len(texts),
        reference_length=len(reference),
        result_length=len(best) if best else 0,
    )
    return best
