"""
Prefix function (failure array) and linear-time exact motif search.

The failure array of a pattern stores, for every position i, the length of the
longest proper prefix of pattern[:i + 1] that is also a suffix of it. The
Knuth-Morris-Pratt scan uses it to avoid re-reading text symbols, giving
O(len(text) + len(pattern)) matching with overlapping hits.
"""

from typing import List, Union

from motifkit._logging import get_logger, log_search
from motifkit.exceptions import EmptyPattern
from motifkit.sequence.sequence import Sequence, as_text, shared_alphabet

logger = get_logger(__name__)


def build_prefix_array(pattern: Union[str, Sequence]) -> List[int]:
    """
    Compute the failure array of a pattern.

    Args:
        pattern: Pattern to preprocess (may be empty)

    Returns:
        List of len(pattern) non-negative integers

    Example:
        >>> build_prefix_array("ABABAB")
        [0, 0, 1, 2, 3, 4]
    """
    pattern = as_text(pattern)
    m = len(pattern)
    prefix = [0] * m

    k = 0
    for i in range(1, m):
        while k > 0 and pattern[i] != pattern[k]:
            k = prefix[k - 1]
        if pattern[i] == pattern[k]:
            k += 1
        prefix[i] = k

    return prefix


def locate(text: Union[str, Sequence], pattern: Union[str, Sequence]) -> List[int]:
    """
    Find every occurrence of a pattern in a text, overlaps included.

    Args:
        text: Sequence to search in
        pattern: Non-empty motif to search for

    Returns:
        Strictly increasing list of 0-based start offsets (empty if no match)

    Raises:
        EmptyPattern: If the pattern is empty
        AlphabetError: If text and pattern are Sequences over different alphabets

    Example:
        >>> locate("GATATATGCATATACTT", "ATAT")
        [1, 3, 9]
    """
    shared_alphabet((text, pattern))
    text = as_text(text)
    pattern = as_text(pattern)
    m = len(pattern)
    if m == 0:
        raise EmptyPattern()

    prefix = build_prefix_array(pattern)
    positions = []

    k = 0
    for i, symbol in enumerate(text):
        while k > 0 and symbol != pattern[k]:
            k = prefix[k - 1]
        if symbol == pattern[k]:
            k += 1
        if k == m:
            positions.append(i - m + 1)
            # Keep the longest border so overlapping hits are found
            k = prefix[k - 1]

    log_search(logger, "locate", text_length=len(text), pattern_length=m, matches=len(positions))
    return positions


def contains(text: Union[str, Sequence], pattern: Union[str, Sequence]) -> bool:
    """Whether a non-empty pattern occurs in text, stopping at the first hit."""
    text = as_text(text)
    pattern = as_text(pattern)
    m = len(pattern)
    if m == 0:
        raise EmptyPattern()

    prefix = build_prefix_array(pattern)
    k = 0
    for symbol in text:
        while k > 0 and symbol != pattern[k]:
            k = prefix[k - 1]
        if symbol == pattern[k]:
            k += 1
        if k == m:
            return True
    return False
