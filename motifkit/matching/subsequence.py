"""
Longest common subsequence and spliced-motif embedding.

Implements the classic dynamic programming recurrence for the LCS of two
sequences, with an iterative traceback that yields one concrete witness.
"""

from typing import List, Optional, Union

import numpy as np

from motifkit._logging import get_logger, log_search
from motifkit.sequence.sequence import Sequence, as_text, shared_alphabet

logger = get_logger(__name__)


def _lcs_table(a: str, b: str) -> np.ndarray:
    """Table T with T[i, j] = LCS length of a[:i] and b[:j]."""
    m, n = len(a), len(b)
    table = np.zeros((m + 1, n + 1), dtype=np.int32)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                table[i, j] = table[i - 1, j - 1] + 1
            else:
                table[i, j] = max(table[i - 1, j], table[i, j - 1])

    return table


def longest_common_subsequence(
    a: Union[str, Sequence],
    b: Union[str, Sequence]
) -> str:
    """
    Find a longest common subsequence of two sequences.

    When several subsequences reach the maximal length, the traceback fixes
    one: matching symbols are taken diagonally, otherwise the walk moves up
    (drops a symbol of `a`) whenever that keeps the current length.

    Args:
        a: First sequence
        b: Second sequence

    Returns:
        A maximal common subsequence, "" if the sequences share no symbol

    Raises:
        AlphabetError: If a and b are Sequences over different alphabets

    Example:
        >>> longest_common_subsequence("ACAA", "TTTTTGGGGG")
        ''
    """
    shared_alphabet((a, b))
    a = as_text(a)
    b = as_text(b)
    table = _lcs_table(a, b)

    # Traceback
    witness = []
    i, j = len(a), len(b)

    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            witness.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1, j] == table[i, j]:
            i -= 1
        else:
            j -= 1

    result = "".join(reversed(witness))
    log_search(
        logger,
        "longest_common_subsequence",
        length_a=len(a),
        length_b=len(b),
        result_length=len(result),
    )
    return result


def lcs_length(a: Union[str, Sequence], b: Union[str, Sequence]) -> int:
    """
    Length of a longest common subsequence, using two rolling rows.

    Memory is O(min(len(a), len(b))); no witness is produced.
    """
    shared_alphabet((a, b))
    a = as_text(a)
    b = as_text(b)
    if len(b) > len(a):
        a, b = b, a

    previous = np.zeros(len(b) + 1, dtype=np.int32)
    current = np.zeros(len(b) + 1, dtype=np.int32)

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            if a[i - 1] == b[j - 1]:
                current[j] = previous[j - 1] + 1
            else:
                current[j] = max(previous[j], current[j - 1])
        previous, current = current, previous

    return int(previous[len(b)])


def find_subsequence_indices(
    text: Union[str, Sequence],
    motif: Union[str, Sequence]
) -> Optional[List[int]]:
    """
    Embed a motif as a (spliced) subsequence of a text.

    Each motif symbol is matched to the leftmost usable text position.

    Args:
        text: Sequence to search in
        motif: Subsequence to embed

    Returns:
        Strictly increasing 0-based positions in text, or None if the motif is
        not a subsequence of text

    Example:
        >>> find_subsequence_indices("ACGTACGTGACG", "GTA")
        [2, 3, 4]
    """
    shared_alphabet((text, motif))
    text = as_text(text)
    motif = as_text(motif)

    indices = []
    position = 0
    for symbol in motif:
        position = text.find(symbol, position)
        if position == -1:
            return None
        indices.append(position)
        position += 1

    return indices
