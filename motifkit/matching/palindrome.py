"""
Reverse-palindrome (restriction site) detection.

A reverse palindrome equals the reverse complement of itself, e.g. GCATGC.
Complement pairing forces even lengths, so every match is centred between two
symbols; each centre is expanded outward while the flanking symbols pair.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

from motifkit._logging import get_logger, log_search
from motifkit.exceptions import InvalidRange, NoComplementDefined
from motifkit.sequence.alphabet import DNA, Alphabet
from motifkit.sequence.sequence import Sequence, as_text

logger = get_logger(__name__)

# Restriction enzyme recognition sites are typically 4 to 12 bp long
DEFAULT_MIN_PALINDROME = 4
DEFAULT_MAX_PALINDROME = 12


@dataclass(frozen=True)
class PalindromeMatch:
    """A reverse palindrome at a 0-based start offset."""
    start: int
    length: int

    @property
    def end(self) -> int:
        """Exclusive end offset."""
        return self.start + self.length


def find_reverse_palindromes(
    sequence: Union[str, Sequence],
    min_len: int = DEFAULT_MIN_PALINDROME,
    max_len: int = DEFAULT_MAX_PALINDROME,
    alphabet: Optional[Alphabet] = None
) -> List[PalindromeMatch]:
    """
    Find every reverse palindrome with length in [min_len, max_len].

    Nested and overlapping palindromes are all reported.

    Args:
        sequence: Sequence to scan
        min_len: Minimum palindrome length (inclusive)
        max_len: Maximum palindrome length (inclusive)
        alphabet: Alphabet providing the complement; defaults to the
            sequence's own alphabet, or DNA for plain strings

    Returns:
        Matches sorted by (start, length)

    Raises:
        InvalidRange: If min_len < 1 or min_len > max_len
        NoComplementDefined: If the alphabet has no complement mapping

    Example:
        >>> find_reverse_palindromes("ACGT", 4, 4)
        [PalindromeMatch(start=0, length=4)]
    """
    if min_len < 1 or min_len > max_len:
        raise InvalidRange(min_len, max_len)

    if alphabet is None:
        alphabet = sequence.alphabet if isinstance(sequence, Sequence) else DNA
    if not alphabet.has_complement:
        raise NoComplementDefined(alphabet.name)
    complement = alphabet.complement

    text = as_text(sequence)
    n = len(text)
    max_half = max_len // 2
    matches = []

    # Centre c lies between text[c - 1] and text[c]
    for centre in range(1, n):
        for half in range(1, max_half + 1):
            left = centre - half
            right = centre + half - 1
            if left < 0 or right >= n:
                break
            if complement.get(text[left]) != text[right]:
                break
            if 2 * half >= min_len:
                matches.append(PalindromeMatch(start=left, length=2 * half))

    matches.sort(key=lambda match: (match.start, match.length))

    log_search(
        logger,
        "find_reverse_palindromes",
        sequence_length=n,
        min_len=min_len,
        max_len=max_len,
        matches=len(matches),
    )
    return matches
