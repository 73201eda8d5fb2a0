"""
Symbol and k-mer composition of sequences.

Counts are indexed by the alphabet's canonical ordering, so k-mers come out in
lexicographic order of that alphabet (AA, AC, AG, AT, CA, ... for DNA).
"""

from itertools import product
from typing import Iterable, List, Optional, Union

import numpy as np

from motifkit.exceptions import EmptyCollection
from motifkit.sequence.alphabet import DNA, Alphabet
from motifkit.sequence.sequence import Sequence, as_text, shared_alphabet


def _resolve_alphabet(
    sequence: Union[str, Sequence],
    alphabet: Optional[Alphabet],
) -> Alphabet:
    if alphabet is not None:
        return alphabet
    if isinstance(sequence, Sequence):
        return sequence.alphabet
    return DNA


def symbol_counts(
    sequence: Union[str, Sequence],
    alphabet: Optional[Alphabet] = None
) -> List[int]:
    """
    Count each alphabet symbol in a sequence.

    Args:
        sequence: Sequence or plain string
        alphabet: Alphabet to count over (defaults to the sequence's own, or DNA)

    Returns:
        List of counts in alphabet order

    Raises:
        InvalidSymbol: If the sequence holds a symbol outside the alphabet

    Example:
        >>> symbol_counts("ATTCCC")
        [1, 3, 0, 2]
    """
    if isinstance(sequence, Sequence) and alphabet is None:
        return sequence.counts()
    return Sequence(as_text(sequence), _resolve_alphabet(sequence, alphabet)).counts()


def generate_kmers(k: int, alphabet: Alphabet = DNA) -> List[str]:
    """Generate all possible k-mers over an alphabet in lexicographic order."""
    return ["".join(kmer) for kmer in product(alphabet.symbols, repeat=k)]


def kmer_composition(
    sequence: Union[str, Sequence],
    k: int = 4,
    alphabet: Optional[Alphabet] = None
) -> np.ndarray:
    """
    Count every overlapping k-mer of a sequence.

    Args:
        sequence: Sequence or plain string
        k: Length of k-mers
        alphabet: Alphabet defining the k-mer ordering

    Returns:
        numpy integer array of shape (len(alphabet) ** k,) where entry i counts
        the i-th k-mer of generate_kmers(k, alphabet)

    Example:
        >>> kmer_composition("ACGACCTACC", k=2).tolist()
        [0, 3, 0, 0, 0, 2, 1, 1, 1, 0, 0, 0, 1, 0, 0, 0]
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")

    alphabet = _resolve_alphabet(sequence, alphabet)
    text = as_text(sequence)
    base = len(alphabet)

    counts = np.zeros(base ** k, dtype=np.int64)

    for i in range(len(text) - k + 1):
        # Index of the k-mer in base-|alphabet| positional notation
        idx = 0
        for symbol in text[i:i + k]:
            idx = idx * base + alphabet.index(symbol)
        counts[idx] += 1

    return counts


def profile_matrix(
    sequences: Iterable[Union[str, Sequence]],
    alphabet: Optional[Alphabet] = None
) -> np.ndarray:
    """
    Count the symbols at every column of equal-length sequences.

    Args:
        sequences: Non-empty collection of sequences of the same length
        alphabet: Alphabet defining the row order (defaults to the
            sequences' shared alphabet, or DNA for plain strings)

    Returns:
        numpy integer array of shape (len(alphabet), length) where entry
        [r, c] counts alphabet symbol r at column c

    Raises:
        EmptyCollection: If no sequences are given
        ValueError: If the sequences differ in length
        AlphabetError: If the Sequence inputs use different alphabets

    Example:
        >>> profile_matrix(["AC", "AG"]).tolist()
        [[2, 0], [0, 1], [0, 1], [0, 0]]
    """
    sequences = list(sequences)
    if not sequences:
        raise EmptyCollection()

    if alphabet is None:
        alphabet = shared_alphabet(sequences) or DNA

    texts = [as_text(seq) for seq in sequences]
    length = len(texts[0])
    if any(len(text) != length for text in texts):
        raise ValueError("Profile requires sequences of equal length")

    profile = np.zeros((len(alphabet), length), dtype=np.int64)

    for text in texts:
        for column, symbol in enumerate(text):
            profile[alphabet.index(symbol), column] += 1

    return profile


def consensus(
    sequences: Iterable[Union[str, Sequence]],
    alphabet: Optional[Alphabet] = None
) -> str:
    """
    Most frequent symbol at each column of equal-length sequences.

    Ties go to the symbol earliest in the alphabet ordering.

    Example:
        >>> consensus(["ATCCAGCT", "GGGCAACT", "ATGGATCT"])
        'ATGCAACT'
    """
    sequences = list(sequences)
    if alphabet is None:
        alphabet = shared_alphabet(sequences) or DNA

    profile = profile_matrix(sequences, alphabet)
    return "".join(alphabet.symbols[row] for row in np.argmax(profile, axis=0))
