"""
motifkit: exact string matching for biological sequences

This package provides tools for:
- Validated DNA/RNA/protein sequences over fixed alphabets
- Linear-time motif search with the prefix function (KMP)
- Longest common substrings and subsequences
- Reverse-palindrome (restriction site) detection
- Symbol and k-mer composition, profiles and consensus strings

All positions returned are 0-based.
"""

__version__ = "0.1.0"
__author__ = "motifkit Contributors"

from motifkit.sequence import (
    Alphabet,
    Sequence,
    DNA,
    RNA,
    PROTEIN,
    symbol_counts,
    kmer_composition,
    profile_matrix,
    consensus,
)

from motifkit.matching import (
    build_prefix_array,
    locate,
    longest_common_substring,
    longest_common_subsequence,
    lcs_length,
    find_subsequence_indices,
    find_reverse_palindromes,
    PalindromeMatch,
)

from motifkit.exceptions import (
    MotifkitError,
    AlphabetError,
    InvalidSymbol,
    NoComplementDefined,
    EmptyPattern,
    EmptyCollection,
    InvalidRange,
)

from motifkit._logging import configure_logging, enable_debug_logging, disable_logging

__all__ = [
    # Sequences
    "Alphabet",
    "Sequence",
    "DNA",
    "RNA",
    "PROTEIN",
    "symbol_counts",
    "kmer_composition",
    "profile_matrix",
    "consensus",
    # Matching
    "build_prefix_array",
    "locate",
    "longest_common_substring",
    "longest_common_subsequence",
    "lcs_length",
    "find_subsequence_indices",
    "find_reverse_palindromes",
    "PalindromeMatch",
    # Exceptions
    "MotifkitError",
    "AlphabetError",
    "InvalidSymbol",
    "NoComplementDefined",
    "EmptyPattern",
    "EmptyCollection",
    "InvalidRange",
    # Logging
    "configure_logging",
    "enable_debug_logging",
    "disable_logging",
]
