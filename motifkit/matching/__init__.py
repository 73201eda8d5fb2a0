"""
Exact and comparative string matching engines.

This module provides:
- Failure array construction and KMP motif search
- Longest common substring of a collection
- Longest common subsequence with witness
- Reverse-palindrome scanning
"""

from motifkit.matching.prefix import (
    build_prefix_array,
    locate,
    contains,
)

from motifkit.matching.substring import longest_common_substring

from motifkit.matching.subsequence import (
    longest_common_subsequence,
    lcs_length,
    find_subsequence_indices,
)

from motifkit.matching.palindrome import (
    find_reverse_palindromes,
    PalindromeMatch,
    DEFAULT_MIN_PALINDROME,
    DEFAULT_MAX_PALINDROME,
)

__all__ = [
    "build_prefix_array",
    "locate",
    "contains",
    "longest_common_substring",
    "longest_common_subsequence",
    "lcs_length",
    "find_subsequence_indices",
    "find_reverse_palindromes",
    "PalindromeMatch",
    "DEFAULT_MIN_PALINDROME",
    "DEFAULT_MAX_PALINDROME",
]
