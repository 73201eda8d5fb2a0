"""
Sequences and alphabets.

This module provides:
- Alphabets with optional complement mappings (DNA, RNA, protein)
- Validated, immutable Sequence values
- Symbol and k-mer composition counts
- Profile matrices and consensus strings
"""

from motifkit.sequence.alphabet import (
    Alphabet,
    DNA,
    RNA,
    PROTEIN,
)

from motifkit.sequence.sequence import Sequence, as_text, shared_alphabet

from motifkit.sequence.composition import (
    symbol_counts,
    generate_kmers,
    kmer_composition,
    profile_matrix,
    consensus,
)

__all__ = [
    "Alphabet",
    "DNA",
    "RNA",
    "PROTEIN",
    "Sequence",
    "as_text",
    "shared_alphabet",
    "symbol_counts",
    "generate_kmers",
    "kmer_composition",
    "profile_matrix",
    "consensus",
]
