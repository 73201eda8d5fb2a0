#!/usr/bin/env python3
"""
Example: Sequence Matching with motifkit

This example demonstrates the matching engines:
- Motif search with the prefix function
- Shared motifs across several sequences
- Longest common subsequence
- Restriction sites (reverse palindromes)
- K-mer composition
"""

import logging
import sys
sys.path.insert(0, '..')

from motifkit import (
    Sequence,
    configure_logging,
    find_reverse_palindromes,
    kmer_composition,
    locate,
    longest_common_subsequence,
    longest_common_substring,
)
from motifkit.matching import build_prefix_array, find_subsequence_indices
from motifkit.sequence import generate_kmers


def demo_motif_search():
    """Demonstrate exact motif search."""
    print("\n" + "=" * 60)
    print("MOTIF SEARCH")
    print("=" * 60)

    dna = Sequence("GATATATGCATATACTT")
    motif = Sequence("ATAT")
    print(f"\nText:  {dna}")
    print(f"Motif: {motif}")
    print(f"Failure array: {build_prefix_array(motif)}")

    positions = locate(dna, motif)
    # Convert to 1-based for display
    print(f"Positions (1-based): {' '.join(str(p + 1) for p in positions)}")


def demo_shared_motifs():
    """Demonstrate common substring and subsequence search."""
    print("\n" + "=" * 60)
    print("SHARED MOTIFS")
    print("=" * 60)

    sequences = [Sequence(s) for s in ["GATTACA", "TAGACCA", "ATACA"]]
    print(f"\nSequences: {', '.join(str(s) for s in sequences)}")
    print(f"Longest common substring: {longest_common_substring(sequences)}")

    a, b = Sequence("AACCTTGG"), Sequence("ACACTGTGA")
    print(f"\nLCS of {a} and {b}: {longest_common_subsequence(a, b)}")

    indices = find_subsequence_indices("ACGTACGTGACG", "GTA")
    print(f"Spliced motif GTA in ACGTACGTGACG at: {indices}")


def demo_restriction_sites():
    """Demonstrate reverse palindrome scanning."""
    print("\n" + "=" * 60)
    print("RESTRICTION SITES")
    print("=" * 60)

    dna = Sequence("TCAATGCATGCGGGTCTATATGCAT")
    print(f"\nSequence: {dna}")
    for match in find_reverse_palindromes(dna, min_len=4, max_len=12):
        print(f"   {match.start + 1:>3} {match.length:>3}  {dna[match.start:match.end]}")


def demo_composition():
    """Demonstrate k-mer composition."""
    print("\n" + "=" * 60)
    print("K-MER COMPOSITION")
    print("=" * 60)

    dna = Sequence("ACGACCTACC")
    counts = kmer_composition(dna, k=2)
    print(f"\nSequence: {dna}")
    for kmer, count in zip(generate_kmers(2), counts):
        if count:
            print(f"   {kmer}: {count}")


if __name__ == "__main__":
    configure_logging(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)

    demo_motif_search()
    demo_shared_motifs()
    demo_restriction_sites()
    demo_composition()
