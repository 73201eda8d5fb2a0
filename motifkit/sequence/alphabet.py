"""
Alphabets for biological sequences.

An alphabet is an ordered set of one-character symbols. Nucleotide alphabets
also carry a complement mapping (base pairing), which is what palindrome
scanning and reverse complementation require.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from motifkit.exceptions import AlphabetError, NoComplementDefined


@dataclass(frozen=True, eq=False)
class Alphabet:
    """
    Finite ordered symbol set with an optional complement mapping.

    Attributes:
        name: Human readable name, used in error messages
        symbols: The symbols in canonical order (e.g. "ACGT")
        complement: Optional involutive mapping symbol -> paired symbol
    """
    name: str
    symbols: str
    complement: Optional[Mapping[str, str]] = None

    def __post_init__(self) -> None:
        if len(set(self.symbols)) != len(self.symbols):
            raise AlphabetError("Alphabet symbols must be distinct", self.name)

        if self.complement is None:
            return

        if set(self.complement) != set(self.symbols):
            raise AlphabetError("Complement must be defined for every symbol", self.name)
        for symbol, paired in self.complement.items():
            if self.complement.get(paired) != symbol:
                raise AlphabetError(
                    f"Complement is not an involution at {symbol!r}", self.name
                )

        # Freeze the mapping so the alphabet stays a pure value
        object.__setattr__(self, "complement", MappingProxyType(dict(self.complement)))

    def _key(self) -> tuple:
        pairs = None if self.complement is None else frozenset(self.complement.items())
        return (self.name, self.symbols, pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and len(symbol) == 1 and symbol in self.symbols

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return self.name

    @property
    def has_complement(self) -> bool:
        return self.complement is not None

    def index(self, symbol: str) -> int:
        """Position of a symbol in the canonical ordering."""
        return self.symbols.index(symbol)

    def complement_of(self, symbol: str) -> str:
        """
        Get the paired symbol of a single symbol.

        Raises:
            NoComplementDefined: If the alphabet has no complement mapping
            KeyError: If the symbol is not part of the alphabet
        """
        if self.complement is None:
            raise NoComplementDefined(self.name)
        return self.complement[symbol]


DNA = Alphabet(
    name="DNA",
    symbols="ACGT",
    complement={"A": "T", "T": "A", "C": "G", "G": "C"},
)

RNA = Alphabet(
    name="RNA",
    symbols="ACGU",
    complement={"A": "U", "U": "A", "C": "G", "G": "C"},
)

# The 20 standard amino acids in one-letter code
PROTEIN = Alphabet(name="protein", symbols="ACDEFGHIKLMNPQRSTVWY")
