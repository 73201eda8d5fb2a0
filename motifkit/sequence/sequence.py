"""
Immutable, validated biological sequences.
"""

from typing import Iterable, Iterator, List, Optional, Union, overload

from motifkit.exceptions import AlphabetError, InvalidSymbol
from motifkit.sequence.alphabet import DNA, RNA, Alphabet


class Sequence:
    """
    An immutable sequence of symbols over an alphabet.

    Every symbol is checked against the alphabet on construction, so engines
    receiving a Sequence can rely on it. Equality and hashing are structural
    on the symbols.

    Example:
        >>> seq = Sequence("GATTACA")
        >>> len(seq), seq[0], str(seq[1:4])
        (7, 'G', 'ATT')
    """

    __slots__ = ("_symbols", "_alphabet")

    def __init__(self, symbols: str, alphabet: Alphabet = DNA) -> None:
        for position, symbol in enumerate(symbols):
            if symbol not in alphabet:
                raise InvalidSymbol(symbol, position, alphabet.name)
        self._symbols = symbols
        self._alphabet = alphabet

    @property
    def symbols(self) -> str:
        return self._symbols

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def __len__(self) -> int:
        return len(self._symbols)

    @overload
    def __getitem__(self, key: int) -> str: ...

    @overload
    def __getitem__(self, key: slice) -> "Sequence": ...

    def __getitem__(self, key: Union[int, slice]) -> Union[str, "Sequence"]:
        if isinstance(key, slice):
            return Sequence(self._symbols[key], self._alphabet)
        return self._symbols[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence):
            return self._symbols == other._symbols
        if isinstance(other, str):
            return self._symbols == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __str__(self) -> str:
        return self._symbols

    def __repr__(self) -> str:
        return f"Sequence({self._symbols!r}, alphabet={self._alphabet.name})"

    def reverse_complement(self) -> "Sequence":
        """
        Complement every symbol and reverse the result.

        Raises:
            NoComplementDefined: If the alphabet has no complement mapping

        Example:
            >>> str(Sequence("AAAACCCGGT").reverse_complement())
            'ACCGGGTTTT'
        """
        complemented = "".join(
            self._alphabet.complement_of(symbol) for symbol in reversed(self._symbols)
        )
        return Sequence(complemented, self._alphabet)

    def transcribe(self) -> "Sequence":
        """
        Transcribe a DNA sequence into RNA (T becomes U).

        Raises:
            AlphabetError: If the sequence is not over the DNA alphabet

        Example:
            >>> str(Sequence("GATGGAACTTG").transcribe())
            'GAUGGAACUUG'
        """
        if self._alphabet != DNA:
            raise AlphabetError("Only DNA sequences can be transcribed", self._alphabet.name)
        return Sequence(self._symbols.replace("T", "U"), RNA)

    def counts(self) -> List[int]:
        """Occurrences of each alphabet symbol, in alphabet order."""
        return [self._symbols.count(symbol) for symbol in self._alphabet.symbols]


def as_text(sequence: Union[str, Sequence]) -> str:
    """Plain string view of a Sequence or str."""
    if isinstance(sequence, Sequence):
        return sequence.symbols
    return sequence


def shared_alphabet(sequences: Iterable[Union[str, Sequence]]) -> Optional[Alphabet]:
    """
    Alphabet common to every Sequence among the inputs.

    Plain strings carry no alphabet and are ignored.

    Returns:
        The shared alphabet, or None if no input is a Sequence

    Raises:
        AlphabetError: If two Sequence inputs use different alphabets
    """
    alphabet = None
    for sequence in sequences:
        if not isinstance(sequence, Sequence):
            continue
        if alphabet is None:
            alphabet = sequence.alphabet
        elif sequence.alphabet != alphabet:
            raise AlphabetError(
                f"Sequences mix alphabets {alphabet.name} and {sequence.alphabet.name}",
                sequence.alphabet.name,
            )
    return alphabet
