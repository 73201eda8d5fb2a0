"""
Custom exceptions for the motifkit library.

All exceptions inherit from MotifkitError for easy catching of library-specific
errors. A search that finds nothing is not an error; these are raised only for
malformed requests.
"""

from typing import Any, Dict, Optional


class MotifkitError(Exception):
    """Base exception for all motifkit errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class AlphabetError(MotifkitError):
    """Raised when an alphabet definition is inconsistent."""

    def __init__(self, message: str, alphabet: Optional[str] = None) -> None:
        ctx = {}
        if alphabet:
            ctx["alphabet"] = alphabet
        super().__init__(message, ctx)
        self.alphabet = alphabet


class InvalidSymbol(MotifkitError):
    """Raised when a sequence contains a symbol outside its alphabet."""

    def __init__(self, symbol: str, position: int, alphabet: str) -> None:
        super().__init__(
            f"Invalid symbol {symbol!r}",
            {"position": position, "alphabet": alphabet},
        )
        self.symbol = symbol
        self.position = position
        self.alphabet = alphabet


class NoComplementDefined(MotifkitError):
    """Raised when a complement is requested from an alphabet without one."""

    def __init__(self, alphabet: str) -> None:
        super().__init__("Alphabet has no complement mapping", {"alphabet": alphabet})
        self.alphabet = alphabet


class EmptyPattern(MotifkitError):
    """Raised when a motif search is invoked with a zero-length pattern."""

    def __init__(self, message: str = "Pattern must contain at least one symbol.") -> None:
        super().__init__(message)


class EmptyCollection(MotifkitError):
    """Raised when a common-substring search receives no sequences."""

    def __init__(self, message: str = "At least one sequence is required.") -> None:
        super().__init__(message)


class InvalidRange(MotifkitError):
    """Raised when palindrome length bounds are malformed."""

    def __init__(self, min_len: int, max_len: int) -> None:
        super().__init__(
            "Palindrome length range must satisfy 1 <= min_len <= max_len",
            {"min_len": min_len, "max_len": max_len},
        )
        self.min_len = min_len
        self.max_len = max_len
