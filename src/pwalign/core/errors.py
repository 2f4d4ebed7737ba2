"""
Error types raised by the alignment engine.
"""

from typing import Optional


class PWAlignError(Exception):
    """Base class for alignment errors."""
    pass


class UnknownSymbolError(PWAlignError):
    """Raised when a residue is absent from the substitution matrix."""
    def __init__(self, symbol: str, position: Optional[int] = None):
        self.symbol = symbol
        self.position = position
        if position is None:
            message = f"Symbol {symbol!r} is not in the substitution matrix"
        else:
            message = f"Symbol {symbol!r} at position {position} is not in the substitution matrix"
        super().__init__(message)


class EmptyInputError(PWAlignError):
    """Raised when one or both input sequences are empty."""
    pass


class EmptyComparisonError(PWAlignError):
    """Raised when an alignment has no compared positions to derive a distance from."""
    pass


class InconsistentAlignmentError(PWAlignError):
    """Raised when the two aligned strings differ in length."""
    def __init__(self, len_a: int, len_b: int):
        self.len_a = len_a
        self.len_b = len_b
        super().__init__(f"Aligned sequences differ in length: {len_a} != {len_b}")


class SequenceTooLongError(PWAlignError):
    """Raised when a sequence pair would need a grid larger than the configured limit."""
    def __init__(self, cells: int, max_cells: int):
        self.cells = cells
        self.max_cells = max_cells
        super().__init__(f"Alignment grid of {cells} cells exceeds limit of {max_cells}")
