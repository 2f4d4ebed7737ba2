"""
Scoring model: substitution matrix plus affine gap penalties.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Sequence, Tuple

import numpy as np
from Bio.Align import substitution_matrices

from .errors import UnknownSymbolError


class SubstitutionMatrix:
    """
    Replacement scores for every ordered pair of residue symbols.

    Rows are indexed by the symbol from the top sequence, columns by the
    symbol from the bottom sequence. The table is read-only once built and
    need not be symmetric.
    """

    def __init__(self, alphabet: Iterable[str], scores):
        symbols = list(alphabet)
        if not symbols:
            raise ValueError("Substitution matrix alphabet is empty")
        if len(set(symbols)) != len(symbols):
            raise ValueError(f"Duplicate symbols in alphabet: {''.join(symbols)}")

        table = np.array(scores, dtype=float)
        if table.shape != (len(symbols), len(symbols)):
            raise ValueError(
                f"Score table shape {table.shape} does not match alphabet of {len(symbols)} symbols"
            )
        if not np.all(np.isfinite(table)):
            raise ValueError("Substitution scores must be finite")
        table.setflags(write=False)

        self.alphabet = ''.join(symbols)
        self._index = {symbol: k for k, symbol in enumerate(symbols)}
        self._table = table

    @classmethod
    def identity(cls, alphabet: str, match: float = 1.0, mismatch: float = -1.0) -> 'SubstitutionMatrix':
        """Uniform matrix rewarding identical symbols and penalising all others."""
        size = len(alphabet)
        scores = np.full((size, size), mismatch, dtype=float)
        np.fill_diagonal(scores, match)
        return cls(alphabet, scores)

    @classmethod
    def from_dict(cls, pairs: Mapping[Tuple[str, str], float]) -> 'SubstitutionMatrix':
        """Build from ``{(x, y): score}``; every ordered pair must be present."""
        symbols = []
        for x, y in pairs:
            for symbol in (x, y):
                if symbol not in symbols:
                    symbols.append(symbol)

        scores = np.zeros((len(symbols), len(symbols)), dtype=float)
        for r, x in enumerate(symbols):
            for c, y in enumerate(symbols):
                if (x, y) not in pairs:
                    raise ValueError(f"Missing substitution score for pair ({x!r}, {y!r})")
                scores[r, c] = pairs[(x, y)]
        return cls(symbols, scores)

    @classmethod
    def load(cls, name: str) -> 'SubstitutionMatrix':
        """Named matrix bundled with Biopython, e.g. BLOSUM62 or PAM250."""
        matrix = substitution_matrices.load(name)
        return cls(matrix.alphabet, np.asarray(matrix, dtype=float))

    def score(self, x: str, y: str) -> float:
        try:
            return float(self._table[self._index[x], self._index[y]])
        except KeyError:
            missing = x if x not in self._index else y
            raise UnknownSymbolError(missing) from None

    def check(self, sequence: Sequence[str]):
        """Raise UnknownSymbolError for the first symbol outside the alphabet."""
        for position, symbol in enumerate(sequence):
            if symbol not in self._index:
                raise UnknownSymbolError(symbol, position)

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self._table, self._table.T))

    def to_array(self) -> np.ndarray:
        return self._table

    def __contains__(self, symbol):
        return symbol in self._index

    def __eq__(self, other):
        if not isinstance(other, SubstitutionMatrix):
            return NotImplemented
        return self.alphabet == other.alphabet and np.array_equal(self._table, other._table)

    def __hash__(self):
        return hash((self.alphabet, self._table.tobytes()))

    def __repr__(self):
        return f"SubstitutionMatrix(alphabet={self.alphabet!r})"


@dataclass(frozen=True)
class Scoring:
    """
    Substitution matrix and affine gap penalties.

    Penalties are costs: algorithms subtract them. A gap run of length L
    costs ``gap_opening + (L - 1) * gap_extension``.
    """
    replacement: SubstitutionMatrix
    gap_opening: float
    gap_extension: float

    def __post_init__(self):
        for name in ('gap_opening', 'gap_extension'):
            value = float(getattr(self, name))
            if not np.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
            if value < 0:
                raise ValueError(f"{name} is a cost and must be >= 0, got {value}")
            object.__setattr__(self, name, value)

    def gap_cost(self, length: int) -> float:
        """Total cost of a gap run of the given length."""
        if length <= 0:
            return 0.0
        return self.gap_opening + (length - 1) * self.gap_extension

    @classmethod
    def from_config(cls, params: Mapping[str, Any]) -> 'Scoring':
        """
        Build from a ``scoring`` configuration section.

        The ``matrix`` entry either names a bundled matrix (``name: BLOSUM62``)
        or describes a uniform one (``alphabet``, ``match``, ``mismatch``).
        """
        matrix_params: Dict[str, Any] = dict(params.get('matrix') or {})
        if matrix_params.get('name'):
            replacement = SubstitutionMatrix.load(matrix_params['name'])
        else:
            replacement = SubstitutionMatrix.identity(
                matrix_params.get('alphabet', 'ACGT'),
                match=matrix_params.get('match', 1.0),
                mismatch=matrix_params.get('mismatch', -1.0),
            )
        return cls(
            replacement=replacement,
            gap_opening=params.get('gap_opening', 10.0),
            gap_extension=params.get('gap_extension', 0.1),
        )
