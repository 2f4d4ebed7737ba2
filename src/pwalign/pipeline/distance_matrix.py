"""
All-pairs distance matrix for progressive alignment and tree building.

Every pair is aligned independently, so pairs are distributed over a
process pool with no coordination beyond collecting results.
"""

import logging
from dataclasses import dataclass
from multiprocessing import Pool, cpu_count
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

import numpy as np

from ..algorithms import get_aligner
from ..config.config_loader import ConfigLoader, get_config
from ..core.errors import EmptyComparisonError
from ..core.scoring import Scoring
from ..diagnostics.validation import check_pair_size

logger = logging.getLogger('pwalign')

SequenceSet = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


@dataclass(frozen=True, eq=False)
class DistanceMatrix:
    """Symmetric matrix of pairwise distances with a zero diagonal."""
    names: Tuple[str, ...]
    values: np.ndarray

    def index(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise KeyError(name) from None

    def __getitem__(self, key: Tuple[str, str]) -> float:
        name1, name2 = key
        return float(self.values[self.index(name1), self.index(name2)])

    def __len__(self):
        return len(self.names)


def parse_num_workers(num_workers_spec) -> int:
    """Parse num_workers specification."""
    if num_workers_spec == 'auto':
        return max(1, cpu_count() - 1)
    elif isinstance(num_workers_spec, str) and num_workers_spec.isdigit():
        return max(1, int(num_workers_spec))
    elif isinstance(num_workers_spec, int):
        return max(1, num_workers_spec)
    else:
        return 1


def setup_logging(config: Dict[str, Any]) -> logging.Logger:
    """Setup logging configuration from the ``logging`` config section."""
    log_level_str = config.get('level', 'INFO')
    log_level = getattr(logging, str(log_level_str).upper(), logging.INFO)

    logger = logging.getLogger('pwalign')
    logger.setLevel(log_level)

    # Remove existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    log_file = config.get('file')
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file)
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


def _unpack(sequences: SequenceSet) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    items = list(sequences.items()) if isinstance(sequences, Mapping) else list(sequences)
    names = tuple(name for name, _ in items)
    if len(set(names)) != len(names):
        raise ValueError("Sequence names must be unique")
    return names, tuple(seq for _, seq in items)


def _pair_distance(task) -> Tuple[int, int, float]:
    i, j, a, b, method, scoring, undefined_distance = task
    alignment = get_aligner(method)(a, b, scoring).align()
    try:
        return i, j, alignment.distance()
    except EmptyComparisonError:
        if undefined_distance is None:
            raise
        logger.warning(f"No compared positions between sequences {i} and {j}; "
                       f"using {undefined_distance}")
        return i, j, undefined_distance


def compute_distance_matrix(
    sequences: SequenceSet,
    scoring: Scoring,
    method: str = 'clustalw',
    num_workers: Union[int, str] = 1,
    max_cells: Optional[int] = None,
    undefined_distance: Optional[float] = None
) -> DistanceMatrix:
    """
    Align every unordered pair and collect ``distance()`` into a matrix.

    Args:
        sequences: Mapping or iterable of (name, sequence)
        scoring: Scoring shared read-only by all pairs
        method: Registered alignment method
        num_workers: Worker processes, ``'auto'`` for cpu_count() - 1
        max_cells: Reject any pair whose grid exceeds this many cells
        undefined_distance: Value used when a pair has no compared positions;
            None propagates EmptyComparisonError and aborts the batch

    Returns:
        DistanceMatrix over the sequence names in input order
    """
    names, seqs = _unpack(sequences)
    get_aligner(method)

    tasks = []
    for i in range(len(seqs)):
        for j in range(i + 1, len(seqs)):
            check_pair_size(seqs[i], seqs[j], max_cells)
            tasks.append((i, j, seqs[i], seqs[j], method, scoring, undefined_distance))

    workers = min(parse_num_workers(num_workers), max(1, len(tasks)))
    logger.info(f"Computing {len(tasks)} pairwise distances for {len(seqs)} sequences "
                f"({method}, {workers} worker(s))")

    if workers > 1:
        with Pool(processes=workers) as pool:
            results = pool.map(_pair_distance, tasks)
    else:
        results = [_pair_distance(task) for task in tasks]

    values = np.zeros((len(seqs), len(seqs)), dtype=float)
    for i, j, dist in results:
        values[i, j] = dist
        values[j, i] = dist

    return DistanceMatrix(names=names, values=values)


def compute_distance_matrix_from_config(
    sequences: SequenceSet,
    config: Optional[ConfigLoader] = None
) -> DistanceMatrix:
    """Run ``compute_distance_matrix`` with scoring, limits and workers from configuration."""
    config = config or get_config()
    pipeline_params = config.get_pipeline_params()
    return compute_distance_matrix(
        sequences,
        Scoring.from_config(config.get_scoring_params()),
        method=config.get_alignment_params().get('method', 'clustalw'),
        num_workers=pipeline_params.get('num_workers', 1),
        max_cells=config.get_limits_params().get('max_cells'),
        undefined_distance=pipeline_params.get('undefined_distance'),
    )
