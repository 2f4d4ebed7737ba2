from .distance_matrix import (
    DistanceMatrix,
    compute_distance_matrix,
    compute_distance_matrix_from_config,
    parse_num_workers,
    setup_logging,
)

__all__ = [
    'DistanceMatrix',
    'compute_distance_matrix',
    'compute_distance_matrix_from_config',
    'parse_num_workers',
    'setup_logging',
]
