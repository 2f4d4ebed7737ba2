from .validation import grid_cells, check_pair_size, validate_sequences

__all__ = [
    'grid_cells',
    'check_pair_size',
    'validate_sequences',
]
