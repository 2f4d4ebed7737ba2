from .results_writer import (
    format_summary,
    write_alignment,
    format_phylip,
    write_phylip,
)

__all__ = [
    'format_summary',
    'write_alignment',
    'format_phylip',
    'write_phylip',
]
