from ..core import is_success_all
from .partition import partition
from .resolve import resolve, resolve_map
from .sequence import sequence, sequence_map

__all__ = (
    # Checks
    "is_success_all",
    # Pure
    "partition",
    "sequence",
    "sequence_map",
    # Async
    "resolve",
    "resolve_map",
)
