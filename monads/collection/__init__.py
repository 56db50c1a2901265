from .partition import partition, validate
from .sequence import sequence
from .traverse import traverse

__all__ = (
    "partition",
    "sequence",
    "traverse",
    "validate",
)
