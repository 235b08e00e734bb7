from writings_core.errors import (
    CitationResolutionError,
    NotFoundError,
    RecordCountMismatchError,
    StructureError,
    WritingsError,
)
from writings_core.writings import Writings

__version__ = "0.1.0"

__all__ = [
    "CitationResolutionError",
    "NotFoundError",
    "RecordCountMismatchError",
    "StructureError",
    "Writings",
    "WritingsError",
    "__version__",
]
