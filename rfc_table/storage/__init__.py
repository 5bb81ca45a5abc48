"""Document storage for the rendered table."""

from .document import (
    BEGIN_MARKER,
    END_MARKER,
    DocumentManager,
    MarkerNotFoundError,
    find_markers,
    inject_table,
    list_doc_files,
)

__all__ = [
    "BEGIN_MARKER",
    "END_MARKER",
    "DocumentManager",
    "MarkerNotFoundError",
    "find_markers",
    "inject_table",
    "list_doc_files",
]
