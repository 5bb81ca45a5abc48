"""Status classification and Markdown table rendering."""

from .classifier import classify
from .links import RepositoryLinks, find_doc_file, resolve_link
from .metadata import IssueMetadata, extract_metadata
from .renderer import IssueRecord, TableRenderer, build_records, render_rows
from .status import (
    DEFAULT_STATUS_REGISTRY,
    UNKNOWN_STATUS,
    StatusEntry,
    StatusRegistry,
    normalize_status,
)

__all__ = [
    "DEFAULT_STATUS_REGISTRY",
    "UNKNOWN_STATUS",
    "IssueMetadata",
    "IssueRecord",
    "RepositoryLinks",
    "StatusEntry",
    "StatusRegistry",
    "TableRenderer",
    "build_records",
    "classify",
    "extract_metadata",
    "find_doc_file",
    "normalize_status",
    "render_rows",
    "resolve_link",
]
