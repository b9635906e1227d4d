"""md-links: extract, validate and summarize links in Markdown files."""

from .api import md_links, process_document, run_pipeline
from .errors import (
    MdLinksError,
    FileNotFound,
    IncompatibleFileType,
    EmptyFile,
    NoLinksFound,
)
from .parser import LinkRecord, LinkStats, extract_links
from .stats import compute_stats
from .validator import LinkValidator, validate_link, batch_validate

__version__ = "0.1.0"

__all__ = [
    "md_links",
    "process_document",
    "run_pipeline",
    "MdLinksError",
    "FileNotFound",
    "IncompatibleFileType",
    "EmptyFile",
    "NoLinksFound",
    "LinkRecord",
    "LinkStats",
    "extract_links",
    "compute_stats",
    "LinkValidator",
    "validate_link",
    "batch_validate",
]
