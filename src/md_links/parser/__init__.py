"""Parser module for extracting links from Markdown files."""

from .models import LinkRecord, LinkStats
from .md_parser import (
    INLINE_LINK_PATTERN,
    extract_links,
    read_markdown,
    parse_md_file,
    scan_directory,
)

__all__ = [
    "LinkRecord",
    "LinkStats",
    "INLINE_LINK_PATTERN",
    "extract_links",
    "read_markdown",
    "parse_md_file",
    "scan_directory",
]
