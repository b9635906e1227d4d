"""Markdown parser for extracting inline links."""

import re
from pathlib import Path
from typing import Optional, Union

from ..errors import EmptyFile, FileNotFound, IncompatibleFileType, NoLinksFound
from ..utils.logging import get_logger
from .models import LinkRecord

logger = get_logger("parser")

# [label](url "title") on a single line; the label may be empty, the title is dropped
INLINE_LINK_PATTERN = re.compile(r'\[([^\]\n]*)\]\(([^)\s]+)(?:[ \t]+"[^"\n]*")?\)')

MARKDOWN_EXTENSIONS = (".md", ".markdown")


def extract_links(text: str, source_id: str) -> list[LinkRecord]:
    """
    Extract every inline link from Markdown text.
    
    Args:
        text: Raw document content
        source_id: Identifier stored as ``file`` on every record
        
    Returns:
        LinkRecords in order of appearance, duplicates included
        
    Raises:
        NoLinksFound: If the text holds no ``[label](url)`` construct
    """
    links = [
        LinkRecord(text=match.group(1), url=match.group(2), file=source_id)
        for match in INLINE_LINK_PATTERN.finditer(text)
    ]
    
    if not links:
        raise NoLinksFound(source_id)
    
    logger.debug("Extracted %d links from %s", len(links), source_id)
    return links


def is_markdown(path: Path) -> bool:
    return path.suffix.lower() in MARKDOWN_EXTENSIONS


def read_markdown(path: Union[str, Path]) -> str:
    """
    Read a Markdown file, rejecting anything the extractor should not see.
    
    Raises:
        FileNotFound: The path does not exist
        IncompatibleFileType: The file is not Markdown or not UTF-8 text
        EmptyFile: The file has no content
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFound(path)
    if not file_path.is_file() or not is_markdown(file_path):
        raise IncompatibleFileType(path)
    
    try:
        content = file_path.read_text(encoding='utf-8')
    except UnicodeDecodeError:
        raise IncompatibleFileType(path)
    if not content.strip():
        raise EmptyFile(path)
    
    return content


def parse_md_file(path: Union[str, Path]) -> list[LinkRecord]:
    """Read a single Markdown file and extract its links."""
    content = read_markdown(path)
    return extract_links(content, str(path))


def scan_directory(
    path: Union[str, Path],
    pattern: Optional[str] = None,
    recursive: bool = True,
) -> list[LinkRecord]:
    """
    Scan a directory for Markdown files and extract all links.
    
    Files that are empty, unreadable or hold no links are skipped with a warning.
    
    Args:
        path: Directory path to scan
        pattern: Glob pattern for files (default: any Markdown extension)
        recursive: Whether to scan subdirectories
        
    Returns:
        LinkRecords grouped by file, files in sorted order
        
    Raises:
        FileNotFound: The directory does not exist
        NoLinksFound: No file in the tree holds a link
    """
    dir_path = Path(path)
    if not dir_path.is_dir():
        raise FileNotFound(path)
    
    glob = dir_path.rglob if recursive else dir_path.glob
    if pattern is None:
        files = [p for p in glob("*") if is_markdown(p)]
    else:
        files = list(glob(pattern))
    
    links = []
    for file_path in sorted(files):
        try:
            links.extend(parse_md_file(file_path))
        except (EmptyFile, NoLinksFound, IncompatibleFileType) as e:
            logger.warning("Skipping %s", e)
    
    if not links:
        raise NoLinksFound(path)
    
    return links
