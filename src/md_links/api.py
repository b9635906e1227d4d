"""Link extraction pipeline."""

from pathlib import Path
from typing import Optional, Union

from .parser import LinkRecord, LinkStats, extract_links, read_markdown, scan_directory
from .stats import compute_stats
from .utils.logging import get_logger
from .validator import AiohttpTransport, HttpTransport, LinkValidator

logger = get_logger("api")

LinksResult = Union[list[LinkRecord], LinkStats]


async def run_pipeline(
    links: list[LinkRecord],
    validate: bool = False,
    stats: bool = False,
    transport: Optional[HttpTransport] = None,
    concurrent_limit: Optional[int] = None,
) -> LinksResult:
    """Validate and/or summarize already extracted links."""
    if validate:
        if transport is None:
            async with AiohttpTransport() as shared:
                links = await LinkValidator(shared, concurrent_limit).batch_validate(links)
        else:
            links = await LinkValidator(transport, concurrent_limit).batch_validate(links)
        broken = sum(1 for link in links if link.is_broken)
        logger.info("Validated %d links, %d broken", len(links), broken)
    
    if stats:
        return compute_stats(links)
    return links


async def process_document(
    text: str,
    source_id: str,
    validate: bool = False,
    stats: bool = False,
    transport: Optional[HttpTransport] = None,
    concurrent_limit: Optional[int] = None,
) -> LinksResult:
    """
    Run the pipeline over document text that has already been read.
    
    Args:
        text: Markdown content (non-empty)
        source_id: Stored as ``file`` on every link
        validate: Probe every link
        stats: Return LinkStats instead of the links
        transport: Probe implementation (default: aiohttp)
        concurrent_limit: Cap on outstanding probes (default: none)
        
    Raises:
        NoLinksFound: The text contains no links
    """
    links = extract_links(text, source_id)
    return await run_pipeline(links, validate, stats, transport, concurrent_limit)


async def md_links(
    path: Union[str, Path],
    validate: bool = False,
    stats: bool = False,
    transport: Optional[HttpTransport] = None,
    concurrent_limit: Optional[int] = None,
) -> LinksResult:
    """
    Extract links from a Markdown file or a directory of them.

    Raises:
        FileNotFound, IncompatibleFileType, EmptyFile, NoLinksFound
    """
    source = Path(path)
    
    if source.is_dir():
        links = scan_directory(source)
        logger.info("Found %d links under %s", len(links), path)
        return await run_pipeline(links, validate, stats, transport, concurrent_limit)
    
    content = read_markdown(source)
    return await process_document(
        content,
        str(path),
        validate=validate,
        stats=stats,
        transport=transport,
        concurrent_limit=concurrent_limit,
    )
