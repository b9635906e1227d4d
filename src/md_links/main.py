"""Main CLI entry point for md-links."""

import asyncio
import sys

import hydra
from omegaconf import DictConfig
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .api import md_links
from .errors import MdLinksError
from .parser import LinkRecord, LinkStats
from .utils.formatting import describe_outcome, truncate
from .utils.logging import setup_logging
from .validator import AiohttpTransport

console = Console()


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entry point."""
    sys.exit(run(cfg))


def run(cfg: DictConfig) -> int:
    """Run the CLI with a resolved config and return the exit code."""
    setup_logging(cfg.logging.level)
    
    try:
        result = asyncio.run(collect(cfg))
    except (MdLinksError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
    
    if isinstance(result, LinkStats):
        show_stats(result, show_broken=cfg.options.validate or result.broken > 0)
    else:
        show_links(result, validated=cfg.options.validate)
    return 0


async def collect(cfg: DictConfig):
    """Run the pipeline configured by ``cfg``."""
    if not cfg.options.validate:
        return await md_links(cfg.input.path, stats=cfg.options.stats)
    
    transport = AiohttpTransport(
        timeout=cfg.validator.timeout,
        user_agent=cfg.validator.user_agent,
    )
    async with transport:
        return await md_links(
            cfg.input.path,
            validate=True,
            stats=cfg.options.stats,
            transport=transport,
            concurrent_limit=cfg.validator.concurrent_limit,
        )


def show_links(links: list[LinkRecord], validated: bool = False) -> None:
    """Display one row per link."""
    table = Table(title="Links")
    table.add_column("File", style="cyan")
    table.add_column("URL", style="blue")
    if validated:
        table.add_column("Result")
    table.add_column("Text")
    
    for link in links:
        row = [link.file, link.url]
        if validated:
            outcome = describe_outcome(link.status, link.error)
            style = "red" if link.is_broken else "green"
            row.append(f"[{style}]{outcome}[/{style}]")
        row.append(truncate(link.text))
        table.add_row(*row)
    
    console.print(table)


def show_stats(stats: LinkStats, show_broken: bool = True) -> None:
    """Display link statistics."""
    table = Table(title="Link Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    
    table.add_row("Total", str(stats.total))
    table.add_row("Unique", str(stats.unique))
    if show_broken:
        table.add_row("Broken", str(stats.broken))
    
    console.print(table)


if __name__ == "__main__":
    main()
