"""Summary statistics over extracted links."""

from typing import Iterable

from ..parser.models import LinkRecord, LinkStats


def compute_stats(records: Iterable[LinkRecord]) -> LinkStats:
    """
    Count total, unique and broken links.
    
    A link is broken when it carries a status >= 400 or a transport error.
    Unvalidated links without either are never counted as broken.
    
    Args:
        records: Links, validated or not
        
    Returns:
        LinkStats (all zeros for no input)
    """
    records = list(records)
    return LinkStats(
        total=len(records),
        unique=len({record.url for record in records}),
        broken=sum(1 for record in records if record.is_broken),
    )
