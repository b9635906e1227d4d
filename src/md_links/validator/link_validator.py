"""Link validator for checking reachability of extracted URLs."""

import asyncio
from typing import Optional, Protocol

import aiohttp

from ..parser.models import LinkRecord
from ..utils.logging import get_logger

logger = get_logger("validator")

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class HttpTransport(Protocol):
    """Anything that can probe a URL and report its HTTP status."""
    
    async def probe(self, url: str) -> int:
        """Return the response status code, or raise on transport failure."""
        ...


class AiohttpTransport:
    """
    Probe URLs with aiohttp.
    
    Used as an async context manager the transport shares one session
    across all probes; otherwise each probe opens its own.
    """
    
    def __init__(
        self,
        timeout: float = 10,
        user_agent: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.timeout = timeout
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self._session = session
        self._owns_session = False
    
    @property
    def headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        }
    
    def _new_session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            headers=self.headers,
        )
    
    async def __aenter__(self) -> "AiohttpTransport":
        if self._session is None:
            self._session = self._new_session()
            self._owns_session = True
        return self
    
    async def __aexit__(self, *exc_info) -> None:
        if self._owns_session:
            await self._session.close()
            self._session = None
            self._owns_session = False
    
    async def probe(self, url: str) -> int:
        if self._session is not None:
            return await self._request(self._session, url)
        
        async with self._new_session() as session:
            return await self._request(session, url)
    
    async def _request(self, session: aiohttp.ClientSession, url: str) -> int:
        # The body is never read; only the status line matters
        async with session.get(url, allow_redirects=True) as response:
            return response.status


class LinkValidator:
    """Validates links with a single probe each."""
    
    def __init__(
        self,
        transport: Optional[HttpTransport] = None,
        concurrent_limit: Optional[int] = None,
    ):
        if concurrent_limit is not None and concurrent_limit < 1:
            raise ValueError(f"concurrent_limit must be at least 1, got {concurrent_limit}")
        self.transport = transport or AiohttpTransport()
        self.concurrent_limit = concurrent_limit
    
    async def validate(self, record: LinkRecord) -> LinkRecord:
        """
        Probe a link and return a copy carrying the outcome.
        
        Never raises: transport failures are recorded in ``error``.
        
        Args:
            record: The link to check
            
        Returns:
            The record plus ``valid`` and either ``status`` or ``error``
        """
        try:
            status = await self.transport.probe(record.url)
        except asyncio.TimeoutError:
            timeout = getattr(self.transport, "timeout", None)
            error = f"Timeout after {timeout}s" if timeout is not None else "Timeout"
            logger.debug("Probe timed out: %s", record.url)
            return record.model_copy(update={"valid": False, "error": error})
        except Exception as e:
            error = str(e) or e.__class__.__name__
            logger.debug("Probe failed: %s (%s)", record.url, error)
            return record.model_copy(update={"valid": False, "error": error})
        
        logger.debug("Probe returned %d: %s", status, record.url)
        # Any completed response counts as valid; status codes are judged by stats
        return record.model_copy(update={"valid": True, "status": status})
    
    async def batch_validate(self, records: list[LinkRecord]) -> list[LinkRecord]:
        """
        Validate links concurrently.
        
        All probes are launched at once, capped by ``concurrent_limit`` if set.
        
        Returns:
            Validated records in the same order as input
        """
        if self.concurrent_limit is None:
            tasks = [self.validate(record) for record in records]
            return list(await asyncio.gather(*tasks))
        
        semaphore = asyncio.Semaphore(self.concurrent_limit)
        
        async def validate_with_semaphore(record: LinkRecord) -> LinkRecord:
            async with semaphore:
                return await self.validate(record)
        
        tasks = [validate_with_semaphore(record) for record in records]
        return list(await asyncio.gather(*tasks))


# Convenience functions
async def validate_link(
    record: LinkRecord,
    transport: Optional[HttpTransport] = None,
) -> LinkRecord:
    """Validate a single link."""
    validator = LinkValidator(transport=transport)
    return await validator.validate(record)


async def batch_validate(
    records: list[LinkRecord],
    transport: Optional[HttpTransport] = None,
    concurrent_limit: Optional[int] = None,
) -> list[LinkRecord]:
    """Validate multiple links, sharing one aiohttp session unless a transport is given."""
    if transport is not None:
        validator = LinkValidator(transport=transport, concurrent_limit=concurrent_limit)
        return await validator.batch_validate(records)
    
    async with AiohttpTransport() as shared:
        validator = LinkValidator(transport=shared, concurrent_limit=concurrent_limit)
        return await validator.batch_validate(records)
