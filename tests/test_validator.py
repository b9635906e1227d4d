"""Tests for the validator module."""

import asyncio
import pytest
from unittest.mock import AsyncMock, MagicMock

import aiohttp

from md_links.parser import LinkRecord
from md_links.validator import (
    AiohttpTransport,
    LinkValidator,
    validate_link,
    batch_validate,
)


class FakeTransport:
    """Transport answering from a url -> status (or exception) table."""
    
    def __init__(self, responses: dict, delays: dict = None, timeout: float = 10):
        self.responses = responses
        self.delays = delays or {}
        self.timeout = timeout
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0
    
    async def probe(self, url: str) -> int:
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(url, 0))
            outcome = self.responses[url]
            if isinstance(outcome, BaseException):
                raise outcome
            return outcome
        finally:
            self.in_flight -= 1


@pytest.fixture
def linkedin():
    return LinkRecord(
        text="Linkedin",
        url="https://www.linkedin.com/feed/",
        file="./files/test.md",
    )


class TestValidate:
    """Tests for LinkValidator.validate."""
    
    @pytest.mark.asyncio
    async def test_success(self, linkedin):
        transport = FakeTransport({linkedin.url: 200})
        
        result = await validate_link(linkedin, transport=transport)
        
        assert result.to_dict() == {
            "text": "Linkedin",
            "url": "https://www.linkedin.com/feed/",
            "file": "./files/test.md",
            "valid": True,
            "status": 200,
        }
        assert transport.calls == [linkedin.url]
    
    @pytest.mark.asyncio
    async def test_network_error(self):
        record = LinkRecord(
            text="test 2",
            url="https://invalidurl.example.com",
            file="./files/test.md",
        )
        transport = FakeTransport({record.url: Exception("Network error")})
        
        result = await LinkValidator(transport).validate(record)
        
        assert result.to_dict() == {
            "text": "test 2",
            "url": "https://invalidurl.example.com",
            "file": "./files/test.md",
            "valid": False,
            "error": "Network error",
        }
        assert result.status is None
    
    @pytest.mark.asyncio
    async def test_error_status_is_still_valid(self, linkedin):
        result = await LinkValidator(FakeTransport({linkedin.url: 404})).validate(linkedin)
        
        assert result.valid is True
        assert result.status == 404
        assert result.error is None
        assert result.is_broken is True
    
    @pytest.mark.asyncio
    async def test_timeout(self, linkedin):
        transport = FakeTransport({linkedin.url: asyncio.TimeoutError()}, timeout=3)
        
        result = await LinkValidator(transport).validate(linkedin)
        
        assert result.valid is False
        assert result.error == "Timeout after 3s"
    
    @pytest.mark.asyncio
    async def test_empty_message_uses_class_name(self, linkedin):
        transport = FakeTransport({linkedin.url: aiohttp.ClientConnectionError()})
        
        result = await LinkValidator(transport).validate(linkedin)
        
        assert result.error == "ClientConnectionError"
    
    @pytest.mark.asyncio
    async def test_input_not_mutated(self, linkedin):
        await LinkValidator(FakeTransport({linkedin.url: 200})).validate(linkedin)
        assert linkedin.valid is None
        assert linkedin.status is None


class TestBatchValidate:
    """Tests for batch validation."""
    
    @pytest.mark.asyncio
    async def test_batch_validate_empty(self):
        validator = LinkValidator(FakeTransport({}))
        results = await validator.batch_validate([])
        assert results == []
    
    @pytest.mark.asyncio
    async def test_order_preserved_despite_completion_order(self):
        records = [
            LinkRecord(text=str(i), url=f"https://{i}.example", file="doc.md")
            for i in range(4)
        ]
        transport = FakeTransport(
            responses={r.url: 200 + i for i, r in enumerate(records)},
            # first link finishes last
            delays={r.url: 0.04 - 0.01 * i for i, r in enumerate(records)},
        )
        
        results = await batch_validate(records, transport=transport)
        
        assert [r.text for r in results] == ["0", "1", "2", "3"]
        assert [r.status for r in results] == [200, 201, 202, 203]
        assert transport.max_in_flight == 4
    
    @pytest.mark.asyncio
    async def test_one_failure_does_not_stop_others(self):
        records = [
            LinkRecord(text="ok", url="https://ok.example", file="doc.md"),
            LinkRecord(text="down", url="https://down.example", file="doc.md"),
            LinkRecord(text="ok2", url="https://ok2.example", file="doc.md"),
        ]
        transport = FakeTransport({
            "https://ok.example": 200,
            "https://down.example": aiohttp.ClientError("Cannot connect"),
            "https://ok2.example": 301,
        })
        
        results = await batch_validate(records, transport=transport)
        
        assert [r.valid for r in results] == [True, False, True]
        assert results[1].error == "Cannot connect"
    
    @pytest.mark.asyncio
    async def test_concurrent_limit(self):
        records = [
            LinkRecord(text=str(i), url=f"https://{i}.example", file="doc.md")
            for i in range(6)
        ]
        transport = FakeTransport(
            responses={r.url: 200 for r in records},
            delays={r.url: 0.01 for r in records},
        )
        
        results = await batch_validate(records, transport=transport, concurrent_limit=2)
        
        assert len(results) == 6
        assert transport.max_in_flight <= 2
    
    @pytest.mark.parametrize("limit", [0, -1])
    def test_concurrent_limit_below_one_rejected(self, limit):
        with pytest.raises(ValueError, match="concurrent_limit"):
            LinkValidator(FakeTransport({}), concurrent_limit=limit)
    
    @pytest.mark.asyncio
    async def test_concurrent_limit_of_one(self):
        records = [
            LinkRecord(text=str(i), url=f"https://{i}.example", file="doc.md")
            for i in range(3)
        ]
        transport = FakeTransport(
            responses={r.url: 200 for r in records},
            delays={r.url: 0.01 for r in records},
        )
        
        results = await asyncio.wait_for(
            LinkValidator(transport, concurrent_limit=1).batch_validate(records),
            timeout=2,
        )
        
        assert [r.text for r in results] == ["0", "1", "2"]
        assert transport.max_in_flight == 1


class TestAiohttpTransport:
    """Tests for the aiohttp transport using a mocked session."""
    
    def make_session(self, status: int = 200) -> MagicMock:
        response = MagicMock()
        response.status = status
        session = MagicMock()
        session.get.return_value.__aenter__.return_value = response
        session.close = AsyncMock()
        return session
    
    def test_defaults(self):
        transport = AiohttpTransport()
        assert transport.timeout == 10
        assert "Mozilla" in transport.headers["User-Agent"]
    
    def test_custom_user_agent(self):
        transport = AiohttpTransport(user_agent="md-links-test")
        assert transport.headers["User-Agent"] == "md-links-test"
    
    @pytest.mark.asyncio
    async def test_probe_returns_status(self):
        session = self.make_session(status=302)
        transport = AiohttpTransport(session=session)
        
        status = await transport.probe("https://a.example")
        
        assert status == 302
        session.get.assert_called_once_with("https://a.example", allow_redirects=True)
    
    @pytest.mark.asyncio
    async def test_injected_session_not_closed(self):
        session = self.make_session()
        
        async with AiohttpTransport(session=session) as transport:
            await transport.probe("https://a.example")
        
        session.close.assert_not_called()
    
    @pytest.mark.asyncio
    async def test_transport_error_propagates_to_validator(self):
        session = MagicMock()
        session.get.side_effect = aiohttp.ClientConnectionError("Connection refused")
        record = LinkRecord(text="a", url="https://a.example", file="doc.md")
        
        result = await LinkValidator(AiohttpTransport(session=session)).validate(record)
        
        assert result.valid is False
        assert result.error == "Connection refused"
