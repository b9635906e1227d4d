"""Validator module for checking link reachability."""

from .link_validator import (
    HttpTransport,
    AiohttpTransport,
    LinkValidator,
    validate_link,
    batch_validate,
)

__all__ = [
    "HttpTransport",
    "AiohttpTransport",
    "LinkValidator",
    "validate_link",
    "batch_validate",
]
