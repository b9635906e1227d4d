"""Data models for extracted links."""

from typing import Optional
from pydantic import BaseModel, Field


class LinkRecord(BaseModel):
    """A link found in a Markdown document."""
    
    text: str = Field(..., description="Link label as written")
    url: str = Field(..., description="Raw link target, not normalized")
    file: str = Field(..., description="Path of the source document")
    
    # Set by validation only
    valid: Optional[bool] = Field(None, description="Probe completed")
    status: Optional[int] = Field(None, description="HTTP status code of the probe")
    error: Optional[str] = Field(None, description="Transport failure reason")
    
    @property
    def is_validated(self) -> bool:
        return self.valid is not None
    
    @property
    def is_broken(self) -> bool:
        """True if the probe failed or returned a status >= 400."""
        if self.error is not None:
            return True
        return self.status is not None and self.status >= 400
    
    def to_dict(self) -> dict:
        """Return the record without the fields that were never set."""
        return self.model_dump(exclude_none=True)


class LinkStats(BaseModel):
    """Summary counts over a set of links."""
    
    total: int = Field(0, ge=0)
    unique: int = Field(0, ge=0)
    broken: int = Field(0, ge=0)
