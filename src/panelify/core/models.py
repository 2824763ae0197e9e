"""Data models shared by the sectioner, layout geometry, and session"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Section(BaseModel):
    """A rank-2-heading-delimited block of a markdown document."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    content: str = ""
    level: int = 2


class PlacementItem(BaseModel):
    """Grid position and span of one panel; serialized with `i` as the id key."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., alias="i", description="Section id this panel displays")
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    w: int = Field(..., ge=1)
    h: int = Field(..., ge=1)
    minW: Optional[int] = Field(default=None, ge=1)
    minH: Optional[int] = Field(default=None, ge=1)


class ReadResult(BaseModel):
    """Outcome of a ContentStore read; failures are reported, never raised."""
    success: bool
    content: Optional[str] = None
    error: Optional[str] = None


class PickResult(BaseModel):
    """A document chosen interactively, with its content already read."""
    path: str
    content: str
