"""Selection state model persisted between CLI invocations."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SelectionState(BaseModel):
    """Last explicitly selected category for a snippet source file."""

    model_config = ConfigDict(extra="forbid")

    version: str = Field(default="1.0", description="State file version")
    category: str | None = Field(default=None, description="Selected category")
    source_file: str | None = Field(
        default=None, description="Source file the category belongs to"
    )
    updated_at: datetime | None = Field(
        default=None, description="When the selection was last changed"
    )
