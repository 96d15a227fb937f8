from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


@dataclass
class TableScan:
    """Outcome of examining one table under a section heading."""

    qualifying: bool
    types: List[str] = field(default_factory=list)
    name: Optional[str] = None  # link text of the name cell, for tracing only


class WebhookEvent(BaseModel):
    """A workflow trigger and the activity types it accepts."""

    name: str = Field(..., min_length=1, description="Event name, taken from the section heading")
    types: List[str] = Field(default_factory=list, description="Activity types in document order")

    model_config = {"extra": "forbid"}


class EventMapping(BaseModel):
    """
    Ordered mapping of event name to activity types.

    Entries keep document order so generated output is deterministic.
    """

    events: List[WebhookEvent] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_unique_names(self) -> "EventMapping":
        seen: set[str] = set()
        for event in self.events:
            if event.name in seen:
                raise ValueError(f"duplicate event name: {event.name!r}")
            seen.add(event.name)
        return self

    @property
    def names(self) -> List[str]:
        return [e.name for e in self.events]

    def as_dict(self) -> Dict[str, List[str]]:
        return {e.name: list(e.types) for e in self.events}

    def __len__(self) -> int:
        return len(self.events)
