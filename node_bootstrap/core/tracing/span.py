from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


# The record handed to code running under a span. Live spans fill in the ids, start time and
# duration; restricted spans leave them unset.
class Span(BaseModel):
    name: str
    target: str
    fields: Dict[str, Any] = Field(default_factory=dict)
    trace_id: Optional[str] = None
    span_id: Optional[str] = None
    start_time_ns: Optional[int] = None
    duration_seconds: Optional[float] = None

    @property
    def is_recorded(self) -> bool:
        return self.duration_seconds is not None
