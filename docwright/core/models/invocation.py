from dataclasses import dataclass
from typing import Any, Mapping

@dataclass(frozen=True, slots=True)
class RawInvocation:
    tool_name:   str
    raw_payload: str | Mapping[str, Any]     # whatever the reasoning loop emitted
