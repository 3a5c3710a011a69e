from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping

from docwright.core.exceptions import ValidationError

from .enums import Category

EXPECTED_SAVE_SHAPE = json.dumps(
    {"category": "output", "fileName": "example.md", "content": "document body"},
    indent=2,
)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


@dataclass(slots=True)
class SaveRequest:
    file_name: str
    content:   str
    category:  str  = Category.OUTPUT.value
    overwrite: bool = False

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any], *, fallback_category: str = Category.OUTPUT.value) -> "SaveRequest":
        """
        Build a request from the wire-level keys a tool call carries
        (``category``, ``fileName``, ``content``, ``overwrite``).
        Missing values are left empty so DocumentStore can reject them;
        non-text content (``content: false``, ``content: 42``) is refused
        here rather than written out as "False" / "42".
        """
        content = params.get("content")
        if content is not None and not isinstance(content, str):
            raise ValidationError(
                f"content must be text, got {type(content).__name__} {content!r}",
                remediation=f"Expected input of the form:\n{EXPECTED_SAVE_SHAPE}",
            )
        return cls(
            file_name=str(params.get("fileName") or ""),
            content=content or "",
            category=str(params.get("category") or fallback_category),
            overwrite=_as_bool(params.get("overwrite", False)),
        )
