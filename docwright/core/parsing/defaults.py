"""
Default values for document-save parameters.

Kept apart from the extractor so the values can be tested without any
parsing or filesystem state; the only impurity is the clock, which is
injectable.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict

from docwright.core.models.enums import Category
from docwright.core.utils.naming import timestamped_name

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveDefaults:
    fallback_category: str = Category.OUTPUT.value
    base_name:         str = "document"
    extension:         str = "md"
    clock:             Callable[[], datetime] = field(default=datetime.now, compare=False)

    def category(self) -> str:
        return self.fallback_category

    def file_name(self) -> str:
        return timestamped_name(self.base_name, self.extension, now=self.clock())

    def apply(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of `params` with missing/empty category and fileName filled in."""
        out = dict(params)
        if not out.get("category"):
            out["category"] = self.category()
            log.info("category not given, using %r", out["category"])
        if not out.get("fileName"):
            out["fileName"] = self.file_name()
            log.info("fileName not given, generated %r", out["fileName"])
        return out
