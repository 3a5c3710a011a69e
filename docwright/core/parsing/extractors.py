"""
docwright.core.parsing.extractors
=================================

Tool-specific heuristics, consulted by the cascade only after the generic
strategies gave up.

Every extractor implements the same two-method interface:

    extract(raw)      -> dict | None      None = "could not extract"
    complete(params)  -> dict             fill tool defaults into a mapping
                                          that a generic strategy produced

Adding a tool means registering an Extractor, never branching inside the
cascade.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Iterator, Optional

import yaml

from docwright.core.exceptions          import ValidationError
from docwright.core.models.enums        import ToolName
from docwright.core.models.save_request import EXPECTED_SAVE_SHAPE
from docwright.core.parsing.defaults    import SaveDefaults

log = logging.getLogger(__name__)


class Extractor:
    def extract(self, raw: str) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def complete(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return params


# ════════════════════════════════════════════════════════════════════════
#                          SINGLE FIELD
# ════════════════════════════════════════════════════════════════════════
class SingleFieldExtractor(Extractor):
    """The whole string is the value of the tool's one text field."""

    def __init__(self, field: str) -> None:
        self.field = field

    def extract(self, raw: str) -> Dict[str, Any]:
        return {self.field: raw}

    def __repr__(self) -> str:
        return f"<SingleFieldExtractor {self.field}>"


# ════════════════════════════════════════════════════════════════════════
#                          SAVE DOCUMENT
# ════════════════════════════════════════════════════════════════════════
class SaveDocumentExtractor(Extractor):
    """
    Pull category / fileName / content / overwrite out of whatever the
    model wrote for a save_document call.

    Content is searched in this order, first hit wins:
      1. content: "…"   or   content: '…'   (up to the matching quote)
      2. content: …                        (up to the next , or } or end)
      3. interior of a ``` fenced block
      4. the whole raw string
    """

    CONTENT_PATTERNS = (
        re.compile(r"""content\s*:\s*(["'])(.*?)(?<!\\)\1(?=[ \t]*(?:[,}\r\n]|$))""", re.DOTALL),
        re.compile(r"content\s*:\s*([^,}]+)(?:,|\}|$)", re.DOTALL),
        re.compile(r"```(?:markdown|md)?\s*([^`]+)```", re.DOTALL),
        re.compile(r"(.+)", re.DOTALL),
    )
    CATEGORY  = re.compile(r"""category\s*:\s*["']?([^"',}\n]+)["']?""")
    FILE_NAME = re.compile(r"""fileName\s*:\s*["']?([^"',}\n]+)["']?""")
    OVERWRITE = re.compile(r"""overwrite\s*:\s*["']?(true|false)""", re.IGNORECASE)

    def __init__(self, defaults: SaveDefaults | None = None) -> None:
        self.defaults = defaults or SaveDefaults()

    # ---------------------------------------------------------------- public
    def complete(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return self.defaults.apply(params)

    def extract(self, raw: str) -> Dict[str, Any]:
        params = self._structured(raw)
        if params is not None:
            log.info("save_document: structured payload accepted")
            return self.defaults.apply(params)

        params = {"content": self._content(raw)}
        params.update(self._auxiliary(raw))
        params = self.defaults.apply(params)

        if not params["content"].strip():
            log.error("save_document: extracted content is empty")
            raise ValidationError(
                "save_document needs non-empty content",
                remediation=f"Expected input of the form:\n{EXPECTED_SAVE_SHAPE}",
            )
        log.info(
            "save_document: category=%s fileName=%s content=%d chars",
            params["category"], params["fileName"], len(params["content"]),
        )
        return params

    # ---------------------------------------------------------------- helpers
    @staticmethod
    def _structured(raw: str) -> Optional[Dict[str, Any]]:
        # JSON first, then YAML; parse() only gets here when no key: segment
        # matched, so block YAML is seen only by direct extract() callers
        for loader in (json.loads, yaml.safe_load):
            try:
                data = loader(raw)
            except (ValueError, RecursionError, yaml.YAMLError):
                continue
            if isinstance(data, dict):
                content = data.get("content")
                if isinstance(content, str) and content.strip():
                    return dict(data)
        return None

    def _content(self, raw: str) -> str:
        for idx, pattern in enumerate(self.CONTENT_PATTERNS, 1):
            if m := pattern.search(raw):
                log.debug("save_document: content matched pattern %d", idx)
                return m.group(m.lastindex).strip()
        return raw.strip()      # unreachable: the last pattern always matches

    def _auxiliary(self, raw: str) -> Dict[str, Any]:
        found: Dict[str, Any] = {}
        if m := self.CATEGORY.search(raw):
            found["category"] = m.group(1).strip()
        if m := self.FILE_NAME.search(raw):
            found["fileName"] = m.group(1).strip()
        if m := self.OVERWRITE.search(raw):
            found["overwrite"] = m.group(1).lower() == "true"
        return found


# ════════════════════════════════════════════════════════════════════════
#                            REGISTRY
# ════════════════════════════════════════════════════════════════════════
class ExtractorRegistry:
    def __init__(self) -> None:
        self._extractors: Dict[str, Extractor] = {}

    def register(self, tool_name: str, extractor: Extractor) -> Extractor:
        self._extractors[str(getattr(tool_name, "value", tool_name))] = extractor
        return extractor

    def get(self, tool_name: str) -> Optional[Extractor]:
        return self._extractors.get(str(getattr(tool_name, "value", tool_name)))

    def __contains__(self, tool_name: object) -> bool:
        return self.get(tool_name) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._extractors)

    def __repr__(self) -> str:
        return f"<ExtractorRegistry {sorted(self._extractors)}>"


def build_default_registry(defaults: SaveDefaults | None = None) -> ExtractorRegistry:
    registry = ExtractorRegistry()
    registry.register(ToolName.REQUIREMENT_ANALYSIS, SingleFieldExtractor("description"))
    registry.register(ToolName.EXTERNAL_DESIGN,      SingleFieldExtractor("requirementsAnalysis"))
    registry.register(ToolName.SAVE_DOCUMENT,        SaveDocumentExtractor(defaults))
    return registry


DEFAULT_REGISTRY = build_default_registry()
