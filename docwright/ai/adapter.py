"""
docwright.ai.adapter
--------------------
Lets a reasoning loop that can only emit strings drive structured tools.

    wrapped = StringInputTool(SaveDocumentTool(store))
    wrapped.invoke('content: "Hello", fileName: "x.md"')

invoke() never raises: parse failures, validation errors and write
errors all come back as text that repeats the tool's expected input
shape, so the loop can correct itself on the next turn.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List

from docwright.core.exceptions              import DocumentWriteError, ValidationError
from docwright.core.parsing.cascade         import parse
from docwright.core.parsing.extractors      import DEFAULT_REGISTRY, ExtractorRegistry
from docwright.core.services.document_store import DocumentStore

from .tools import (
    ExternalDesignTool,
    LayoutGeneratorTool,
    RequirementAnalysisTool,
    SaveDocumentTool,
    Tool,
    UMLGeneratorTool,
)

log = logging.getLogger(__name__)


class StringInputTool:
    def __init__(self, tool: Tool, *, registry: ExtractorRegistry | None = None) -> None:
        self.tool = tool
        self.registry = DEFAULT_REGISTRY if registry is None else registry

    @property
    def name(self) -> str:
        return self.tool.name

    @property
    def description(self) -> str:
        return (
            f"{self.tool.description} Pass the instructions as a string; "
            f"expected fields: {json.dumps(self.tool.schema, ensure_ascii=False)}"
        )

    def invoke(self, raw: Any) -> str:
        head = raw[:50] if isinstance(raw, str) else raw
        log.info("[%s] converting input %r", self.name, head)
        try:
            params = parse(self.name, raw, registry=self.registry)
            log.debug("[%s] parameters: %s", self.name, params)
            return self.tool.run(params)
        except Exception as exc:  # noqa: BLE001
            log.error("[%s] failed: %s", self.name, exc, exc_info=not isinstance(exc, ValidationError))
            return compose_error(self.tool, exc)

    def __repr__(self) -> str:
        return f"<StringInputTool {self.name}>"


def compose_error(tool: Tool, exc: BaseException) -> str:
    """Error text for the loop: what went wrong plus the shape to use instead."""
    if isinstance(exc, ValidationError):
        detail = exc.reason
    elif isinstance(exc, DocumentWriteError):
        detail = f"{exc} (cause: {type(exc.cause).__name__})"
    else:
        detail = f"{type(exc).__name__}: {exc}"

    example: Dict[str, Any] = {field: f"<{help_}>" for field, help_ in tool.schema.items()}
    return (
        f"Tool input error ({tool.name}): {detail}\n\n"
        "This tool expects a JSON object with these fields:\n"
        f"{json.dumps(example, indent=2, ensure_ascii=False)}\n\n"
        "Plain text is also accepted where the tool has a single text field."
    )


def default_tools(store: DocumentStore) -> List[Tool]:
    return [
        RequirementAnalysisTool(store),
        ExternalDesignTool(store),
        SaveDocumentTool(store),
        UMLGeneratorTool(),
        LayoutGeneratorTool(),
    ]


def wrap_tools(tools: Iterable[Tool], *, registry: ExtractorRegistry | None = None) -> Dict[str, StringInputTool]:
    return {t.name: StringInputTool(t, registry=registry) for t in tools}
