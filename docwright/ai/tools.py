"""
docwright.ai.tools
------------------
The analysis tools a reasoning loop can call. Each tool takes an already
parsed parameter mapping; turning the loop's raw strings into that
mapping is the adapter's job (docwright.ai.adapter).

requirement_analysis / external_design only seed a stub document and
tell the loop what to do next; the actual analysis and the final
save_document call come from the model.
"""
from __future__ import annotations

import json
import logging
import random
import re
import textwrap
from typing import Any, Dict, Mapping

from docwright.core.exceptions              import DocumentWriteError, ValidationError
from docwright.core.models.enums            import Category, ToolName
from docwright.core.models.save_request     import SaveRequest
from docwright.core.parsing.defaults        import SaveDefaults
from docwright.core.services.document_store import DocumentStore
from docwright.core.utils.naming            import formatted_date, timestamped_name

log = logging.getLogger(__name__)


def generate_project_name() -> str:
    return f"proj_{formatted_date()}_{random.randint(0, 999):03d}"


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False) if isinstance(value, (dict, list)) else str(value)


def _flag(value: Any, default: bool = True) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() != "false"
    return bool(value)


def _preview(text: str, limit: int = 100) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


class Tool:
    name: str = ""
    description: str = ""
    schema: Dict[str, str] = {}

    def run(self, params: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


# ─────────────────────────────────────────────── seeding tools
class _SeedingTool(Tool):
    """Writes an initial document the model is expected to replace later."""

    category: str = Category.OUTPUT.value
    suffix: str = ""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    def _seed(self, project: str, body: str) -> str:
        slug = re.sub(r"\s+", "_", project.strip())
        file_name = timestamped_name(f"{slug}_{self.suffix}", "md")
        try:
            result = self.store.save(SaveRequest(file_name, body, category=self.category))
            return result.path
        except DocumentWriteError as exc:
            # the seed is a convenience; the model still gets its instructions
            log.error("Could not seed %s: %s", file_name, exc)
            return self.store.path_for(self.category, file_name)


class RequirementAnalysisTool(_SeedingTool):
    name = ToolName.REQUIREMENT_ANALYSIS.value
    description = "Analyse the given information and produce a structured requirements document."
    schema = {
        "projectName": "project name",
        "description": "description of the requirements",
    }
    category = Category.REQUIREMENTS.value
    suffix = "requirements"

    def run(self, params: Mapping[str, Any]) -> str:
        project = _text(params.get("projectName")) or generate_project_name()
        description = _text(params.get("description") or params.get("input"))
        if not description.strip():
            raise ValidationError("requirement_analysis needs a description")

        log.info("Requirement analysis for %s", project)
        body = textwrap.dedent(
            """\
            # {project} - Requirements

            ## Project overview
            {description}

            ## To be analysed
            - functional requirements
            - non-functional requirements
            - user stories
            - priorities
            """
        ).format(project=project, description=description)
        path = self._seed(project, body)
        return (
            f"Started requirement analysis for project '{project}': {_preview(description)}. "
            f"Results go to {path}. Carry out the detailed analysis, then store it "
            "with the save_document tool."
        )


class ExternalDesignTool(_SeedingTool):
    name = ToolName.EXTERNAL_DESIGN.value
    description = "Produce an external design document from a requirements analysis."
    schema = {
        "projectName": "project name",
        "requirementsAnalysis": "requirements analysis result or requirement description",
        "includeArchitecture": "include system architecture (default true)",
        "includeUML": "include UML diagrams (default true)",
    }
    category = Category.DESIGNS.value
    suffix = "design"

    def run(self, params: Mapping[str, Any]) -> str:
        project = _text(params.get("projectName")) or generate_project_name()
        analysis = _text(params.get("requirementsAnalysis") or params.get("input"))
        if not analysis.strip():
            raise ValidationError("external_design needs requirementsAnalysis")
        architecture = _flag(params.get("includeArchitecture"))
        uml = _flag(params.get("includeUML"))

        log.info("External design for %s", project)
        items = []
        if architecture:
            items.append("- system architecture")
        if uml:
            items.append("- UML diagrams")
        items += ["- screen layouts", "- component structure"]
        body = (
            f"# {project} - External design\n\n"
            f"## Source requirements\n{analysis}\n\n"
            "## Design elements\n" + "\n".join(items) + "\n"
        )
        path = self._seed(project, body)
        message = (
            f"Started external design for '{_preview(analysis)}'. Results go to {path}. "
            "Carry out the detailed design, then store it with the save_document tool."
        )
        return message + (" Create the UML diagrams as well." if uml else "")


# ─────────────────────────────────────────────── save
class SaveDocumentTool(Tool):
    name = ToolName.SAVE_DOCUMENT.value
    description = "Save a document to a file."
    schema = {
        "category": "target folder: requirements | designs | output",
        "fileName": "file name including extension",
        "content": "file content",
        "overwrite": "true to replace an existing file (optional)",
    }

    def __init__(self, store: DocumentStore) -> None:
        self.store = store
        self.defaults = SaveDefaults(fallback_category=store.fallback_category)

    def run(self, params: Mapping[str, Any]) -> str:
        request = SaveRequest.from_mapping(
            self.defaults.apply(dict(params)),
            fallback_category=self.store.fallback_category,
        )
        return self.store.save(request).message()


# ─────────────────────────────────────────────── echo tools
class UMLGeneratorTool(Tool):
    name = ToolName.GENERATE_UML.value
    description = "Generate a UML diagram in Mermaid notation."
    schema = {
        "type": "class | sequence | usecase | entity | component",
        "description": "what the diagram should show",
        "details": "extra detail (optional)",
    }
    TYPES = ("class", "sequence", "usecase", "entity", "component")

    def run(self, params: Mapping[str, Any]) -> str:
        kind = _text(params.get("type")).strip().lower()
        description = _text(params.get("description") or params.get("input"))
        if kind not in self.TYPES:
            raise ValidationError(f"type must be one of {', '.join(self.TYPES)}, got {kind!r}")
        if not description.strip():
            raise ValidationError("generate_uml needs a description")
        details = _text(params.get("details"))

        log.info("UML generation: %s - %s", kind, _preview(description, 50))
        response = f"Starting {kind} diagram: {description}"
        if details:
            response += f"\nDetails: {_preview(details)}"
        return response


class LayoutGeneratorTool(Tool):
    name = ToolName.GENERATE_LAYOUT.value
    description = "Describe a screen layout as text."
    schema = {
        "screenName": "screen name",
        "description": "screen description and requirements",
        "format": "ascii | markdown | html (default markdown)",
    }
    FORMATS = ("ascii", "markdown", "html")

    def run(self, params: Mapping[str, Any]) -> str:
        screen = _text(params.get("screenName")).strip()
        description = _text(params.get("description") or params.get("input"))
        fmt = _text(params.get("format")).strip().lower() or "markdown"
        if not screen:
            raise ValidationError("generate_layout needs a screenName")
        if fmt not in self.FORMATS:
            raise ValidationError(f"format must be one of {', '.join(self.FORMATS)}, got {fmt!r}")

        log.info("Layout generation: %s", screen)
        return f"Starting {fmt} layout for {screen}: {_preview(description)}"
