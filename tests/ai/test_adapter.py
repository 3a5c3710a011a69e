import errno
from pathlib import Path

import pytest

from docwright.ai.adapter                   import StringInputTool, compose_error, default_tools, wrap_tools
from docwright.ai.tools                     import SaveDocumentTool, Tool, UMLGeneratorTool
from docwright.core.exceptions              import DocumentWriteError
from docwright.core.services.document_store import DocumentStore


@pytest.fixture
def tools(store: DocumentStore):
    return wrap_tools(default_tools(store))


class Exploding(Tool):
    name = "exploding"
    schema = {"x": "anything"}

    def run(self, params):
        raise RuntimeError("kaboom")


# ───────────────────────────────────────────────────────── save_document
def test_save_from_unbraced_string(tools, tmp_path: Path):
    out = tools["save_document"].invoke('content: "Hello", fileName: "x.md"')
    target = tmp_path / "docs" / "output" / "x.md"
    assert out == f"Document saved to {target.as_posix()}."
    assert target.read_text(encoding="utf-8") == "Hello"


def test_second_save_is_declined_not_an_error(tools, tmp_path: Path):
    payload = '{"category": "designs", "fileName": "d.md", "content": "v1"}'
    tools["save_document"].invoke(payload)
    out = tools["save_document"].invoke(payload.replace("v1", "v2"))
    assert "already exists" in out
    assert (tmp_path / "docs" / "designs" / "d.md").read_text(encoding="utf-8") == "v1"


def test_overwrite_from_string(tools, tmp_path: Path):
    tools["save_document"].invoke("fileName: o.md, content: first")
    out = tools["save_document"].invoke("fileName: o.md, content: second, overwrite: true")
    assert "overwritten" in out
    assert (tmp_path / "docs" / "output" / "o.md").read_text(encoding="utf-8") == "second"


def test_empty_content_comes_back_as_guidance(tools):
    out = tools["save_document"].invoke('content: ""')
    assert out.startswith("Tool input error (save_document): content must not be empty")
    assert '"fileName"' in out


def test_boolean_content_is_refused(tools, tmp_path: Path):
    out = tools["save_document"].invoke("fileName: b.md, content: false")
    assert out.startswith("Tool input error (save_document): content must be text, got bool False")
    assert not (tmp_path / "docs" / "output" / "b.md").exists()


def test_nul_in_file_name_comes_back_as_guidance(tools, tmp_path: Path):
    out = tools["save_document"].invoke('{"fileName": "a\\u0000b.md", "content": "x"}')
    assert "contains control characters" in out
    assert not (tmp_path / "docs" / "output").exists()


def test_plain_prose_is_saved_with_generated_name(tools, tmp_path: Path):
    out = tools["save_document"].invoke("A short note without any structure.")
    files = list((tmp_path / "docs" / "output").glob("document_*.md"))
    assert len(files) == 1
    assert files[0].read_text(encoding="utf-8") == "A short note without any structure."
    assert out.startswith("Document saved to")


# ───────────────────────────────────────────────────────── seeding tools
def test_requirement_analysis_from_plain_text(tools, tmp_path: Path):
    out = tools["requirement_analysis"].invoke("A calendar app for small teams")
    seeded = list((tmp_path / "docs" / "requirements").glob("proj_*_requirements_*.md"))
    assert len(seeded) == 1
    assert "A calendar app for small teams" in seeded[0].read_text(encoding="utf-8")
    assert "save_document" in out


def test_requirement_analysis_uses_project_name(tools, tmp_path: Path):
    tools["requirement_analysis"].invoke('{"projectName": "Calendar App", "description": "teams"}')
    assert list((tmp_path / "docs" / "requirements").glob("Calendar_App_requirements_*.md"))


def test_external_design_respects_flags(tools, tmp_path: Path):
    out = tools["external_design"].invoke(
        '{"projectName": "cal", "requirementsAnalysis": "R1", "includeUML": false}'
    )
    body = next((tmp_path / "docs" / "designs").glob("cal_design_*.md")).read_text(encoding="utf-8")
    assert "UML" not in body
    assert "system architecture" in body
    assert "UML" not in out


def test_seed_write_failure_still_answers(store: DocumentStore, tmp_path: Path, monkeypatch):
    def fail(_request):
        raise DocumentWriteError("could not write", OSError(errno.EACCES, "denied"))

    monkeypatch.setattr(store, "save", fail)
    out = wrap_tools(default_tools(store))["requirement_analysis"].invoke("anything")
    assert "Started requirement analysis" in out


# ───────────────────────────────────────────────────────── echo tools
def test_uml_rejects_unknown_type(tools):
    out = tools["generate_uml"].invoke('{"type": "flowchart", "description": "login"}')
    assert "type must be one of" in out


def test_uml_ok(tools):
    out = tools["generate_uml"].invoke("type: sequence, description: login flow")
    assert out == "Starting sequence diagram: login flow"


def test_layout_needs_screen_name(tools):
    out = tools["generate_layout"].invoke("a settings page")
    assert "screenName" in out


# ───────────────────────────────────────────────────────── adapter
def test_unexpected_errors_become_text():
    out = StringInputTool(Exploding()).invoke("x: 1")
    assert "RuntimeError: kaboom" in out
    assert '"x"' in out


def test_compose_error_for_write_failure(store):
    exc = DocumentWriteError("could not write o/f.md", PermissionError(errno.EACCES, "denied"))
    text = compose_error(SaveDocumentTool(store), exc)
    assert "PermissionError" in text
    assert '"content"' in text


def test_description_lists_fields():
    assert '"description"' in StringInputTool(UMLGeneratorTool()).description


def test_default_tool_names(store):
    assert set(wrap_tools(default_tools(store))) == {
        "requirement_analysis",
        "external_design",
        "save_document",
        "generate_uml",
        "generate_layout",
    }
