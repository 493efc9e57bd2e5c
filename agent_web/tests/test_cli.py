from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from agent_web.cli.args import parse_args
from agent_web.cli.controller import main, render_markdown, write_files
from agent_web.domain.models import AgentInsights, AgentResult, GeneratedFile, TechSummary


@pytest.fixture
def ini(tmp_path: Path) -> Path:
    p = tmp_path / "cli.ini"
    p.write_text("[agent]\nmax_prompt_chars = 40\n\n[logging]\nlevel = WARNING\n", encoding="utf-8")
    return p


def test_parse_args_defaults():
    args = parse_args(["a brief"])
    assert args.brief == "a brief"
    assert args.format == "markdown"
    assert args.out == ""


def test_markdown_output(ini: Path):
    out = io.StringIO()
    code = main(["python backend api", "--ini", str(ini)], stdout=out)

    text = out.getvalue()
    assert code == 0
    assert text.startswith("# Primary objective: python backend api\n")
    assert "**Stack:** Python / FastAPI (confidence medium)" in text
    assert "## Timeline (2.1s simulated)" in text
    assert "### Decode & Scope (0.4s)" in text
    assert "- `agent/main.py` (python): FastAPI blueprint produced by the agent." in text


def test_json_output(ini: Path):
    out = io.StringIO()
    code = main(["rust axum", "--format", "json", "--ini", str(ini)], stdout=out)

    assert code == 0
    body = json.loads(out.getvalue())
    assert body["tech"]["language"] == "Rust"
    assert body["files"][0]["path"] == "AGENT_NOTES.md"


def test_reads_brief_from_stdin(ini: Path):
    out = io.StringIO()
    code = main(["--format", "json", "--ini", str(ini)], stdin=io.StringIO("java spring\n"), stdout=out)

    assert code == 0
    assert json.loads(out.getvalue())["prompt"] == "java spring"


def test_writes_generated_files(ini: Path, tmp_path: Path):
    out_dir = tmp_path / "scaffold"
    code = main(["next react app", "--ini", str(ini), "--out", str(out_dir)], stdout=io.StringIO())

    assert code == 0
    assert (out_dir / "src" / "components" / "GeneratedSolution.tsx").is_file()
    assert (out_dir / "src" / "lib" / "agent-playbook.ts").is_file()


def test_oversize_brief_exits_with_error(ini: Path):
    out = io.StringIO()
    assert main(["x" * 41, "--ini", str(ini)], stdout=out) == 2
    assert out.getvalue() == ""


def _result_with(path: str) -> AgentResult:
    return AgentResult(
        prompt="p",
        tech=TechSummary(language="Go", framework=None, tools=("Go Modules",), confidence="low", rationale="r"),
        stages=(),
        files=(GeneratedFile(path=path, description="d", language="md", content="c"),),
        insights=AgentInsights(summary="s", risks=("r1",), next_steps=(), qa_checklist=()),
        heuristics=(),
    )


def test_write_files_refuses_to_escape_out_dir(tmp_path: Path):
    with pytest.raises(ValueError):
        write_files(_result_with("../escape.md"), tmp_path / "out")


def test_render_markdown_without_framework():
    text = render_markdown(_result_with("NOTES.md"))
    assert "**Stack:** Go (confidence low)" in text
    assert "- r1" in text
