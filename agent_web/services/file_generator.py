from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined

from agent_web.domain.models import GeneratedFile, TechSummary
from agent_web.domain.playbook import AGENT_ROLES, DEFAULT_GUARDRAILS

_PREAMBLE_LINES = (
    "Generated scaffold by the Coding Agent.",
    "Tailor this file to match project conventions before shipping.",
)


def preamble_for(language: str) -> str:
    """Header comment in the target file's own comment syntax."""
    if language == "python":
        return '"""\n' + "\n".join(_PREAMBLE_LINES) + '\n"""'
    if language == "md":
        return "<!--\n" + "\n".join(_PREAMBLE_LINES) + "\n-->"
    return "/**\n" + "\n".join(f" * {line}" for line in _PREAMBLE_LINES) + "\n */"


def js_string(value: str) -> str:
    """Double-quoted JS string literal; text stays readable, only quotes and control chars are escaped."""
    return json.dumps(str(value), ensure_ascii=False)


def _default_env() -> Environment:
    return Environment(
        loader=PackageLoader("agent_web", "scaffolds"),
        autoescape=False,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


@dataclass
class ScaffoldFileGenerator:
    """
    Picks one of three canned bundles:
    Next.js projects get a component + playbook, Python gets a FastAPI app,
    everything else gets implementation notes.
    """
    env: Environment = field(default_factory=_default_env)

    def __post_init__(self) -> None:
        self.env.filters["js_string"] = js_string

    def _render(self, template: str, path: str, description: str, language: str, **context) -> GeneratedFile:
        content = self.env.get_template(template).render(preamble=preamble_for(language), **context)
        return GeneratedFile(path=path, description=description, language=language, content=content)

    def generate(self, tech: TechSummary, highlights: Sequence[str]) -> tuple[GeneratedFile, ...]:
        if tech.framework == "Next.js":
            summary = highlights[0] if highlights else "core feature"
            return (
                self._render(
                    "generated_solution.tsx.j2",
                    path="src/components/GeneratedSolution.tsx",
                    description="Reference implementation for the requested feature.",
                    language="tsx",
                    component_name="GeneratedSolution",
                    summary=summary,
                ),
                self._render(
                    "agent_playbook.ts.j2",
                    path="src/lib/agent-playbook.ts",
                    description="Codifies the runbook for orchestrating the agent.",
                    language="ts",
                    roles=AGENT_ROLES,
                    guardrails=DEFAULT_GUARDRAILS,
                ),
            )

        if tech.language == "Python":
            return (
                self._render(
                    "fastapi_main.py.j2",
                    path="agent/main.py",
                    description="FastAPI blueprint produced by the agent.",
                    language="python",
                ),
            )

        return (
            self._render(
                "agent_notes.md.j2",
                path="AGENT_NOTES.md",
                description="Guidance for implementing the remaining components.",
                language="md",
            ),
        )


def bundle_text(files: Iterable[GeneratedFile]) -> str:
    """Everything the "Copy all" button puts on the clipboard."""
    return "\n\n".join(f"// {f.path}\n{f.content}" for f in files)
