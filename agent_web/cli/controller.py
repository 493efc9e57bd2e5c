from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from agent_web.app_factory import build_agent_service
from agent_web.config.ini_config import IniConfig
from agent_web.domain.errors import AgentInputError
from agent_web.domain.models import AgentResult
from agent_web.log_setup import setup_logging
from agent_web.cli.args import parse_args

logger = logging.getLogger(__name__)


def render_markdown(result: AgentResult) -> str:
    tech = result.tech
    stack = tech.language + (f" / {tech.framework}" if tech.framework else "")
    lines = [
        f"# {result.insights.summary}",
        "",
        f"**Stack:** {stack} (confidence {tech.confidence})",
        f"**Tools:** {', '.join(tech.tools)}",
        "",
        f"_{tech.rationale}_",
        "",
        f"## Timeline ({result.total_duration_ms / 1000:.1f}s simulated)",
    ]
    for stage in result.stages:
        lines += ["", f"### {stage.title} ({stage.duration_ms / 1000:.1f}s)", stage.headline, ""]
        lines += [f"- {b}" for b in stage.bullets]

    lines += ["", "## Generated files", ""]
    lines += [f"- `{f.path}` ({f.language}): {f.description}" for f in result.files]

    for title, items in (
        ("Guardrails", result.heuristics),
        ("Risk radar", result.insights.risks),
        ("QA checklist", result.insights.qa_checklist),
        ("Next steps", result.insights.next_steps),
    ):
        lines += ["", f"## {title}", ""]
        lines += [f"- {item}" for item in items]

    return "\n".join(lines) + "\n"


def write_files(result: AgentResult, out_dir: Path) -> list[Path]:
    out_dir = out_dir.resolve()
    written = []
    for f in result.files:
        target = (out_dir / f.path).resolve()
        if out_dir not in target.parents:
            raise ValueError(f"Refusing to write outside {out_dir}: {f.path}")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(f.content, encoding="utf-8")
        written.append(target)
    return written


def main(argv: Optional[Sequence[str]] = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    args = parse_args(argv)

    ini = IniConfig(Path(args.ini)) if args.ini else IniConfig.from_env_or_default()
    settings = ini.load_settings()
    setup_logging(settings.log_level, settings.log_file)

    brief = args.brief if args.brief is not None else stdin.read()
    service = build_agent_service(settings)

    try:
        result = service.run(brief)
    except AgentInputError as e:
        logger.error("%s", e)
        return 2

    if args.format == "json":
        stdout.write(json.dumps(result.to_dict(), indent=2) + "\n")
    else:
        stdout.write(render_markdown(result))

    if args.out:
        for path in write_files(result, Path(args.out)):
            logger.info("Wrote %s", path)

    return 0
