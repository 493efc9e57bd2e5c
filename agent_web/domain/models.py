from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

CONFIDENCE_LEVELS = ("high", "medium", "low")


def total_duration_ms(stages: Iterable["AgentStage"]) -> int:
    return sum(s.duration_ms for s in stages)


@dataclass(frozen=True)
class TechSummary:
    language: str
    framework: Optional[str]
    tools: tuple[str, ...]
    confidence: str             # "high" | "medium" | "low"
    rationale: str
    matched_keywords: tuple[str, ...] = ()
    score: int = 0

    def __post_init__(self) -> None:
        if self.confidence not in CONFIDENCE_LEVELS:
            raise ValueError(f"confidence must be one of {CONFIDENCE_LEVELS}, got {self.confidence!r}")

    def to_dict(self) -> dict:
        return {
            "language": self.language,
            "framework": self.framework,
            "tools": list(self.tools),
            "confidence": self.confidence,
            "rationale": self.rationale,
            "matchedKeywords": list(self.matched_keywords),
            "score": self.score,
        }


@dataclass(frozen=True)
class AgentStage:
    id: str
    title: str
    headline: str
    bullets: tuple[str, ...]
    duration_ms: int            # UI pacing only

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "headline": self.headline,
            "bullets": list(self.bullets),
            "durationMs": self.duration_ms,
        }


@dataclass(frozen=True)
class GeneratedFile:
    path: str
    description: str
    language: str
    content: str

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "description": self.description,
            "language": self.language,
            "content": self.content,
        }


@dataclass(frozen=True)
class AgentInsights:
    summary: str
    risks: tuple[str, ...]
    next_steps: tuple[str, ...]
    qa_checklist: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "risks": list(self.risks),
            "nextSteps": list(self.next_steps),
            "qaChecklist": list(self.qa_checklist),
        }


@dataclass(frozen=True)
class AgentResult:
    """One simulated agent run. Built fresh for every submitted brief."""
    prompt: str
    tech: TechSummary
    stages: tuple[AgentStage, ...]
    files: tuple[GeneratedFile, ...]
    insights: AgentInsights
    heuristics: tuple[str, ...]
    run_id: str = ""
    generated_at: str = ""
    highlights: tuple[str, ...] = field(default=())

    @property
    def total_duration_ms(self) -> int:
        return total_duration_ms(self.stages)

    def find_file(self, path: str) -> Optional[GeneratedFile]:
        return next((f for f in self.files if f.path == path), None)

    def to_dict(self) -> dict:
        return {
            "runId": self.run_id,
            "generatedAt": self.generated_at,
            "prompt": self.prompt,
            "tech": self.tech.to_dict(),
            "stages": [s.to_dict() for s in self.stages],
            "files": [f.to_dict() for f in self.files],
            "insights": self.insights.to_dict(),
            "heuristics": list(self.heuristics),
            "highlights": list(self.highlights),
            "totalDurationMs": self.total_duration_ms,
        }
