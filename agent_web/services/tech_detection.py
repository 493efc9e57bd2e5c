from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from agent_web.domain.models import TechSummary


@dataclass(frozen=True)
class TechCandidate:
    name: str
    keywords: tuple[str, ...]
    framework: Optional[str] = None
    tools: tuple[str, ...] = ()


# Order matters: on equal scores the earlier candidate wins.
LANGUAGE_PRIORITIES: tuple[TechCandidate, ...] = (
    TechCandidate(
        name="TypeScript",
        framework="Next.js",
        keywords=("next", "react", "frontend", "component", "typescript", "ts", "vercel"),
        tools=("Next.js App Router", "React Server Components", "Tailwind CSS"),
    ),
    TechCandidate(
        name="Python",
        framework="FastAPI",
        keywords=("python", "fastapi", "pydantic", "backend", "api"),
        tools=("FastAPI", "uvicorn", "Pydantic"),
    ),
    TechCandidate(
        name="Go",
        framework="Gin",
        keywords=("golang", "go", "gin", "http"),
        tools=("Gin", "Go Modules"),
    ),
    TechCandidate(
        name="Rust",
        framework="Axum",
        keywords=("rust", "axum", "cargo"),
        tools=("Axum", "Tokio", "Serde"),
    ),
    TechCandidate(
        name="Java",
        framework="Spring Boot",
        keywords=("spring", "java", "spring boot"),
        tools=("Spring Boot", "Maven"),
    ),
)

FALLBACK_TOOLS: tuple[str, ...] = ("TypeScript", "Next.js App Router", "Tailwind CSS")


def _house_stack(rationale: str) -> TechSummary:
    return TechSummary(
        language="TypeScript",
        framework="Next.js",
        tools=FALLBACK_TOOLS,
        confidence="low",
        rationale=rationale,
    )


def confidence_for(score: int) -> str:
    if score >= 4:
        return "high"
    if score >= 2:
        return "medium"
    return "low"


def score_candidate(candidate: TechCandidate, lowered: str) -> tuple[int, tuple[str, ...]]:
    """
    Plain substring matching: "ts" also hits "tests", "go" hits "good".
    Multi-word keywords count double.
    """
    score = 0
    matched = []
    for keyword in candidate.keywords:
        if keyword in lowered:
            score += 2 if len(keyword.split(" ")) > 1 else 1
            matched.append(keyword)
    return score, tuple(matched)


@dataclass(frozen=True)
class KeywordTechDetector:
    candidates: tuple[TechCandidate, ...] = LANGUAGE_PRIORITIES

    def detect(self, prompt: str) -> TechSummary:
        if not prompt:
            return _house_stack("No prompt provided; defaulting to the house stack.")

        lowered = prompt.lower()
        best: Optional[TechCandidate] = None
        best_score = 0
        best_matched: tuple[str, ...] = ()

        for candidate in self.candidates:
            score, matched = score_candidate(candidate, lowered)
            if score > best_score:
                best, best_score, best_matched = candidate, score, matched

        if best is None:
            return _house_stack("Falling back to the opinionated TypeScript web stack.")

        with_framework = f" with {best.framework}" if best.framework else ""
        return TechSummary(
            language=best.name,
            framework=best.framework,
            tools=best.tools,
            confidence=confidence_for(best_score),
            rationale=f"Detected domain-specific keywords for {best.name}{with_framework}.",
            matched_keywords=best_matched,
            score=best_score,
        )
