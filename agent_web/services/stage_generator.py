from __future__ import annotations

from typing import Sequence

from agent_web.domain.models import AgentStage, TechSummary, total_duration_ms

# Pause after the last stage before the run counts as finished.
COMPLETION_GRACE_MS = 250
MIN_COMPLETION_MS = 600


def generate_stages(highlights: Sequence[str], tech: TechSummary) -> tuple[AgentStage, ...]:
    return (
        AgentStage(
            id="explore",
            title="Decode & Scope",
            headline="Frame the request and lock the objective.",
            bullets=(
                "Capture explicit goals, constraints, and success signals.",
                "List out unknowns; surface clarifying questions quickly.",
                f"Map initial requirements to {tech.language} capabilities.",
            ),
            duration_ms=400,
        ),
        AgentStage(
            id="architect",
            title="Architecture Sketch",
            headline="Select boundaries, contracts, and core abstractions.",
            bullets=(
                f"Design the high-level module layout around {tech.framework or tech.language}.",
                "Define data flow, state ownership, and integration seams.",
                "Choose patterns that keep iteration speed high.",
            ),
            duration_ms=520,
        ),
        AgentStage(
            id="build",
            title="Implement Feature Slices",
            headline="Translate the plan into shippable increments.",
            bullets=(
                *(f"Deliver: {item}" for item in highlights[:3]),
                "Instrument logging and metrics around risky branches.",
            ),
            duration_ms=760,
        ),
        AgentStage(
            id="validate",
            title="Hardening & QA",
            headline="Verify correctness, resilience, and DX.",
            bullets=(
                "Author regression tests for the critical paths.",
                "Run accessibility sweep and perf smoke tests.",
                "Prepare release notes and deployment checklist.",
            ),
            duration_ms=380,
        ),
    )


def reveal_schedule(stages: Sequence[AgentStage]) -> tuple[list[tuple[str, int]], int]:
    """
    Returns ([(stage_id, start_offset_ms), ...], completion_ms).
    Stage i starts once every earlier stage has run for its duration.
    """
    offsets = []
    offset = 0
    for stage in stages:
        offsets.append((stage.id, offset))
        offset += stage.duration_ms
    return offsets, max(total_duration_ms(stages) + COMPLETION_GRACE_MS, MIN_COMPLETION_MS)
