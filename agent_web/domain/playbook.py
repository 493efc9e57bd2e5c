"""
Baseline agent configuration shared with the UI.
Extend this to add domain-specific roles or guardrails.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AgentRole:
    id: str
    title: str
    focus: str


AGENT_ROLES: tuple[AgentRole, ...] = (
    AgentRole(
        id="strategist",
        title="Product Strategist",
        focus="Identifies the user-facing value, edge cases, and business constraints.",
    ),
    AgentRole(
        id="architect",
        title="Systems Architect",
        focus="Tames complexity with composable boundaries and robust integrations.",
    ),
    AgentRole(
        id="engineer",
        title="Implementation Engineer",
        focus="Transforms the plan into production-grade code with safety nets.",
    ),
    AgentRole(
        id="qa",
        title="Quality Steward",
        focus="Provides verification strategy, instrumentation, and release gating.",
    ),
)

DEFAULT_GUARDRAILS: tuple[str, ...] = (
    "Enforce type safety across internal contracts.",
    "Fail closed on third-party API outages.",
    "Prefer deterministic pure functions for critical paths.",
    "Maintain exhaustive test coverage for state machines.",
)

EXAMPLE_BRIEFS: tuple[str, ...] = (
    "Build a Next.js dashboard for monitoring CI pipelines with real-time status and deploy buttons.",
    "Create a full-stack TypeScript API for managing feature flags with audit logging and metrics.",
    "Prototype a collaborative markdown editor with optimistic updates and presence indicators.",
)
