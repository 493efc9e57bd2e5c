from __future__ import annotations

# Scanned in order; every keyword found in the brief adds its sentence.
RISK_KEYWORDS: dict[str, str] = {
    "auth": "Add role-based access control and secure credential storage.",
    "realtime": "Validate concurrency strategy and ensure websocket back-pressure.",
    "payment": "Run PCI compliance checks before introducing payment flows.",
    "seo": "Provide metadata for SEO, open graph, and social previews.",
    "analytics": "Respect user privacy by toggling analytics based on consent.",
    "streaming": "Confirm the streaming transport supports backpressure.",
    "ai": "Budget for API usage and implement graceful degradation when the model is unavailable.",
}

FALLBACK_RISK = "Verify observability and alerting for critical workflows."

QA_CHECKS: tuple[str, ...] = (
    "Unit tests added for core logic paths.",
    "Edge cases captured for invalid user inputs.",
    "Performance profiled for target browsers/devices.",
    "Accessibility reviewed with keyboard navigation and landmarks.",
)

NEXT_STEPS: tuple[str, ...] = (
    "Pair the agent output with human review before merge.",
    "Translate generated tasks into issue tracker tickets.",
    "Schedule a demo sync once implementation reaches beta quality.",
)

HEURISTICS: tuple[str, ...] = (
    "Decompose large features into independently testable slices.",
    "Treat external integrations as unreliable dependencies until proven otherwise.",
    "Prioritize short feedback loops and fast lint/test pipelines.",
    "Document assumptions directly alongside the generated artifacts.",
)

MIGRATION_HEURISTIC = "Design forward-only migrations with rolling deploys."
LEGACY_HEURISTIC = "Isolate legacy adapters behind clean anti-corruption layers."


def derive_risks(prompt: str) -> list[str]:
    lowered = (prompt or "").lower()
    risks = [action for keyword, action in RISK_KEYWORDS.items() if keyword in lowered]
    return risks or [FALLBACK_RISK]


def generate_heuristics(prompt: str, limit: int = 5) -> list[str]:
    lowered = (prompt or "").lower()
    heuristics = list(HEURISTICS)

    if "migration" in lowered:
        heuristics.insert(0, MIGRATION_HEURISTIC)

    # legacy goes in front of migration when both apply
    if "legacy" in lowered:
        heuristics.insert(0, LEGACY_HEURISTIC)

    return heuristics[:limit]
