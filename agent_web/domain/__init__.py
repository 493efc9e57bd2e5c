from .models import (
    AgentInsights,
    AgentResult,
    AgentStage,
    GeneratedFile,
    TechSummary,
)
from .errors import AgentInputError, BriefTooLongError

__all__ = [
    "AgentInsights",
    "AgentResult",
    "AgentStage",
    "GeneratedFile",
    "TechSummary",
    "AgentInputError",
    "BriefTooLongError",
]
