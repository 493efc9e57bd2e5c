import re
from dataclasses import dataclass

# Periods, line breaks, bullets and hyphens all end a clause.
_CLAUSE_BREAK = re.compile(r"[.\n\r•\-]")

FALLBACK_HIGHLIGHT = "Clarify product requirements with the stakeholder."


def utf16_length(s: str) -> int:
    """Length as a browser counts it; characters outside the BMP count twice."""
    return len(s.encode("utf-16-le")) // 2


@dataclass(frozen=True)
class HighlightExtractor:
    limit: int = 6
    max_chars: int = 160

    def extract(self, prompt: str) -> list[str]:
        segments = [s.strip() for s in _CLAUSE_BREAK.split(prompt or "")]
        segments = [s for s in segments if 0 < utf16_length(s) <= self.max_chars]

        if not segments:
            return [FALLBACK_HIGHLIGHT]

        return segments[: self.limit]
