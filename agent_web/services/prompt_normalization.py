import re
from dataclasses import dataclass

_WHITESPACE = re.compile(r"\s+")


class PromptNormalizer:
    """Strategy interface."""
    def normalize(self, s: str) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class WhitespacePromptNormalizer(PromptNormalizer):
    """Collapses every whitespace run (newlines and tabs included) to one space."""

    def normalize(self, s: str) -> str:
        return _WHITESPACE.sub(" ", s or "").strip()
