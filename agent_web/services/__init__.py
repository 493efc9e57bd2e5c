from .agent_service import CodingAgentService
from .file_generator import ScaffoldFileGenerator, bundle_text
from .highlights import HighlightExtractor
from .prompt_normalization import PromptNormalizer, WhitespacePromptNormalizer
from .tech_detection import KeywordTechDetector

__all__ = [
    "CodingAgentService",
    "ScaffoldFileGenerator",
    "bundle_text",
    "HighlightExtractor",
    "PromptNormalizer",
    "WhitespacePromptNormalizer",
    "KeywordTechDetector",
]
