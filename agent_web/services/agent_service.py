from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from agent_web.domain.errors import BriefTooLongError
from agent_web.domain.models import AgentInsights, AgentResult
from agent_web.repositories.run_repository import RunRepository
from agent_web.services.file_generator import ScaffoldFileGenerator
from agent_web.services.highlights import HighlightExtractor
from agent_web.services.prompt_normalization import PromptNormalizer
from agent_web.services.risk_analysis import NEXT_STEPS, QA_CHECKS, derive_risks, generate_heuristics
from agent_web.services.stage_generator import generate_stages
from agent_web.services.tech_detection import KeywordTechDetector

logger = logging.getLogger(__name__)


@dataclass
class CodingAgentService:
    """
    Service layer: turns one brief into one simulated agent run.
    Keeps controllers/routes thin.
    """
    prompt_normalizer: PromptNormalizer
    tech_detector: KeywordTechDetector
    highlight_extractor: HighlightExtractor
    file_generator: ScaffoldFileGenerator
    run_repo: RunRepository
    max_prompt_chars: int = 4000
    heuristic_limit: int = 5
    clock: Callable[[], datetime] = field(default=datetime.now)

    def run(self, raw_prompt: str) -> AgentResult:
        prompt = self.prompt_normalizer.normalize(raw_prompt)
        if len(prompt) > self.max_prompt_chars:
            raise BriefTooLongError(len(prompt), self.max_prompt_chars)

        tech = self.tech_detector.detect(prompt)
        highlights = self.highlight_extractor.extract(prompt)
        stages = generate_stages(highlights, tech)
        files = self.file_generator.generate(tech, highlights)

        summary = (
            f"Primary objective: {highlights[0]}"
            if highlights
            else "Prepare discovery questions to clarify the task."
        )

        started = self.clock()
        run_id = started.strftime("%Y%m%d_%H%M%S") + "_" + uuid.uuid4().hex[:6]

        result = AgentResult(
            prompt=prompt,
            tech=tech,
            stages=stages,
            files=files,
            insights=AgentInsights(
                summary=summary,
                risks=tuple(derive_risks(prompt)),
                next_steps=NEXT_STEPS,
                qa_checklist=QA_CHECKS,
            ),
            heuristics=tuple(generate_heuristics(prompt, self.heuristic_limit)),
            run_id=run_id,
            generated_at=started.strftime("%Y-%m-%d %H:%M:%S"),
            highlights=tuple(highlights),
        )

        self.run_repo.add(result)
        logger.info(
            "Run %s language=%s framework=%s confidence=%s score=%d files=%d",
            run_id, tech.language, tech.framework, tech.confidence, tech.score, len(files),
        )
        return result
