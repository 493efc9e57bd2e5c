from __future__ import annotations

from typing import Optional

from flask import Flask

from agent_web.config.ini_config import AppSettings, IniConfig
from agent_web.log_setup import setup_logging
from agent_web.repositories.run_repository import RunRepository
from agent_web.services.agent_service import CodingAgentService
from agent_web.services.file_generator import ScaffoldFileGenerator
from agent_web.services.highlights import HighlightExtractor
from agent_web.services.prompt_normalization import WhitespacePromptNormalizer
from agent_web.services.tech_detection import KeywordTechDetector
from agent_web.web.routes import create_blueprint


def build_agent_service(settings: AppSettings) -> CodingAgentService:
    return CodingAgentService(
        prompt_normalizer=WhitespacePromptNormalizer(),
        tech_detector=KeywordTechDetector(),
        highlight_extractor=HighlightExtractor(
            limit=settings.highlight_limit,
            max_chars=settings.highlight_max_chars,
        ),
        file_generator=ScaffoldFileGenerator(),
        run_repo=RunRepository(retained_runs=settings.retained_runs),
        max_prompt_chars=settings.max_prompt_chars,
        heuristic_limit=settings.heuristic_limit,
    )


def create_app(settings: Optional[AppSettings] = None) -> Flask:
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()

    setup_logging(settings.log_level, settings.log_file)

    agent_service = build_agent_service(settings)

    app = Flask(__name__)
    app.register_blueprint(create_blueprint(agent_service))

    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug
    app.json.sort_keys = False

    return app
