from __future__ import annotations

import pytest

from agent_web.app_factory import create_app
from agent_web.config.ini_config import AppSettings


def make_settings(**overrides) -> AppSettings:
    values = dict(
        flask_host="127.0.0.1",
        flask_port=5000,
        flask_debug=False,
        max_prompt_chars=4000,
        highlight_limit=6,
        highlight_max_chars=160,
        heuristic_limit=5,
        retained_runs=1,
        log_level="WARNING",
        log_file=None,
    )
    values.update(overrides)
    return AppSettings(**values)


@pytest.fixture
def settings() -> AppSettings:
    return make_settings()


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
