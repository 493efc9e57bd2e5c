########## ini_config.py

import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

INI_DEFAULT_NAME = "agent_web.ini"


@dataclass(frozen=True)
class AppSettings:
    flask_host: str
    flask_port: int
    flask_debug: bool

    max_prompt_chars: int
    highlight_limit: int
    highlight_max_chars: int
    heuristic_limit: int
    retained_runs: int

    log_level: str
    log_file: Optional[Path]


class IniConfig:
    """
    Adapter around ConfigParser.
    Keeps INI handling out of your app/service code.
    """

    def __init__(self, ini_path: Optional[Path], *, required: bool = True):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        if ini_path is None:
            return
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok and required:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @staticmethod
    def from_env_or_default() -> "IniConfig":
        ini_raw = (os.getenv("APP_INI") or "").strip()
        if ini_raw:
            return IniConfig(Path(ini_raw))
        # If APP_INI is not set, use the repo-root ini when present, else built-in defaults
        return IniConfig(Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME, required=False)

    def _positive_int(self, section: str, key: str, fallback: int) -> int:
        value = self._cfg.getint(section, key, fallback=fallback)
        if value < 1:
            raise ValueError(f"[{section}] {key} must be a positive integer, got {value}")
        return value

    def load_settings(self) -> AppSettings:
        # Flask
        flask_host = (self._cfg.get("flask", "host", fallback="127.0.0.1") or "").strip() or "127.0.0.1"
        flask_port = self._cfg.getint("flask", "port", fallback=5000)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=False)

        # Agent
        max_prompt_chars = self._positive_int("agent", "max_prompt_chars", 4000)
        highlight_limit = self._positive_int("agent", "highlight_limit", 6)
        highlight_max_chars = self._positive_int("agent", "highlight_max_chars", 160)
        heuristic_limit = self._positive_int("agent", "heuristic_limit", 5)
        retained_runs = self._positive_int("agent", "retained_runs", 1)

        # Logging
        log_level = (self._cfg.get("logging", "level", fallback="INFO") or "").strip().upper() or "INFO"
        log_file_raw = (self._cfg.get("logging", "file", fallback="") or "").strip()
        log_file = Path(os.path.expandvars(os.path.expanduser(log_file_raw))).resolve() if log_file_raw else None

        return AppSettings(
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
            max_prompt_chars=max_prompt_chars,
            highlight_limit=highlight_limit,
            highlight_max_chars=highlight_max_chars,
            heuristic_limit=heuristic_limit,
            retained_runs=retained_runs,
            log_level=log_level,
            log_file=log_file,
        )
