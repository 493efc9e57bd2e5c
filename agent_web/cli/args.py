from __future__ import annotations

import argparse
from typing import Optional, Sequence


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="agent-web-plan",
        description="Run the simulated coding agent on a brief and print the plan.",
    )
    p.add_argument("brief", nargs="?", default=None, help="Product brief. Read from stdin when omitted.")
    p.add_argument("--format", choices=("markdown", "json"), default="markdown", help="Output format.")
    p.add_argument("--out", default="", help="Write the generated scaffold files into this directory.")
    p.add_argument("--ini", default="", help="INI file to use instead of APP_INI / agent_web.ini.")
    return p


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
