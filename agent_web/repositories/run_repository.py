from __future__ import annotations

import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Optional

from agent_web.domain.models import AgentResult


@dataclass
class RunRepository:
    """
    Repository pattern: keeps the most recent results in memory so download
    links keep working. Oldest runs are dropped once `retained_runs` is exceeded.

    Safe to share between the dev server's request threads. With the default
    of one retained run the newest submission wins, which suits a single-user demo.
    """
    retained_runs: int = 1
    _runs: "OrderedDict[str, AgentResult]" = field(default_factory=OrderedDict, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.retained_runs < 1:
            raise ValueError("retained_runs must be at least 1")

    def add(self, result: AgentResult) -> None:
        with self._lock:
            self._runs[result.run_id] = result
            self._runs.move_to_end(result.run_id)
            while len(self._runs) > self.retained_runs:
                self._runs.popitem(last=False)

    def get(self, run_id: str) -> Optional[AgentResult]:
        with self._lock:
            return self._runs.get(run_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._runs)
