from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .tape import Tape


@dataclass
class ExecutionState:
    tape: Tape = field(default_factory=Tape)
    pc: int = 0
    steps: int = 0
    output: bytearray = field(default_factory=bytearray)
    trace: List[str] = field(default_factory=list)
    is_tracing: bool = False

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)
