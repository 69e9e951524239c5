from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Dict, List, Optional

from .compiler import scan
from .errors import make_load_error, make_options_error
from .interpreter import interpret
from .tape import CELL_DTYPES, INITIAL_SIZE, Tape


@dataclass(frozen=True)
class RunOptions:
    initial_size: int = INITIAL_SIZE
    cell_bits: int = 64
    eof_value: int = 0
    trace: bool = False

    def __post_init__(self) -> None:
        if self.cell_bits not in CELL_DTYPES:
            raise make_options_error(field='cell_bits', value=self.cell_bits, expected='one of 8, 16, 32, 64')
        if self.initial_size <= 0:
            raise make_options_error(field='initial_size', value=self.initial_size, expected='a positive cell count')
        # The sentinel is stored in a cell, so it follows the cell width.
        object.__setattr__(self, 'eof_value', int(self.eof_value) & ((1 << self.cell_bits) - 1))


@dataclass(frozen=True)
class RunResult:
    output: bytes
    steps: int
    position: int
    cells: Dict[int, int] = field(default_factory=dict)
    trace: List[str] = field(default_factory=list)


def load_source(path: str | Path) -> str:
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as e:
        raise make_load_error(path=p, exc=e) from e
    # latin-1 maps every byte to one character, so no input is rejected.
    return data.decode('latin-1')


def run_string(
    source: str,
    *,
    options: Optional[RunOptions] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    capture: Optional[bool] = None,
) -> RunResult:
    """Compile and run ``source``. ``capture`` defaults to keeping output only when no stdout is given."""
    opts = RunOptions() if options is None else options
    tape = Tape(opts.initial_size, opts.cell_bits)
    state = interpret(
        scan(source),
        tape=tape,
        stdin=stdin,
        stdout=stdout,
        eof_value=opts.eof_value,
        trace=opts.trace,
        capture=capture,
    )
    return RunResult(
        output=bytes(state.output),
        steps=state.steps,
        position=tape.position,
        cells=tape.nonzero(),
        trace=list(state.trace),
    )


def run_file(
    path: str | Path,
    *,
    options: Optional[RunOptions] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    capture: Optional[bool] = None,
) -> RunResult:
    return run_string(load_source(path), options=options, stdin=stdin, stdout=stdout, capture=capture)
