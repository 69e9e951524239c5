from __future__ import annotations

from typing import Tuple

from .instructions import Instruction, InstructionStream, Op

MOVE_CHARS = {'>': 1, '<': -1}
ADD_CHARS = {'+': 1, '-': -1}

SINGLE_OPS = {
    '.': Op.OUT,
    ',': Op.IN,
    '[': Op.BEGIN_LOOP,
    ']': Op.END_LOOP,
}


def _consume_run(source: str, i: int, weights: dict) -> Tuple[int, int]:
    # Sum the maximal run of characters in `weights` starting at i.
    total = 0
    n = len(source)
    while i < n and source[i] in weights:
        total += weights[source[i]]
        i += 1
    return total, i


def scan(source: str) -> InstructionStream:
    """
    Compile source text into an instruction stream.

    Runs of ``>``/``<`` collapse into one MOVE and runs of ``+``/``-`` into
    one ADD, each carrying the net signed count. Brackets and I/O map one to
    one; every other character is a comment. A single END is always appended.
    """
    stream = InstructionStream()
    i = 0
    n = len(source)
    while i < n:
        ch = source[i]
        if ch in MOVE_CHARS:
            payload, i = _consume_run(source, i, MOVE_CHARS)
            stream.append(Instruction(Op.MOVE, payload))
        elif ch in ADD_CHARS:
            payload, i = _consume_run(source, i, ADD_CHARS)
            stream.append(Instruction(Op.ADD, payload))
        elif ch in SINGLE_OPS:
            stream.append(Instruction(SINGLE_OPS[ch]))
            i += 1
        else:
            i += 1

    stream.finish()
    return stream
