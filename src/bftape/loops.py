from __future__ import annotations

from .instructions import InstructionStream, Op


def jump_forward(instructions: InstructionStream, i: int) -> int:
    """
    Position just past the END_LOOP matching the BEGIN_LOOP at ``i``.

    Without a match the scan stops on the END instruction and returns its
    position, which halts execution.
    """
    i += 1
    depth = 0
    n = len(instructions)
    while i < n:
        op = instructions[i].op
        if op is Op.END:
            break
        if op is Op.END_LOOP:
            if depth == 0:
                return i + 1
            depth -= 1
        elif op is Op.BEGIN_LOOP:
            depth += 1
        i += 1
    return i


def jump_back(instructions: InstructionStream, i: int) -> int:
    """
    Position of the BEGIN_LOOP matching the END_LOOP at ``i``.

    Without a match the scan stops at position 0 and returns it.
    """
    i -= 1
    depth = 0
    while i > 0:
        op = instructions[i].op
        if op is Op.BEGIN_LOOP:
            if depth == 0:
                return i
            depth -= 1
        elif op is Op.END_LOOP:
            depth += 1
        i -= 1
    return 0
