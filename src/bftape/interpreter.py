from __future__ import annotations

import io
from typing import BinaryIO, Optional

from .instructions import InstructionStream, Op
from .loops import jump_back, jump_forward
from .state import ExecutionState
from .tape import Tape


def _read_byte(stdin, eof_value: int, pending: bytearray) -> int:
    # Text streams hand out UTF-8 bytes one per read; leftovers wait in `pending`.
    if pending:
        return pending.pop(0)
    if stdin is None:
        return eof_value
    data = stdin.read(1)
    if not data:
        return eof_value
    if isinstance(data, str):
        pending.extend(data.encode('utf-8'))
        return pending.pop(0)
    return data[0]


def _write_byte(stdout, byte: int) -> None:
    if isinstance(stdout, io.TextIOBase):
        stdout.write(chr(byte))
    else:
        stdout.write(bytes((byte,)))
    stdout.flush()


def interpret(
    instructions: InstructionStream,
    *,
    tape: Optional[Tape] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    eof_value: int = 0,
    trace: bool = False,
    capture: Optional[bool] = None,
) -> ExecutionState:
    """
    Execute a compiled stream until END (or the end of the stream).

    Each OUT emits the low 8 bits of the current cell. When ``stdout`` is
    given the byte is written and flushed immediately (text streams get
    ``chr(byte)``). Bytes are collected in ``state.output`` only when
    ``capture`` is true, which defaults to "no stdout given".

    Each IN stores one byte from ``stdin``; text streams are read as UTF-8
    bytes. End of input (or no ``stdin``) stores ``eof_value``.
    """
    if capture is None:
        capture = stdout is None
    state = ExecutionState(tape=Tape() if tape is None else tape, is_tracing=trace)
    tape = state.tape
    pending = bytearray()
    n = len(instructions)

    i = 0
    while i < n:
        inst = instructions[i]
        op = inst.op
        if op is Op.END:
            break

        state.steps += 1
        if state.is_tracing:
            state.add_trace(f"{i:04d}  {inst!r:<12} ptr={tape.position} cell={tape.current_value()}")

        if op is Op.MOVE:
            tape.move(inst.payload)
            i += 1
        elif op is Op.ADD:
            tape.add(inst.payload)
            i += 1
        elif op is Op.BEGIN_LOOP:
            if tape.current_value() == 0:
                i = jump_forward(instructions, i)
            else:
                i += 1
        elif op is Op.END_LOOP:
            if tape.current_value() != 0:
                i = jump_back(instructions, i)
            else:
                i += 1
        elif op is Op.IN:
            tape.set(_read_byte(stdin, eof_value, pending))
            i += 1
        elif op is Op.OUT:
            byte = tape.current_value() & 0xFF
            if capture:
                state.output.append(byte)
            if stdout is not None:
                _write_byte(stdout, byte)
            i += 1

    state.pc = i
    return state
