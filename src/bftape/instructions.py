from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, List, Sequence


class Op(enum.Enum):
    MOVE = 'move'
    ADD = 'add'
    BEGIN_LOOP = 'begin_loop'
    END_LOOP = 'end_loop'
    IN = 'in'
    OUT = 'out'
    END = 'end'


# Source characters for the single-character ops
OP_CHARS = {
    Op.BEGIN_LOOP: '[',
    Op.END_LOOP: ']',
    Op.IN: ',',
    Op.OUT: '.',
}


@dataclass(frozen=True)
class Instruction:
    op: Op
    payload: int = 0  # net >/< for MOVE, net +/- for ADD

    def __repr__(self) -> str:
        if self.op in (Op.MOVE, Op.ADD):
            return f"{self.op.name}({self.payload:+d})"
        return self.op.name


class InstructionStream:
    """Append-only sequence of instructions; positions never change once assigned."""

    def __init__(self, instructions: Sequence[Instruction] = ()):
        self._items: List[Instruction] = list(instructions)

    def append(self, instruction: Instruction) -> int:
        self._items.append(instruction)
        return len(self._items) - 1

    def finish(self) -> None:
        # Exactly one trailing END.
        if not self._items or self._items[-1].op is not Op.END:
            self._items.append(Instruction(Op.END))

    def ops(self) -> List[Op]:
        return [inst.op for inst in self._items]

    def __getitem__(self, index: int) -> Instruction:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._items)

    def __eq__(self, other) -> bool:
        if isinstance(other, InstructionStream):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"InstructionStream({self._items!r})"


# ---------------- Rendering ----------------
def disassemble(stream: InstructionStream) -> str:
    lines: List[str] = []
    for pos, inst in enumerate(stream):
        if inst.op in (Op.MOVE, Op.ADD):
            lines.append(f"{pos:04d}  {inst.op.name:<10} {inst.payload:+d}")
        else:
            lines.append(f"{pos:04d}  {inst.op.name}")
    return "\n".join(lines)


def emit(stream: InstructionStream) -> str:
    """Regenerate canonical source for a compiled stream (END is implicit)."""
    out: List[str] = []
    for inst in stream:
        if inst.op is Op.ADD:
            out.append(("+" * inst.payload) if inst.payload > 0 else ("-" * (-inst.payload)))
        elif inst.op is Op.MOVE:
            out.append((">" * inst.payload) if inst.payload > 0 else ("<" * (-inst.payload)))
        elif inst.op in OP_CHARS:
            out.append(OP_CHARS[inst.op])
    return "".join(out)
