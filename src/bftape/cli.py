from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from .api import RunOptions, RunResult, load_source, run_string
from .compiler import scan
from .errors import BFError
from .instructions import disassemble
from .tape import CELL_DTYPES

PROMPT = 'bf> '
EXIT_WORDS = {'exit', 'quit'}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bftape',
        description='Brainfuck interpreter (run-length compiled, bidirectional tape).',
    )
    parser.add_argument('file', nargs='?', help='Program file; omit to start the REPL')
    parser.add_argument('--tape-size', type=int, default=30000, help='Initial tape size in cells (default 30000)')
    parser.add_argument('--cell-bits', type=int, default=64, choices=sorted(CELL_DTYPES), help='Cell width (default 64)')
    parser.add_argument('--eof', type=int, default=0, help='Value stored by "," at end of input (default 0)')
    parser.add_argument('--trace', action='store_true', help='Print an execution trace to stderr')
    parser.add_argument('--dump', action='store_true', help='Print the compiled instructions instead of running')
    parser.add_argument('--dump-tape', action='store_true', help='Print non-zero cells to stderr after the run')
    return parser


def _report(result: RunResult, args: argparse.Namespace, stderr: TextIO) -> None:
    if args.trace:
        for line in result.trace:
            print(line, file=stderr)
    if args.dump_tape:
        print(f"ptr={result.position} steps={result.steps}", file=stderr)
        for offset in sorted(result.cells):
            print(f"  [{offset:+d}] = {result.cells[offset]}", file=stderr)


def run_program(source: str, args: argparse.Namespace, options: RunOptions, *, stdin, stdout, stderr: TextIO) -> None:
    if args.dump:
        stdout.write((disassemble(scan(source)) + "\n").encode('ascii'))
        stdout.flush()
        return
    result = run_string(source, options=options, stdin=stdin, stdout=stdout)
    _report(result, args, stderr)


def repl(args: argparse.Namespace, options: RunOptions, *, lines: TextIO, stdout, stderr: TextIO) -> None:
    """Compile and run each input line as its own program, each on a fresh tape."""
    while True:
        stderr.write(PROMPT)
        stderr.flush()
        line = lines.readline()
        if not line:
            stderr.write("\n")
            break
        line = line.rstrip('\n')
        if line.strip() in EXIT_WORDS:
            break
        if args.dump:
            run_program(line, args, options, stdin=None, stdout=stdout, stderr=stderr)
            continue
        result = run_string(line, options=options, stdout=stdout, capture=True)
        if result.output:
            stdout.write(b"\n")
            stdout.flush()
        _report(result, args, stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    stdout = sys.stdout.buffer
    try:
        options = RunOptions(
            initial_size=args.tape_size,
            cell_bits=args.cell_bits,
            eof_value=args.eof,
            trace=args.trace,
        )
        if args.file is None:
            repl(args, options, lines=sys.stdin, stdout=stdout, stderr=sys.stderr)
        else:
            source = load_source(args.file)
            run_program(source, args, options, stdin=sys.stdin.buffer, stdout=stdout, stderr=sys.stderr)
    except BFError as e:
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
