from .api import RunOptions, RunResult, load_source, run_file, run_string
from .compiler import scan
from .errors import BFError, BFLoadError, BFOptionsError
from .instructions import Instruction, InstructionStream, Op, disassemble, emit
from .interpreter import interpret
from .loops import jump_back, jump_forward
from .tape import Tape

__all__ = [
    'BFError',
    'BFLoadError',
    'BFOptionsError',
    'Instruction',
    'InstructionStream',
    'Op',
    'RunOptions',
    'RunResult',
    'Tape',
    'disassemble',
    'emit',
    'interpret',
    'jump_back',
    'jump_forward',
    'load_source',
    'run_file',
    'run_string',
    'scan',
]
