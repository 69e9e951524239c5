from __future__ import annotations

import errno
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


def _hint_for(exc: OSError) -> Optional[str]:
    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        return 'Check the path. Relative paths are resolved from the current directory.'
    if isinstance(exc, IsADirectoryError) or exc.errno == errno.EISDIR:
        return 'Pass a program file, not a directory.'
    if isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
        return 'The file exists but is not readable by this user.'
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BFLoadError(BFError):
    path: str


@dataclass
class BFOptionsError(BFError, ValueError):
    field: str


def make_load_error(*, path: Union[str, Path], exc: OSError) -> BFLoadError:
    reason = exc.strerror or type(exc).__name__
    hint = _hint_for(exc)
    hint_block = f"\nHint: {hint}" if hint else ""
    return BFLoadError(
        message=f"LoadError: cannot read {str(path)!r}: {reason}{hint_block}",
        path=str(path),
    )


def make_options_error(*, field: str, value: object, expected: str) -> BFOptionsError:
    return BFOptionsError(
        message=f"OptionsError: {field}={value!r} is invalid (expected {expected})",
        field=field,
    )
