"""Input and output for the command line: HTML in, JSX out."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO, Union

PathLike = Union[str, Path]

STDIO_PATH = "-"


def _is_stdio(path: Optional[PathLike]) -> bool:
    return path is None or str(path) == STDIO_PATH


def read_markup(path: Optional[PathLike], *, stdin: Optional[TextIO] = None) -> str:
    """Read an HTML fragment from ``path``, or from standard input for ``None`` or ``-``."""
    if _is_stdio(path):
        return (stdin or sys.stdin).read()
    return Path(path).read_text(encoding="utf-8")


def write_jsx(path: Optional[PathLike], jsx: str, *, stdout: Optional[TextIO] = None) -> Optional[Path]:
    """Write ``jsx`` as one newline-terminated snippet.

    Goes to standard output for ``None`` or ``-``; otherwise the file and any
    missing parent directories are created and the file path is returned.
    """
    snippet = jsx if jsx.endswith("\n") else jsx + "\n"
    if _is_stdio(path):
        (stdout or sys.stdout).write(snippet)
        return None
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(snippet, encoding="utf-8")
    return out_path


__all__ = ["read_markup", "write_jsx"]
