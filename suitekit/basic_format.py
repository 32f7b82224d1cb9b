"""Plain-text formatting of failure lists."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from .model import FailureRecord


def format_failures(failures: Iterable[FailureRecord], indent: str = "  ") -> str:
    """Render failures as numbered lines, each starting with a newline."""
    return "".join(
        f"\n{indent}{i}. {f.file_name or ''}:{f.line_number}  - {f.condition or ''}"
        for i, f in enumerate(failures, 1)
    )


def show_failures(
    failures: Iterable[FailureRecord], out: Optional[TextIO] = None
) -> None:
    """Write the numbered failure list to a stream (standard output by default)."""
    stream = out if out is not None else sys.stdout
    stream.write(format_failures(failures))