# SPDX-License-Identifier: Apache-2.0
"""Path-or-dash helpers so sources and reports can use stdin/stdout."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator


@contextmanager
def open_input(path_or_dash: str) -> Iterator[BinaryIO]:
    """Yield a readable binary handle for a path, or stdin for ``-``.

    Stdin is left open on exit.
    """
    if path_or_dash == "-":
        yield sys.stdin.buffer
    else:
        with Path(path_or_dash).expanduser().open("rb") as f:
            yield f


@contextmanager
def open_output(path_or_dash: str) -> Iterator[BinaryIO]:
    """Yield a writable binary handle for a path, or stdout for ``-``.

    Parent directories are created for file paths; stdout is left open on exit.
    """
    if path_or_dash == "-":
        yield sys.stdout.buffer
    else:
        path = Path(path_or_dash).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as f:
            yield f


def write_text_output(path_or_dash: str, text: str) -> None:
    with open_output(path_or_dash) as fh:
        fh.write(text.encode("utf-8"))
        if path_or_dash == "-":
            fh.flush()
