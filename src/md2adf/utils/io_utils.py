#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adf/utils/io_utils.py
"""I/O utilities for writing rendered text to output destinations."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


def _is_binary_stream(output: object) -> bool:
    """Guess whether a file-like object expects bytes."""
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_text(text: str, output: OutputTarget) -> None:
    """Write text to a path or file-like object.

    Paths are written as UTF-8. Binary streams receive UTF-8 encoded bytes,
    text streams receive the string unchanged.

    Parameters
    ----------
    text : str
        Content to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination

    Raises
    ------
    TypeError
        If output type is not supported

    Examples
    --------
    >>> buffer = BytesIO()
    >>> write_text('{"type": "doc"}', buffer)
    >>> buffer.getvalue()
    b'{"type": "doc"}'

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(text, encoding="utf-8")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(text.encode("utf-8"))
    else:
        cast(IO[str], output).write(text)


__all__ = ["OutputTarget", "write_text"]
