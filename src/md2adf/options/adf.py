#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for ADF JSON rendering."""
# src/md2adf/options/adf.py

from __future__ import annotations

from dataclasses import dataclass, field

from md2adf.constants import DEFAULT_JSON_ENSURE_ASCII, DEFAULT_JSON_INDENT, DEFAULT_JSON_SORT_KEYS
from md2adf.exceptions import ValidationError
from md2adf.options.base import BaseRendererOptions


@dataclass(frozen=True)
class AdfRendererOptions(BaseRendererOptions):
    """Configuration options for rendering an ADF document to JSON text.

    Parameters
    ----------
    indent : int or None, default None
        Number of spaces for pretty printing. None produces compact output.
    ensure_ascii : bool, default False
        Escape non-ASCII characters in the output.
    sort_keys : bool, default False
        Sort object keys alphabetically.

    """

    indent: int | None = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "JSON indentation spaces (None for compact output)", "type": int},
    )
    ensure_ascii: bool = field(
        default=DEFAULT_JSON_ENSURE_ASCII,
        metadata={"help": "Escape non-ASCII characters in JSON output"},
    )
    sort_keys: bool = field(
        default=DEFAULT_JSON_SORT_KEYS,
        metadata={"help": "Sort JSON object keys alphabetically"},
    )

    def __post_init__(self) -> None:
        """Validate option values."""
        if self.indent is not None and (not isinstance(self.indent, int) or self.indent < 0):
            raise ValidationError(
                f"indent must be a non-negative integer or None, got {self.indent!r}",
                parameter_name="indent",
                parameter_value=self.indent,
            )
