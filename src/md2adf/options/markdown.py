#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing.

The options control which Markdown extensions the underlying parser
recognizes. Recognizing an extension does not make it convertible: a table
that is parsed as a table is rejected by the converter instead of silently
ending up as paragraph text.
"""
# src/md2adf/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from md2adf.constants import DEFAULT_HARD_WRAP, DEFAULT_PARSE_STRIKETHROUGH, DEFAULT_PARSE_TABLES
from md2adf.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-syntax-tree parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to recognize GFM pipe tables.
    parse_strikethrough : bool, default True
        Whether to recognize strikethrough syntax (~~text~~).
    hard_wrap : bool, default False
        Whether every newline inside a paragraph is a hard line break.

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Recognize table syntax (GFM pipe tables)", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Recognize strikethrough syntax (~~text~~)", "importance": "core"},
    )
    hard_wrap: bool = field(
        default=DEFAULT_HARD_WRAP,
        metadata={"help": "Treat every newline in a paragraph as a hard line break", "importance": "advanced"},
    )

    def mistune_plugins(self) -> list[str]:
        """Return the mistune plugin names enabled by these options."""
        plugins = []
        if self.parse_strikethrough:
            plugins.append("strikethrough")
        if self.parse_tables:
            plugins.append("table")
        return plugins
