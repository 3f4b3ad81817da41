#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers producing the generic Markdown syntax tree."""

from md2adf.parsers.markdown import MarkdownNode, MarkdownParser

__all__ = ["MarkdownNode", "MarkdownParser"]
