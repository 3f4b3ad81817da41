#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for the md2adf pipeline."""

from md2adf.options.adf import AdfRendererOptions
from md2adf.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2adf.options.markdown import MarkdownParserOptions

__all__ = [
    "AdfRendererOptions",
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
]
