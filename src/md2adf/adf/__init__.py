#  Copyright (c) 2025 Tom Villani, Ph.D.
"""ADF document model, builder and serialization."""

from md2adf.adf.builder import CodeBlockBuilder, DocumentBuilder, ParagraphBuilder
from md2adf.adf.nodes import AdfDocument, AdfNode, BlockNode, CodeBlock, Mark, Paragraph, Text
from md2adf.adf.serialization import adf_to_dict, adf_to_json, dict_to_adf, json_to_adf

__all__ = [
    "AdfDocument",
    "AdfNode",
    "BlockNode",
    "CodeBlock",
    "CodeBlockBuilder",
    "DocumentBuilder",
    "Mark",
    "Paragraph",
    "ParagraphBuilder",
    "Text",
    "adf_to_dict",
    "adf_to_json",
    "dict_to_adf",
    "json_to_adf",
]
