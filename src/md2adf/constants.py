#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adf/constants.py
"""Constants and default values for md2adf.

This module collects the fixed vocabulary of the Atlassian Document Format
(ADF) subset produced by the library, together with the default values used
by the option dataclasses.

"""

from __future__ import annotations

from typing import Final

# =============================================================================
# ADF schema vocabulary
# =============================================================================

ADF_VERSION: Final = 1

ADF_TYPE_DOC: Final = "doc"
ADF_TYPE_PARAGRAPH: Final = "paragraph"
ADF_TYPE_CODE_BLOCK: Final = "codeBlock"
ADF_TYPE_TEXT: Final = "text"

ADF_MARK_LINK: Final = "link"
ADF_LINK_HREF_ATTR: Final = "href"

ADF_BLOCK_TYPES: Final = frozenset({ADF_TYPE_PARAGRAPH, ADF_TYPE_CODE_BLOCK})
ADF_MARK_TYPES: Final = frozenset({ADF_MARK_LINK})

# =============================================================================
# Generic Markdown syntax tree vocabulary
# =============================================================================

MD_ROOT: Final = "root"
MD_PARAGRAPH: Final = "paragraph"
MD_CODE: Final = "code"
MD_TEXT: Final = "text"
MD_LINK: Final = "link"

# mistune token type -> generic node kind. Tokens not listed keep their name.
MISTUNE_KIND_MAP: Final[dict[str, str]] = {
    "paragraph": MD_PARAGRAPH,
    "block_code": MD_CODE,
    "text": MD_TEXT,
    "link": MD_LINK,
    "heading": "heading",
    "block_quote": "blockquote",
    "list": "list",
    "list_item": "listItem",
    "block_text": "paragraph",
    "table": "table",
    "thematic_break": "thematicBreak",
    "block_html": "html",
    "inline_html": "html",
    "emphasis": "emphasis",
    "strong": "strong",
    "codespan": "inlineCode",
    "image": "image",
    "linebreak": "break",
    "strikethrough": "delete",
}

# Tokens carrying no content that are dropped from the generic tree
MISTUNE_SKIPPED_TOKENS: Final = frozenset({"blank_line"})

# =============================================================================
# Option defaults
# =============================================================================

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_HARD_WRAP = False

DEFAULT_JSON_INDENT: int | None = None
DEFAULT_JSON_ENSURE_ASCII = False
DEFAULT_JSON_SORT_KEYS = False
