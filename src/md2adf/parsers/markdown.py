#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adf/parsers/markdown.py
"""Markdown to generic syntax tree parser.

This module wraps the mistune parser and normalizes its token stream into a
small, typed syntax tree (:class:`MarkdownNode`). The converter only relies
on two capabilities of that tree: an ordered list of typed top-level nodes,
and ordered typed children for paragraph and link nodes.

Normalization rules
-------------------
- Node kinds use stable names (``paragraph``, ``text``, ``link``, ``code``,
  ``heading``, ``emphasis``, ``inlineCode``, ...). Tokens not in the kind map
  keep their mistune name.
- ``blank_line`` tokens are dropped.
- Soft line breaks are folded into the surrounding text, so a paragraph that
  spans several source lines yields a single text run containing newlines.
- Complete, semicolon-terminated HTML character references in text are
  decoded. Text produced by backslash escapes is never decoded again.
- Link destinations are kept as written in the source, with only backslash
  escapes and character references resolved. Autolinks are kept untouched.
- The final line terminator of a code block payload is removed.

"""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass, field
from html.entities import html5
from typing import Any, Optional

import mistune
from mistune.helpers import parse_link_href, parse_link_label, parse_link_text, unescape_char
from mistune.plugins import import_plugin

from md2adf.constants import MD_CODE, MD_ROOT, MD_TEXT, MISTUNE_KIND_MAP, MISTUNE_SKIPPED_TOKENS
from md2adf.exceptions import InvalidOptionsError, ValidationError
from md2adf.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

_CHARACTER_REFERENCE_RE = re.compile(r"&(?:#[0-9]{1,7}|#[xX][0-9a-fA-F]{1,6}|[A-Za-z][A-Za-z0-9]{1,31});")

# marks link text that must not be entity-decoded (autolink labels)
_VERBATIM_KEY = "md2adf_verbatim"


def _replace_reference(match: re.Match[str]) -> str:
    reference = match.group(0)
    if reference[1] == "#":
        return html.unescape(reference)
    return html5.get(reference[1:], reference)


def decode_character_references(text: str) -> str:
    """Decode complete HTML character references.

    Only named references that exist exactly as written and decimal or
    hexadecimal references ending in ``;`` are replaced. Text such as
    ``AT&T``, ``?a=1&copy=2`` or ``&notit;`` is returned unchanged.

    Parameters
    ----------
    text : str
        Literal text from the Markdown source

    Returns
    -------
    str
        Text with character references replaced

    Examples
    --------
    >>> decode_character_references("fish &amp; chips &#60;3")
    'fish & chips <3'
    >>> decode_character_references("?a=1&copy=2")
    '?a=1&copy=2'

    """
    if "&" not in text:
        return text
    return _CHARACTER_REFERENCE_RE.sub(_replace_reference, text)


def link_destination(raw_href: str) -> str:
    """Resolve backslash escapes and character references in a link destination."""
    return decode_character_references(unescape_char(raw_href))


def _keep_source_url(attrs: Any, raw_href: str, url: str) -> None:
    """Replace mistune's percent-encoded url with ``url``.

    The swap only happens when mistune encoded ``raw_href`` to exactly the
    stored value, so a mismatched lookup never changes a link.
    """
    if isinstance(attrs, dict) and attrs.get("url") == mistune.escape_url(unescape_char(raw_href)):
        attrs["url"] = url


def _inline_link_href(src: str, pos: int) -> Optional[str]:
    """Return the raw destination of the ``[text](dest)`` link whose text starts at ``pos``."""
    label, end_pos = parse_link_label(src, pos)
    if label is None:
        text, end_pos = parse_link_text(src, pos)
        if text is None:
            return None
    if end_pos is None or end_pos >= len(src) or src[end_pos] != "(":
        return None
    href, _href_pos = parse_link_href(src, end_pos + 1)
    return href


class _SourceUrlInlineParser(mistune.InlineParser):
    """mistune inline parser that keeps link destinations as written."""

    def parse_link(self, m: re.Match[str], state: mistune.InlineState) -> Optional[int]:
        count = len(state.tokens)
        end_pos = super().parse_link(m, state)
        if end_pos and len(state.tokens) > count:
            token = state.tokens[-1]
            # reference links take their url from the definition
            if token.get("type") in ("link", "image") and "ref" not in token:
                raw_href = _inline_link_href(state.src, m.end())
                if raw_href is not None:
                    _keep_source_url(token.get("attrs"), raw_href, link_destination(raw_href))
        return end_pos

    def parse_auto_link(self, m: re.Match[str], state: mistune.InlineState) -> int:
        count = len(state.tokens)
        end_pos = super().parse_auto_link(m, state)
        self._keep_autolink_url(state, count, m.group(0)[1:-1])
        return end_pos

    def parse_auto_email(self, m: re.Match[str], state: mistune.InlineState) -> int:
        count = len(state.tokens)
        end_pos = super().parse_auto_email(m, state)
        self._keep_autolink_url(state, count, "mailto:" + m.group(0)[1:-1])
        return end_pos

    @staticmethod
    def _keep_autolink_url(state: mistune.InlineState, count: int, url: str) -> None:
        if len(state.tokens) <= count or state.tokens[-1].get("type") != "link":
            return
        token = state.tokens[-1]
        attrs = token.get("attrs")
        if isinstance(attrs, dict) and attrs.get("url") == mistune.escape_url(url):
            attrs["url"] = url
            for child in token.get("children") or []:
                child[_VERBATIM_KEY] = True


class _SourceUrlBlockParser(mistune.BlockParser):
    """mistune block parser that keeps link reference definitions as written."""

    def parse_ref_link(self, m: re.Match[str], state: mistune.BlockState) -> Optional[int]:
        known = set(state.env.get("ref_links", {}))
        end_pos = super().parse_ref_link(m, state)
        label = m.groupdict().get("reflink_1")
        if not end_pos or not label:
            return end_pos

        key = mistune.unikey(label)
        definition = state.env.get("ref_links", {}).get(key)
        if definition is not None and key not in known:
            raw_href, _href_pos = parse_link_href(state.src, m.end(), block=True)
            if raw_href is not None:
                _keep_source_url(definition, raw_href, link_destination(raw_href))
        return end_pos


@dataclass
class MarkdownNode:
    """Node of the generic Markdown syntax tree.

    Parameters
    ----------
    kind : str
        Node kind, e.g. "paragraph", "text", "link", "code", "heading"
    children : list of MarkdownNode, default = empty list
        Ordered child nodes
    value : str or None, default = None
        Literal payload for leaf nodes (text content, code body, raw HTML)
    url : str or None, default = None
        Destination for link and image nodes
    attrs : dict, default = empty dict
        Remaining parser attributes (heading level, code info string, title)

    """

    kind: str
    children: list[MarkdownNode] = field(default_factory=list)
    value: Optional[str] = None
    url: Optional[str] = None
    attrs: dict[str, Any] = field(default_factory=dict)

    @property
    def first_child(self) -> Optional[MarkdownNode]:
        return self.children[0] if self.children else None


class MarkdownParser:
    r"""Parse Markdown text into a :class:`MarkdownNode` tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    >>> root = MarkdownParser().parse("Hello [world](https://example.com)")
    >>> [child.kind for child in root.children[0].children]
    ['text', 'link']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the parser with options."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise InvalidOptionsError(
                component_name="markdown",
                expected_type=MarkdownParserOptions,
                received_type=type(options),
            )
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

    def _create_markdown(self) -> mistune.Markdown:
        return mistune.Markdown(
            renderer=None,
            block=_SourceUrlBlockParser(),
            inline=_SourceUrlInlineParser(hard_wrap=self.options.hard_wrap),
            plugins=[import_plugin(name) for name in self.options.mistune_plugins()],
        )

    def parse(self, markdown: str) -> MarkdownNode:
        """Parse Markdown text.

        Parameters
        ----------
        markdown : str
            Complete Markdown document

        Returns
        -------
        MarkdownNode
            Root node (kind "root") whose children are the top-level blocks

        Raises
        ------
        ValidationError
            If ``markdown`` is not a string

        """
        if not isinstance(markdown, str):
            raise ValidationError(
                f"Markdown input must be a string, got {type(markdown).__name__}",
                parameter_name="markdown",
                parameter_value=markdown,
            )

        logger.debug("Parsing %d characters of Markdown", len(markdown))
        tokens, _state = self._create_markdown().parse(markdown)

        # renderer=None always yields a token list
        children = self._process_tokens(tokens if isinstance(tokens, list) else [])
        return MarkdownNode(kind=MD_ROOT, children=children)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[MarkdownNode]:
        """Convert sibling tokens, merging adjacent text runs."""
        nodes: list[MarkdownNode] = []

        for token in tokens:
            node = self._process_token(token)
            if node is None:
                continue
            if node.kind == MD_TEXT and nodes and nodes[-1].kind == MD_TEXT:
                nodes[-1].value = (nodes[-1].value or "") + (node.value or "")
            else:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> MarkdownNode | None:
        """Convert a single mistune token.

        Parameters
        ----------
        token : dict
            Mistune token with 'type' and optional 'raw', 'attrs', 'children'

        Returns
        -------
        MarkdownNode or None
            The converted node, or None for tokens that carry no content

        """
        token_type = token.get("type", "")
        if token_type in MISTUNE_SKIPPED_TOKENS:
            return None
        if token_type == "softbreak":
            return MarkdownNode(kind=MD_TEXT, value="\n")

        kind = MISTUNE_KIND_MAP.get(token_type, token_type)
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        node = MarkdownNode(kind=kind, attrs=dict(attrs))

        raw = token.get("raw")
        if kind == MD_TEXT:
            text = raw or ""
            # decoded per token: escape output is a token of its own
            node.value = text if token.get(_VERBATIM_KEY) else decode_character_references(text)
        elif kind == MD_CODE:
            node.value = self._strip_final_newline(raw or "")
        elif isinstance(raw, str):
            node.value = raw

        url = node.attrs.pop("url", None)
        if url is not None:
            node.url = url

        children = token.get("children")
        if isinstance(children, list):
            node.children = self._process_tokens(children)

        return node

    @staticmethod
    def _strip_final_newline(code: str) -> str:
        if code.endswith("\n"):
            return code[:-1]
        return code


__all__ = ["MarkdownNode", "MarkdownParser", "decode_character_references", "link_destination"]
