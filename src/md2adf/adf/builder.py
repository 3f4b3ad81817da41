#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adf/adf/builder.py
"""Builder helper classes for constructing ADF documents.

The document builder accumulates blocks in order. Opening a block returns a
sub-builder bound to that exact block, so inline content is always appended
to the most recently opened block without re-navigating the tree.

Examples
--------
>>> builder = DocumentBuilder()
>>> _ = builder.begin_paragraph().append_text("See ").append_link("docs", "https://example.com")
>>> _ = builder.begin_code_block().append_text("a = 42")
>>> doc = builder.finish()
>>> len(doc.content)
2

"""

from __future__ import annotations

from md2adf.adf.nodes import AdfDocument, BlockNode, CodeBlock, Mark, Paragraph, Text
from md2adf.exceptions import BuilderFinishedError


class ParagraphBuilder:
    """Append inline content to one paragraph.

    Parameters
    ----------
    paragraph : Paragraph
        The paragraph owned by the document under construction
    owner : DocumentBuilder
        Builder that opened the paragraph; appending fails once it is finished

    """

    def __init__(self, paragraph: Paragraph, owner: DocumentBuilder):
        self.paragraph = paragraph
        self._owner = owner

    def append_text(self, text: str) -> ParagraphBuilder:
        """Append an unmarked text node."""
        self._owner._check_open()
        self.paragraph.content.append(Text(text=text))
        return self

    def append_link(self, display_text: str, url: str) -> ParagraphBuilder:
        """Append a text node carrying a single link mark.

        Parameters
        ----------
        display_text : str
            Text shown for the link
        url : str
            Link target, stored verbatim in the mark's ``href`` attribute

        Returns
        -------
        ParagraphBuilder
            This builder, for chaining

        Raises
        ------
        BuilderFinishedError
            If the owning document builder has already been finished

        """
        self._owner._check_open()
        self.paragraph.content.append(Text(text=display_text, marks=[Mark.link(url)]))
        return self


class CodeBlockBuilder:
    """Append the code payload to one code block."""

    def __init__(self, code_block: CodeBlock, owner: DocumentBuilder):
        self.code_block = code_block
        self._owner = owner

    def append_text(self, text: str) -> CodeBlockBuilder:
        """Append an unmarked text node holding raw code."""
        self._owner._check_open()
        self.code_block.content.append(Text(text=text))
        return self


class DocumentBuilder:
    """Accumulate ADF blocks and finalize them into an AdfDocument.

    Blocks are append-only. Once :meth:`finish` has been called the builder is
    consumed: any further use, including appends through sub-builders it
    handed out, raises BuilderFinishedError.

    """

    def __init__(self) -> None:
        self._content: list[BlockNode] = []
        self._finished = False

    def _check_open(self) -> None:
        if self._finished:
            raise BuilderFinishedError()

    def begin_paragraph(self) -> ParagraphBuilder:
        """Append an empty paragraph and return a builder bound to it.

        Returns
        -------
        ParagraphBuilder
            Sub-builder referencing the appended paragraph (not a copy)

        Raises
        ------
        BuilderFinishedError
            If the builder has already been finished

        """
        self._check_open()
        paragraph = Paragraph()
        self._content.append(paragraph)
        return ParagraphBuilder(paragraph, self)

    def begin_code_block(self) -> CodeBlockBuilder:
        """Append an empty code block and return a builder bound to it.

        Returns
        -------
        CodeBlockBuilder
            Sub-builder referencing the appended code block (not a copy)

        Raises
        ------
        BuilderFinishedError
            If the builder has already been finished

        """
        self._check_open()
        code_block = CodeBlock()
        self._content.append(code_block)
        return CodeBlockBuilder(code_block, self)

    @property
    def block_count(self) -> int:
        return len(self._content)

    def finish(self) -> AdfDocument:
        """Wrap the accumulated blocks into a document.

        Returns
        -------
        AdfDocument
            Document with the fixed ``doc`` type and schema version

        Raises
        ------
        BuilderFinishedError
            If the builder has already been finished

        """
        self._check_open()
        self._finished = True
        document = AdfDocument(content=tuple(self._content))
        self._content = []
        return document


__all__ = ["CodeBlockBuilder", "DocumentBuilder", "ParagraphBuilder"]
