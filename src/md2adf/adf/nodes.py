#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adf/adf/nodes.py
"""Node classes for the supported subset of the Atlassian Document Format.

The ADF vocabulary modeled here is closed: a document holds block nodes,
block nodes hold text nodes, and text nodes carry marks.

Node Hierarchy
--------------
Block nodes (allowed directly inside a document):
    - Paragraph, CodeBlock

Inline nodes (allowed inside a block):
    - Text

Annotations (allowed inside ``Text.marks``):
    - Mark (only the ``link`` kind is produced)

Each node class carries its wire ``type`` string as a class attribute, so the
serialized form needs no wrapper to tell the variants apart.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from md2adf.constants import (
    ADF_LINK_HREF_ATTR,
    ADF_MARK_LINK,
    ADF_TYPE_CODE_BLOCK,
    ADF_TYPE_DOC,
    ADF_TYPE_PARAGRAPH,
    ADF_TYPE_TEXT,
    ADF_VERSION,
)


@dataclass
class Mark:
    """Annotation attached to a text node.

    Parameters
    ----------
    type : str
        Mark kind, e.g. "link"
    attrs : dict[str, str], default = empty dict
        Mark attributes; a link mark has exactly one key, "href"

    """

    type: str
    attrs: dict[str, str] = field(default_factory=dict)

    @classmethod
    def link(cls, url: str) -> Mark:
        """Create a link mark pointing at ``url``.

        The URL is stored verbatim, without scheme checks or escaping.
        """
        return cls(type=ADF_MARK_LINK, attrs={ADF_LINK_HREF_ATTR: url})

    @property
    def is_link(self) -> bool:
        return self.type == ADF_MARK_LINK


@dataclass
class Text:
    """Inline text node.

    Parameters
    ----------
    text : str
        Literal text content
    marks : list of Mark, default = empty list
        Annotations on the text. Omitted from the serialized form when empty.

    """

    text: str
    marks: list[Mark] = field(default_factory=list)

    type: ClassVar[str] = ADF_TYPE_TEXT

    def add_mark(self, mark: Mark) -> None:
        self.marks.append(mark)


@dataclass
class Paragraph:
    """Paragraph block holding inline text nodes.

    Parameters
    ----------
    content : list of AdfNode, default = empty list
        Inline children, always Text nodes

    """

    content: list[AdfNode] = field(default_factory=list)

    type: ClassVar[str] = ADF_TYPE_PARAGRAPH


@dataclass
class CodeBlock:
    """Code block holding the raw code payload as text nodes.

    Parameters
    ----------
    content : list of AdfNode, default = empty list
        Inline children, always unmarked Text nodes

    """

    content: list[AdfNode] = field(default_factory=list)

    type: ClassVar[str] = ADF_TYPE_CODE_BLOCK


AdfNode = Union[Paragraph, CodeBlock, Text, Mark]
BlockNode = Union[Paragraph, CodeBlock]

BLOCK_NODE_CLASSES: tuple[type, ...] = (Paragraph, CodeBlock)


@dataclass(frozen=True)
class AdfDocument:
    """Root of a finished ADF document.

    Instances are produced by :meth:`md2adf.adf.builder.DocumentBuilder.finish`
    or loaded with :func:`md2adf.adf.serialization.dict_to_adf`.

    Parameters
    ----------
    content : tuple of BlockNode, default = empty tuple
        Top-level blocks in document order

    """

    content: tuple[BlockNode, ...] = ()

    type: ClassVar[str] = ADF_TYPE_DOC
    version: ClassVar[int] = ADF_VERSION

    def __iter__(self):
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)


__all__ = [
    "AdfDocument",
    "AdfNode",
    "BLOCK_NODE_CLASSES",
    "BlockNode",
    "CodeBlock",
    "Mark",
    "Paragraph",
    "Text",
]
