#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adf/adf/serialization.py
"""JSON serialization and loading for ADF nodes.

Every node is written with its own ``type`` field inlined next to its other
fields; there is no wrapper around the variants. ``Text.marks`` is written
only when it is non-empty, every other field is always present.

Examples
--------
Serialize a document:

    >>> from md2adf.adf import DocumentBuilder
    >>> from md2adf.adf.serialization import adf_to_json
    >>> builder = DocumentBuilder()
    >>> _ = builder.begin_paragraph().append_text("Hello")
    >>> adf_to_json(builder.finish())
    '{"type": "doc", "version": 1, "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Hello"}]}]}'

Load it back:

    >>> from md2adf.adf.serialization import json_to_adf
    >>> doc = json_to_adf('{"type": "doc", "version": 1, "content": []}')
    >>> len(doc.content)
    0

"""

from __future__ import annotations

import json
from typing import Any, Callable

from md2adf.adf.nodes import AdfDocument, AdfNode, BlockNode, CodeBlock, Mark, Paragraph, Text
from md2adf.constants import (
    ADF_BLOCK_TYPES,
    ADF_LINK_HREF_ATTR,
    ADF_MARK_TYPES,
    ADF_TYPE_DOC,
    ADF_TYPE_PARAGRAPH,
    ADF_TYPE_TEXT,
    ADF_VERSION,
)
from md2adf.exceptions import AdfValidationError


def _serialize_document(node: AdfDocument) -> dict[str, Any]:
    return {
        "type": node.type,
        "version": node.version,
        "content": [adf_to_dict(child) for child in node.content],
    }


def _serialize_block(node: Paragraph | CodeBlock) -> dict[str, Any]:
    return {"type": node.type, "content": [adf_to_dict(child) for child in node.content]}


def _serialize_text(node: Text) -> dict[str, Any]:
    result: dict[str, Any] = {"type": node.type, "text": node.text}
    if node.marks:
        result["marks"] = [adf_to_dict(mark) for mark in node.marks]
    return result


def _serialize_mark(node: Mark) -> dict[str, Any]:
    return {"type": node.type, "attrs": dict(node.attrs)}


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    AdfDocument: _serialize_document,
    Paragraph: _serialize_block,
    CodeBlock: _serialize_block,
    Text: _serialize_text,
    Mark: _serialize_mark,
}


def adf_to_dict(node: AdfDocument | AdfNode) -> dict[str, Any]:
    """Convert an ADF node or document to its wire dictionary.

    Parameters
    ----------
    node : AdfDocument or AdfNode
        The node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node is not one of the supported ADF classes

    Examples
    --------
    >>> adf_to_dict(Text(text="Hello"))
    {'type': 'text', 'text': 'Hello'}

    """
    node_class = type(node)
    serializer = _SERIALIZATION_DISPATCH.get(node_class)
    if serializer:
        return serializer(node)

    raise ValueError(f"Unknown node type for serialization: {node_class.__name__}")


def adf_to_json(
    document: AdfDocument | AdfNode,
    indent: int | None = None,
    ensure_ascii: bool = False,
    sort_keys: bool = False,
) -> str:
    """Convert an ADF document (or node) to a JSON string.

    Parameters
    ----------
    document : AdfDocument or AdfNode
        Value to serialize
    indent : int or None, default = None
        Indentation for pretty printing; None produces compact output
    ensure_ascii : bool, default = False
        Escape non-ASCII characters
    sort_keys : bool, default = False
        Sort object keys

    Returns
    -------
    str
        JSON text

    """
    return json.dumps(adf_to_dict(document), indent=indent, ensure_ascii=ensure_ascii, sort_keys=sort_keys)


# Loading helpers
def _require_mapping(data: Any, path: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise AdfValidationError(f"Expected an object, got {type(data).__name__}", path=path)
    return data


def _require_list(data: dict[str, Any], key: str, path: str) -> list[Any]:
    if key not in data:
        raise AdfValidationError(f"Missing required field '{key}'", path=path)
    value = data[key]
    if not isinstance(value, list):
        raise AdfValidationError(f"Field '{key}' must be an array, got {type(value).__name__}", path=path)
    return value


def _require_str(data: dict[str, Any], key: str, path: str) -> str:
    if key not in data:
        raise AdfValidationError(f"Missing required field '{key}'", path=path)
    value = data[key]
    if not isinstance(value, str):
        raise AdfValidationError(f"Field '{key}' must be a string, got {type(value).__name__}", path=path)
    return value


def _load_mark(data: Any, path: str) -> Mark:
    data = _require_mapping(data, path)
    mark_type = _require_str(data, "type", path)
    if mark_type not in ADF_MARK_TYPES:
        raise AdfValidationError(f"Unsupported mark type '{mark_type}'", path=path)

    attrs = _require_mapping(data.get("attrs"), f"{path}/attrs")
    if set(attrs) != {ADF_LINK_HREF_ATTR}:
        raise AdfValidationError("Link mark must have exactly one attribute, 'href'", path=f"{path}/attrs")
    href = _require_str(attrs, ADF_LINK_HREF_ATTR, f"{path}/attrs")
    return Mark.link(href)


def _load_text(data: Any, path: str) -> Text:
    data = _require_mapping(data, path)
    node_type = data.get("type")
    if node_type != ADF_TYPE_TEXT:
        raise AdfValidationError(f"Block content must be text nodes, found '{node_type}'", path=path)

    text = Text(text=_require_str(data, "text", path))
    if "marks" in data:
        marks = _require_list(data, "marks", path)
        if not marks:
            raise AdfValidationError("Empty 'marks' must be omitted", path=path)
        for index, mark_data in enumerate(marks):
            text.add_mark(_load_mark(mark_data, f"{path}/marks/{index}"))
    return text


def _load_block(data: Any, path: str) -> BlockNode:
    data = _require_mapping(data, path)
    node_type = data.get("type")
    if not isinstance(node_type, str) or node_type not in ADF_BLOCK_TYPES:
        raise AdfValidationError(f"Unsupported block type '{node_type}'", path=path)
    block: BlockNode = Paragraph() if node_type == ADF_TYPE_PARAGRAPH else CodeBlock()

    for index, child in enumerate(_require_list(data, "content", path)):
        text = _load_text(child, f"{path}/content/{index}")
        if isinstance(block, CodeBlock) and text.marks:
            raise AdfValidationError("Code block text must not carry marks", path=f"{path}/content/{index}")
        block.content.append(text)
    return block


def dict_to_adf(data: dict[str, Any]) -> AdfDocument:
    """Load an ADF document from its wire dictionary.

    Only the vocabulary produced by this library is accepted: ``paragraph``
    and ``codeBlock`` blocks holding ``text`` nodes, with ``link`` marks.

    Parameters
    ----------
    data : dict
        Parsed ADF JSON

    Returns
    -------
    AdfDocument
        The loaded document

    Raises
    ------
    AdfValidationError
        If the data does not match the supported schema

    """
    data = _require_mapping(data, "")
    if data.get("type") != ADF_TYPE_DOC:
        raise AdfValidationError(f"Root node must have type '{ADF_TYPE_DOC}', got {data.get('type')!r}", path="/")
    if data.get("version") != ADF_VERSION:
        raise AdfValidationError(f"Unsupported ADF version {data.get('version')!r}, expected {ADF_VERSION}", path="/")

    blocks = [_load_block(child, f"/content/{index}") for index, child in enumerate(_require_list(data, "content", "/"))]
    return AdfDocument(content=tuple(blocks))


def json_to_adf(json_str: str) -> AdfDocument:
    """Load an ADF document from JSON text.

    Raises
    ------
    AdfValidationError
        If the text is not valid JSON or does not match the supported schema

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise AdfValidationError(f"Invalid JSON: {e}", original_error=e) from e
    return dict_to_adf(data)


__all__ = ["adf_to_dict", "adf_to_json", "dict_to_adf", "json_to_adf"]
