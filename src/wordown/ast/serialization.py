#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/ast/serialization.py
"""JSON serialization and deserialization for wordown documents.

The JSON form mirrors the node model one to one, so a document survives a
dump/load cycle unchanged (source locations included).

Examples
--------
Serialize a document:

    >>> from wordown.ast import Document, Node, RichTextSpan
    >>> from wordown.ast.serialization import ast_to_json
    >>> doc = Document(children=[Node(kind="styled_text", style="body1", content=(RichTextSpan("Hi"),))])
    >>> json_str = ast_to_json(doc, indent=2)

Load it back:

    >>> from wordown.ast.serialization import json_to_ast
    >>> json_to_ast(json_str).children[0].text
    'Hi'

"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from wordown.ast.nodes import (
    Document,
    ExternalLink,
    InternalLink,
    LinkTarget,
    Node,
    RichTextSpan,
    SourceLocation,
)

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def _link_to_dict(link: Optional[LinkTarget]) -> Optional[dict[str, Any]]:
    if link is None:
        return None
    if isinstance(link, InternalLink):
        return {"kind": "internal", "anchor_id": link.anchor_id}
    return {"kind": "external", "url": link.url}


def _dict_to_link(data: Optional[dict[str, Any]]) -> Optional[LinkTarget]:
    if data is None:
        return None
    kind = data.get("kind")
    if kind == "internal":
        return InternalLink(anchor_id=data["anchor_id"])
    if kind == "external":
        return ExternalLink(url=data["url"])
    raise ValueError(f"Unknown link kind: {kind!r}")


def span_to_dict(span: RichTextSpan) -> dict[str, Any]:
    """Convert a span to a dictionary representation.

    Parameters
    ----------
    span : RichTextSpan
        Span to convert

    Returns
    -------
    dict
        ``{"text": ..., "style_ref": ..., "link_target": ...}``

    """
    return {"text": span.text, "style_ref": span.style_ref, "link_target": _link_to_dict(span.link_target)}


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a dictionary representation.

    Parameters
    ----------
    node : Node
        Node to convert

    Returns
    -------
    dict
        Dictionary with kind, style, content, anchor and source_location

    """
    location = None
    if node.source_location is not None:
        location = {"format": node.source_location.format, "line": node.source_location.line}
    return {
        "kind": node.kind,
        "style": node.style,
        "content": [span_to_dict(span) for span in node.content],
        "anchor": node.anchor,
        "source_location": location,
    }


def document_to_dict(doc: Document) -> dict[str, Any]:
    """Convert a document to a dictionary representation.

    Parameters
    ----------
    doc : Document
        Document to convert

    Returns
    -------
    dict
        ``{"type": "document", "children": [...], "metadata": {...}}``

    """
    return {
        "type": "document",
        "children": [node_to_dict(child) for child in doc.children],
        "metadata": dict(doc.metadata),
    }


def dict_to_node(data: dict[str, Any]) -> Node:
    """Rebuild a node from its dictionary representation.

    Raises
    ------
    ValueError
        If the kind or a link form is unknown
    KeyError
        If a required field is missing

    """
    location_data = data.get("source_location")
    location = None
    if location_data is not None:
        location = SourceLocation(format=location_data.get("format", "wordown"), line=location_data.get("line"))
    content = tuple(
        RichTextSpan(
            text=span.get("text", ""),
            style_ref=span.get("style_ref"),
            link_target=_dict_to_link(span.get("link_target")),
        )
        for span in data.get("content", [])
    )
    return Node(
        kind=data["kind"],
        style=data["style"],
        content=content,
        anchor=data.get("anchor"),
        source_location=location,
    )


def dict_to_document(data: dict[str, Any]) -> Document:
    """Rebuild a document from its dictionary representation.

    Raises
    ------
    ValueError
        If the data does not describe a document

    """
    if data.get("type") != "document":
        raise ValueError(f"Expected a document, got type {data.get('type')!r}")
    return Document(
        children=[dict_to_node(child) for child in data.get("children", [])],
        metadata=dict(data.get("metadata", {})),
    )


def ast_to_json(doc: Document, indent: int | None = None) -> str:
    """Serialize a document to a JSON string with schema versioning.

    Parameters
    ----------
    doc : Document
        Document to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string, ``{"schema_version": 1, "type": "document", ...}``

    """
    versioned = {"schema_version": SCHEMA_VERSION, **document_to_dict(doc)}
    return json.dumps(versioned, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, validate_schema: bool = True) -> Document:
    """Deserialize a JSON string produced by ``ast_to_json``.

    Parameters
    ----------
    json_str : str
        JSON string representation
    validate_schema : bool, default True
        Raise on an unsupported schema version instead of warning

    Returns
    -------
    Document
        Reconstructed document

    Raises
    ------
    ValueError
        If the schema version is unsupported or the data is not a document
    json.JSONDecodeError
        If the JSON string is malformed

    """
    data = json.loads(json_str)
    schema_version = data.pop("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        if validate_schema:
            raise ValueError(f"Unsupported schema version: {schema_version}")
        logger.warning(f"Schema version {schema_version} differs from supported version {SCHEMA_VERSION}")
    return dict_to_document(data)
