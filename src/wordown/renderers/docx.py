#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/renderers/docx.py
"""DOCX rendering of wordown documents.

This module provides the DocxRenderer class which patches a Word template
with the nodes of a wordown document using python-docx.

Every node becomes one paragraph carrying the node's style. Spans become
runs carrying their character style; linked spans become ``w:hyperlink``
elements (external targets through a relationship, internal targets through
``w:anchor``). Heading anchors become bookmarks around the heading runs so
internal links elsewhere in the document resolve to them.

The rendered paragraphs replace the template's ``{{paragraphReplace}}``
placeholder paragraph, which may sit inside a table cell, or are appended to
the body when there is none.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Iterator, Optional, Union

from docx import Document as open_docx
from docx.enum.style import WD_STYLE_TYPE
from docx.opc.constants import RELATIONSHIP_TYPE as RT
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from wordown.ast import Document, ExternalLink, InternalLink, Node, NodeVisitor, RichTextSpan
from wordown.constants import PLACEHOLDER_TEMPLATE
from wordown.exceptions import (
    FileError,
    FileNotFoundError,
    MissingStyleError,
    OutputWriteError,
    RenderingError,
)
from wordown.options.docx import DocxRendererOptions
from wordown.renderers.base import BaseRenderer

logger = logging.getLogger(__name__)


def _iter_paragraphs(container: Any) -> Iterator[Paragraph]:
    """Yield paragraphs in document order, descending into table cells."""
    for item in container.iter_inner_content():
        if isinstance(item, Table):
            for row in item.rows:
                for cell in row.cells:
                    yield from _iter_paragraphs(cell)
        else:
            yield item


class DocxRenderer(NodeVisitor, BaseRenderer):
    """Render wordown documents to DOCX.

    Parameters
    ----------
    options : DocxRendererOptions or None, default = None
        DOCX rendering options

    Examples
    --------
    Patch a template:

        >>> from wordown.parsers import WordownParser
        >>> from wordown.options import DocxRendererOptions
        >>> doc = WordownParser().parse("section\\tHeading1\\tIntroduction\\tintro\\nnewLine")
        >>> renderer = DocxRenderer(DocxRendererOptions(template_path="template.docx"))
        >>> renderer.render(doc, "output.docx")

    """

    def __init__(self, options: DocxRendererOptions | None = None):
        """Initialize the DOCX renderer with options."""
        BaseRenderer._validate_options_type(options, DocxRendererOptions, "docx")
        options = options or DocxRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: DocxRendererOptions = options
        self.document: Any = None  # python-docx Document
        self._placeholder: Optional[Paragraph] = None
        self._next_bookmark_id: int = 0
        self._style_cache: dict[tuple[str, WD_STYLE_TYPE], Any] = {}

    def render(self, doc: Document, output: Union[str, Path, IO[bytes]]) -> None:
        """Render the document to a DOCX file or binary stream.

        Parameters
        ----------
        doc : Document
            Document to render
        output : str, Path, or IO[bytes]
            Output destination

        Raises
        ------
        FileNotFoundError
            If the template does not exist
        MissingStyleError
            If a style is missing and ``missing_style_mode="error"``
        OutputWriteError
            If the output path cannot be written
        RenderingError
            If DOCX generation fails for any other reason

        """
        try:
            self.document = self._open_template()
            self._style_cache = {}
            self._next_bookmark_id = self._first_free_bookmark_id()
            self._placeholder = self._find_placeholder()

            doc.accept(self)

            if self._placeholder is not None:
                self._remove_placeholder()
            if self.options.creator:
                self.document.core_properties.last_modified_by = self.options.creator
        except (FileError, RenderingError):
            raise
        except Exception as e:
            raise RenderingError(f"Failed to render DOCX: {e!r}", rendering_stage="rendering", original_error=e) from e

        self._save(output)

    def _open_template(self) -> Any:
        template_path = self.options.template_path
        if not template_path:
            return open_docx()
        if not Path(template_path).is_file():
            raise FileNotFoundError(template_path, message=f"Template not found: {template_path}")
        logger.debug(f"Opening DOCX template: {template_path}")
        return open_docx(template_path)

    def _save(self, output: Union[str, Path, IO[bytes]]) -> None:
        if isinstance(output, (str, Path)):
            try:
                self.document.save(str(output))
            except OSError as e:
                raise OutputWriteError(str(output), original_error=e) from e
        else:
            self.document.save(output)

    def _find_placeholder(self) -> Optional[Paragraph]:
        if not self.options.placeholder:
            return None
        marker = PLACEHOLDER_TEMPLATE.format(name=self.options.placeholder)
        for paragraph in _iter_paragraphs(self.document):
            if marker in paragraph.text:
                return paragraph
        if self.options.template_path:
            logger.warning(f"Template has no {marker} paragraph; appending content to the end of the body")
        return None

    def _remove_placeholder(self) -> None:
        element = self._placeholder._element
        parent = element.getparent()
        self._placeholder = None
        if parent.tag == qn("w:tc") and len(parent.findall(qn("w:p"))) == 1:
            # A table cell must keep at least one paragraph
            for child in list(element):
                if child.tag != qn("w:pPr"):
                    element.remove(child)
            return
        parent.remove(element)

    def _first_free_bookmark_id(self) -> int:
        ids = [
            int(value)
            for element in self.document.element.body.iter(qn("w:bookmarkStart"))
            if (value := element.get(qn("w:id"), "")).isdigit()
        ]
        return max(ids, default=-1) + 1

    # Styles

    def _resolve_style(self, name: str, style_type: WD_STYLE_TYPE) -> Any:
        """Look up a style by name or style id, applying the missing-style policy.

        Returns
        -------
        python-docx style or None
            None when the style is missing and ``missing_style_mode="ignore"``

        Raises
        ------
        MissingStyleError
            If the style is missing and ``missing_style_mode="error"``

        """
        key = (name, style_type)
        if key in self._style_cache:
            return self._style_cache[key]

        style = next(
            (s for s in self.document.styles if s.type == style_type and name in (s.name, s.style_id)),
            None,
        )
        if style is None:
            type_name = "paragraph" if style_type == WD_STYLE_TYPE.PARAGRAPH else "character"
            mode = self.options.missing_style_mode
            if mode == "error":
                raise MissingStyleError(name, style_type=type_name)
            if mode == "create":
                logger.info(f"Adding missing {type_name} style {name!r}")
                style = self.document.styles.add_style(name, style_type)
                if style_type == WD_STYLE_TYPE.PARAGRAPH:
                    style.base_style = self._resolve_style("Normal", WD_STYLE_TYPE.PARAGRAPH)
            else:
                logger.warning(f"Template has no {type_name} style {name!r}; using default formatting")

        self._style_cache[key] = style
        return style

    # Visitor

    def visit_document(self, node: Document) -> None:
        """Render every node of the document in order."""
        for link in node.unresolved_links():
            logger.warning(f"Internal link to unknown anchor {link.anchor_id!r}")
        for child in node.children:
            child.accept(self)

    def generic_visit(self, node: Node) -> Paragraph:
        """Render a node as one styled paragraph."""
        paragraph = self._new_paragraph(node.style)
        self._render_spans(paragraph, node.content)
        return paragraph

    def visit_heading(self, node: Node) -> Paragraph:
        """Render a heading paragraph, bookmarked by its anchor when it has one."""
        if not node.anchor:
            return self.generic_visit(node)

        paragraph = self._new_paragraph(node.style)
        bookmark_id = str(self._next_bookmark_id)
        self._next_bookmark_id += 1

        start = OxmlElement("w:bookmarkStart")
        start.set(qn("w:id"), bookmark_id)
        start.set(qn("w:name"), node.anchor)
        paragraph._p.append(start)

        self._render_spans(paragraph, node.content)

        end = OxmlElement("w:bookmarkEnd")
        end.set(qn("w:id"), bookmark_id)
        paragraph._p.append(end)
        return paragraph

    def _new_paragraph(self, style_name: str) -> Paragraph:
        if self._placeholder is not None:
            paragraph = self._placeholder.insert_paragraph_before()
        else:
            paragraph = self.document.add_paragraph()
        style = self._resolve_style(style_name, WD_STYLE_TYPE.PARAGRAPH)
        if style is not None:
            paragraph.style = style
        return paragraph

    def _render_spans(self, paragraph: Paragraph, spans: tuple[RichTextSpan, ...]) -> None:
        for span in spans:
            if span.link_target is not None:
                self._add_hyperlink(paragraph, span)
            elif span.text:
                run = paragraph.add_run(span.text)
                if span.style_ref:
                    style = self._resolve_style(span.style_ref, WD_STYLE_TYPE.CHARACTER)
                    if style is not None:
                        run.style = style

    def _add_hyperlink(self, paragraph: Paragraph, span: RichTextSpan) -> None:
        """Append a hyperlink for a linked span.

        python-docx has no hyperlink API, so the ``w:hyperlink`` element is
        built directly.

        """
        target = span.link_target
        hyperlink = OxmlElement("w:hyperlink")
        if isinstance(target, InternalLink):
            hyperlink.set(qn("w:anchor"), target.anchor_id)
            hyperlink.set(qn("w:history"), "1")
        elif isinstance(target, ExternalLink) and target.url:
            r_id = paragraph.part.relate_to(target.url, RT.HYPERLINK, is_external=True)
            hyperlink.set(qn("r:id"), r_id)
        else:
            logger.warning(f"Link {span.text!r} has no target; rendering it as plain text")
            paragraph.add_run(span.text)
            return

        run = OxmlElement("w:r")
        style_name = span.style_ref or self.options.link_style
        style = self._resolve_style(style_name, WD_STYLE_TYPE.CHARACTER) if style_name else None
        if style is not None:
            r_pr = OxmlElement("w:rPr")
            r_style = OxmlElement("w:rStyle")
            r_style.set(qn("w:val"), style.style_id)
            r_pr.append(r_style)
            run.append(r_pr)

        # xml:space="preserve" keeps leading and trailing spaces
        text = OxmlElement("w:t")
        text.set(qn("xml:space"), "preserve")
        text.text = span.text
        run.append(text)

        hyperlink.append(run)
        paragraph._p.append(hyperlink)
