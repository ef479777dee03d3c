"""The exported API functions for wordown conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/wordown/api.py
import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from wordown.ast import Document
from wordown.constants import OUTPUT_FORMATS
from wordown.exceptions import FormatError, ParsingError, ValidationError, WordownError
from wordown.options import DocxRendererOptions, JsonRendererOptions, WordownParserOptions
from wordown.options.base import BaseRendererOptions
from wordown.parsers import WordownParser
from wordown.renderers import BaseRenderer, DocxRenderer, JsonRenderer

logger = logging.getLogger(__name__)

_RENDERERS: dict[str, tuple[type[BaseRenderer], type[BaseRendererOptions]]] = {
    "docx": (DocxRenderer, DocxRendererOptions),
    "json": (JsonRenderer, JsonRendererOptions),
}


def _get_renderer_entry(target_format: str) -> tuple[type[BaseRenderer], type[BaseRendererOptions]]:
    try:
        return _RENDERERS[target_format]
    except KeyError:
        raise FormatError(format_type=target_format, supported_formats=list(OUTPUT_FORMATS)) from None


def _split_kwargs_for_parser_and_renderer(
    options_class: type[BaseRendererOptions], kwargs: dict[str, Any]
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split keyword options between the parser and the renderer by field name.

    Raises
    ------
    ValidationError
        If a keyword is neither a parser nor a renderer option

    """
    parser_fields = WordownParserOptions.field_names()
    renderer_fields = options_class.field_names()
    parser_kwargs: dict[str, Any] = {}
    renderer_kwargs: dict[str, Any] = {}
    for key, value in kwargs.items():
        if key in parser_fields:
            parser_kwargs[key] = value
        elif key in renderer_fields:
            renderer_kwargs[key] = value
        else:
            raise ValidationError(f"Unknown option: {key}", parameter_name=key, parameter_value=value)
    return parser_kwargs, renderer_kwargs


def to_ast(
    source: Union[str, Path, IO[bytes], IO[str], bytes],
    *,
    parser_options: Optional[WordownParserOptions] = None,
    **kwargs: Any,
) -> Document:
    """Parse wordown markup into a document.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markup text, a Path to a markup file, a stream or raw bytes
    parser_options : WordownParserOptions, optional
        Pre-configured parser options
    kwargs : Any
        Individual parser options that override settings in parser_options

    Returns
    -------
    Document
        Nodes in flush order

    Raises
    ------
    UnterminatedBlockError
        In strict mode, when a block opens before the previous one was terminated
    FileNotFoundError
        If a Path source does not exist
    ParsingError
        If parsing fails for any other reason

    Examples
    --------
        >>> from wordown import to_ast
        >>> doc = to_ast("text\\tHello\\nnewLine")
        >>> doc.children[0].text
        'Hello'

    """
    if kwargs:
        parser_options = (parser_options or WordownParserOptions()).create_updated(**kwargs)

    try:
        return WordownParser(parser_options).parse(source)
    except WordownError:
        raise
    except Exception as e:
        raise ParsingError(f"Parsing failed: {e!r}", parsing_stage="parse", original_error=e) from e


def from_ast(
    doc: Document,
    target_format: str = "docx",
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    *,
    renderer_options: Optional[BaseRendererOptions] = None,
    **kwargs: Any,
) -> Union[None, str, bytes]:
    """Render a document to a target format.

    Parameters
    ----------
    doc : Document
        Document to render
    target_format : {"docx", "json"}, default "docx"
        Output format
    output : str, Path, IO[bytes], IO[str], or None, optional
        Output destination. If None, the rendered content is returned.
    renderer_options : BaseRendererOptions, optional
        Renderer options for the target format
    kwargs : Any
        Individual renderer options that override renderer_options

    Returns
    -------
    None, str, or bytes
        - None if output was specified
        - str for ``json`` when output is None
        - bytes for ``docx`` when output is None

    Raises
    ------
    FormatError
        If the target format is unknown
    RenderingError
        If rendering fails

    """
    renderer_class, options_class = _get_renderer_entry(target_format)
    if kwargs:
        renderer_options = (renderer_options or options_class()).create_updated(**kwargs)

    renderer = renderer_class(renderer_options)
    if output is not None:
        renderer.render(doc, output)
        return None
    if target_format == "json":
        return renderer.render_to_string(doc)
    return renderer.render_to_bytes(doc)


def convert(
    source: Union[str, Path, IO[bytes], IO[str], bytes],
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    *,
    target_format: str = "docx",
    parser_options: Optional[WordownParserOptions] = None,
    renderer_options: Optional[BaseRendererOptions] = None,
    **kwargs: Any,
) -> Union[None, str, bytes]:
    """Convert wordown markup to a target format.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markup source
    output : str, Path, IO[bytes], IO[str], or None, optional
        Output destination. If None, the rendered content is returned.
    target_format : {"docx", "json"}, default "docx"
        Output format
    parser_options : WordownParserOptions, optional
        Options for parsing the markup
    renderer_options : BaseRendererOptions, optional
        Options for the renderer of ``target_format``
    kwargs : Any
        Individual options, routed to the parser or the renderer by field name

    Returns
    -------
    None, str, or bytes
        See :func:`from_ast`

    Examples
    --------
    Patch a template:
        >>> from pathlib import Path
        >>> convert(Path("report.wd"), "report.docx", template_path="template.docx")

    Inspect the parsed nodes:
        >>> print(convert("text\\tHello\\nnewLine", target_format="json"))

    """
    _, options_class = _get_renderer_entry(target_format)
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(options_class, kwargs)

    doc = to_ast(source, parser_options=parser_options, **parser_kwargs)
    logger.debug(f"Rendering {len(doc.children)} nodes to {target_format}")
    return from_ast(doc, target_format, output, renderer_options=renderer_options, **renderer_kwargs)
