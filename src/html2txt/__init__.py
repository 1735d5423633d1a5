"""Render HTML documents as word-wrapped, fixed-width plain text."""

from __future__ import annotations

from typing import List, Optional

from .bulleting import NO_BULLETING, Bulleting, ConstantBulleting, NumberedBulleting, NumberingType
from .conversion import parse_options, run_conversion
from .engine import Html2Txt, LineCollector
from .errors import (
    CollectingErrorHandler,
    HtmlError,
    HtmlErrorHandler,
    LoggingErrorHandler,
    RaisingErrorHandler,
)
from .models import Alignment, Element, Html2TxtOptions, Text
from .parsing import HtmlParser
from .plugins import get_parser_factory

__all__ = [
    "NO_BULLETING",
    "Alignment",
    "Bulleting",
    "CollectingErrorHandler",
    "ConstantBulleting",
    "Element",
    "Html2Txt",
    "Html2TxtOptions",
    "HtmlError",
    "HtmlErrorHandler",
    "HtmlParser",
    "LineCollector",
    "LoggingErrorHandler",
    "NumberedBulleting",
    "NumberingType",
    "RaisingErrorHandler",
    "Text",
    "html_to_lines",
    "html_to_text",
    "parse_options",
]


def html_to_lines(
    markup: str,
    options: Optional[Html2TxtOptions] = None,
    *,
    error_handler: Optional[HtmlErrorHandler] = None,
    parser_name: str = "html",
) -> List[str]:
    return run_conversion(
        markup,
        options=options or Html2TxtOptions(),
        parser_factory=get_parser_factory(parser_name),
        converter_factory=Html2Txt,
        error_handler=error_handler,
    )


def html_to_text(
    markup: str,
    options: Optional[Html2TxtOptions] = None,
    *,
    error_handler: Optional[HtmlErrorHandler] = None,
) -> str:
    return "\n".join(html_to_lines(markup, options, error_handler=error_handler))
