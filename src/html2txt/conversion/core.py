from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional, Protocol

from ..bulleting import Bulleting
from ..errors import HtmlErrorHandler
from ..models import Element, Html2TxtOptions

if TYPE_CHECKING:
    from ..engine import Html2Txt


LineSink = Callable[[str], None]

OPTION_KEYS = frozenset({"page_width", "width", "left_margin", "right_margin", "heading_font"})


class Parser(Protocol):
    def parse(self, markup: str) -> Element:
        ...


class Converter(Protocol):
    def convert(self, document: Element) -> List[str]:
        ...


class ParserFactory(Protocol):
    def __call__(self, **kwargs: Any) -> Parser:
        ...


class ConverterFactory(Protocol):
    def __call__(
        self,
        options: Html2TxtOptions,
        *,
        error_handler: Optional[HtmlErrorHandler] = None,
    ) -> Converter:
        ...


class BlockFormatter(Protocol):
    def __call__(
        self,
        engine: Html2Txt,
        left_margin: int,
        bulleting: Bulleting,
        measure: int,
        element: Element,
        output: LineSink,
    ) -> None:
        ...


class InlineFormatter(Protocol):
    def __call__(self, engine: Html2Txt, element: Element) -> str:
        ...


def _parse_int(value: Optional[str], default: int = 0) -> int:
    if value is None:
        return default
    match = re.search(r"-?\d+", value)
    if not match:
        return default
    try:
        return int(match.group())
    except ValueError:
        return default


def _parse_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in {"true", "yes", "1", "on"}:
        return True
    if lowered in {"false", "no", "0", "off"}:
        return False
    return default


def parse_options(values: Mapping[str, str], base: Optional[Html2TxtOptions] = None) -> Html2TxtOptions:
    base = base or Html2TxtOptions()
    normalized: Dict[str, str] = {key.strip().lower().replace("-", "_"): value for key, value in values.items()}
    unknown = sorted(set(normalized) - OPTION_KEYS)
    if unknown:
        raise KeyError(f"Unknown option(s): {', '.join(unknown)}")
    page_width = normalized.get("page_width")
    if page_width is None:
        page_width = normalized.get("width")
    heading_font = normalized.get("heading_font")
    if heading_font is not None:
        heading_font = heading_font.strip()
        if not heading_font or not _parse_bool(heading_font, True):
            heading_font = None
    else:
        heading_font = base.heading_font
    return Html2TxtOptions(
        page_width=max(1, _parse_int(page_width, base.page_width)),
        left_margin=max(0, _parse_int(normalized.get("left_margin"), base.left_margin)),
        right_margin=max(0, _parse_int(normalized.get("right_margin"), base.right_margin)),
        heading_font=heading_font,
    )


def read_text(path: Path) -> str:
    with path.open("r", encoding="utf-8") as handle:
        return handle.read()


def run_pipeline(markup: str, *, parser: Parser, converter: Converter) -> List[str]:
    document = parser.parse(markup)
    return converter.convert(document)


def run_conversion(
    markup: str,
    *,
    options: Html2TxtOptions,
    parser_factory: ParserFactory,
    converter_factory: ConverterFactory,
    error_handler: Optional[HtmlErrorHandler] = None,
    parser_options: Optional[Dict[str, Any]] = None,
) -> List[str]:
    parser = parser_factory(**(parser_options or {}))
    converter = converter_factory(options, error_handler=error_handler)
    return run_pipeline(markup, parser=parser, converter=converter)
