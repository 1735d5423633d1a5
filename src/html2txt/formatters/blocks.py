from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from pyfiglet import Figlet, FontNotFound

from ..bulleting import (
    NO_BULLETING,
    Bulleting,
    ConstantBulleting,
    NumberedBulleting,
    NumberingType,
    OneShotBulleting,
)
from ..conversion.core import LineSink
from ..geometry import max_length
from ..models import Alignment, Element
from ..wrapping import bullet_margin

if TYPE_CHECKING:
    from ..engine import Html2Txt

logger = logging.getLogger(__name__)

UL_INDENTATION = 3
OL_INDENTATION = 5
UL_BULLET = "*"


class IndentingFormatter:
    """Formats the children ``indentation`` columns further right.

    With ``indentation=0`` this is the "ignore the tag" formatter.
    """

    def __init__(
        self,
        indentation: int = 0,
        *,
        honour_align: bool = False,
        default_alignment: Optional[Alignment] = None,
    ) -> None:
        self.indentation = indentation
        self.honour_align = honour_align
        self.default_alignment = default_alignment

    def __call__(
        self,
        engine: Html2Txt,
        left_margin: int,
        bulleting: Bulleting,
        measure: int,
        element: Element,
        output: LineSink,
    ) -> None:
        alignment = self.default_alignment
        if self.honour_align:
            alignment = Alignment.parse(element.get("align"), alignment)
        with engine.aligned(alignment):
            engine.format_blocks(
                left_margin + self.indentation,
                bulleting,
                bulleting,
                measure - self.indentation,
                element.children,
                output,
            )


IGNORE_BLOCK = IndentingFormatter()


def format_nothing(
    engine: Html2Txt,
    left_margin: int,
    bulleting: Bulleting,
    measure: int,
    element: Element,
    output: LineSink,
) -> None:
    pass


def format_not_implemented(
    engine: Html2Txt,
    left_margin: int,
    bulleting: Bulleting,
    measure: int,
    element: Element,
    output: LineSink,
) -> None:
    engine.warning(element, f'HTML block element "<{element.tag}>" is not yet implemented and thus ignored')
    IGNORE_BLOCK(engine, left_margin, bulleting, measure, element, output)


class HeadingFormatter:
    """Underlined (``h1``-``h3``) or framed (``h4``-``h6``) headings."""

    def __init__(
        self,
        *,
        underline: Optional[str] = None,
        prefix: str = "",
        suffix: str = "",
        blank_lines: bool = False,
        figlet: bool = False,
    ) -> None:
        self.underline = underline
        self.prefix = prefix
        self.suffix = suffix
        self.blank_lines = blank_lines
        self.figlet = figlet

    def __call__(
        self,
        engine: Html2Txt,
        left_margin: int,
        bulleting: Bulleting,
        measure: int,
        element: Element,
        output: LineSink,
    ) -> None:
        text = engine.render_inline(element.children).strip(" \n")
        if not text:
            return
        lines: Optional[List[str]] = None
        if self.figlet and engine.options.heading_font:
            lines = self._render_figlet(engine, left_margin, bulleting, measure, element, text)
        if lines is None:
            lines = []
            engine.word_wrap(left_margin, bulleting, measure, self.prefix + text + self.suffix, lines.append)
            if self.underline and lines:
                indent = min(len(line) - len(line.lstrip(" ")) for line in lines)
                lines.append(" " * indent + self.underline * (max_length(lines) - indent))
        if self.blank_lines:
            output("")
        for line in lines:
            output(line)
        if self.blank_lines:
            output("")

    def _render_figlet(
        self,
        engine: Html2Txt,
        left_margin: int,
        bulleting: Bulleting,
        measure: int,
        element: Element,
        text: str,
    ) -> Optional[List[str]]:
        font = engine.options.heading_font
        width = max(1, min(measure, engine.page_measure))
        key = (font, width, engine.alignment)
        if key not in engine.figlets:
            try:
                engine.figlets[key] = Figlet(font=font, width=width, justify=_figlet_justify(engine.alignment))
            except FontNotFound:
                engine.figlets[key] = None
                engine.warning(element, f'Unknown FIGlet font "{font}"; falling back to underlined headings')
        figlet = engine.figlets[key]
        if figlet is None:
            return None
        rendered = figlet.renderText(" ".join(text.split())).rstrip("\n").splitlines()
        margin = " " * left_margin
        lines: List[str] = []
        label = bulleting.next()
        if label:
            lines.append(bullet_margin(left_margin, label).rstrip())
        lines.extend((margin + line).rstrip() for line in rendered)
        logger.debug("Rendered <%s> with FIGlet font %s in %d lines", element.tag, font, len(rendered))
        return lines


def _figlet_justify(alignment: Alignment) -> str:
    if alignment is Alignment.CENTER:
        return "center"
    if alignment is Alignment.RIGHT:
        return "right"
    return "left"


def format_horizontal_rule(
    engine: Html2Txt,
    left_margin: int,
    bulleting: Bulleting,
    measure: int,
    element: Element,
    output: LineSink,
) -> None:
    output(" " * left_margin + "-" * max(1, min(measure, engine.page_measure)))


def format_preformatted(
    engine: Html2Txt,
    left_margin: int,
    bulleting: Bulleting,
    measure: int,
    element: Element,
    output: LineSink,
) -> None:
    with engine.preformatted():
        text = engine.render_inline(element.children)
    lines = text.expandtabs().splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        return
    margin = bullet_margin(left_margin, bulleting.next())
    for line in lines:
        output(margin + line.rstrip())
        margin = " " * left_margin


def format_unordered_list(
    engine: Html2Txt,
    left_margin: int,
    bulleting: Bulleting,
    measure: int,
    element: Element,
    output: LineSink,
) -> None:
    engine.format_blocks(
        left_margin + UL_INDENTATION,
        NO_BULLETING,
        ConstantBulleting(UL_BULLET),
        measure - UL_INDENTATION,
        element.children,
        output,
    )


def _list_start(value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        return 1


def format_ordered_list(
    engine: Html2Txt,
    left_margin: int,
    bulleting: Bulleting,
    measure: int,
    element: Element,
    output: LineSink,
) -> None:
    numbering = NumberedBulleting(
        NumberingType.from_type_attribute(element.get("type", "1")),
        _list_start(element.get("start", "1")),
    )
    engine.format_blocks(
        left_margin + OL_INDENTATION,
        NO_BULLETING,
        numbering,
        measure - OL_INDENTATION,
        element.children,
        output,
    )


def format_list_item(
    engine: Html2Txt,
    left_margin: int,
    bulleting: Bulleting,
    measure: int,
    element: Element,
    output: LineSink,
) -> None:
    label = OneShotBulleting(bulleting)
    engine.format_blocks(left_margin, label, label, measure, element.children, output)
    if not label.consumed:
        # Empty item: keep the numbering visible.
        bullet = label.next()
        if bullet:
            output(bullet_margin(left_margin, bullet).rstrip())


BLOCK_FORMATTERS = {
    "address": IndentingFormatter(2),
    "article": IGNORE_BLOCK,
    "aside": IGNORE_BLOCK,
    "audio": format_not_implemented,
    "blockquote": IndentingFormatter(2),
    "body": IGNORE_BLOCK,
    "canvas": IGNORE_BLOCK,
    "center": IndentingFormatter(honour_align=True, default_alignment=Alignment.CENTER),
    "dd": IndentingFormatter(4),
    "div": IndentingFormatter(honour_align=True),
    "dl": IndentingFormatter(2),
    "dt": IGNORE_BLOCK,
    "fieldset": IGNORE_BLOCK,
    "figcaption": IGNORE_BLOCK,
    "figure": IGNORE_BLOCK,
    "footer": IGNORE_BLOCK,
    "form": IGNORE_BLOCK,
    "h1": HeadingFormatter(underline="*", blank_lines=True, figlet=True),
    "h2": HeadingFormatter(underline="=", blank_lines=True, figlet=True),
    "h3": HeadingFormatter(underline="-", blank_lines=True, figlet=True),
    "h4": HeadingFormatter(prefix="=== ", suffix=" ==="),
    "h5": HeadingFormatter(prefix="== ", suffix=" =="),
    "h6": HeadingFormatter(prefix="= ", suffix=" ="),
    "head": format_nothing,
    "header": IGNORE_BLOCK,
    "hgroup": IGNORE_BLOCK,
    "hr": format_horizontal_rule,
    "li": format_list_item,
    "main": IGNORE_BLOCK,
    "nav": IGNORE_BLOCK,
    "noscript": format_nothing,
    "ol": format_ordered_list,
    "output": IGNORE_BLOCK,
    "p": IndentingFormatter(honour_align=True),
    "pre": format_preformatted,
    "section": IGNORE_BLOCK,
    "style": format_nothing,
    "tfoot": IGNORE_BLOCK,
    "title": format_nothing,
    "ul": format_unordered_list,
    "video": format_not_implemented,
}
