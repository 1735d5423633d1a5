from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from . import formatters  # noqa: F401  # register the built-in formatters
from .bulleting import NO_BULLETING, Bulleting
from .conversion.core import BlockFormatter, InlineFormatter, LineSink
from .errors import HtmlError, HtmlErrorHandler, RaisingErrorHandler
from .models import Alignment, Element, Html2TxtOptions, Node, Text, describe
from .plugins import PluginRegistry, block_formatters, inline_formatters
from .wrapping import align_line, bullet_margin, wrap_text

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"[ \t\n\r\f\v]+")


class LineCollector:
    """Line sink for a whole document.

    Trailing spaces are cut, runs of blank lines are squeezed into one, and
    blank lines at the start and the end of the document are dropped.
    """

    def __init__(self) -> None:
        self.lines: List[str] = []
        self._pending_blank = False

    def __call__(self, line: str) -> None:
        line = line.rstrip(" \t")
        if not line:
            if self.lines:
                self._pending_blank = True
            return
        if self._pending_blank:
            self.lines.append("")
            self._pending_blank = False
        self.lines.append(line)

    def finalize(self) -> List[str]:
        return self.lines


class Html2Txt:
    """Lays out a document tree as fixed-width text."""

    def __init__(
        self,
        options: Optional[Html2TxtOptions] = None,
        *,
        error_handler: Optional[HtmlErrorHandler] = None,
        block_registry: Optional[PluginRegistry[BlockFormatter]] = None,
        inline_registry: Optional[PluginRegistry[InlineFormatter]] = None,
    ) -> None:
        self.options = options or Html2TxtOptions()
        self.error_handler: HtmlErrorHandler = error_handler or RaisingErrorHandler()
        self.block_formatters = block_registry or block_formatters
        self.inline_formatters = inline_registry or inline_formatters
        self.alignment = Alignment.LEFT
        self.preserve_whitespace = False
        self._alignment_locked = False
        self.figlets: Dict[Tuple[Any, ...], Any] = {}

    @property
    def page_measure(self) -> int:
        return self.options.measure

    def convert(self, document: Element) -> List[str]:
        collector = LineCollector()
        left_margin = self.options.left_margin
        measure = self.options.measure
        logger.debug("Converting <%s> at left margin %d, measure %d", document.tag, left_margin, measure)
        if document.tag == "html":
            for child in document.children:
                if isinstance(child, Element) and child.tag == "body":
                    self.format_blocks(left_margin, NO_BULLETING, NO_BULLETING, measure, child.children, collector)
        elif document.tag == "body":
            self.format_blocks(left_margin, NO_BULLETING, NO_BULLETING, measure, document.children, collector)
        else:
            self.format_blocks(left_margin, NO_BULLETING, NO_BULLETING, measure, [document], collector)
        return collector.finalize()

    # Diagnostics ---------------------------------------------------------
    def warning(self, node: object, message: str) -> None:
        self.error_handler.warning(HtmlError(node, message))

    def error(self, node: object, message: str) -> None:
        self.error_handler.error(HtmlError(node, message))

    # Classification -------------------------------------------------------
    def is_inline(self, node: object) -> bool:
        if isinstance(node, Text):
            return True
        return isinstance(node, Element) and node.tag in self.inline_formatters

    def is_block(self, node: object) -> bool:
        return isinstance(node, Element) and node.tag in self.block_formatters

    # Text flow -----------------------------------------------------------
    def format_blocks(
        self,
        left_margin: int,
        inline_bulleting: Bulleting,
        block_bulleting: Bulleting,
        measure: int,
        nodes: Iterable[Node],
        output: LineSink,
    ) -> None:
        inline_nodes: List[Node] = []
        for node in nodes:
            if self.is_inline(node):
                inline_nodes.append(node)
                continue
            if isinstance(node, Element) and self.is_block(node):
                if inline_nodes:
                    self.word_wrap(left_margin, inline_bulleting, measure, self.render_inline(inline_nodes), output)
                    inline_nodes = []
                formatter = self.block_formatters.get(node.tag)
                formatter(self, left_margin, block_bulleting, measure, node, output)
                continue
            if isinstance(node, Element):
                self.error(node, f'Unexpected element "<{node.tag}>" in block')
            else:
                self.error(node, f"Unexpected node {describe(node)} in block")
        if inline_nodes:
            self.word_wrap(left_margin, inline_bulleting, measure, self.render_inline(inline_nodes), output)

    def render_inline(self, nodes: Iterable[Node]) -> str:
        parts: List[str] = []
        for node in nodes:
            if isinstance(node, Text):
                parts.append(node.content if self.preserve_whitespace else WHITESPACE_RE.sub(" ", node.content))
            elif isinstance(node, Element):
                if node.tag in self.inline_formatters:
                    parts.append(self.inline_formatters.get(node.tag)(self, node))
                else:
                    self.error(node, f'Unexpected element "<{node.tag}>" in inline text')
            else:
                self.error(node, f"Unexpected node {describe(node)} in inline text")
        return "".join(parts)

    def word_wrap(self, left_margin: int, bulleting: Bulleting, measure: int, text: str, output: LineSink) -> None:
        text = text.strip(" \n")
        if not text:
            return
        measure = max(1, measure)
        blank_margin = " " * left_margin
        margin = bullet_margin(left_margin, bulleting.next())
        for segment in text.split("\n"):
            lines = wrap_text(segment, measure)
            if not lines:
                output(margin)
                margin = blank_margin
                continue
            for index, line in enumerate(lines):
                output(margin + align_line(line, measure, self.alignment, last=index == len(lines) - 1))
                margin = blank_margin

    @contextmanager
    def aligned(self, alignment: Optional[Alignment], *, lock: bool = False) -> Iterator[None]:
        """Use ``alignment`` for nested blocks; a locked alignment ignores nested requests."""
        previous = (self.alignment, self._alignment_locked)
        if alignment is not None and not self._alignment_locked:
            self.alignment = alignment
            self._alignment_locked = lock
        try:
            yield
        finally:
            self.alignment, self._alignment_locked = previous

    @contextmanager
    def preformatted(self) -> Iterator[None]:
        previous = self.preserve_whitespace
        self.preserve_whitespace = True
        try:
            yield
        finally:
            self.preserve_whitespace = previous
