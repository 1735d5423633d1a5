"""Markup parsing: BeautifulSoup trees to the immutable node model."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from .models import Element, Node, Text
from .plugins import register_parser

logger = logging.getLogger(__name__)


def _attribute_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return "" if value is None else str(value)


def _column(tag: Tag) -> Optional[int]:
    position = getattr(tag, "sourcepos", None)
    return None if position is None else position + 1


class HtmlParser:
    """Builds the node tree with BeautifulSoup.

    Comments, doctypes, CDATA sections and processing instructions are
    dropped. A document without an ``<html>`` root is wrapped in a synthetic
    ``<body>`` element.
    """

    def __init__(self, features: str = "html.parser") -> None:
        self.features = features

    def parse(self, markup: str) -> Element:
        soup = BeautifulSoup(markup, self.features)
        root = soup.find("html")
        if root is None:
            logger.debug("No <html> element; wrapping the document in <body>")
            return Element("body", {}, tuple(self._children(soup)))
        document = self._element(root)
        if not any(isinstance(child, Element) and child.tag == "body" for child in document.children):
            body = tuple(
                child for child in document.children if not (isinstance(child, Element) and child.tag == "head")
            )
            document = Element(
                document.tag,
                document.attributes,
                (Element("body", {}, body, document.line, document.column),),
                document.line,
                document.column,
            )
        return document

    def _element(self, tag: Tag) -> Element:
        attributes: Dict[str, str] = {name.lower(): _attribute_value(value) for name, value in tag.attrs.items()}
        return Element(
            tag.name.lower(),
            attributes,
            tuple(self._children(tag)),
            getattr(tag, "sourceline", None),
            _column(tag),
        )

    def _children(self, tag: Tag) -> List[Node]:
        children: List[Node] = []
        for child in tag.children:
            if isinstance(child, Tag):
                children.append(self._element(child))
            elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
                children.append(Text(str(child), getattr(tag, "sourceline", None)))
        return children


def _html_parser_factory(*, features: str = "html.parser", **_: Any) -> HtmlParser:
    return HtmlParser(features)


try:
    register_parser("html", _html_parser_factory)
except ValueError:
    pass
