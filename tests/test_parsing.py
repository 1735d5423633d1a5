from __future__ import annotations

from html2txt import Element, HtmlParser, Text
from html2txt.plugins import available_parsers, get_parser_factory


def test_fragment_is_wrapped_in_body() -> None:
    document = HtmlParser().parse("<p>hi</p>")
    assert document == Element("body", {}, (Element("p", {}, (Text("hi", 1),), 1, 1),))


def test_comments_and_doctype_are_dropped() -> None:
    document = HtmlParser().parse("<!DOCTYPE html><html><body><p>a<!-- c -->b</p></body></html>")
    assert document.tag == "html"
    body = document.children[0]
    assert isinstance(body, Element) and body.tag == "body"
    paragraph = body.children[0]
    assert [child.content for child in paragraph.children] == ["a", "b"]


def test_missing_body_is_synthesised() -> None:
    document = HtmlParser().parse("<html><head><title>t</title></head><p>x</p></html>")
    assert [child.tag for child in document.children] == ["body"]
    assert document.children[0].children[0].tag == "p"


def test_attributes_are_flattened() -> None:
    paragraph = HtmlParser().parse('<p class="a b" ALIGN="right">x</p>').children[0]
    assert paragraph.get("class") == "a b"
    assert paragraph.get("align") == "right"
    assert paragraph.get("missing", "default") == "default"


def test_boolean_attributes_are_present() -> None:
    checkbox = HtmlParser().parse("<input type=checkbox checked>").children[0]
    assert checkbox.has("checked")
    assert not checkbox.has("disabled")


def test_source_positions() -> None:
    paragraph = HtmlParser().parse("<p>\n  <b>x</b></p>").children[0]
    bold = paragraph.children[1]
    assert (paragraph.line, paragraph.column) == (1, 1)
    assert (bold.line, bold.column) == (2, 3)


def test_html_parser_is_registered() -> None:
    assert "html" in available_parsers()
    assert isinstance(get_parser_factory("html")(), HtmlParser)
