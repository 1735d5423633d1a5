from __future__ import annotations

import pytest

from html2txt import CollectingErrorHandler, Element, Html2Txt, Html2TxtOptions, HtmlError, Text
from html2txt.engine import LineCollector


def test_paragraph_wraps_at_last_fitting_space(render) -> None:
    markup = "<p>The quick brown fox jumps over the lazy dog</p>"
    assert render(markup, page_width=16) == ["The quick brown", "fox jumps over", "the lazy dog"]


def test_whitespace_is_collapsed(render) -> None:
    assert render("<p>a \n\t  b</p>") == ["a b"]


def test_line_breaks(render) -> None:
    assert render("<p>a<br>b</p>") == ["a", "b"]
    assert render("<p>a<br><br>b</p>") == ["a", "", "b"]


def test_left_margin_option(render) -> None:
    assert render("<p>hi</p>", page_width=20, left_margin=4) == ["    hi"]


def test_inline_decorations(render) -> None:
    markup = "<p><b>bold</b> <i>it</i> <u>u</u> x<sup>2</sup> <kbd>k</kbd> <code>c</code></p>"
    assert render(markup) == ["*bold* <it> _u_ x^2 [ k ] c"]


def test_links_abbreviations_and_quotes(render) -> None:
    assert render('<p><a href="http://x">site</a></p>') == ["site (see http://x)"]
    assert render('<p><abbr title="World Wide Web">WWW</abbr></p>') == ['WWW ("World Wide Web")']
    assert render('<p><q cite="Hamlet">to be</q></p>') == ['"to be" (Hamlet)']


def test_anchor_targets_render_as_nothing(render) -> None:
    assert render('<p><a name="top"></a>Top of page</p>') == ["Top of page"]
    assert render('<p><a href="http://x">http://x</a></p>') == ["http://x (see http://x)"]

    handler = CollectingErrorHandler()
    assert render('<p><a name="top">Top</a> text</p>', error_handler=handler) == ["text"]
    assert len(handler.warnings) == 1
    assert handler.warnings[0].node.get("name") == "top"


def test_anchor_with_unexpected_attributes_warns(render) -> None:
    handler = CollectingErrorHandler()
    markup = '<p><a name="n" href="h">both</a> <a>plain</a></p>'
    assert render(markup, error_handler=handler) == ["both plain"]
    expected = '"<a>" tag has an unexpected combination of attributes'
    assert [warning.message for warning in handler.warnings] == [expected, expected]
    assert str(handler.warnings[0]).startswith("Line 1, column 4: ")


def test_images_and_inputs(render) -> None:
    assert render('<p><img alt="logo"> <img src="x.png"></p>') == ["[logo] [IMG]"]
    markup = (
        '<p><input type="checkbox" checked> <input type="radio">'
        ' <input type="submit"> <input value="abc"> <input type="hidden" value="h"></p>'
    )
    assert render(markup) == ["[x] ( ) [ Submit ] [abc]"]


def test_unordered_list(render) -> None:
    markup = "<ul>\n<li>one</li>\n<li>two</li>\n</ul>"
    assert render(markup) == [" * one", " * two"]


def test_nested_lists_indent_further(render) -> None:
    markup = "<ul><li>one<ul><li>three</li></ul></li></ul>"
    assert render(markup) == [" * one", "    * three"]


def test_inline_content_directly_in_list_is_not_bulleted(render) -> None:
    assert render("<ul>zero<li>one</li></ul>") == ["   zero", " * one"]


def test_list_item_continuation_lines_are_indented(render) -> None:
    markup = "<ul><li>aaa bbb ccc</li></ul>"
    assert render(markup, page_width=11) == [" * aaa bbb", "   ccc"]


def test_ordered_lists(render) -> None:
    assert render("<ol><li>one</li><li>two</li></ol>") == ["  1. one", "  2. two"]
    assert render('<ol type="a" start="3"><li>x</li></ol>') == ["  c. x"]
    assert render('<ol type="I" start="4"><li>x</li></ol>') == [" IV. x"]
    assert render('<ol start="bogus"><li>x</li></ol>') == ["  1. x"]


def test_nested_ordered_list_keeps_outer_count(render) -> None:
    markup = "<ol><li>a<ol><li>b</li></ol></li><li>c</li></ol>"
    assert render(markup) == ["  1. a", "       1. b", "  2. c"]


def test_empty_list_item_still_shows_its_label(render) -> None:
    assert render("<ol><li></li><li>b</li></ol>") == ["  1.", "  2. b"]


def test_label_goes_to_first_nested_block(render) -> None:
    assert render("<ol><li><p>para</p></li></ol>") == ["  1. para"]


def test_underlined_headings(render) -> None:
    assert render("<h1>Title</h1><p>x</p>") == ["Title", "*****", "", "x"]
    assert render("<p>x</p><h2>Sub</h2><p>y</p>") == ["x", "", "Sub", "===", "", "y"]
    assert render("<h3>Small</h3>") == ["Small", "-----"]


def test_framed_headings(render) -> None:
    assert render("<h4>Sub</h4>") == ["=== Sub ==="]
    assert render("<h5>Sub</h5>") == ["== Sub =="]
    assert render("<h6>Sub</h6>") == ["= Sub ="]


def test_wrapped_heading_is_underlined_to_longest_line(render) -> None:
    assert render("<h2>aaa bbbbbb</h2>", page_width=8) == ["aaa", "bbbbbb", "======"]


def test_empty_heading_is_skipped(render) -> None:
    assert render("<h1> </h1><p>x</p>") == ["x"]


def test_figlet_heading(render) -> None:
    lines = render("<h1>Hi</h1>", heading_font="standard")
    assert len(lines) > 1
    assert "*" not in "".join(lines)


def test_unknown_figlet_font_falls_back_to_underline(render) -> None:
    handler = CollectingErrorHandler()
    lines = render("<h1>Hi</h1><h1>Ho</h1>", heading_font="no-such-font", error_handler=handler)
    assert lines == ["Hi", "**", "", "Ho", "**"]
    assert len(handler.warnings) == 1


def test_preformatted_text(render) -> None:
    markup = "<pre>\n\n  a  b\n\tc <b>d</b>\n\n</pre>"
    assert render(markup) == ["  a  b", "        c *d*"]


def test_preformatted_text_keeps_margin(render) -> None:
    assert render("<blockquote><pre>x\n  y</pre></blockquote>") == ["  x", "    y"]


def test_horizontal_rule(render) -> None:
    assert render("<hr>", page_width=11) == ["----------"]
    assert render("<blockquote><hr></blockquote>", page_width=11) == ["  --------"]


def test_indenting_blocks(render) -> None:
    assert render("<blockquote>q</blockquote>") == ["  q"]
    assert render("<address>a</address>") == ["  a"]
    assert render("<dl><dt>term</dt><dd>definition</dd></dl>") == ["  term", "      definition"]


def test_alignment(render) -> None:
    assert render('<p align="right">ab</p>', page_width=11) == ["        ab"]
    assert render("<center>ab</center>", page_width=11) == ["    ab"]
    assert render('<div align="center"><p>ab</p></div>', page_width=11) == ["    ab"]
    assert render('<p align="justify">aa bb cc dd</p>', page_width=10) == ["aa  bb cc", "dd"]


def test_table_cells_ignore_alignment(render) -> None:
    markup = '<div align="right"><table border="1"><tr><td><p align="center">x</p></td></tr></table></div>'
    assert render(markup) == ["+-+", "|x|", "+-+"]


def test_head_and_style_are_not_rendered(render) -> None:
    markup = (
        "<html><head><title>T</title><style>p {}</style></head>"
        "<body><noscript>n</noscript><p>x</p></body></html>"
    )
    assert render(markup) == ["x"]


def test_unknown_block_element_raises_by_default(render) -> None:
    with pytest.raises(HtmlError) as excinfo:
        render("<p>a</p>\n<foo>x</foo>")
    assert 'Unexpected element "<foo>" in block' in str(excinfo.value)
    assert str(excinfo.value).startswith("Line 2, column 1: ")


def test_unknown_element_is_skipped_when_handler_continues(render) -> None:
    handler = CollectingErrorHandler()
    assert render("<p>a<foo>x</foo> b</p>", error_handler=handler) == ["a b"]
    assert len(handler.errors) == 1
    assert handler.errors[0].node.tag == "foo"


def test_not_yet_implemented_elements_warn(render) -> None:
    handler = CollectingErrorHandler()
    assert render("<video>v</video><p><bdo>w</bdo></p>", error_handler=handler) == ["v", "w"]
    assert len(handler.warnings) == 2


def test_convert_accepts_bare_elements() -> None:
    engine = Html2Txt(Html2TxtOptions(page_width=20))
    assert engine.convert(Element("p", {}, (Text("hello"),))) == ["hello"]
    assert engine.convert(Element("body", {}, (Text("a"), Element("br"), Text("b")))) == ["a", "b"]


def test_convert_formats_every_body() -> None:
    document = Element(
        "html",
        {},
        (
            Element("head", {}, (Element("title", {}, (Text("t"),)),)),
            Element("body", {}, (Text("one"),)),
        ),
    )
    assert Html2Txt(Html2TxtOptions(page_width=20)).convert(document) == ["one"]


def test_tiny_page_never_crashes(render) -> None:
    assert render("<p>abc def</p>", page_width=1) == ["abc", "def"]


def test_line_collector_squeezes_blank_lines() -> None:
    collector = LineCollector()
    for line in ["", "  ", "a  ", "", "", "b", "", ""]:
        collector(line)
    assert collector.finalize() == ["a", "", "b"]


def test_unexpected_nodes_are_reported_with_the_node() -> None:
    handler = CollectingErrorHandler()
    engine = Html2Txt(Html2TxtOptions(page_width=20), error_handler=handler)
    stray = object()
    assert engine.convert(Element("body", {}, (Text("a"), stray))) == ["a"]
    assert engine.render_inline([stray]) == ""
    assert [error.node for error in handler.errors] == [stray, stray]
    assert handler.errors[0].message == "Unexpected node object in block"
