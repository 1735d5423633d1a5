from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Element

if TYPE_CHECKING:
    from ..engine import Html2Txt


class DecoratingFormatter:
    """Renders the element's content between a fixed prefix and suffix."""

    def __init__(self, prefix: str = "", suffix: str = "") -> None:
        self.prefix = prefix
        self.suffix = suffix

    def __call__(self, engine: Html2Txt, element: Element) -> str:
        return self.prefix + engine.render_inline(element.children) + self.suffix


IGNORE_INLINE = DecoratingFormatter()


def format_not_implemented(engine: Html2Txt, element: Element) -> str:
    engine.warning(element, f'HTML inline element "<{element.tag}>" is not yet implemented and thus ignored')
    return engine.render_inline(element.children)


def format_anchor(engine: Html2Txt, element: Element) -> str:
    """``<a href>`` renders as ``content (see href)``; an ``<a name>`` target renders as nothing."""
    name = element.get("name").strip()
    href = element.get("href").strip()
    content = engine.render_inline(element.children)
    if name and not href:
        if content.strip():
            engine.warning(element, "'<a name=\"...\" />' tag should have no content")
        return ""
    if href and not name:
        return f"{content} (see {href})"
    engine.warning(element, '"<a>" tag has an unexpected combination of attributes')
    return content


def format_abbreviation(engine: Html2Txt, element: Element) -> str:
    content = engine.render_inline(element.children)
    title = element.get("title")
    if title:
        return f'{content} ("{title}")'
    return content


def format_line_break(engine: Html2Txt, element: Element) -> str:
    if element.children:
        engine.warning(element, '"<br>" tag should not have subelements nor contain text')
    return "\n"


def format_image(engine: Html2Txt, element: Element) -> str:
    alt = " ".join(element.get("alt").split())
    return f"[{alt}]" if alt else "[IMG]"


def format_input(engine: Html2Txt, element: Element) -> str:
    kind = element.get("type").strip().lower()
    checked = element.has("checked")
    if kind == "checkbox":
        return "[x]" if checked else "[ ]"
    if kind == "radio":
        return "(o)" if checked else "( )"
    if kind == "hidden":
        return ""
    if kind == "password":
        return "[******]"
    if kind == "submit":
        return f"[ {element.get('value') or 'Submit'} ]"
    if kind in ("", "text"):
        return f"[{element.get('value')}]"
    return f"[{kind.upper()}-INPUT]"


def format_quotation(engine: Html2Txt, element: Element) -> str:
    quoted = f'"{engine.render_inline(element.children)}"'
    cite = element.get("cite")
    if cite:
        return f"{quoted} ({cite})"
    return quoted


INLINE_FORMATTERS = {
    "a": format_anchor,
    "abbr": format_abbreviation,
    "acronym": format_abbreviation,
    "b": DecoratingFormatter("*", "*"),
    "bdo": format_not_implemented,
    "big": IGNORE_INLINE,
    "br": format_line_break,
    "button": DecoratingFormatter("[ ", " ]"),
    "cite": IGNORE_INLINE,
    "code": IGNORE_INLINE,
    "dfn": IGNORE_INLINE,
    "em": DecoratingFormatter("<", ">"),
    "font": IGNORE_INLINE,
    "i": DecoratingFormatter("<", ">"),
    "img": format_image,
    "input": format_input,
    "kbd": DecoratingFormatter("[ ", " ]"),
    "label": IGNORE_INLINE,
    "map": format_not_implemented,
    "object": format_not_implemented,
    "q": format_quotation,
    "samp": IGNORE_INLINE,
    "script": format_not_implemented,
    "select": DecoratingFormatter("[ ", " ]"),
    "small": IGNORE_INLINE,
    "span": IGNORE_INLINE,
    "strong": DecoratingFormatter("*", "*"),
    "sub": IGNORE_INLINE,
    "sup": DecoratingFormatter("^"),
    "textarea": DecoratingFormatter("[ ", " ]"),
    "tt": IGNORE_INLINE,
    "u": DecoratingFormatter("_", "_"),
    "var": DecoratingFormatter("<", ">"),
}
