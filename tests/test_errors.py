from __future__ import annotations

import logging

import pytest

from html2txt import CollectingErrorHandler, Element, HtmlError, LoggingErrorHandler, RaisingErrorHandler, Text


def test_message_carries_location() -> None:
    assert str(HtmlError(Element("foo", line=3, column=5), "bad")) == "Line 3, column 5: bad"
    assert str(HtmlError(Text("x", line=7), "bad")) == "Line 7: bad"
    assert str(HtmlError(None, "bad")) == "bad"


def test_raising_handler_raises_everything() -> None:
    handler = RaisingErrorHandler()
    error = HtmlError(None, "boom")
    for report in (handler.warning, handler.error, handler.fatal_error):
        with pytest.raises(HtmlError):
            report(error)


def test_logging_handler_logs_and_continues(render, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="html2txt"):
        lines = render("<foo>x</foo><video>v</video>", error_handler=LoggingErrorHandler())
    assert lines == ["v"]
    messages = [(record.levelno, record.getMessage()) for record in caplog.records]
    assert (logging.ERROR, 'Unexpected element "<foo>" in block') in [
        (level, message.split(": ", 1)[-1]) for level, message in messages
    ]
    assert any(level == logging.WARNING and "<video>" in message for level, message in messages)


def test_logging_handler_still_raises_fatal_errors() -> None:
    with pytest.raises(HtmlError):
        LoggingErrorHandler().fatal_error(HtmlError(None, "fatal"))


def test_collecting_handler_sorts_by_severity() -> None:
    handler = CollectingErrorHandler()
    handler.warning(HtmlError(None, "w"))
    handler.error(HtmlError(None, "e"))
    assert [str(error) for error in handler.warnings] == ["w"]
    assert [str(error) for error in handler.errors] == ["e"]
    with pytest.raises(HtmlError):
        handler.fatal_error(HtmlError(None, "f"))


def test_malformed_attributes_are_silent(render) -> None:
    handler = CollectingErrorHandler()
    markup = (
        '<ol start="x"><li>a</li></ol>'
        '<table border="x"><tr><td colspan="wide" rowspan="-2">b</td></tr></table>'
    )
    assert render(markup, error_handler=handler) == ["  1. a", "b"]
    assert not handler.warnings
    assert not handler.errors
