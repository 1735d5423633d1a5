"""Conversion pipeline helpers."""

from .core import (
    BlockFormatter,
    ConverterFactory,
    InlineFormatter,
    LineSink,
    ParserFactory,
    parse_options,
    read_text,
    run_conversion,
    run_pipeline,
)

__all__ = [
    "BlockFormatter",
    "ConverterFactory",
    "InlineFormatter",
    "LineSink",
    "ParserFactory",
    "parse_options",
    "read_text",
    "run_conversion",
    "run_pipeline",
]
