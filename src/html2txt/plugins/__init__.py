from __future__ import annotations

from ..conversion.core import BlockFormatter, InlineFormatter, ParserFactory
from .registry import PluginRegistry


parser_plugins = PluginRegistry[ParserFactory]("Parser")
block_formatters = PluginRegistry[BlockFormatter]("Block formatter")
inline_formatters = PluginRegistry[InlineFormatter]("Inline formatter")


def register_parser(name: str, factory: ParserFactory) -> None:
    parser_plugins.register(name, factory)


def register_block_formatter(tag: str, formatter: BlockFormatter) -> None:
    block_formatters.register(tag, formatter)


def register_inline_formatter(tag: str, formatter: InlineFormatter) -> None:
    inline_formatters.register(tag, formatter)


def get_parser_factory(name: str) -> ParserFactory:
    return parser_plugins.get(name)


def get_block_formatter(tag: str) -> BlockFormatter:
    return block_formatters.get(tag)


def get_inline_formatter(tag: str) -> InlineFormatter:
    return inline_formatters.get(tag)


def available_parsers() -> list[str]:
    return parser_plugins.names()


__all__ = [
    "PluginRegistry",
    "available_parsers",
    "block_formatters",
    "get_block_formatter",
    "get_inline_formatter",
    "get_parser_factory",
    "inline_formatters",
    "parser_plugins",
    "register_block_formatter",
    "register_inline_formatter",
    "register_parser",
]
