"""Built-in block and inline formatters, registered on import."""

from ..plugins import block_formatters, inline_formatters
from ..tables import TableFormatter
from .blocks import BLOCK_FORMATTERS, HeadingFormatter, IndentingFormatter
from .inline import INLINE_FORMATTERS, DecoratingFormatter

for _tag, _formatter in BLOCK_FORMATTERS.items():
    try:
        block_formatters.register(_tag, _formatter)
    except ValueError:
        pass

try:
    block_formatters.register("table", TableFormatter())
except ValueError:
    pass

for _tag, _formatter in INLINE_FORMATTERS.items():
    try:
        inline_formatters.register(_tag, _formatter)
    except ValueError:
        pass

__all__ = [
    "BLOCK_FORMATTERS",
    "INLINE_FORMATTERS",
    "DecoratingFormatter",
    "HeadingFormatter",
    "IndentingFormatter",
]
