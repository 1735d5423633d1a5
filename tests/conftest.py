from __future__ import annotations

from typing import Any, Callable, List

import pytest

from html2txt import Html2TxtOptions, html_to_lines


@pytest.fixture
def render() -> Callable[..., List[str]]:
    def _render(markup: str, *, page_width: int = 40, error_handler: Any = None, **options: Any) -> List[str]:
        return html_to_lines(markup, Html2TxtOptions(page_width=page_width, **options), error_handler=error_handler)

    return _render
