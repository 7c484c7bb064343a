from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from favicon_forge import __version__
from favicon_forge.config import FaviconOptions, settings
from favicon_forge.data.artifacts import FaviconGenerator
from favicon_forge.data.platforms import Source
from favicon_forge.inputs import resolve_input

HEAD_CLOSE = "</head>"
_BLANK_LINES = re.compile(r"\n{2,}")


def render_html_tags(tags: list[str], compress: bool = True) -> str:
    if compress:
        return "".join(tags).replace("\n", "")

    body = _BLANK_LINES.sub("\n", "\n".join(tags))
    return f"\n\n<!-- Favicon Forge v{__version__} -->\n{body}\n<!-- Favicon Forge -->\n\t"


class HeadTagInjector:
    """Single-step HTML transform that places favicon tags before `</head>`."""

    name = "favicon-forge"

    def __init__(self, tags_block: str) -> None:
        self.tags_block = tags_block

    def transform(self, html: str) -> str:
        escaped = self.tags_block.replace('"', '\\"')
        return html.replace(HEAD_CLOSE, f"{escaped}{HEAD_CLOSE}", 1)


async def create_html_transform(
    icons: Source | Mapping[Any, Any] | None,
    options: FaviconOptions | None,
    generator: FaviconGenerator,
    compress_html: bool | None = None,
) -> HeadTagInjector:
    if icons is None:
        icons = settings.source
    if options is None:
        options = FaviconOptions.from_settings(settings)
    if compress_html is None:
        compress_html = settings.compress_html

    response = await generator.generate(resolve_input(icons), options.to_generator_options())
    return HeadTagInjector(render_html_tags(response.html, compress=compress_html))
