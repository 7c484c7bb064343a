from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from favicon_forge.data.platforms import InputSource


@dataclass(frozen=True)
class Artifact:
    name: str  # relative to the output directory, may contain subdirectories
    contents: bytes


@dataclass
class GeneratorResponse:
    images: list[Artifact] = field(default_factory=list)
    files: list[Artifact] = field(default_factory=list)
    html: list[str] = field(default_factory=list)


class FaviconGenerator(Protocol):
    """Produces the whole artifact set for a resolved source in one call."""

    async def generate(self, source: InputSource, options: dict[str, Any]) -> GeneratorResponse: ...
