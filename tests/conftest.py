from __future__ import annotations

import pytest

from favicon_forge.data.artifacts import Artifact, GeneratorResponse


class FakeGenerator:
    def __init__(self, response: GeneratorResponse | None = None) -> None:
        self.response = response or GeneratorResponse(
            images=[
                Artifact("favicon.ico", b"ico"),
                Artifact("android-chrome-192x192.png", b"png192"),
            ],
            files=[
                Artifact("manifest.webmanifest", b"{}"),
                Artifact("browserconfig.xml", b"<browserconfig/>"),
            ],
            html=['<link rel="icon" href="/favicon.ico">', '<link rel="manifest" href="/manifest.webmanifest">'],
        )
        self.calls: list[tuple[dict, dict]] = []

    async def generate(self, source, options):
        self.calls.append((source, options))
        return self.response


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def make_generator():
    return FakeGenerator
