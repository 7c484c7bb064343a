from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from favicon_forge.api.main import _resolve_inside, create_app
from favicon_forge.mime import mime


@pytest.fixture
def output_dir(tmp_path):
    (tmp_path / "favicon.ico").write_bytes(b"ico")
    (tmp_path / "manifest.webmanifest").write_text("{}", encoding="utf-8")
    (tmp_path / "icons").mkdir()
    (tmp_path / "icons" / "logo.svg").write_text("<svg/>", encoding="utf-8")
    return tmp_path


def test_health(output_dir) -> None:
    client = TestClient(create_app(output_dir))
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["ok"] is True


@pytest.mark.parametrize(
    "url,content_type",
    [
        ("/favicon.ico", "image/x-icon"),
        ("/manifest.webmanifest", "application/manifest+json"),
        ("/icons/logo.svg", "image/svg+xml"),
    ],
)
def test_serves_generated_files(output_dir, url: str, content_type: str) -> None:
    client = TestClient(create_app(output_dir))
    response = client.get(url)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith(content_type)


def test_missing_file_is_404(output_dir) -> None:
    client = TestClient(create_app(output_dir))
    assert client.get("/nope.png").status_code == 404
    assert client.get("/icons").status_code == 404


def test_resolve_inside_refuses_escape(output_dir) -> None:
    root = output_dir.resolve()
    assert _resolve_inside(root, "icons/logo.svg") == root / "icons" / "logo.svg"
    assert _resolve_inside(root, "../outside.txt") is None


@pytest.mark.parametrize(
    "name,expected",
    [
        ("favicon.ico", "image/x-icon"),
        ("A.PNG", "image/png"),
        ("browserconfig.xml", "application/xml"),
        ("yandex-browser-manifest.json", "application/json"),
        ("README", "application/octet-stream"),
    ],
)
def test_mime(name: str, expected: str) -> None:
    assert mime(name) == expected
