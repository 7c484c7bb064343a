from __future__ import annotations

from pathlib import PurePosixPath

CONTENT_TYPES = {
    "ico": "image/x-icon",
    "png": "image/png",
    "svg": "image/svg+xml",
    "json": "application/json",
    "xml": "application/xml",
    "webmanifest": "application/manifest+json",
}


def mime(file_name: str) -> str:
    ext = PurePosixPath(file_name).suffix.lower().lstrip(".")
    return CONTENT_TYPES.get(ext, "application/octet-stream")
