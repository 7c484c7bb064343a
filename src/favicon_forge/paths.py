from __future__ import annotations

import re
from urllib.parse import urlparse

_WHITESPACE = re.compile(r"\s+")


def fix_out_path(path: str | None) -> str:
    """
    Turn a user supplied output path into a relative, slash-terminated path.

    - leading `/` and every `..` segment are dropped
    - whitespace runs become `/`, so "icons v2" is written to `icons/v2/`
    - an empty result means "write to the output root" and stays ""

    This is best-effort cleanup for build-time config, not a sandbox.
    """
    if not path:
        return ""

    path = _WHITESPACE.sub("/", path)
    segments = [s for s in path.split("/") if s and s != ".."]
    if not segments:
        return ""
    return "/".join(segments) + "/"


def normalize_path(prefix: str | None) -> str:
    """Like `fix_out_path`, but accepts a full URL and keeps only its path."""
    if not prefix:
        return ""

    parsed = urlparse(prefix)
    if parsed.scheme and parsed.netloc:
        prefix = parsed.path
    return fix_out_path(prefix)
