from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from favicon_forge.data.platforms import DEFAULT_SOURCE, InputSource, Platform, Source

_BLOB_TYPES = (bytes, bytearray)


def is_source(value: Any) -> bool:
    if isinstance(value, (str, *_BLOB_TYPES)):
        return True
    if isinstance(value, (list, tuple)):
        return all(isinstance(item, (str, *_BLOB_TYPES)) for item in value)
    return False


def _union_source(partial: Mapping[Any, Any]) -> list[Any]:
    union: list[Any] = []
    for value in partial.values():
        if value is None:
            continue
        items = value if isinstance(value, (list, tuple)) else [value]
        for item in items:
            # bytearray is unhashable, so dedupe by equality
            if item not in union:
                union.append(item)
    return union


def resolve_input(value: Source | Mapping[Any, Any] | None) -> InputSource:
    """
    Build a source for every platform.

    - nothing given: every platform uses DEFAULT_SOURCE
    - a single source: every platform shares it
    - a per-platform mapping: missing platforms fall back to the union of the
      sources that were given (a single value when the union has one element,
      an empty list when nothing was given)

    Never raises; shapes that are not a source are read as a mapping.
    """
    if value is None:
        return {platform: DEFAULT_SOURCE for platform in Platform}

    if is_source(value):
        return {platform: value for platform in Platform}

    partial: Mapping[Any, Any] = value if isinstance(value, Mapping) else {}
    union = _union_source(partial)
    fallback: Source = union[0] if len(union) == 1 else union

    result: InputSource = {}
    for platform in Platform:
        given = partial.get(platform.value)
        result[platform] = given if given is not None else fallback
    return result


def source_label(value: Any) -> str:
    if value is None:
        return str(DEFAULT_SOURCE)
    if isinstance(value, str):
        return value[2:] if value.startswith("./") else value
    if isinstance(value, _BLOB_TYPES):
        return f"<{len(value)} bytes>"
    if isinstance(value, (list, tuple)):
        return ", ".join(source_label(item) for item in value)
    if isinstance(value, Mapping):
        return ", ".join(f"{k}: {source_label(v)}" for k, v in value.items() if v is not None)
    return repr(value)
