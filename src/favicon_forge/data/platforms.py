from __future__ import annotations

from enum import Enum
from typing import Sequence, Union

Source = Union[str, bytes, Sequence[Union[str, bytes]]]


class Platform(str, Enum):
    FAVICONS = "favicons"
    ANDROID = "android"
    APPLE_ICON = "appleIcon"
    APPLE_STARTUP = "appleStartup"
    WINDOWS = "windows"
    YANDEX = "yandex"


# Every key of Platform is always present.
InputSource = dict[Platform, Source]

DEFAULT_SOURCE: Source = "public/favicon.svg"
