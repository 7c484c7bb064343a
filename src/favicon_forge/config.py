from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FAVICON_", env_file=".env", extra="ignore")

    source: str = "public/favicon.svg"  # used when a build is started without an icon source
    output_dir: Path = Path("dist")
    path: str = "/"  # sub-path under output_dir, also used as the href prefix
    compress_html: bool = True  # False = commented, one tag per line
    app_name: str = "Welcome to Favicon Forge."
    app_short_name: str = "Favicon Forge"
    app_description: str = "A multi-platform favicon generator for static sites."
    dark_mode: bool = True


def _default_icons() -> dict[str, Any]:
    return {
        "android": ["android-chrome-192x192.png", "android-chrome-512x512.png"],
        "appleIcon": [{"name": "apple-touch-icon.png", "offset": 11.5}],
        "appleStartup": False,
        "favicons": True,
        "windows": ["mstile-150x150.png"],
        "yandex": True,
        "safari": True,
    }


@dataclass
class FaviconOptions:
    path: str = "/"
    app_name: str = "Welcome to Favicon Forge."
    app_short_name: str = "Favicon Forge"
    app_description: str = "A multi-platform favicon generator for static sites."
    favicons_dark_mode: bool = True
    icons: dict[str, Any] = field(default_factory=_default_icons)

    @classmethod
    def from_settings(cls, s: Settings) -> "FaviconOptions":
        return cls(
            path=s.path,
            app_name=s.app_name,
            app_short_name=s.app_short_name,
            app_description=s.app_description,
            favicons_dark_mode=s.dark_mode,
        )

    def to_generator_options(self) -> dict[str, Any]:
        # the generator speaks camelCase
        return {
            "path": self.path,
            "appName": self.app_name,
            "appShortName": self.app_short_name,
            "appDescription": self.app_description,
            "faviconsDarkMode": self.favicons_dark_mode,
            "icons": dict(self.icons),
        }


settings = Settings()
