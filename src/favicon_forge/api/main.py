from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse

from favicon_forge import __version__
from favicon_forge.config import settings
from favicon_forge.mime import mime
from favicon_forge.paths import fix_out_path

logger = logging.getLogger(__name__)


def _default_output_dir() -> Path:
    return Path(settings.output_dir) / fix_out_path(settings.path)


def _resolve_inside(root: Path, file_path: str) -> Path | None:
    # fix_out_path is only cleanup; containment is checked here.
    candidate = (root / file_path).resolve()
    if not candidate.is_relative_to(root):
        return None
    return candidate


def create_app(output_dir: str | Path | None = None) -> FastAPI:
    app = FastAPI(title="Favicon Forge", version=__version__)
    root = Path(output_dir if output_dir is not None else _default_output_dir()).resolve()
    app.state.output_dir = root

    @app.get("/health")
    def health() -> dict:
        return {"ok": True, "service": "favicon-forge"}

    @app.get("/{file_path:path}", include_in_schema=False)
    def generated_file(file_path: str):
        target = _resolve_inside(root, file_path)
        if target is None:
            logger.warning("refused path outside output dir: %s", file_path)
            raise HTTPException(status_code=404, detail="not found")
        if not target.is_file():
            raise HTTPException(status_code=404, detail="not found")
        return FileResponse(target, media_type=mime(target.name))

    return app


app = create_app()
