from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from favicon_forge.config import FaviconOptions, settings
from favicon_forge.data.artifacts import FaviconGenerator
from favicon_forge.data.platforms import Source
from favicon_forge.inputs import resolve_input, source_label
from favicon_forge.output.report import BuildReport, log_report
from favicon_forge.output.writer import write_artifacts
from favicon_forge.paths import fix_out_path

logger = logging.getLogger(__name__)


async def create_files(
    icons: Source | Mapping[Any, Any] | None,
    dist: str | Path,
    options: FaviconOptions | None,
    generator: FaviconGenerator,
) -> BuildReport:
    """
    Generate favicons and write them under `dist/<options.path>`.

    Images are written as one concurrent batch, then manifests/config files as
    a second. Any failure is raised as is; nothing written before it is
    removed, so the output directory may be incomplete.

    `icons=None` uses `settings.source`; `options=None` is built from settings.
    """
    start = time.perf_counter()
    if icons is None:
        icons = settings.source
    if options is None:
        options = FaviconOptions.from_settings(settings)

    source = resolve_input(icons)
    out_path = fix_out_path(options.path or "/")
    dest = Path(dist) / out_path

    logger.info("Parsing options...")
    response = await generator.generate(source, options.to_generator_options())

    image_records = await write_artifacts(response.images, dest)
    file_records = await write_artifacts(response.files, dest)

    report = BuildReport(
        source_label=source_label(icons),
        path=out_path,
        image_records=image_records,
        file_records=file_records,
        total_seconds=round(time.perf_counter() - start, 3),
    )
    log_report(report)
    logger.info("Complete!")
    return report
