from __future__ import annotations

import logging
from dataclasses import dataclass, field

from favicon_forge.output.writer import WriteRecord

logger = logging.getLogger(__name__)

PLATFORM_MARKERS = (
    ("manifest.webmanifest", "Android/Chrome"),
    ("browserconfig.xml", "Windows Metro"),
    ("yandex-browser-manifest.json", "Yandex"),
)


def get_platform(file_name: str) -> str:
    for marker, platform in PLATFORM_MARKERS:
        if marker in file_name:
            return platform
    return "Unknown"


@dataclass
class BuildReport:
    source_label: str
    path: str  # normalized output sub-path, "" for the output root
    image_records: list[WriteRecord] = field(default_factory=list)
    file_records: list[WriteRecord] = field(default_factory=list)
    total_seconds: float = 0.0

    @property
    def total_files(self) -> int:
        return len(self.image_records) + len(self.file_records)


def _entry(report: BuildReport, record: WriteRecord) -> str:
    return f"/{report.path}{record.artifact_name} (+{record.elapsed_ms:.0f}ms)"


def render_report(report: BuildReport) -> list[str]:
    lines = ["generating favicons", f"> {report.source_label}"]

    last = len(report.image_records) - 1
    for idx, record in enumerate(report.image_records):
        symbol = "└─" if idx == last else "├─"
        lines.append(f"  {symbol} {_entry(report, record)}")

    for record in report.file_records:
        lines.append(f"> {get_platform(record.artifact_name)}")
        lines.append(f"  └─ {_entry(report, record)}")

    lines.append(f"Completed in {report.total_seconds}s.")
    lines.append(f"{report.total_files} file(s) built in {report.total_seconds}s")
    return lines


def log_report(report: BuildReport, log: logging.Logger | None = None) -> None:
    log = log or logger
    for line in render_report(report):
        log.info(line)
