from __future__ import annotations

import logging

import pytest

from favicon_forge.output.report import BuildReport, get_platform, log_report, render_report
from favicon_forge.output.writer import WriteRecord


@pytest.mark.parametrize(
    "name,platform",
    [
        ("manifest.webmanifest", "Android/Chrome"),
        ("browserconfig.xml", "Windows Metro"),
        ("yandex-browser-manifest.json", "Yandex"),
        ("favicon.ico", "Unknown"),
    ],
)
def test_get_platform(name: str, platform: str) -> None:
    assert get_platform(name) == platform


def _report() -> BuildReport:
    return BuildReport(
        source_label="public/favicon.svg",
        path="icons/",
        image_records=[WriteRecord("a.png", 1.2), WriteRecord("b.png", 3.0)],
        file_records=[WriteRecord("manifest.webmanifest", 0.4)],
        total_seconds=0.25,
    )


def test_render_report_tree() -> None:
    lines = render_report(_report())

    assert lines[1] == "> public/favicon.svg"
    assert lines[2] == "  ├─ /icons/a.png (+1ms)"
    assert lines[3] == "  └─ /icons/b.png (+3ms)"
    assert lines[4] == "> Android/Chrome"
    assert lines[5] == "  └─ /icons/manifest.webmanifest (+0ms)"
    assert lines[-1] == "3 file(s) built in 0.25s"


def test_log_report_emits_every_line(caplog) -> None:
    report = _report()
    with caplog.at_level(logging.INFO, logger="favicon_forge.output.report"):
        log_report(report)

    assert [r.getMessage() for r in caplog.records] == render_report(report)
