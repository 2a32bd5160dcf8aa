"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from link_updater.domain.models import ReplacementTarget

CSS_URL = "https://cdn.example.com/style.css"
JS_URL = "https://cdn.example.com/script.js"

MATCHING_HTML = (
    "<html><head>\n"
    '<link rel="stylesheet" href="/assets/doki-docs.css">\n'
    "</head><body>\n"
    '<script src="./js/doki-docs.js"></script>\n'
    "</body></html>\n"
)

PLAIN_HTML = "<html><head><title>plain</title></head><body></body></html>\n"


class RecordingReporter:
    """Collects status events instead of printing them."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Path, str | None]] = []

    def file_updated(self, path: Path) -> None:
        self.events.append(("updated", path, None))

    def file_skipped(self, path: Path) -> None:
        self.events.append(("skipped", path, None))

    def file_failed(self, path: Path, message: str) -> None:
        self.events.append(("failed", path, message))

    def directory_failed(self, path: Path, message: str) -> None:
        self.events.append(("directory_failed", path, message))

    def kinds(self) -> list[str]:
        return [kind for kind, _, _ in self.events]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def target() -> ReplacementTarget:
    return ReplacementTarget(stylesheet_url=CSS_URL, script_url=JS_URL)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
