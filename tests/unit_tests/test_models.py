"""Unit tests for run statistics bookkeeping."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from link_updater.domain.models import FileOutcome, ReplacementTarget, RunStatistics


def test_with_outcome_classifies_each_result() -> None:
    """Every outcome lands in exactly one bucket."""
    page = Path("page.html")
    stats = (
        RunStatistics()
        .with_outcome(FileOutcome.updated(page, 2))
        .with_outcome(FileOutcome.unchanged(page))
        .with_outcome(FileOutcome.failed(page, "denied"))
        .with_outcome(FileOutcome.unchanged(page))
    )

    assert stats == RunStatistics(
        files_processed=4, files_updated=1, files_skipped=2, files_errored=1
    )
    assert stats.is_consistent


def test_addition_sums_every_counter() -> None:
    """Folding child statistics adds field by field."""
    parent = RunStatistics(files_processed=2, files_updated=1, files_skipped=1)
    child = RunStatistics(files_processed=3, files_skipped=1, files_errored=2)

    assert parent + child == RunStatistics(
        files_processed=5, files_updated=1, files_skipped=2, files_errored=2
    )


def test_directory_error_counts_only_errors() -> None:
    stats = RunStatistics().with_directory_error()

    assert stats == RunStatistics(files_errored=1)
    assert stats.has_errors
    assert not stats.has_updates
    assert not stats.is_consistent


def test_directory_error_breaks_balance_only_by_that_error() -> None:
    """Files still balance; only the unlisted directory is extra."""
    page = Path("page.html")
    stats = (
        RunStatistics()
        .with_outcome(FileOutcome.updated(page, 1))
        .with_outcome(FileOutcome.unchanged(page))
        .with_directory_error()
    )

    assert not stats.is_consistent
    assert stats.files_processed + 1 == (
        stats.files_updated + stats.files_skipped + stats.files_errored
    )


def test_models_are_immutable() -> None:
    target = ReplacementTarget(stylesheet_url="https://a/x.css", script_url="https://a/x.js")

    with pytest.raises(dataclasses.FrozenInstanceError):
        target.script_url = "https://b/y.js"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        RunStatistics().files_updated = 3  # type: ignore[misc]


def test_failed_outcome_carries_message() -> None:
    outcome = FileOutcome.failed(Path("x.html"), "No such file")

    assert not outcome.succeeded
    assert not outcome.changed
    assert outcome.error_message == "No such file"
    assert outcome.replacements == 0
