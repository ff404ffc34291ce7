"""Unit tests for report formatting."""

from __future__ import annotations

from pathlib import Path

import pytest

from webp_converter.application.results import ConversionOutcome, DirectoryStatistics
from webp_converter.report import (
    describe_outcome,
    format_megabytes,
    format_summary,
    reduction_percent,
)


def test_reduction_percent_basic() -> None:
    """Ensure 1000 -> 400 bytes reports a 60.00% reduction."""
    assert f"{reduction_percent(1000, 400):.2f}" == "60.00"


def test_reduction_percent_zero_original() -> None:
    """Ensure an empty original reports 0% without raising."""
    assert reduction_percent(0, 0) == 0.0
    assert reduction_percent(0, 123) == 0.0


def test_reduction_percent_growth_is_negative() -> None:
    """Ensure outputs larger than inputs report a negative reduction."""
    assert reduction_percent(100, 150) == pytest.approx(-50.0)


def test_format_megabytes() -> None:
    """Ensure byte counts render as megabytes with two decimals."""
    assert format_megabytes(0) == "0.00 MB"
    assert format_megabytes(1024 * 1024 * 3 // 2) == "1.50 MB"


def test_describe_outcome_lines() -> None:
    """Ensure per-file lines carry name, sizes and reduction."""
    lines = describe_outcome("cat.png", ConversionOutcome(True, 1000, 400))
    assert lines[0] == "✓ Converted: cat.png"
    assert lines[-1] == "  Reduced by: 60.00%"


def test_format_summary_empty_run() -> None:
    """Ensure an empty run summarizes without division errors."""
    lines = format_summary(DirectoryStatistics.empty(), Path("converted"))
    assert "Total files processed: 0" in lines
    assert "Overall reduction: 0.00%" in lines
    assert lines[-1] == 'Converted files are in the "converted" directory'


def test_format_summary_lists_formats() -> None:
    """Ensure the per-extension breakdown is included."""
    stats = DirectoryStatistics(
        total_files=3,
        successful_conversions=2,
        failed_conversions=1,
        total_original_size=1000,
        total_new_size=400,
        format_counts={".png": 2, ".gif": 1},
    )
    lines = format_summary(stats)
    assert "Failed conversions: 1" in lines
    assert "Overall reduction: 60.00%" in lines
    assert ".png: 2 files" in lines
    assert ".gif: 1 files" in lines
    assert not any("Converted files are in" in line for line in lines)
