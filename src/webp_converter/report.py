"""Human-readable formatting of conversion outcomes and statistics."""

from __future__ import annotations

from pathlib import Path

from webp_converter.application.results import ConversionOutcome, DirectoryStatistics

_BYTES_PER_MB = 1024 * 1024


def reduction_percent(original_size: int, new_size: int) -> float:
    """Return the size reduction as a percentage of ``original_size``.

    Parameters
    ----------
    original_size : int
        Size before conversion, in bytes.
    new_size : int
        Size after conversion, in bytes.

    Returns
    -------
    float
        ``(original - new) / original * 100``; ``0.0`` when nothing was
        measured (``original_size == 0``). Negative when the output grew.
    """
    if original_size <= 0:
        return 0.0
    return (original_size - new_size) / original_size * 100


def format_megabytes(size: int) -> str:
    """Format a byte count as megabytes with two decimals."""
    return f"{size / _BYTES_PER_MB:.2f} MB"


def describe_outcome(name: str, outcome: ConversionOutcome) -> list[str]:
    """Build the per-file success lines."""
    savings = reduction_percent(outcome.original_size, outcome.new_size)
    return [
        f"✓ Converted: {name}",
        f"  Original: {format_megabytes(outcome.original_size)}",
        f"  New size: {format_megabytes(outcome.new_size)}",
        f"  Reduced by: {savings:.2f}%",
    ]


def format_summary(stats: DirectoryStatistics, output_dir: Path | None = None) -> list[str]:
    """Build the end-of-run summary block.

    Parameters
    ----------
    stats : DirectoryStatistics
        Aggregate for the whole pending tree.
    output_dir : Path | None, default=None
        Output root mentioned in the closing line, if given.

    Returns
    -------
    list[str]
        Summary lines, without trailing newlines.
    """
    overall = reduction_percent(stats.total_original_size, stats.total_new_size)
    lines = [
        "Conversion Summary:",
        f"Total files processed: {stats.total_files}",
        f"Successful conversions: {stats.successful_conversions}",
        f"Failed conversions: {stats.failed_conversions}",
        "",
        f"Total original size: {format_megabytes(stats.total_original_size)}",
        f"Total new size: {format_megabytes(stats.total_new_size)}",
        f"Overall reduction: {overall:.2f}%",
        "",
        "Files processed by format:",
    ]
    lines.extend(
        f"{extension}: {count} files" for extension, count in stats.format_counts.items()
    )
    if output_dir is not None:
        lines.append("")
        lines.append(f'Converted files are in the "{output_dir}" directory')
    return lines
