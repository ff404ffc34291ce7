"""Application-layer result objects and statistics aggregation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from webp_converter.types import FormatCounts


@dataclass(frozen=True)
class ConversionOutcome:
    """Structured outcome of one successful file conversion."""

    success: bool
    original_size: int
    new_size: int

    def __post_init__(self) -> None:
        if self.original_size < 0 or self.new_size < 0:
            raise ValueError("File sizes cannot be negative.")


def _freeze_counts(counts: Mapping[str, int]) -> FormatCounts:
    return MappingProxyType(dict(counts))


@dataclass(frozen=True)
class DirectoryStatistics:
    """Aggregated conversion statistics for a directory subtree.

    Byte totals only cover successful conversions, while ``total_files``
    counts every supported file that was attempted. Records compare by
    value but are unhashable, since ``format_counts`` is a mapping.
    """

    __hash__ = None  # type: ignore[assignment]

    total_files: int = 0
    successful_conversions: int = 0
    failed_conversions: int = 0
    total_original_size: int = 0
    total_new_size: int = 0
    format_counts: FormatCounts = field(default_factory=dict)

    def __post_init__(self) -> None:
        counters = (
            self.total_files,
            self.successful_conversions,
            self.failed_conversions,
            self.total_original_size,
            self.total_new_size,
        )
        if any(value < 0 for value in counters):
            raise ValueError("Statistics counters cannot be negative.")
        if self.total_files != self.successful_conversions + self.failed_conversions:
            raise ValueError(
                "total_files must equal successful_conversions + failed_conversions."
            )
        object.__setattr__(self, "format_counts", _freeze_counts(self.format_counts))

    @classmethod
    def empty(cls) -> DirectoryStatistics:
        """Return a zero-activity statistics record."""
        return cls()

    def record(
        self,
        extension: str,
        outcome: ConversionOutcome | None,
    ) -> DirectoryStatistics:
        """Fold one attempted file into a new statistics record.

        Parameters
        ----------
        extension : str
            Lower-case source extension used for the per-format breakdown.
        outcome : ConversionOutcome | None
            Conversion outcome, or ``None`` when the conversion failed.

        Returns
        -------
        DirectoryStatistics
            New record; ``self`` is left untouched.
        """
        converted = outcome is not None and outcome.success
        single = DirectoryStatistics(
            total_files=1,
            successful_conversions=1 if converted else 0,
            failed_conversions=0 if converted else 1,
            total_original_size=outcome.original_size if converted else 0,
            total_new_size=outcome.new_size if converted else 0,
            format_counts={extension: 1},
        )
        return merge_statistics(self, single)

    def merge(self, other: DirectoryStatistics) -> DirectoryStatistics:
        """Return ``merge_statistics(self, other)``."""
        return merge_statistics(self, other)

    def as_dict(self) -> dict[str, object]:
        """Return a plain-dict view, handy for JSON output and tests."""
        return {
            "total_files": self.total_files,
            "successful_conversions": self.successful_conversions,
            "failed_conversions": self.failed_conversions,
            "total_original_size": self.total_original_size,
            "total_new_size": self.total_new_size,
            "format_counts": dict(self.format_counts),
        }


def merge_statistics(
    parent: DirectoryStatistics,
    child: DirectoryStatistics,
) -> DirectoryStatistics:
    """Combine two self-contained statistics records.

    Counters add, and format counts are summed per extension. Neither input
    is modified, so the fold gives the same totals in any order.
    """
    counts: dict[str, int] = dict(parent.format_counts)
    for extension, count in child.format_counts.items():
        counts[extension] = counts.get(extension, 0) + count
    return DirectoryStatistics(
        total_files=parent.total_files + child.total_files,
        successful_conversions=parent.successful_conversions
        + child.successful_conversions,
        failed_conversions=parent.failed_conversions + child.failed_conversions,
        total_original_size=parent.total_original_size + child.total_original_size,
        total_new_size=parent.total_new_size + child.total_new_size,
        format_counts=counts,
    )
