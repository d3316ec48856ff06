"""PR size categorization utilities."""

import math
from dataclasses import dataclass
from logging import getLogger

logger = getLogger(__name__)


@dataclass(frozen=True)
class SizeThreshold:
    """Upper bounds (inclusive) for a size label."""

    label: str
    max_files: float
    max_lines: float

    def matches(self, files_changed: int, lines_changed: int) -> bool:
        return files_changed <= self.max_files and lines_changed <= self.max_lines


# Order defines precedence; the last entry is unbounded so every input matches.
SIZE_THRESHOLDS: tuple[SizeThreshold, ...] = (
    SizeThreshold("tiny", max_files=4, max_lines=9),
    SizeThreshold("small", max_files=9, max_lines=49),
    SizeThreshold("medium", max_files=9, max_lines=249),
    SizeThreshold("large", max_files=math.inf, max_lines=math.inf),
)

SIZE_LABELS: tuple[str, ...] = tuple(threshold.label for threshold in SIZE_THRESHOLDS)


def classify_pr_size(files_changed: int, lines_changed: int) -> str:
    """Categorize PR size based on files and lines changed.

    Args:
        files_changed: Number of files changed in the pull request
        lines_changed: Number of lines added plus lines deleted

    Returns:
        The label of the first threshold both counts fit under

    Raises:
        ValueError: If either count is negative

    Size Categories:
        - "tiny": at most 4 files and 9 lines
        - "small": at most 9 files and 49 lines
        - "medium": at most 9 files and 249 lines
        - "large": everything else
    """
    if files_changed < 0 or lines_changed < 0:
        raise ValueError(f"Change counts must be non-negative (files={files_changed}, lines={lines_changed})")

    for threshold in SIZE_THRESHOLDS:
        if threshold.matches(files_changed, lines_changed):
            logger.debug(f"{files_changed} files / {lines_changed} lines classified as {threshold.label}")
            return threshold.label

    # Unreachable while the final threshold is unbounded
    raise RuntimeError("Size threshold table has no unbounded entry")


def is_size_label(name: str) -> bool:
    """Return True if the name is one of the known size labels."""
    return name in SIZE_LABELS
