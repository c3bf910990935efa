from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import numpy as np


class InvalidInput(ValueError):
    """Raised when germination data cannot produce a well-defined PSRI."""


def _as_series(values, name: str) -> np.ndarray:
    try:
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{name} must be a sequence of numbers") from exc

    if arr.ndim != 1:
        raise InvalidInput(f"{name} must be one-dimensional, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidInput(f"{name} contains non-finite values")
    return arr


def validate_total_seeds(total_seeds) -> float:
    try:
        total = float(total_seeds)
    except (TypeError, ValueError) as exc:
        raise InvalidInput("total_seeds must be a number") from exc
    if not math.isfinite(total) or total <= 0:
        raise InvalidInput(f"total_seeds must be > 0, got {total_seeds!r}")
    return total


def validate_series(
    germination_counts: Sequence[float],
    time_points: Sequence[float],
    diseased_counts: Optional[Sequence[float]] = None,
) -> Tuple[np.ndarray, np.ndarray, Optional[np.ndarray]]:
    counts = _as_series(germination_counts, "germination_counts")
    times = _as_series(time_points, "time_points")

    if counts.size != times.size:
        raise InvalidInput(
            f"germination_counts and time_points differ in length: {counts.size} vs {times.size}"
        )
    if counts.size < 2:
        raise InvalidInput("at least two observations are required")
    if np.any(counts < 0):
        raise InvalidInput("germination_counts must be non-negative")
    if np.any(times < 0):
        raise InvalidInput("time_points must be non-negative")
    if np.any(np.diff(times) <= 0):
        raise InvalidInput("time_points must be strictly increasing")

    diseased = None
    if diseased_counts is not None:
        diseased = _as_series(diseased_counts, "diseased_counts")
        if diseased.size != counts.size:
            raise InvalidInput(
                f"diseased_counts must match germination_counts in length: {diseased.size} vs {counts.size}"
            )
        if np.any(diseased < 0):
            raise InvalidInput("diseased_counts must be non-negative")

    return counts, times, diseased


def check_final_germinated(final_germinated: float, total_seeds: float) -> None:
    if final_germinated > total_seeds:
        raise InvalidInput(
            f"final germinated count {final_germinated:g} exceeds total_seeds {total_seeds:g}"
        )
