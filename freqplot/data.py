"""Dataset providers.

A provider is any zero-argument callable returning a :class:`Dataset`.
"""

from __future__ import annotations

from typing import Callable

from .models import Dataset, Sample, Series

DataProvider = Callable[[], Dataset]


def stub_dataset() -> Dataset:
    """Return the hard-coded two-series sample dataset."""
    return Dataset.from_series(
        Series(
            "A",
            (
                Sample(1.0, 1.0, 1.0),
                Sample(10.0, 10.0, 10.0),
                Sample(10_000.0, 100.0, 100.0),
            ),
        ),
        Series(
            "B",
            (
                Sample(1.0, 1.0, 1.0),
                Sample(20.0, 20.0, 20.0),
                Sample(10_000.0, 100.0, 100.0),
            ),
        ),
    )
