"""Data models for frequency-response datasets.

Provides frozen dataclasses for samples and named series plus an ordered,
read-only dataset container keyed by series name.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Mapping, Tuple, Union

import numpy as np

# Color type: matplotlib color names, "#RRGGBB", or RGB(A) float tuples in [0, 1]
Color = Union[str, Tuple[float, float, float], Tuple[float, float, float, float]]


@dataclass(frozen=True)
class Sample:
    """One frequency-response measurement.

    Attributes:
        freq: Frequency in Hz. Must be positive (plotted on a log axis).
        gain: Gain value plotted on the linear y-axis.
        phase: Phase value. Carried with the sample but never rendered.
    """

    freq: float
    gain: float
    phase: float = 0.0

    def __post_init__(self) -> None:
        freq = _as_float("frequency", self.freq)
        gain = _as_float("gain", self.gain)
        phase = _as_float("phase", self.phase)
        if not math.isfinite(freq) or freq <= 0.0:
            raise ValueError(
                f"Sample frequency must be a finite value > 0 for a logarithmic "
                f"axis, got {self.freq!r}"
            )
        if not math.isfinite(gain):
            raise ValueError(f"Sample gain must be finite, got {self.gain!r}")
        object.__setattr__(self, "freq", freq)
        object.__setattr__(self, "gain", gain)
        object.__setattr__(self, "phase", phase)


def _as_float(field_name: str, value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise TypeError(f"Sample {field_name} must be a number, got {value!r}") from e


@dataclass(frozen=True)
class Series:
    """A named, ordered sequence of samples plotted as one connected line."""

    name: str
    samples: Tuple[Sample, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Series name must be a non-empty string, got {self.name!r}")
        # Accept any iterable; store as tuple for immutability
        object.__setattr__(self, "samples", tuple(self.samples))
        if len(self.samples) == 0:
            raise ValueError(f"Series '{self.name}' must contain at least one sample")
        for s in self.samples:
            if not isinstance(s, Sample):
                raise TypeError(f"Series '{self.name}' expects Sample items, got {type(s)}")

    def __len__(self) -> int:
        return len(self.samples)

    def frequencies(self) -> np.ndarray:
        return np.array([s.freq for s in self.samples], dtype=np.float64)

    def gains(self) -> np.ndarray:
        return np.array([s.gain for s in self.samples], dtype=np.float64)

    def phases(self) -> np.ndarray:
        return np.array([s.phase for s in self.samples], dtype=np.float64)


class Dataset(Mapping[str, Series]):
    """Read-only mapping of series name -> Series, in insertion order.

    Series names double as data keys and legend labels, so they must be
    unique.
    """

    def __init__(self, series: Iterable[Series] = ()) -> None:
        self._series: Dict[str, Series] = {}
        for s in series:
            if s.name in self._series:
                raise ValueError(f"Duplicate series name: '{s.name}'")
            self._series[s.name] = s

    @classmethod
    def from_series(cls, *series: Series) -> "Dataset":
        return cls(series)

    @classmethod
    def from_points(
        cls, points: Mapping[str, Iterable[Tuple[float, float, float]]]
    ) -> "Dataset":
        """Build a dataset from ``{name: [(freq, gain, phase), ...]}``.

        Args:
            points: Mapping of series name to (freq, gain, phase) triples.

        Returns:
            Dataset with one series per mapping entry, in mapping order.
        """
        return cls(
            Series(name, tuple(Sample(*p) for p in rows)) for name, rows in points.items()
        )

    def __getitem__(self, name: str) -> Series:
        try:
            return self._series[name]
        except KeyError:
            raise KeyError(f"Unknown series: '{name}'") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._series)

    def __len__(self) -> int:
        return len(self._series)

    def __repr__(self) -> str:
        return f"Dataset({list(self._series)!r})"
