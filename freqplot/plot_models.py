"""Data models for chart configuration.

Provides frozen dataclasses for configuring the drawing surface, axes, traces
and legend. Similar pattern to models.py for consistency.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .models import Color

OUT_FILE_NAME = "logscale-sample.svg"
FONT = "sans-serif"


@dataclass(frozen=True)
class AxisConfig:
    """Configuration for one chart axis.

    ``key_points`` are forced tick positions; the automatic tick locator is
    replaced entirely when they are given.
    """

    label: str = ""
    log_mode: bool = False
    range_min: float = 0.0
    range_max: float = 1.0
    key_points: Tuple[float, ...] = ()
    grid: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "key_points", tuple(self.key_points))
        if self.range_min >= self.range_max:
            raise ValueError(
                f"Axis range must satisfy min < max, got [{self.range_min}, {self.range_max}]"
            )
        if self.log_mode and self.range_min <= 0:
            raise ValueError(
                f"Logarithmic axis range must be positive, got min={self.range_min}"
            )
        if self.log_mode and any(k <= 0 for k in self.key_points):
            raise ValueError("Logarithmic axis key points must be positive")


@dataclass(frozen=True)
class TraceStyle:
    """Styling configuration for a line trace."""

    alpha: float = 0.9  # Mix factor applied to the palette color
    line_width: float = 3.0
    palette: str = "tab10"  # Categorical matplotlib colormap


@dataclass(frozen=True)
class LegendConfig:
    """Configuration for the series legend box."""

    border_color: Color = "black"
    swatch_px: Tuple[int, int] = (10, 10)  # Filled rectangle width, height
    background: Color = "white"
    location: str = "best"  # Let matplotlib place the box
    font_px: float = 14.0


@dataclass(frozen=True)
class ChartConfig:
    """Overall chart configuration.

    Sizes are in pixels; relative sizes are fractions (0.08 == 8 %).
    """

    width: int = 1024
    height: int = 768
    split_at: int = 750  # Upper chart region height; the rest is the title strip
    background_color: Color = "white"
    foreground_color: Color = "black"
    font: str = FONT
    title: str = ""
    title_font_px: float = 10.0
    title_alpha: float = 0.5
    label_font_px: float = 14.0  # Tick labels and axis descriptions
    caption: str = ""
    caption_height_ratio: float = 0.05  # Relative to the chart region height
    left_label_area: float = 0.08
    bottom_label_area: float = 0.04
    margin: float = 0.01
    x_axis: AxisConfig = field(default_factory=AxisConfig)
    y_axis: AxisConfig = field(default_factory=AxisConfig)
    trace: TraceStyle = field(default_factory=TraceStyle)
    legend: LegendConfig = field(default_factory=LegendConfig)
    series_order: Optional[Tuple[str, ...]] = None  # None: dataset order

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Surface size must be positive, got {self.width}x{self.height}")
        if not 0 < self.split_at <= self.height:
            raise ValueError(
                f"split_at must be within (0, {self.height}], got {self.split_at}"
            )
        if self.series_order is not None:
            object.__setattr__(self, "series_order", tuple(self.series_order))

    @property
    def chart_height(self) -> int:
        return self.split_at

    @property
    def strip_height(self) -> int:
        return self.height - self.split_at


def default_chart_config() -> ChartConfig:
    """Return the stock log-scale frequency-response chart configuration."""
    return ChartConfig(
        title="log-scale sample",
        caption="FREQUENCY RESPONSE",
        x_axis=AxisConfig(
            label="freq [Hz]",
            log_mode=True,
            range_min=1,
            range_max=10_000,
            key_points=(1, 10, 100, 1000, 10_000),
        ),
        y_axis=AxisConfig(
            label="gain [dB]",
            range_min=0,
            range_max=100,
            key_points=(0, 20, 40, 60, 80, 100),
        ),
        series_order=("A", "B"),
    )
