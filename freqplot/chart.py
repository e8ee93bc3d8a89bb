"""Frequency-response chart built on matplotlib's object API.

This module provides a two-phase chart builder: every drawing call only
configures an in-memory matplotlib figure, and nothing touches the disk until
``present()`` writes the SVG and checks that it was written.

Key features:
  - Fixed-size drawing surface split into a chart region and a title strip
  - Logarithmic or linear axes with forced key points (tick positions)
  - Categorical palette colors per series with legend swatches
  - Deterministic SVG output (fixed hash salt, no date metadata)

Typical usage:

    chart = FrequencyChart(default_chart_config())
    chart.draw_title()
    chart.build_cartesian()
    chart.draw_mesh()
    for idx, name in enumerate(["A", "B"]):
        chart.draw_series(dataset[name], idx)
    chart.draw_legend()
    chart.present("logscale-sample.svg")

Google-style docstrings + PEP8.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import matplotlib
from matplotlib.axes import Axes
from matplotlib.backends.backend_svg import FigureCanvasSVG
from matplotlib.figure import Figure
from matplotlib.patches import Patch
from matplotlib.ticker import FixedLocator, FuncFormatter, NullLocator

from .models import Series
from .plot_models import AxisConfig, ChartConfig
from .utils import RGBA, mix, pick_color, px_to_points, to_plot_coords

PathLike = Union[str, Path]

# rc overrides active while serializing; a fixed salt keeps element ids stable
SVG_RC = {
    "svg.hashsalt": "freqplot",
    "svg.fonttype": "none",
}

CAPTION_LINE_SPACING = 1.6


class FrequencyChart:
    """Chart configured step by step and written once by ``present()``.

    Attributes:
        config: The chart configuration in use.
        dpi: Resolution used to map pixel sizes onto the figure.
    """

    def __init__(self, config: ChartConfig, dpi: float = 100.0) -> None:
        """Initialize the drawing surface.

        The surface is filled with the background color and split into the
        upper chart region and the lower title strip.

        Args:
            config: Chart configuration.
            dpi: Figure resolution. Pixel sizes in ``config`` are exact at
                any dpi.
        """
        self.config = config
        self.dpi = float(dpi)

        self._figure = Figure(
            figsize=(config.width / self.dpi, config.height / self.dpi),
            dpi=self.dpi,
            facecolor=config.background_color,
        )
        FigureCanvasSVG(self._figure)

        self._ax: Optional[Axes] = None
        self._handles: List[Patch] = []
        self._colors: Dict[str, RGBA] = {}
        self._presented = False

    # ------------------------------------------------------------------
    # Geometry helpers (figure fractions)
    # ------------------------------------------------------------------

    def _fx(self, px: float) -> float:
        return px / self.config.width

    def _fy(self, px: float) -> float:
        """Map a pixel offset from the top edge to a figure fraction."""
        return 1.0 - px / self.config.height

    def _pt(self, px: float) -> float:
        return px_to_points(px, self.dpi)

    def _ensure_open(self) -> None:
        if self._presented:
            raise RuntimeError("Chart has already been presented; build a new chart")

    def _require_axes(self) -> Axes:
        self._ensure_open()
        if self._ax is None:
            raise RuntimeError("build_cartesian() must be called before drawing on the chart")
        return self._ax

    # ------------------------------------------------------------------
    # Configure phase
    # ------------------------------------------------------------------

    def draw_title(self) -> None:
        """Render the title text centered in the lower strip."""
        self._ensure_open()
        cfg = self.config
        if not cfg.title or cfg.strip_height == 0:
            return
        self._figure.text(
            0.5,
            self._fy(cfg.split_at + cfg.strip_height / 2.0),
            cfg.title,
            ha="center",
            va="center",
            family=cfg.font,
            fontsize=self._pt(cfg.title_font_px),
            color=mix(cfg.foreground_color, cfg.title_alpha),
            gid="title",
        )

    def build_cartesian(self) -> Axes:
        """Place the Cartesian plotting area inside the chart region.

        Reserves the outer margin, the left and bottom label areas and the
        caption band, then applies both axis configurations.

        Returns:
            The matplotlib axes backing the chart.
        """
        self._ensure_open()
        if self._ax is not None:
            raise RuntimeError("Cartesian coordinates have already been built")

        cfg = self.config
        region_w = float(cfg.width)
        region_h = float(cfg.chart_height)
        margin_x = cfg.margin * region_w
        margin_y = cfg.margin * region_h
        caption_px = cfg.caption_height_ratio * region_h if cfg.caption else 0.0

        left = margin_x + cfg.left_label_area * region_w
        right = region_w - margin_x
        top = margin_y + caption_px * CAPTION_LINE_SPACING
        bottom = region_h - margin_y - cfg.bottom_label_area * region_h

        if right <= left or bottom <= top:
            raise ValueError("Label areas and margins leave no room for the plotting area")

        self._ax = self._figure.add_axes(
            (self._fx(left), self._fy(bottom), self._fx(right - left), (bottom - top) / cfg.height)
        )
        self._ax.set_facecolor(cfg.background_color)

        if cfg.caption:
            self._figure.text(
                self._fx((left + right) / 2.0),
                self._fy(margin_y + caption_px * CAPTION_LINE_SPACING / 2.0),
                cfg.caption,
                ha="center",
                va="center",
                family=cfg.font,
                fontsize=self._pt(caption_px),
                color=cfg.foreground_color,
                gid="caption",
            )

        self._configure_axis(self._ax.xaxis, cfg.x_axis, self._ax.set_xscale, self._ax.set_xlim)
        self._configure_axis(self._ax.yaxis, cfg.y_axis, self._ax.set_yscale, self._ax.set_ylim)
        return self._ax

    @staticmethod
    def _configure_axis(axis, axis_cfg: AxisConfig, set_scale, set_lim) -> None:
        set_scale("log" if axis_cfg.log_mode else "linear")
        set_lim(axis_cfg.range_min, axis_cfg.range_max)
        if axis_cfg.key_points:
            axis.set_major_locator(FixedLocator(list(axis_cfg.key_points)))
            axis.set_minor_locator(NullLocator())
            axis.set_major_formatter(FuncFormatter(lambda v, _pos: f"{v:g}"))

    def draw_mesh(self) -> None:
        """Draw grid lines and the axis descriptions."""
        ax = self._require_axes()
        cfg = self.config
        label_pt = self._pt(cfg.label_font_px)

        for name, axis_cfg in (("x", cfg.x_axis), ("y", cfg.y_axis)):
            if axis_cfg.grid:
                ax.grid(True, axis=name, which="major", color=cfg.foreground_color, alpha=0.2)
            else:
                ax.grid(False, axis=name)
        ax.set_axisbelow(True)
        ax.tick_params(labelsize=label_pt, colors=cfg.foreground_color)

        ax.set_xlabel(cfg.x_axis.label, family=cfg.font, fontsize=label_pt)
        ax.set_ylabel(cfg.y_axis.label, family=cfg.font, fontsize=label_pt)

    def draw_series(self, series: Series, index: int) -> RGBA:
        """Draw a series as a connected line and register its legend entry.

        Args:
            series: Series to draw. Samples are plotted in stored order with
                x = int(freq) and y = int(gain).
            index: Position in the enumeration order; selects the palette color.

        Returns:
            The RGBA color used for the series.

        Raises:
            ValueError: If the series name is already drawn, or an x value
                falls outside the domain of a logarithmic x-axis.
        """
        ax = self._require_axes()
        cfg = self.config
        if series.name in self._colors:
            raise ValueError(f"Series '{series.name}' has already been drawn")

        x, y = to_plot_coords(series.frequencies(), series.gains())
        if cfg.x_axis.log_mode and (x < 1).any():
            bad = series.frequencies()[x < 1]
            raise ValueError(
                f"Series '{series.name}' has frequencies outside the logarithmic axis "
                f"domain (integer value < 1): {bad.tolist()}"
            )

        color = mix(pick_color(index, cfg.trace.palette), cfg.trace.alpha)
        (line,) = ax.plot(
            x,
            y,
            color=color,
            linewidth=self._pt(cfg.trace.line_width),
            label=series.name,
        )
        line.set_gid(f"series-{series.name}")

        self._handles.append(Patch(facecolor=color, edgecolor=color, label=series.name))
        self._colors[series.name] = color
        return color

    def draw_legend(self) -> None:
        """Draw the legend box for all registered series."""
        ax = self._require_axes()
        if not self._handles:
            return
        legend_cfg = self.config.legend
        font_px = legend_cfg.font_px
        swatch_w, swatch_h = legend_cfg.swatch_px

        legend = ax.legend(
            handles=self._handles,
            loc=legend_cfg.location,
            frameon=True,
            fancybox=False,
            framealpha=1.0,
            edgecolor=legend_cfg.border_color,
            facecolor=legend_cfg.background,
            prop={"family": self.config.font, "size": self._pt(font_px)},
            handlelength=swatch_w / font_px,
            handleheight=swatch_h / font_px,
        )
        legend.set_gid("legend")

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def figure(self) -> Figure:
        return self._figure

    @property
    def series_colors(self) -> Dict[str, RGBA]:
        """Colors of drawn series keyed by name, in drawing order."""
        return dict(self._colors)

    @property
    def legend_labels(self) -> Tuple[str, ...]:
        return tuple(h.get_label() for h in self._handles)

    # ------------------------------------------------------------------
    # Render phase
    # ------------------------------------------------------------------

    def present(self, path: PathLike) -> Path:
        """Write the chart to ``path`` as SVG and verify the result.

        The parent directory must already exist. An existing file is
        overwritten.

        Args:
            path: Output file path.

        Returns:
            The output path.

        Raises:
            OSError: If the file cannot be written.
            RuntimeError: If the chart was already presented, or the file is
                missing or empty after writing.
        """
        self._ensure_open()
        out = Path(path)

        with matplotlib.rc_context({**SVG_RC, "font.family": self.config.font}):
            self._figure.savefig(
                out,
                format="svg",
                dpi=self.dpi,
                facecolor=self.config.background_color,
                metadata={"Date": None},
            )

        if not out.is_file() or out.stat().st_size == 0:
            raise RuntimeError(f"Unable to write result to {out}")

        self._presented = True
        return out
