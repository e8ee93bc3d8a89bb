"""Log-scale frequency-response example pipeline.

``run()`` builds the chart for a dataset, writes it and reports the output
path. ``main()`` is the process entry point.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

from .chart import FrequencyChart
from .data import DataProvider, stub_dataset
from .plot_models import OUT_FILE_NAME, ChartConfig, default_chart_config


def run(
    output_path: Union[str, Path] = OUT_FILE_NAME,
    provider: DataProvider = stub_dataset,
    config: Optional[ChartConfig] = None,
) -> Path:
    """Render the frequency-response chart to an SVG file.

    Args:
        output_path: Destination file. Its directory must exist; an existing
            file is overwritten.
        provider: Zero-argument callable returning the dataset to plot.
        config: Chart configuration. Defaults to ``default_chart_config()``.

    Returns:
        Path of the written file.

    Raises:
        KeyError: If ``config.series_order`` names a series the dataset lacks.
        ValueError: If a series cannot be placed on the configured axes.
        OSError: If the output file cannot be written.
    """
    if config is None:
        config = default_chart_config()

    data = provider()
    order = config.series_order if config.series_order is not None else tuple(data)

    chart = FrequencyChart(config)
    chart.draw_title()
    chart.build_cartesian()
    chart.draw_mesh()

    for idx, name in enumerate(order):
        chart.draw_series(data[name], idx)

    chart.draw_legend()

    out = chart.present(output_path)
    print(f"Result has been saved to {out}")
    return out


def main() -> int:
    """Run the example with defaults and return a process exit code."""
    try:
        run()
    except (OSError, ValueError, KeyError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
