from .models import (
    Color,
    Sample,
    Series,
    Dataset,
)

from .plot_models import (
    OUT_FILE_NAME,
    FONT,
    AxisConfig,
    TraceStyle,
    LegendConfig,
    ChartConfig,
    default_chart_config,
)

from .data import DataProvider, stub_dataset
from .chart import FrequencyChart
from .runner import run, main

__all__ = [
    "Color",
    "Sample",
    "Series",
    "Dataset",
    # Chart configuration
    "OUT_FILE_NAME",
    "FONT",
    "AxisConfig",
    "TraceStyle",
    "LegendConfig",
    "ChartConfig",
    "default_chart_config",
    # Data providers
    "DataProvider",
    "stub_dataset",
    # Rendering
    "FrequencyChart",
    "run",
    "main",
]
