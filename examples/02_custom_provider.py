"""Custom data provider and configuration.

Shows how to plot your own series: a provider returns a ``Dataset`` and the
chart configuration is adjusted with ``dataclasses.replace``. Here a simple
first-order low-pass and high-pass response are plotted as gain in percent.
"""

import dataclasses
import sys

import numpy as np

from freqplot import Dataset, Sample, Series, default_chart_config, run


def filter_responses(cutoff_hz=300.0, n=40):
    """Return low-pass and high-pass magnitude responses (0..100 %)."""
    freqs = np.logspace(0, 4, n)
    ratio = freqs / cutoff_hz
    lowpass = 100.0 / np.sqrt(1.0 + ratio ** 2)
    highpass = 100.0 * ratio / np.sqrt(1.0 + ratio ** 2)
    phase_lp = -np.degrees(np.arctan(ratio))
    phase_hp = 90.0 + phase_lp

    return Dataset.from_series(
        Series("low-pass", tuple(Sample(f, g, p) for f, g, p in zip(freqs, lowpass, phase_lp))),
        Series("high-pass", tuple(Sample(f, g, p) for f, g, p in zip(freqs, highpass, phase_hp))),
    )


def main():
    """Render the filter responses to ``filter-response.svg``."""
    config = dataclasses.replace(
        default_chart_config(),
        title="first-order filters, fc = 300 Hz",
        series_order=None,  # plot in dataset order
    )
    try:
        run("filter-response.svg", provider=filter_responses, config=config)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
