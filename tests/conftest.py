"""Shared pytest fixtures.

Charts are rendered through matplotlib's SVG canvas directly, so no GUI
backend or display is needed. Every test that writes a chart gets its own
temporary output path.
"""

import xml.etree.ElementTree as ET

import pytest

from freqplot import Dataset, default_chart_config, stub_dataset


@pytest.fixture
def config():
    """Stock log-scale chart configuration."""
    return default_chart_config()


@pytest.fixture
def dataset() -> Dataset:
    """The hard-coded A/B sample dataset."""
    return stub_dataset()


@pytest.fixture
def svg_path(tmp_path):
    """Output path inside a per-test temporary directory."""
    return tmp_path / "logscale-sample.svg"


@pytest.fixture
def in_tmp_cwd(tmp_path, monkeypatch):
    """Run the test with the temporary directory as working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def parse_svg():
    """Return a helper that parses an SVG file and returns its root element."""

    def _parse(path):
        return ET.parse(str(path)).getroot()

    return _parse
