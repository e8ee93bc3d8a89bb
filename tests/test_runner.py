"""End-to-end tests for run() and main() in runner.py.

Renders the chart to a temporary directory and inspects the written SVG:
well-formed markup, two distinct series stroke colors, legend entries,
byte-identical re-runs, injected providers, and process exit codes.
"""

import dataclasses
import re

import pytest

from freqplot import runner
from freqplot.models import Dataset, Sample, Series
from freqplot.plot_models import OUT_FILE_NAME

SVG_NS = "{http://www.w3.org/2000/svg}"
STROKE_RE = re.compile(r"stroke:\s*(#[0-9a-fA-F]{6})")


def find_group(root, gid):
    for g in root.iter(f"{SVG_NS}g"):
        if g.get("id") == gid:
            return g
    return None


def texts(element):
    return ["".join(t.itertext()).strip() for t in element.iter(f"{SVG_NS}text")]


def series_strokes(root):
    """Map series group id -> set of stroke colors used by its paths."""
    strokes = {}
    for g in root.iter(f"{SVG_NS}g"):
        gid = g.get("id") or ""
        if not gid.startswith("series-"):
            continue
        colors = set()
        for path in g.iter(f"{SVG_NS}path"):
            colors.update(STROKE_RE.findall(path.get("style", "")))
        strokes[gid] = colors
    return strokes


class TestRun:
    """Tests for run()."""

    def test_writes_non_empty_svg(self, svg_path, capsys):
        out = runner.run(svg_path)
        assert out == svg_path
        assert svg_path.is_file()
        assert svg_path.stat().st_size > 0

    def test_output_is_well_formed_svg(self, svg_path, parse_svg):
        runner.run(svg_path)
        root = parse_svg(svg_path)
        assert root.tag == f"{SVG_NS}svg"

    def test_two_distinct_series_colors(self, svg_path, parse_svg):
        runner.run(svg_path)
        strokes = series_strokes(parse_svg(svg_path))
        assert set(strokes) == {"series-A", "series-B"}
        assert len(strokes["series-A"]) == 1
        assert len(strokes["series-B"]) == 1
        assert strokes["series-A"] != strokes["series-B"]

    def test_legend_entries(self, svg_path, parse_svg):
        runner.run(svg_path)
        legend = find_group(parse_svg(svg_path), "legend")
        assert legend is not None
        assert texts(legend) == ["A", "B"]

    def test_labels_present(self, svg_path, parse_svg):
        runner.run(svg_path)
        all_text = texts(parse_svg(svg_path))
        for expected in ("FREQUENCY RESPONSE", "log-scale sample", "freq [Hz]", "gain [dB]"):
            assert expected in all_text
        for tick in ("1", "10", "100", "1000", "10000", "0", "20", "40", "60", "80"):
            assert tick in all_text

    def test_rerun_is_byte_identical(self, svg_path):
        runner.run(svg_path)
        first = svg_path.read_bytes()
        runner.run(svg_path)
        assert svg_path.read_bytes() == first

    def test_reports_output_path(self, svg_path, capsys):
        runner.run(svg_path)
        captured = capsys.readouterr()
        assert captured.out.strip() == f"Result has been saved to {svg_path}"

    def test_default_path_in_cwd(self, in_tmp_cwd):
        out = runner.run()
        assert out.name == OUT_FILE_NAME
        assert (in_tmp_cwd / OUT_FILE_NAME).is_file()

    def test_missing_output_directory_raises(self, tmp_path):
        with pytest.raises(OSError):
            runner.run(tmp_path / "no-such-dir" / OUT_FILE_NAME)

    def test_custom_provider(self, svg_path, parse_svg, config):
        def provider():
            return Dataset.from_points({
                "A": [(1, 5, 0), (10_000, 95, 0)],
                "B": [(2, 50, 0)],
            })

        runner.run(svg_path, provider=provider, config=config)
        strokes = series_strokes(parse_svg(svg_path))
        assert set(strokes) == {"series-A", "series-B"}

    def test_dataset_order_when_no_series_order(self, svg_path, parse_svg, config):
        cfg = dataclasses.replace(config, series_order=None)

        def provider():
            return Dataset.from_series(
                Series("hi", (Sample(100.0, 80.0),)),
                Series("lo", (Sample(100.0, 20.0),)),
            )

        runner.run(svg_path, provider=provider, config=cfg)
        legend = find_group(parse_svg(svg_path), "legend")
        assert texts(legend) == ["hi", "lo"]

    def test_missing_series_raises_key_error(self, svg_path):
        def provider():
            return Dataset.from_series(Series("A", (Sample(1.0, 1.0),)))

        with pytest.raises(KeyError):
            runner.run(svg_path, provider=provider)
        assert not svg_path.exists()

    def test_out_of_domain_frequency_raises_before_writing(self, svg_path):
        def provider():
            return Dataset.from_points({"A": [(0.5, 1, 0)], "B": [(10, 10, 0)]})

        with pytest.raises(ValueError):
            runner.run(svg_path, provider=provider)
        assert not svg_path.exists()


class TestMain:
    """Tests for main()."""

    def test_success_exit_code_and_message(self, in_tmp_cwd, capsys):
        assert runner.main() == 0
        assert OUT_FILE_NAME in capsys.readouterr().out
        assert (in_tmp_cwd / OUT_FILE_NAME).stat().st_size > 0

    def test_failure_exit_code(self, monkeypatch, capsys):
        def failing_run():
            raise OSError("disk full")

        monkeypatch.setattr(runner, "run", failing_run)
        assert runner.main() == 1
        assert "disk full" in capsys.readouterr().err
