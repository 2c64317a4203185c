"""Tests for generate and render orchestration."""

import logging
from pathlib import Path

import pytest

from plotpath.config import GenerateConfig, GeometryConfig, PlotPathSettings, RenderConfig
from plotpath.core.processor import PathProcessor, convert_paths
from plotpath.domain import DrawCommand, build_path
from plotpath.exceptions import DocumentParseError, FormatParseError, InputReadError
from plotpath.io import SvgCom

M, L, Z = DrawCommand.MOVE, DrawCommand.LINE, DrawCommand.CLOSE

CROSSED_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="100.5" height="50" viewBox="0 0 100.5 50">
  <path d="M 0 25 L 100 25" stroke="black" fill="none"/>
  <rect x="40" y="10" width="20" height="30" fill="red"/>
</svg>
"""


@pytest.fixture
def crossed_svg(tmp_path: Path) -> Path:
    """A stroke running under a filled rectangle."""
    path = tmp_path / "crossed.svg"
    path.write_text(CROSSED_SVG, encoding="utf-8")
    return path


@pytest.fixture
def line_and_square():
    """A stroke followed by a filled square that covers its middle."""
    line = build_path([M, L], [0, 5, 10, 5], source_id=0)
    square = build_path(
        [M, L, L, L, Z], [2, 2, 8, 2, 8, 8, 2, 8], source_id=1, has_fill=True
    )
    return [line, square]


def _settings(**generate) -> PlotPathSettings:
    return PlotPathSettings(generate=GenerateConfig(**generate))


class TestConvertPaths:
    """Tests for the pure conversion pipeline."""

    def test_plain(self, line_and_square):
        """Test paths pass through untouched without options."""
        result = convert_paths(line_and_square, GenerateConfig(), GeometryConfig())
        assert result == line_and_square

    def test_autocut(self, line_and_square):
        """Test autocut removes the covered part of the stroke."""
        result = convert_paths(
            line_and_square, GenerateConfig(autocut=True), GeometryConfig()
        )
        assert [p.source_id for p in result] == [0, 0, 1]

    def test_polish_after_autocut(self, line_and_square):
        """Test polish keeps the gap made by autocut."""
        result = convert_paths(
            line_and_square,
            GenerateConfig(autocut=True, polish=True),
            GeometryConfig(),
        )
        assert [p.source_id for p in result] == [0, 0, 1]

    def test_input_list_untouched(self, line_and_square):
        """Test the caller's list is not modified."""
        before = list(line_and_square)
        convert_paths(line_and_square, GenerateConfig(autocut=True), GeometryConfig())
        assert line_and_square == before


class TestPathProcessorGenerate:
    """Tests for PathProcessor.generate."""

    def test_plain(self, crossed_svg, tmp_path):
        """Test a plain conversion keeps every stroke."""
        output = tmp_path / "out.svgcom"
        stats = PathProcessor(_settings()).generate(crossed_svg, output)

        svgcom = SvgCom.from_svgcom_str(output.read_text(encoding="utf-8"))
        assert svgcom.command_letters == "MLMLLLL"
        assert svgcom.view_size.width == 101
        assert svgcom.view_size.height == 50
        assert stats.shapes_read == 2
        assert stats.paths_out == 2
        assert stats.commands_written == 7

    def test_autocut(self, crossed_svg, tmp_path):
        """Test autocut splits the stroke around the rectangle."""
        output = tmp_path / "out.svgcom"
        stats = PathProcessor(_settings(autocut=True)).generate(crossed_svg, output)

        svgcom = SvgCom.from_svgcom_str(output.read_text(encoding="utf-8"))
        assert svgcom.command_letters == "MLMLMLLLL"
        first_end = svgcom.commands[1][1][0]
        second_start = svgcom.commands[2][1][0]
        assert first_end[0] == pytest.approx(40.0)
        assert second_start[0] == pytest.approx(60.0)
        assert stats.paths_out == 3

    def test_only_stroked(self, crossed_svg, tmp_path):
        """Test shapes without a stroke are skipped."""
        output = tmp_path / "out.svgcom"
        stats = PathProcessor(_settings(only_stroked=True)).generate(crossed_svg, output)

        svgcom = SvgCom.from_svgcom_str(output.read_text(encoding="utf-8"))
        assert svgcom.command_letters == "ML"
        assert stats.shapes_read == 1
        assert stats.shapes_skipped == 1

    def test_missing_input(self, tmp_path):
        """Test a missing input raises and writes nothing."""
        output = tmp_path / "out.svgcom"
        with pytest.raises(InputReadError):
            PathProcessor(_settings()).generate(tmp_path / "missing.svg", output)
        assert not output.exists()

    def test_malformed_input(self, tmp_path):
        """Test a malformed document raises and writes nothing."""
        source = tmp_path / "broken.svg"
        source.write_text("<svg", encoding="utf-8")
        output = tmp_path / "out.svgcom"
        with pytest.raises(DocumentParseError):
            PathProcessor(_settings()).generate(source, output)
        assert not output.exists()

    def test_quiet_setting_reaches_console(self):
        """Test the quiet setting limits console logging to errors."""
        settings = PlotPathSettings(logging={"log_level": "DEBUG", "quiet": True})
        PathProcessor(settings)

        ours = [h for h in logging.getLogger().handlers if getattr(h, "_plotpath", False)]
        assert [h.level for h in ours] == [logging.ERROR]

    def test_log_file(self, crossed_svg, tmp_path):
        """Test a log file receives structured records."""
        log_file = tmp_path / "run.log"
        settings = PlotPathSettings(logging={"log_file": log_file})
        PathProcessor(settings).generate(crossed_svg, tmp_path / "out.svgcom")

        text = log_file.read_text(encoding="utf-8")
        assert "Starting generate" in text
        assert "Output written" in text


class TestPathProcessorRender:
    """Tests for PathProcessor.render."""

    def test_render(self, tmp_path):
        """Test svgcom renders to a stroked SVG document."""
        source = tmp_path / "in.svgcom"
        source.write_text("10 10 3 6\nMLL\n0 0 10 0 10 10\n", encoding="utf-8")
        output = tmp_path / "out.svg"
        settings = PlotPathSettings(render=RenderConfig(stroke="red", stroke_width=2.5))

        stats = PathProcessor(settings).render(source, output)

        svg = output.read_text(encoding="utf-8")
        assert 'viewBox="0 0 10 10"' in svg
        assert 'stroke="red"' in svg
        assert 'stroke-width="2.5"' in svg
        assert stats.commands_written == 3
        assert stats.paths_out == 1

    def test_generate_then_render(self, crossed_svg, tmp_path):
        """Test generated output renders back."""
        svgcom_path = tmp_path / "out.svgcom"
        output = tmp_path / "preview.svg"
        processor = PathProcessor(_settings(autocut=True))

        processor.generate(crossed_svg, svgcom_path)
        processor.render(svgcom_path, output)

        assert output.read_text(encoding="utf-8").count("<path") == 1

    def test_malformed_svgcom(self, tmp_path):
        """Test bad svgcom raises and writes nothing."""
        source = tmp_path / "in.svgcom"
        source.write_text("10 10 1 2\nZ\n0 0\n", encoding="utf-8")
        output = tmp_path / "out.svg"
        with pytest.raises(FormatParseError):
            PathProcessor(PlotPathSettings()).render(source, output)
        assert not output.exists()

    def test_missing_svgcom(self, tmp_path):
        """Test a missing input raises InputReadError."""
        with pytest.raises(InputReadError):
            PathProcessor(PlotPathSettings()).render(
                tmp_path / "missing.svgcom", tmp_path / "out.svg"
            )
