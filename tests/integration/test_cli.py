"""End-to-end tests for the command line interface."""

import json
from pathlib import Path

import numpy as np
import pytest
from PIL import Image
from typer.testing import CliRunner

from pixelcollider import __version__
from pixelcollider.cli import app
from pixelcollider.cli.app import EXIT_NO_PIXEL_DATA, build_extraction_config, parse_pair
from pixelcollider.config import Preset
from pixelcollider.domain import BoxCollider, EdgeLoopCollider, PolygonCollider
from pixelcollider.io import load_collider

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("reset_logging")


@pytest.fixture
def sprite_path(tmp_path: Path) -> Path:
    """8x8 sprite with an opaque 4x4 block in the middle."""
    pixels = np.zeros((8, 8, 4), dtype=np.uint8)
    pixels[2:6, 2:6] = (200, 40, 40, 255)
    path = tmp_path / "hero.png"
    Image.fromarray(pixels).save(path)
    return path


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_writes_polygon(self, sprite_path):
        result = runner.invoke(app, ["generate", str(sprite_path), "--ppu", "8", "-q"])

        assert result.exit_code == 0, result.output
        collider = load_collider(sprite_path.with_name("hero.collider.json"))
        assert collider == PolygonCollider(
            points=((-0.25, -0.25), (0.125, -0.25), (0.125, 0.125), (-0.25, 0.125))
        )

    def test_metadata(self, sprite_path, tmp_path):
        output = tmp_path / "custom.json"
        result = runner.invoke(
            app,
            ["generate", str(sprite_path), "-o", str(output), "--pivot", "0,0", "-t", "100", "-q"],
        )

        assert result.exit_code == 0, result.output
        document = json.loads(output.read_text(encoding="utf-8"))
        metadata = document["metadata"]
        assert metadata["source"] == "hero.png"
        assert metadata["region"] == [0, 0, 8, 8]
        assert metadata["pivot"] == [0.0, 0.0]
        assert metadata["closed"] is True
        assert metadata["success"] is True
        assert metadata["settings"]["threshold_alpha"] == 100

    def test_edge_loop_kind(self, sprite_path):
        result = runner.invoke(app, ["generate", str(sprite_path), "--kind", "edge_loop", "-q"])

        assert result.exit_code == 0, result.output
        collider = load_collider(sprite_path.with_name("hero.collider.json"))
        assert isinstance(collider, EdgeLoopCollider)
        assert collider.points[0] == collider.points[-1]

    def test_rect_selects_region(self, sprite_path):
        """A region of fully transparent pixels yields the fallback box."""
        result = runner.invoke(
            app, ["generate", str(sprite_path), "--rect", "0,0,2,2", "--ppu", "1", "-q"]
        )

        assert result.exit_code == 0, result.output
        collider = load_collider(sprite_path.with_name("hero.collider.json"))
        assert collider == BoxCollider(half_extents=(1.0, 1.0))

    def test_region_outside_texture(self, sprite_path):
        result = runner.invoke(app, ["generate", str(sprite_path), "--rect", "4,4,8,8", "-q"])

        assert result.exit_code == EXIT_NO_PIXEL_DATA
        collider = load_collider(sprite_path.with_name("hero.collider.json"))
        assert isinstance(collider, BoxCollider)

    def test_summary_output(self, sprite_path):
        result = runner.invoke(app, ["generate", str(sprite_path), "--ppu", "8", "-v"])

        assert result.exit_code == 0, result.output
        assert "polygon" in result.output
        assert "4 points" in result.output
        assert "closed" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["generate", str(tmp_path / "nope.png")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "fake.png"
        path.write_text("hello", encoding="utf-8")
        result = runner.invoke(app, ["generate", str(path), "-q"])
        assert result.exit_code == 1

    def test_bad_rect(self, sprite_path):
        result = runner.invoke(app, ["generate", str(sprite_path), "--rect", "1,2,3", "-q"])
        assert result.exit_code == 1

    def test_verbose_and_quiet_conflict(self, sprite_path):
        result = runner.invoke(app, ["generate", str(sprite_path), "-v", "-q"])
        assert result.exit_code == 1

    def test_log_file(self, sprite_path, tmp_path):
        log_file = tmp_path / "run.log"
        result = runner.invoke(
            app, ["generate", str(sprite_path), "--debug", "--log-file", str(log_file), "-q"]
        )

        assert result.exit_code == 0, result.output
        log_text = log_file.read_text(encoding="utf-8")
        assert "Stage complete" in log_text
        assert "Generated collider" in log_text


class TestAnalyzeCommand:
    """Tests for the analyze command."""

    def test_alpha_summary(self, sprite_path):
        result = runner.invoke(app, ["analyze", str(sprite_path)])

        assert result.exit_code == 0, result.output
        assert "Opaque" in result.output
        assert "16/64" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["analyze", str(tmp_path / "nope.png")])
        assert result.exit_code == 1


class TestThresholdsCommand:
    """Tests for the thresholds command."""

    def test_default_sweep(self, sprite_path):
        result = runner.invoke(app, ["thresholds", str(sprite_path)])

        assert result.exit_code == 0, result.output
        assert "Threshold" in result.output
        assert "250" in result.output

    def test_custom_thresholds(self, sprite_path):
        result = runner.invoke(app, ["thresholds", str(sprite_path), "-t", "17", "-t", "254"])

        assert result.exit_code == 0, result.output
        assert "17" in result.output
        assert "254" in result.output


class TestAppOptions:
    """Tests for top-level options and helpers."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_parse_pair(self):
        assert parse_pair("1.5, 2", "--pivot") == (1.5, 2.0)

    def test_build_extraction_config_overrides(self):
        config = build_extraction_config(Preset.FAST, {"threshold_alpha": 10, "fill_holes": None})
        assert config.threshold_alpha == 10
        assert config.simplification_tolerance == 0.02
        assert config.fill_holes is False
