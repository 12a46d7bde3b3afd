"""Tests for configuration models and pipeline logging."""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from pixelcollider.config import (
    ColliderKind,
    ExtractionConfig,
    OpenContourPolicy,
    Preset,
    get_default_settings,
)
from pixelcollider.utils import PipelineLogger, configure_logging


class TestExtractionConfig:
    """Tests for ExtractionConfig model."""

    def test_defaults(self):
        config = ExtractionConfig()
        assert config.threshold_alpha == 200
        assert config.fill_holes is True
        assert config.corner_optimization is True
        assert config.simplification_tolerance == 0.01
        assert config.collider_kind == ColliderKind.POLYGON
        assert config.open_contour_policy == OpenContourPolicy.ACCEPT

    @pytest.mark.parametrize("threshold", [-1, 256])
    def test_threshold_range(self, threshold):
        with pytest.raises(ValidationError):
            ExtractionConfig(threshold_alpha=threshold)

    def test_tolerance_description_mentions_scaling(self):
        description = ExtractionConfig.model_fields["simplification_tolerance"].description
        assert "pixels_per_unit" in description
        assert "fallback box" in description

    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValidationError):
            ExtractionConfig(simplification_tolerance=-0.1)

    def test_kind_from_string(self):
        config = ExtractionConfig(collider_kind="edge_loop")
        assert config.collider_kind == ColliderKind.EDGE_LOOP

    def test_presets(self):
        precise = Preset.PRECISE.to_config()
        fast = Preset.FAST.to_config()
        assert precise.threshold_alpha == 220
        assert precise.simplification_tolerance == 0.005
        assert fast.threshold_alpha == 180
        assert fast.simplification_tolerance == 0.02
        assert not fast.fill_holes
        assert not fast.corner_optimization
        assert Preset.DEBUG.to_config() == ExtractionConfig.debug()


class TestSettings:
    """Tests for top-level settings."""

    def test_default_settings(self):
        settings = get_default_settings()
        assert settings.sprite.pixels_per_unit == 100.0
        assert settings.sprite.pivot is None
        assert settings.logging.debug is False
        assert settings.logging.log_level == "WARNING"


class TestPipelineLogger:
    """Tests for PipelineLogger class."""

    def test_stage_diagnostics_gated_by_debug(self):
        inner = MagicMock()
        PipelineLogger(logger=inner).log_stage("hero", "trace", 12)
        inner.debug.assert_not_called()

        PipelineLogger(logger=inner, debug=True).log_stage("hero", "trace", 12)
        inner.debug.assert_called_once_with("Stage complete", sprite="hero", stage="trace", points=12)

    def test_mask_rows_rendered_only_in_debug(self):
        grid = MagicMock(occupied_count=8, height=4)
        PipelineLogger(logger=MagicMock()).log_mask("hero", grid, 16)
        grid.row_string.assert_not_called()

        PipelineLogger(logger=MagicMock(), debug=True).log_mask("hero", grid, 16)
        assert grid.row_string.call_count == 2

    def test_warnings_always_emitted(self):
        inner = MagicMock()
        logger = PipelineLogger(logger=inner)
        logger.log_no_edges("hero", 200)
        logger.log_open_contour("hero", 5, 9)
        assert inner.warning.call_count == 2
        assert logger.stats.open_contour_count == 1

    def test_stats(self):
        logger = PipelineLogger(logger=MagicMock())
        logger.log_generated("a", "polygon", 4)
        logger.log_fallback("b", 0)
        logger.log_sampling_failed("c", "unreadable")

        stats = logger.stats
        assert stats.generated_count == 1
        assert stats.fallback_count == 1
        assert stats.sampling_failures == 1
        assert stats.failures == [("c", "unreadable")]

    @pytest.mark.usefixtures("reset_logging")
    def test_configure_logging_to_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = configure_logging(log_file=log_file, quiet=True)
        logger.info("hello", sprite="hero")
        assert '"sprite": "hero"' in log_file.read_text(encoding="utf-8")
