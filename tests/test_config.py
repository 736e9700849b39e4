"""
Configuration loading tests.

Run with: pytest tests/test_config.py -v
"""

import pytest

from haptic_timeline.config import TimelineConfig, load_config, save_config


class TestConfig:
    """YAML configuration"""

    def test_defaults(self):
        """Defaults match the engine constants"""
        config = TimelineConfig.with_defaults()
        assert config.match_tolerance_ms == 1.0
        assert config.drop_insignificant_curves is False
        assert config.transient_tail == pytest.approx(0.1)
        assert config.output.json_indent == 2

    def test_missing_default_file_uses_defaults(self, tmp_path, monkeypatch):
        """No config file in the working directory means defaults"""
        monkeypatch.chdir(tmp_path)
        assert load_config() == TimelineConfig.with_defaults()

    def test_missing_explicit_file(self, tmp_path):
        """An explicit path must exist"""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_partial_file(self, tmp_path):
        """Unset keys fall back to defaults"""
        path = tmp_path / "timeline.yaml"
        path.write_text("match_tolerance_ms: 0.5\nlog_level: debug\n")
        config = load_config(path)
        assert config.match_tolerance_ms == 0.5
        assert config.log_level == "DEBUG"
        assert config.transient_tail_ms == 100.0

    def test_empty_file(self, tmp_path):
        """An empty file is all defaults"""
        path = tmp_path / "timeline.yaml"
        path.write_text("")
        assert load_config(path) == TimelineConfig.with_defaults()

    def test_save_and_load(self, tmp_path):
        """Saved configs load back equal"""
        config = TimelineConfig(match_tolerance_ms=2.0, drop_insignificant_curves=True)
        config.output.json_indent = 4
        path = tmp_path / "timeline.yaml"
        save_config(config, path)
        assert load_config(path) == config
